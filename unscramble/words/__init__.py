"""Word classification, scrambling and dictionary loading."""

from .models import Difficulty, LengthRange, TIER_LENGTHS, MAX_WORDS
from .difficulty import classify, filter_by_difficulty, is_easy, is_medium, is_hard
from .scramble import scramble_word
from .loader import load_words, read_tokens

__all__ = [
    # Models
    "Difficulty",
    "LengthRange",
    "TIER_LENGTHS",
    "MAX_WORDS",
    # Classification
    "classify",
    "filter_by_difficulty",
    "is_easy",
    "is_medium",
    "is_hard",
    # Scrambling
    "scramble_word",
    # Loading
    "load_words",
    "read_tokens",
]
