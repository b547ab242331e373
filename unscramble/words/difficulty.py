"""Length-based difficulty classification."""

from typing import List, Optional, Sequence

from .models import Difficulty, TIER_LENGTHS


def is_easy(word: str) -> bool:
    """Check if word length falls within the easy range (3-5)."""
    return TIER_LENGTHS[Difficulty.EASY].contains(len(word))


def is_medium(word: str) -> bool:
    """Check if word length falls within the medium range (6-8)."""
    return TIER_LENGTHS[Difficulty.MEDIUM].contains(len(word))


def is_hard(word: str) -> bool:
    """Check if word length is 9 or more."""
    return TIER_LENGTHS[Difficulty.HARD].contains(len(word))


def classify(word: str) -> Optional[Difficulty]:
    """
    Classify a word by its length.

    Returns:
        The matching Difficulty, or None for words shorter than 3 characters
    """
    for tier, lengths in TIER_LENGTHS.items():
        if lengths.contains(len(word)):
            return tier
    return None


def filter_by_difficulty(words: Sequence[str], tier: Difficulty) -> List[str]:
    """
    Select the words belonging to a tier.

    Relative order of the input is preserved.

    Args:
        words: Candidate words
        tier: Difficulty to keep

    Returns:
        New list containing only words classified as `tier`
    """
    return [word for word in words if classify(word) == tier]
