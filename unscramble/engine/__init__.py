"""Game engine for Unscramble."""

from .models import (
    GameConfig,
    SessionStats,
    RoundState,
    RoundPhase,
    GuessResult,
    GuessStatus,
    HintResult,
    HintKind,
    HINT_CHOICES,
    HINT_KEYWORD,
    RoundOutcome,
    Achievement,
)
from .errors import (
    UnscrambleError,
    InputFormatError,
    NoWordsLoaded,
    NoEligibleWords,
    HintsExhausted,
    RoundFinished,
)
from .achievements import AchievementBook, check_achievements, default_achievements
from .round import Round
from .session import GameSession

__all__ = [
    "GameConfig",
    "SessionStats",
    "RoundState",
    "RoundPhase",
    "GuessResult",
    "GuessStatus",
    "HintResult",
    "HintKind",
    "HINT_CHOICES",
    "HINT_KEYWORD",
    "RoundOutcome",
    "Achievement",
    "UnscrambleError",
    "InputFormatError",
    "NoWordsLoaded",
    "NoEligibleWords",
    "HintsExhausted",
    "RoundFinished",
    "AchievementBook",
    "check_achievements",
    "default_achievements",
    "Round",
    "GameSession",
]
