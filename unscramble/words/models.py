"""Data models for word classification."""

from enum import Enum
from typing import NamedTuple, Optional


# Maximum number of words a session's word list can hold
MAX_WORDS = 200


class LengthRange(NamedTuple):
    """Inclusive range of word lengths. `maximum` of None means unbounded."""
    minimum: int
    maximum: Optional[int] = None

    def contains(self, length: int) -> bool:
        if length < self.minimum:
            return False
        return self.maximum is None or length <= self.maximum


class Difficulty(str, Enum):
    """Difficulty tier derived from word length."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def code(self) -> int:
        """Menu number used to select this tier (1, 2 or 3)."""
        return _CODES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_code(cls, code: int) -> "Difficulty":
        """
        Resolve a menu number to a tier.

        Raises:
            ValueError: If code is not 1, 2 or 3
        """
        for tier, tier_code in _CODES.items():
            if tier_code == code:
                return tier
        raise ValueError(f"Unknown difficulty code: {code!r}")


TIER_LENGTHS = {
    Difficulty.EASY: LengthRange(3, 5),
    Difficulty.MEDIUM: LengthRange(6, 8),
    Difficulty.HARD: LengthRange(9),
}

_CODES = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}
