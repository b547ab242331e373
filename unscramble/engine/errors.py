"""Exceptions raised by the game engine and console."""


class UnscrambleError(Exception):
    """Base class for all game errors. None of them are fatal to a session."""


class InputFormatError(UnscrambleError, ValueError):
    """A number was expected but the player typed something else."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Expected a number, got {raw!r}")


class NoWordsLoaded(UnscrambleError):
    """The session's word list is empty."""

    def __init__(self):
        super().__init__("No words loaded from the dictionary files")


class NoEligibleWords(UnscrambleError):
    """No loaded word matches the requested difficulty."""

    def __init__(self, difficulty):
        self.difficulty = difficulty
        super().__init__(f"No words available for difficulty {difficulty.label}")


class HintsExhausted(UnscrambleError):
    """The per-round hint allowance has been used up."""

    def __init__(self, max_hints: int):
        self.max_hints = max_hints
        super().__init__(f"All {max_hints} hints already used for this word")


class RoundFinished(UnscrambleError):
    """A guess or hint was submitted to a round that has already ended."""
