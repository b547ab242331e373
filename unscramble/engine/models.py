"""
Pydantic models for the game engine.

This module contains the data models (configuration, session statistics, round
state and per-action results) used throughout the engine. The logic classes
(Round, AchievementBook, GameSession) live in their respective files.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..words.models import Difficulty, MAX_WORDS


# Type aliases
RoundPhase = Literal["guessing", "solved", "exhausted"]
GuessStatus = Literal["correct", "incorrect", "exhausted"]
HintKind = Literal["first_letter", "length", "random_letter"]

# Hint menu numbers
HINT_CHOICES: Dict[int, HintKind] = {
    1: "first_letter",
    2: "length",
    3: "random_letter",
}

# Typing this instead of a guess asks for a hint
HINT_KEYWORD = "hint"


class GameConfig(BaseModel):
    """Configuration for a game session."""
    model_config = ConfigDict(extra='forbid')

    dictionary: str = "dictionary.txt"
    shop_dictionary: str = "dictionary2.txt"
    max_words: int = Field(default=MAX_WORDS, ge=1)
    max_attempts: int = Field(default=3, ge=1)
    max_hints: int = Field(default=2, ge=0)
    hint_cost: int = Field(default=1, ge=0)
    combo_bonus: int = Field(default=2, ge=0)
    quick_win_seconds: float = Field(default=30, ge=0)
    high_score_target: int = 50
    seed: Optional[int] = None


class SessionStats(BaseModel):
    """
    Scores and streaks for one session.

    `score` may go negative through hint costs. `highest_score` and
    `max_streak` only ever grow.
    """
    score: int = 0
    highest_score: int = 0
    streak: int = 0
    max_streak: int = 0
    rounds_played: int = 0
    rounds_won: int = 0

    def add_points(self, points: int) -> None:
        """Add points to the score and raise the highest score if needed."""
        self.score += points
        if self.score > self.highest_score:
            self.highest_score = self.score

    def extend_streak(self) -> None:
        self.streak += 1
        if self.streak > self.max_streak:
            self.max_streak = self.streak

    def break_streak(self) -> None:
        self.streak = 0

    def reset_score(self) -> None:
        self.score = 0


class RoundState(BaseModel):
    """Mutable state of a single round."""
    target: str
    scrambled: str
    difficulty: Difficulty
    attempts_left: int
    hints_used: int = 0
    phase: RoundPhase = "guessing"
    guesses: List[str] = Field(default_factory=list)
    points_earned: int = 0
    started_at: float = 0.0
    ended_at: Optional[float] = None

    @property
    def is_over(self) -> bool:
        return self.phase != "guessing"

    @property
    def solved(self) -> bool:
        return self.phase == "solved"


class GuessResult(BaseModel):
    """Result of a single non-hint guess."""
    guess: str
    status: GuessStatus
    points: int = 0
    combo_bonus: int = 0
    attempts_left: int
    streak: int
    max_streak: int
    score: int
    answer: Optional[str] = None  # Revealed once the round is exhausted


class HintResult(BaseModel):
    """A hint given to the player."""
    kind: HintKind
    index: Optional[int] = None  # 0-based position of the revealed letter
    letter: Optional[str] = None
    length: Optional[int] = None
    hints_used: int
    hints_remaining: int
    score: int


class RoundOutcome(BaseModel):
    """Summary of a finished round, used for achievements and reporting."""
    won: bool
    word: str
    difficulty: Difficulty
    points: int = 0
    hints_used: int = 0
    attempts_used: int = 0
    time_taken: float = 0.0
    score: int = 0


class Achievement(BaseModel):
    """A one-shot achievement. Once achieved it stays achieved."""
    id: str
    name: str
    description: str
    cheer: str = "Congratulations!"
    achieved: bool = False
