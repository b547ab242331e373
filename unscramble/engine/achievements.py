"""Achievement definitions and evaluation."""

import logging
from typing import List, Optional, Set
from pydantic import BaseModel, Field

from .models import Achievement, RoundOutcome

logger = logging.getLogger(__name__)


# Achievement identifiers
FIRST_WIN = "first_win"
HINT_MASTER = "hint_master"
HIGH_SCORER = "high_scorer"
QUICK_THINKER = "quick_thinker"

# Default thresholds
HIGH_SCORE_TARGET = 50
QUICK_WIN_SECONDS = 30


def high_scorer_description(high_score_target: int) -> str:
    return f"Reach a score of {high_score_target} or more"


def quick_thinker_description(quick_win_seconds: float) -> str:
    return f"Win within {quick_win_seconds:g} seconds"


def default_achievements(
    high_score_target: int = HIGH_SCORE_TARGET,
    quick_win_seconds: float = QUICK_WIN_SECONDS,
) -> List[Achievement]:
    """Fresh, locked copies of the four standard achievements."""
    return [
        Achievement(id=FIRST_WIN, name="First Win",
                    description="Win your first game", cheer="Congratulations!"),
        Achievement(id=HINT_MASTER, name="Hint Master",
                    description="Win without using a hint", cheer="Amazing!"),
        Achievement(id=HIGH_SCORER, name="High Scorer",
                    description=high_scorer_description(high_score_target), cheer="Impressive!"),
        Achievement(id=QUICK_THINKER, name="Quick Thinker",
                    description=quick_thinker_description(quick_win_seconds), cheer="Fast thinking!"),
    ]


def check_achievements(
    won: bool,
    score: int,
    hints_used: int,
    time_taken: float,
    high_score_target: int = HIGH_SCORE_TARGET,
    quick_win_seconds: float = QUICK_WIN_SECONDS,
) -> Set[str]:
    """
    Work out which achievement conditions a round satisfies.

    This ignores whether anything is already unlocked.

    Returns:
        Set of achievement ids whose condition holds
    """
    met = set()
    if won:
        met.add(FIRST_WIN)
    if won and hints_used == 0:
        met.add(HINT_MASTER)
    if score >= high_score_target:
        met.add(HIGH_SCORER)
    if won and time_taken <= quick_win_seconds:
        met.add(QUICK_THINKER)
    return met


class AchievementBook(BaseModel):
    """
    The achievements of one session.

    Achievements are only ever unlocked, never reset, for the lifetime of the
    book.
    """

    achievements: List[Achievement] = Field(default_factory=default_achievements)
    high_score_target: int = HIGH_SCORE_TARGET
    quick_win_seconds: float = QUICK_WIN_SECONDS

    def model_post_init(self, __context) -> None:
        """Describe the threshold achievements with the configured values."""
        self._describe_thresholds()

    def set_thresholds(self, high_score_target: int, quick_win_seconds: float) -> None:
        """Change the High Scorer and Quick Thinker thresholds and their descriptions."""
        self.high_score_target = high_score_target
        self.quick_win_seconds = quick_win_seconds
        self._describe_thresholds()

    def _describe_thresholds(self) -> None:
        high_scorer = self.get(HIGH_SCORER)
        if high_scorer is not None:
            high_scorer.description = high_scorer_description(self.high_score_target)
        quick_thinker = self.get(QUICK_THINKER)
        if quick_thinker is not None:
            quick_thinker.description = quick_thinker_description(self.quick_win_seconds)

    def get(self, achievement_id: str) -> Optional[Achievement]:
        for achievement in self.achievements:
            if achievement.id == achievement_id:
                return achievement
        return None

    @property
    def unlocked(self) -> List[Achievement]:
        return [a for a in self.achievements if a.achieved]

    def is_unlocked(self, achievement_id: str) -> bool:
        achievement = self.get(achievement_id)
        return achievement is not None and achievement.achieved

    def evaluate(
        self,
        won: bool,
        score: int,
        hints_used: int,
        time_taken: float,
    ) -> List[Achievement]:
        """
        Unlock every achievement whose condition is met and that is still locked.

        Args:
            won: Whether the round was solved
            score: Session score after the round
            hints_used: Hints used during the round
            time_taken: Seconds the round took

        Returns:
            Newly unlocked achievements, in definition order
        """
        met = check_achievements(
            won, score, hints_used, time_taken,
            high_score_target=self.high_score_target,
            quick_win_seconds=self.quick_win_seconds,
        )

        newly_unlocked = []
        for achievement in self.achievements:
            if achievement.id in met and not achievement.achieved:
                achievement.achieved = True
                newly_unlocked.append(achievement)
                logger.info("Achievement unlocked: %s", achievement.name)
        return newly_unlocked

    def evaluate_outcome(self, outcome: RoundOutcome) -> List[Achievement]:
        """Evaluate achievements for a finished round."""
        return self.evaluate(
            won=outcome.won,
            score=outcome.score,
            hints_used=outcome.hints_used,
            time_taken=outcome.time_taken,
        )
