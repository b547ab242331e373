import logging
import random
import time
from typing import Callable, Optional, Sequence
from pydantic import BaseModel, ConfigDict

from .errors import HintsExhausted, NoEligibleWords, RoundFinished
from .models import (
    GameConfig,
    GuessResult,
    HintKind,
    HintResult,
    HINT_KEYWORD,
    RoundOutcome,
    RoundState,
    SessionStats,
)
from ..words.difficulty import filter_by_difficulty
from ..words.models import Difficulty
from ..words.scramble import scramble_word

logger = logging.getLogger(__name__)


class Round(BaseModel):
    """
    Runs one word through selection, scrambling and guessing.

    A round is created by `start()` already in the guessing phase. Each call to
    `guess()` or `use_hint()` mutates both the round state and the shared
    session statistics; the round ends as "solved" or "exhausted".

    Attributes:
        state: Target word, scrambled form, attempts and hints
        stats: Session statistics updated by this round (shared, not copied)
        config: Game rules (attempts, hint cost, combo bonus)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    state: RoundState
    stats: SessionStats
    config: GameConfig
    _rng: random.Random = None
    _clock: Callable[[], float] = None

    @classmethod
    def start(
        cls,
        words: Sequence[str],
        difficulty: Difficulty,
        stats: SessionStats,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Round":
        """
        Pick a word of the given difficulty and scramble it.

        Args:
            words: The session's word list
            difficulty: Tier to draw from
            stats: Session statistics the round will update
            config: Game rules (defaults if omitted)
            rng: Random source for selection, scrambling and hints
            clock: Returns seconds; used to time the round

        Returns:
            A new Round in the guessing phase

        Raises:
            NoEligibleWords: If no word matches the difficulty
        """
        config = config or GameConfig()
        rng = rng or random.Random()

        eligible = filter_by_difficulty(words, difficulty)
        if not eligible:
            raise NoEligibleWords(difficulty)

        target = rng.choice(eligible)
        scrambled = scramble_word(target, rng)
        logger.debug(
            "Round started: %s tier, %d eligible words, target %r",
            difficulty.label, len(eligible), target,
        )

        state = RoundState(
            target=target,
            scrambled=scrambled,
            difficulty=difficulty,
            attempts_left=config.max_attempts,
            started_at=clock(),
        )
        round_ = cls(state=state, stats=stats, config=config)
        round_._rng = rng
        round_._clock = clock
        return round_

    @staticmethod
    def is_hint_request(token: str) -> bool:
        """Check if a guess token is the hint keyword."""
        return token == HINT_KEYWORD

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    @property
    def hints_remaining(self) -> int:
        return max(0, self.config.max_hints - self.state.hints_used)

    def can_use_hint(self) -> bool:
        """Check if another hint is allowed this round."""
        return not self.is_over and self.hints_remaining > 0

    def use_hint(self, kind: HintKind) -> HintResult:
        """
        Reveal part of the target word at a cost.

        The hint cost is deducted even if it takes the score below zero.
        No attempt is consumed.

        Args:
            kind: "first_letter", "length" or "random_letter"

        Returns:
            HintResult describing what was revealed

        Raises:
            HintsExhausted: If the hint allowance is used up (nothing changes)
            RoundFinished: If the round has already ended
        """
        self._ensure_active()
        if self.hints_remaining == 0:
            raise HintsExhausted(self.config.max_hints)

        target = self.state.target
        if kind == "first_letter":
            result = {"index": 0, "letter": target[0]}
        elif kind == "length":
            result = {"length": len(target)}
        elif kind == "random_letter":
            idx = self._rng.randrange(len(target))
            result = {"index": idx, "letter": target[idx]}
        else:
            raise ValueError(f"Unknown hint kind: {kind!r}")

        self.state.hints_used += 1
        self.stats.score -= self.config.hint_cost
        logger.debug("Hint %s used (%d/%d)", kind, self.state.hints_used, self.config.max_hints)

        return HintResult(
            kind=kind,
            hints_used=self.state.hints_used,
            hints_remaining=self.hints_remaining,
            score=self.stats.score,
            **result,
        )

    def guess(self, guess: str) -> GuessResult:
        """
        Check a guess against the target word (exact, case-sensitive).

        A correct guess earns the word length plus a combo bonus for the streak
        held before this guess. A wrong guess costs an attempt and breaks the
        streak; the last wrong guess resets the score to 0.

        Args:
            guess: The player's guess

        Returns:
            GuessResult with the new status, points and streak

        Raises:
            RoundFinished: If the round has already ended
        """
        self._ensure_active()
        self.state.guesses.append(guess)

        if guess == self.state.target:
            return self._solve(guess)

        self.state.attempts_left -= 1
        self.stats.break_streak()

        if self.state.attempts_left > 0:
            return self._result(guess, "incorrect")

        self.state.phase = "exhausted"
        self.state.ended_at = self._clock()
        self.stats.reset_score()
        self.stats.rounds_played += 1
        logger.info("Round lost: answer was %r, score reset to 0", self.state.target)
        return self._result(guess, "exhausted", answer=self.state.target)

    def _solve(self, guess: str) -> GuessResult:
        combo_bonus = self.stats.streak * self.config.combo_bonus
        points = len(self.state.target) + combo_bonus

        self.stats.extend_streak()
        self.stats.add_points(points)
        self.stats.rounds_played += 1
        self.stats.rounds_won += 1

        self.state.phase = "solved"
        self.state.points_earned = points
        self.state.ended_at = self._clock()
        logger.info(
            "Round won: %d points (%d combo), score %d, streak %d",
            points, combo_bonus, self.stats.score, self.stats.streak,
        )
        return self._result(guess, "correct", points=points, combo_bonus=combo_bonus)

    def _result(self, guess: str, status, **kwargs) -> GuessResult:
        return GuessResult(
            guess=guess,
            status=status,
            attempts_left=self.state.attempts_left,
            streak=self.stats.streak,
            max_streak=self.stats.max_streak,
            score=self.stats.score,
            **kwargs,
        )

    def _ensure_active(self) -> None:
        if self.is_over:
            raise RoundFinished(f"Round already {self.state.phase}")

    @property
    def time_taken(self) -> float:
        """Seconds from the scramble being shown until the round ended (or now)."""
        end = self.state.ended_at if self.state.ended_at is not None else self._clock()
        return max(0.0, end - self.state.started_at)

    def outcome(self) -> RoundOutcome:
        """
        Summarize the finished round.

        Raises:
            RoundFinished: If the round is still in progress
        """
        if not self.is_over:
            raise RoundFinished("Round is still in progress")
        return RoundOutcome(
            won=self.state.solved,
            word=self.state.target,
            difficulty=self.state.difficulty,
            points=self.state.points_earned,
            hints_used=self.state.hints_used,
            attempts_used=len(self.state.guesses),
            time_taken=self.time_taken,
            score=self.stats.score,
        )
