import logging
import random
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .achievements import AchievementBook
from .errors import NoWordsLoaded
from .models import Achievement, GameConfig, RoundOutcome, SessionStats
from .round import Round
from ..words.loader import load_words
from ..words.models import Difficulty

logger = logging.getLogger(__name__)


class GameSession(BaseModel):
    """
    Top-level state for one player's run of the game.

    Owns the word list, the score/streak statistics and the achievements, and
    hands them to each Round it starts. Nothing is persisted beyond the
    lifetime of the object.

    Attributes:
        config: Game configuration
        words: Loaded dictionary words, capped at config.max_words
        stats: Score, highest score and streaks
        achievements: Achievements unlocked during this session
        history: Outcomes of finished rounds, oldest first
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    words: List[str] = Field(default_factory=list)
    stats: SessionStats = Field(default_factory=SessionStats)
    achievements: AchievementBook = Field(default_factory=AchievementBook)
    history: List[RoundOutcome] = Field(default_factory=list)
    shop_visits: int = 0
    _rng: random.Random = None
    _clock: Callable[[], float] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and thresholds after model creation."""
        self._rng = random.Random(self.config.seed)
        self._clock = time.monotonic
        self.achievements.set_thresholds(
            self.config.high_score_target, self.config.quick_win_seconds
        )

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        clock: Optional[Callable[[], float]] = None,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create a session and load its initial dictionary.

        Args:
            config: Optional GameConfig instance
            clock: Optional time source in seconds (defaults to time.monotonic)
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new GameSession with words loaded from config.dictionary
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        session = cls(config=config)
        if clock is not None:
            session._clock = clock
        session.load_dictionary(config.dictionary)
        return session

    @property
    def word_count(self) -> int:
        return len(self.words)

    def load_dictionary(self, path: str | Path) -> int:
        """
        Append words from a file, respecting the word list capacity.

        Returns:
            Number of words added
        """
        return load_words(path, self.words, capacity=self.config.max_words)

    def visit_shop(self) -> int:
        """
        Buy more words: append the shop dictionary to the word list.

        Returns:
            Number of new words added
        """
        self.shop_visits += 1
        added = self.load_dictionary(self.config.shop_dictionary)
        logger.info("Shop added %d words (%d total)", added, self.word_count)
        return added

    def start_round(self, difficulty: Difficulty) -> Round:
        """
        Start a round at the given difficulty.

        Raises:
            NoWordsLoaded: If the word list is empty
            NoEligibleWords: If no word matches the difficulty
        """
        if not self.words:
            raise NoWordsLoaded()

        return Round.start(
            self.words,
            difficulty,
            stats=self.stats,
            config=self.config,
            rng=self._rng,
            clock=self._clock,
        )

    def finish_round(self, round_: Round) -> List[Achievement]:
        """
        Record a finished round and evaluate achievements with its real outcome.

        Args:
            round_: A round that is solved or exhausted

        Returns:
            Achievements unlocked by this round

        Raises:
            RoundFinished: If the round is still in progress
        """
        outcome = round_.outcome()
        self.history.append(outcome)
        return self.achievements.evaluate_outcome(outcome)

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Returns:
            Dictionary containing scores, word count and achievements
        """
        return {
            "score": self.stats.score,
            "highest_score": self.stats.highest_score,
            "streak": self.stats.streak,
            "max_streak": self.stats.max_streak,
            "rounds_played": self.stats.rounds_played,
            "rounds_won": self.stats.rounds_won,
            "word_count": self.word_count,
            "shop_visits": self.shop_visits,
            "achievements": {a.id: a.achieved for a in self.achievements.achievements},
        }
