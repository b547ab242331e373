"""Test the game session: loading, rounds, shop and state."""

from unittest.mock import Mock

import pytest

from unscramble.engine import GameConfig, GameSession, NoEligibleWords, NoWordsLoaded
from unscramble.engine.achievements import FIRST_WIN, HIGH_SCORER, HINT_MASTER, QUICK_THINKER
from unscramble.words import Difficulty


@pytest.fixture
def dictionaries(tmp_path):
    """Write a starting dictionary and a shop dictionary."""
    main = tmp_path / "dictionary.txt"
    main.write_text("cat dog elephant\n")
    shop = tmp_path / "dictionary2.txt"
    shop.write_text("adventure chocolate\n")
    return GameConfig(dictionary=str(main), shop_dictionary=str(shop), seed=1)


class TestCreate:
    """Test session creation."""

    def test_loads_dictionary(self, dictionaries):
        """Creating a session loads the configured dictionary."""
        session = GameSession.create(config=dictionaries)
        assert session.words == ["cat", "dog", "elephant"]
        assert session.word_count == 3

    def test_create_from_kwargs(self, tmp_path):
        """Config fields can be passed as keyword arguments."""
        session = GameSession.create(dictionary=str(tmp_path / "missing.txt"))
        assert session.words == []
        assert session.config.max_attempts == 3

    def test_capacity_from_config(self, tmp_path):
        """The word list never exceeds max_words."""
        path = tmp_path / "words.txt"
        path.write_text("one two three four five")
        session = GameSession.create(dictionary=str(path), max_words=3)
        assert session.words == ["one", "two", "three"]

    def test_thresholds_passed_to_achievements(self):
        """Achievement thresholds follow the config."""
        session = GameSession(config=GameConfig(high_score_target=10, quick_win_seconds=5))
        assert session.achievements.high_score_target == 10
        assert session.achievements.quick_win_seconds == 5
        assert session.achievements.get(HIGH_SCORER).description == "Reach a score of 10 or more"
        assert session.achievements.get(QUICK_THINKER).description == "Win within 5 seconds"


class TestShop:
    """Test buying more words."""

    def test_shop_appends_words(self, dictionaries):
        """The shop adds the second dictionary after the first."""
        session = GameSession.create(config=dictionaries)
        assert session.visit_shop() == 2
        assert session.words[-2:] == ["adventure", "chocolate"]
        assert session.shop_visits == 1

    def test_shop_respects_capacity(self, dictionaries):
        """The shop cannot push the list past capacity."""
        config = dictionaries.model_copy(update={"max_words": 4})
        session = GameSession.create(config=config)
        assert session.visit_shop() == 1
        assert session.word_count == 4
        assert session.visit_shop() == 0

    def test_shop_not_utf8(self, dictionaries, tmp_path):
        """An undecodable shop dictionary adds nothing and the session carries on."""
        bad = tmp_path / "bad.txt"
        bad.write_bytes(b"caf\xe9 na\xefve elephant")
        config = dictionaries.model_copy(update={"shop_dictionary": str(bad)})
        session = GameSession.create(config=config)

        assert session.visit_shop() == 0
        assert session.words == ["cat", "dog", "elephant"]

    def test_shop_missing_file(self, tmp_path):
        """A missing shop dictionary adds nothing."""
        session = GameSession(config=GameConfig(shop_dictionary=str(tmp_path / "none.txt")))
        assert session.visit_shop() == 0


class TestRounds:
    """Test starting and finishing rounds."""

    def test_no_words_loaded(self):
        """An empty word list refuses to start a round."""
        session = GameSession()
        with pytest.raises(NoWordsLoaded):
            session.start_round(Difficulty.EASY)

    def test_no_eligible_words(self, dictionaries):
        """A tier with no words refuses to start a round."""
        session = GameSession.create(config=dictionaries)
        with pytest.raises(NoEligibleWords):
            session.start_round(Difficulty.HARD)

    def test_round_shares_stats(self, dictionaries):
        """Rounds update the session's own statistics."""
        session = GameSession.create(config=dictionaries)
        round_ = session.start_round(Difficulty.MEDIUM)
        round_.guess("elephant")
        assert session.stats.score == 8
        assert session.stats.highest_score == 8

    def test_finish_round_uses_real_outcome(self, dictionaries):
        """Achievements come from the round actually played."""
        clock = Mock(side_effect=[0.0, 45.0])
        session = GameSession.create(config=dictionaries, clock=clock)
        round_ = session.start_round(Difficulty.MEDIUM)
        round_.guess("elephant")

        unlocked = session.finish_round(round_)

        assert {a.id for a in unlocked} == {FIRST_WIN, HINT_MASTER}
        assert not session.achievements.is_unlocked(QUICK_THINKER)
        assert len(session.history) == 1
        assert session.history[0].time_taken == 45.0

    def test_lost_round_unlocks_nothing(self, dictionaries):
        """A lost round unlocks no achievements."""
        session = GameSession.create(config=dictionaries)
        round_ = session.start_round(Difficulty.MEDIUM)
        for _ in range(3):
            round_.guess("wrong")
        assert session.finish_round(round_) == []
        assert session.history[0].won is False

    def test_seed_is_reproducible(self, dictionaries):
        """Sessions with the same seed draw the same words."""
        a = GameSession.create(config=dictionaries)
        b = GameSession.create(config=dictionaries)
        targets_a = [a.start_round(Difficulty.EASY).state for _ in range(5)]
        targets_b = [b.start_round(Difficulty.EASY).state for _ in range(5)]
        assert [(s.target, s.scrambled) for s in targets_a] == [(s.target, s.scrambled) for s in targets_b]


class TestGetState:
    """Test the state snapshot."""

    def test_state_fields(self, dictionaries):
        """The snapshot reports stats, words and achievements."""
        session = GameSession.create(config=dictionaries)
        round_ = session.start_round(Difficulty.MEDIUM)
        round_.guess("elephant")
        session.finish_round(round_)

        state = session.get_state()

        assert state["score"] == 8
        assert state["highest_score"] == 8
        assert state["streak"] == 1
        assert state["rounds_played"] == 1
        assert state["rounds_won"] == 1
        assert state["word_count"] == 3
        assert state["achievements"][FIRST_WIN] is True
