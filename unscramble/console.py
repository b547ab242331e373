"""
Interactive console front end.

Reads player input line by line, recovers from malformed numbers and drives a
GameSession through the play / shop / exit menu.
"""

import logging
from typing import Callable, Optional

from .engine import (
    GameSession,
    HINT_CHOICES,
    InputFormatError,
    NoEligibleWords,
    NoWordsLoaded,
    Round,
)
from .screens import (
    INTRO,
    format_rules,
    DIFFICULTY_MENU,
    HINT_MENU,
    SHOP_MENU,
    format_main_menu,
    format_achievements,
    format_unlocked,
    format_hint,
    format_guess_result,
    format_summary,
)
from .words import Difficulty

logger = logging.getLogger(__name__)

PLAY, SHOP, EXIT = 1, 2, 3


def parse_int(raw: str) -> int:
    """
    Parse the first token of a line as an integer; the rest of the line is ignored.

    Raises:
        InputFormatError: If the line is blank or the token is not a number
    """
    tokens = raw.split()
    if not tokens:
        raise InputFormatError(raw)
    try:
        return int(tokens[0])
    except ValueError:
        raise InputFormatError(raw) from None


class Console:
    """
    Menu loop for a single player.

    Args:
        session: The game session to play
        input_fn: Reads one line given a prompt (raises EOFError at end of input)
        output: Prints one block of text
    """

    def __init__(
        self,
        session: GameSession,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.session = session
        self.input_fn = input_fn or input
        self.output = output or print

    def read_line(self, prompt: str = "") -> str:
        return self.input_fn(prompt)

    def read_int(self, prompt: str) -> int:
        """Prompt until the player enters a number."""
        raw = self.read_line(prompt)
        while True:
            try:
                return parse_int(raw)
            except InputFormatError as e:
                logger.debug("Rejected input: %s", e)
                raw = self.read_line("Invalid selection. Please enter a number: ")

    def read_token(self, prompt: str) -> str:
        """Prompt until the player enters a non-blank line; return its first word."""
        while True:
            tokens = self.read_line(prompt).split()
            if tokens:
                return tokens[0]

    def pause(self) -> None:
        self.output('Press "Enter" to continue.')
        self.read_line()

    def run(self) -> int:
        """
        Show the intro and run the main menu until the player exits.

        End of input or Ctrl-C is treated as choosing Exit.

        Returns:
            Process exit status (always 0)
        """
        try:
            self.output(INTRO)
            config = self.session.config
            self.output(format_rules(
                config.max_attempts, config.combo_bonus, config.hint_cost, config.max_hints
            ))
            self.read_line()

            while True:
                stats = self.session.stats
                self.output(format_achievements(self.session.achievements.achievements))
                self.output(format_main_menu(stats.score, stats.highest_score))

                option = self.read_int("Enter your selection: ")
                if option == PLAY:
                    self.play()
                elif option == SHOP:
                    self.shop()
                elif option == EXIT:
                    self.output("Exiting the game.")
                    break
                else:
                    self.output("Invalid selection. Please enter a number between 1 and 3.")
        except (EOFError, KeyboardInterrupt):
            self.output("\nExiting the game.")

        self.output(format_summary(self.session.get_state()))
        return 0

    def choose_difficulty(self) -> Difficulty:
        self.output(DIFFICULTY_MENU)
        while True:
            code = self.read_int("Enter your choice: ")
            try:
                return Difficulty.from_code(code)
            except ValueError:
                self.output("Invalid difficulty. Please enter 1, 2 or 3.")

    def play(self) -> None:
        """Play one round at a chosen difficulty, then report achievements."""
        difficulty = self.choose_difficulty()
        try:
            round_ = self.session.start_round(difficulty)
        except NoWordsLoaded:
            self.output("Error: No words loaded from the dictionary files.")
            return
        except NoEligibleWords:
            self.output("No words available for the selected difficulty level.")
            return

        self.play_round(round_)
        for achievement in self.session.finish_round(round_):
            self.output(format_unlocked(achievement))
        self.pause()

    def play_round(self, round_: Round) -> None:
        self.output(f"Anagram of the word is: {round_.state.scrambled}")
        while not round_.is_over:
            token = self.read_token("Guess the word (or type 'hint' for a hint): ")
            if Round.is_hint_request(token):
                self.give_hint(round_)
                continue
            self.output(format_guess_result(round_.guess(token)))

    def give_hint(self, round_: Round) -> None:
        if not round_.can_use_hint():
            self.output("You have used all available hints for this word.")
            return

        self.output(HINT_MENU)
        kind = HINT_CHOICES.get(self.read_int("Enter your choice: "))
        if kind is None:
            self.output("Invalid hint choice.")
            return
        self.output(format_hint(round_.use_hint(kind)))

    def shop(self) -> None:
        self.output(SHOP_MENU)
        if self.read_int("Enter your choice: ") == 1:
            added = self.session.visit_shop()
            self.output(f"{added} new words added!")
        else:
            self.output("Exiting the shop.")
        self.pause()
