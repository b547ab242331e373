from typing import List

INTRO = """

****************************************
*              UNSCRAMBLE              *
****************************************
* Hello! Welcome to Unscramble!        *
* You are shown scrambled words and    *
* must guess the correct word. The     *
* game has difficulty levels, hints,   *
* achievements, combo points for       *
* streaks, and a shop for more words.  *
****************************************"""

MAIN_MENU_OPTIONS = """Choose an option from the menu
1. Play the game
2. Shop
3. Exit the game"""

DIFFICULTY_MENU = """
Select Difficulty Level:
1. Easy (3-5 letters)
2. Medium (6-8 letters)
3. Hard (9+ letters)"""

HINT_MENU = """
Available Hints:
1. Reveal the first letter
2. Show word length
3. Reveal a random letter"""

SHOP_MENU = """Welcome to the shop.
1. Load more difficult words
2. Exit shop"""

BOX_WIDTH = 40


def format_main_menu(score: int, highest_score: int) -> str:
    """Main menu headed by a box showing the current and highest score."""
    border = "*" * BOX_WIDTH
    inner = BOX_WIDTH - 4
    lines = [
        "",
        border,
        f"* {f'Current Score: {score}':<{inner}} *",
        f"* {f'Highest Score: {highest_score}':<{inner}} *",
        border,
        MAIN_MENU_OPTIONS,
    ]
    return "\n".join(lines)


def _boxed(lines: List[str]) -> List[str]:
    inner = BOX_WIDTH - 4
    return [f"* {line:<{inner}} *" for line in lines]


def format_rules(max_attempts: int, combo_bonus: int, hint_cost: int, max_hints: int) -> str:
    """Rules screen describing the rules actually in play."""
    border = "*" * BOX_WIDTH
    points = "point" if hint_cost == 1 else "points"
    lines = [
        border,
        f"*{'RULES':^{BOX_WIDTH - 2}}*",
        border,
        *_boxed([
            "You'll be given a word to unscramble",
            f"and must solve it within {max_attempts} tries.",
            "Points are awarded based on word",
            f"length, plus {combo_bonus} combo points for each",
            "word in your current streak.",
            f"Hints cost {hint_cost} {points}, {max_hints} per word.",
            f"Miss a word {max_attempts} times and your score",
            "drops back to 0.",
        ]),
        border,
        'Press "Enter" to continue.',
    ]
    return "\n".join(lines)
