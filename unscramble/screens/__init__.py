"""Console text for the Unscramble game."""

from .menus import (
    INTRO,
    format_rules,
    DIFFICULTY_MENU,
    HINT_MENU,
    SHOP_MENU,
    format_main_menu,
)
from .report import (
    format_achievements,
    format_unlocked,
    format_hint,
    format_guess_result,
    format_summary,
)

__all__ = [
    "INTRO",
    "format_rules",
    "DIFFICULTY_MENU",
    "HINT_MENU",
    "SHOP_MENU",
    "format_main_menu",
    "format_achievements",
    "format_unlocked",
    "format_hint",
    "format_guess_result",
    "format_summary",
]
