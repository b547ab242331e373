"""Unscramble: a console word-unscrambling game."""

__version__ = "0.1.0"
