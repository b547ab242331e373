"""
Main entry point for playing Unscramble.

Usage:
    python -m unscramble.main
    python -m unscramble.main config.yaml
    python -m unscramble.main --dictionary words.txt --seed 42 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .console import Console
from .engine import GameConfig, GameSession


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Send log records to stderr so they never mix with the game screen."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Unscramble, a word unscrambling game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  dictionary: dictionary.txt
  shop_dictionary: dictionary2.txt
  max_attempts: 3
  max_hints: 2
  hint_cost: 1
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Word file loaded at start (overrides config)"
    )
    parser.add_argument(
        "--shop-dictionary",
        help="Word file the shop adds (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible games (overrides config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log game events to stderr"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log everything to stderr, including target words"
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, debug=args.debug)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    overrides = {
        "dictionary": args.dictionary,
        "shop_dictionary": args.shop_dictionary,
        "seed": args.seed,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = config.model_copy(update=overrides)

    session = GameSession.create(config=config)
    return Console(session).run()


if __name__ == "__main__":
    sys.exit(main())
