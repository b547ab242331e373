"""Dictionary file loading."""

import logging
from pathlib import Path
from typing import Iterator, List

from .models import MAX_WORDS

logger = logging.getLogger(__name__)


def read_tokens(path: str | Path) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text file, in file order."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            yield from line.split()


def load_words(path: str | Path, words: List[str], capacity: int = MAX_WORDS) -> int:
    """
    Append words from a dictionary file to an existing word list.

    Reading stops at end of file or once `words` holds `capacity` entries.
    A missing or unreadable file adds nothing. A file that is not valid UTF-8
    stops loading where decoding fails; words already appended are kept.

    Args:
        path: Dictionary file with whitespace-separated words
        words: Word list to extend in place
        capacity: Maximum total size of `words`

    Returns:
        Number of words actually added
    """
    start = len(words)
    try:
        for token in read_tokens(path):
            if len(words) >= capacity:
                logger.info("Word list full (%d words), ignoring rest of %s", capacity, path)
                break
            words.append(token)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read dictionary %s: %s", path, e)

    added = len(words) - start
    logger.info("Loaded %d words from %s", added, path)
    return added
