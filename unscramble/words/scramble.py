"""Anagram generation."""

import random
from typing import Optional


def scramble_word(word: str, rng: Optional[random.Random] = None) -> str:
    """
    Scramble a word by swapping every position with a random one.

    Each index i is swapped with an index drawn uniformly from the whole word,
    so the range never shrinks (this is not Fisher-Yates). The result may equal
    the input, and words of length 0 or 1 always come back unchanged.

    Args:
        word: The word to scramble
        rng: Random source; the module-level generator is used if omitted

    Returns:
        A permutation of `word`
    """
    randrange = (rng or random).randrange
    letters = list(word)
    n = len(letters)
    for i in range(n):
        k = randrange(n)
        letters[i], letters[k] = letters[k], letters[i]
    return "".join(letters)
