"""
Word Service

Picks the hidden word for a new game.
"""

import random
from typing import Optional, Sequence


def choose_hidden_word(words: Sequence[str], seed: Optional[int] = None) -> str:
    """
    Selects a random word (uniformly) from the word list.

    Args:
        words: Candidate words, already filtered by the dictionary provider
        seed: Makes the choice reproducible when given

    Returns:
        str: The chosen word

    Raises:
        ValueError: If words is empty
    """
    if not words:
        raise ValueError("Cannot choose a word from an empty word list")

    rng = random.Random(seed) if seed is not None else random.Random()
    return rng.choice(list(words))
