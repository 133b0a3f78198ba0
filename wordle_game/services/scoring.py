"""
Scoring Engine

Scores a guess against the hidden word and folds the result into the
per-letter hint map. Everything here is pure: no I/O, no randomness and
no mutation of the arguments.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..config.game_settings import ALPHABET
from ..models.game import LetterState


@dataclass(frozen=True)
class ScoreResult:
    """Per-position states for one guess plus the per-letter best states."""
    states: Tuple[LetterState, ...]
    letter_updates: Dict[str, LetterState]


def letter_multiset(word: str) -> Counter:
    """Count how many times each letter occurs in word."""
    return Counter(word)


def new_letter_state_map() -> Dict[str, LetterState]:
    """Letter state map with every letter of the alphabet still UNKNOWN."""
    return {letter: LetterState.UNKNOWN for letter in ALPHABET}


def score_guess(hidden_word: str, guess: str,
                letter_counts: Optional[Counter] = None) -> ScoreResult:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are resolved first and consume the hidden word's letter
    budget; only the letters left over can then be credited as present
    elsewhere. A letter guessed more times than it occurs in the hidden
    word is therefore only credited as often as it really occurs, with
    exact positions taking priority.

    Args:
        hidden_word: The answer, in canonical case
        guess: The guessed word, same length and case as hidden_word
        letter_counts: Precomputed letter_multiset(hidden_word); it is
            copied, never modified

    Returns:
        ScoreResult with one state per position and, for every guessed
        letter, the best state it reached in this guess

    Raises:
        ValueError: If the two words differ in length
    """
    if len(guess) != len(hidden_word):
        raise ValueError(
            f"Guess '{guess}' and hidden word must have the same length "
            f"({len(guess)} != {len(hidden_word)})"
        )

    remaining = Counter(letter_counts) if letter_counts is not None else letter_multiset(hidden_word)
    states = [LetterState.NOT_PRESENT] * len(guess)

    # First pass: exact position matches
    for i, (guessed, hidden) in enumerate(zip(guess, hidden_word)):
        if guessed == hidden:
            states[i] = LetterState.RIGHT_PLACE
            remaining[guessed] -= 1

    # Second pass: present letters that still have budget left
    for i, guessed in enumerate(guess):
        if states[i] == LetterState.RIGHT_PLACE:
            continue
        if remaining[guessed] > 0:
            states[i] = LetterState.WRONG_PLACE
            remaining[guessed] -= 1

    letter_updates: Dict[str, LetterState] = {}
    for guessed, state in zip(guess, states):
        letter_updates[guessed] = letter_updates.get(guessed, LetterState.UNKNOWN).merge(state)

    return ScoreResult(states=tuple(states), letter_updates=letter_updates)


def merge_letter_states(letter_states: Dict[str, LetterState],
                        updates: Dict[str, LetterState]) -> Dict[str, LetterState]:
    """
    Return a new letter state map with updates merged in.

    Each letter keeps the higher-ranked of its old and new state, and
    letters missing from updates are left as they were.
    """
    merged = dict(letter_states)
    for letter, observed in updates.items():
        merged[letter] = merged.get(letter, LetterState.UNKNOWN).merge(observed)
    return merged
