"""
Game Configuration Constants Module

This module defines the fixed game rules and the dictionary provider.
Word length and the number of rounds are rules of the game, not
deployment settings, so they live here rather than in app_config.
"""

import json
import os
from typing import Iterable, List, Final, Optional


# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every hidden word and every guess."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""Canonical (upper-case) alphabet tracked by the letter state map."""

DEFAULT_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def normalize_word(word: str) -> str:
    """Trim surrounding whitespace and convert to the canonical upper case."""
    return word.strip().upper()


def is_candidate_word(word: str) -> bool:
    """True if word is exactly WORD_LENGTH ASCII letters."""
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


def _read_raw_words(path: str) -> List[str]:
    with open(path, 'r', encoding='utf-8') as f:
        if not path.lower().endswith('.json'):
            return f.read().splitlines()
        word_list = json.load(f)

    if not isinstance(word_list, list):
        raise ValueError(f"JSON file must contain an array of words: {path}")
    return [str(word) for word in word_list]


def _dedup(words: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for word in words:
        if word not in seen:
            seen.add(word)
            unique.append(word)
    return unique


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the dictionary from a JSON array or a plain one-word-per-line file.

    Entries that are not exactly five ASCII letters are skipped; the rest
    are upper-cased and deduplicated in their original order.

    Args:
        path: Word list file, defaults to the bundled wordles.json

    Returns:
        List[str]: Upper-case 5-letter words

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the file is malformed or no usable word remains
    """
    path = path or DEFAULT_WORDS_FILE

    try:
        raw_words = _read_raw_words(path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")

    words = _dedup(
        normalize_word(raw) for raw in raw_words
        if is_candidate_word(raw.strip())
    )

    if not words:
        raise ValueError(f"Word list cannot be empty: {path}")

    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only ASCII alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters with counts
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
