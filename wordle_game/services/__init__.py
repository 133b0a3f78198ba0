"""
Services Package

Contains the scoring engine, the game session and word selection.
"""

from .scoring import ScoreResult, letter_multiset, merge_letter_states, new_letter_state_map, score_guess
from .game_session import GameSession
from .word_service import choose_hidden_word

__all__ = [
    'ScoreResult', 'letter_multiset', 'merge_letter_states', 'new_letter_state_map', 'score_guess',
    'GameSession',
    'choose_hidden_word'
]
