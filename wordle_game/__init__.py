"""
Terminal Wordle

A hidden five-letter word, six tries, and per-letter hints that only
ever get more informative.
"""

from .models import (
    Accepted, Guess, InvalidInput, LetterState, Lost, Outcome,
    SessionState, SessionStatus, UnknownWord, Won
)
from .services import GameSession, choose_hidden_word, score_guess

__all__ = [
    'Accepted', 'Guess', 'InvalidInput', 'LetterState', 'Lost', 'Outcome',
    'SessionState', 'SessionStatus', 'UnknownWord', 'Won',
    'GameSession', 'choose_hidden_word', 'score_guess'
]
