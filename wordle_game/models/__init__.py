"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Accepted,
    Guess,
    InvalidInput,
    LetterState,
    Lost,
    Outcome,
    SessionState,
    SessionStatus,
    UnknownWord,
    Won,
)

__all__ = [
    'Accepted', 'Guess', 'InvalidInput', 'LetterState', 'Lost', 'Outcome',
    'SessionState', 'SessionStatus', 'UnknownWord', 'Won'
]
