"""
Utilities Package

Contains logging and terminal rendering helpers.
"""

from .game_logger import GameLogger, game_logger
from .rendering import render_guess, render_keyboard, render_outcome

__all__ = ['GameLogger', 'game_logger', 'render_guess', 'render_keyboard', 'render_outcome']
