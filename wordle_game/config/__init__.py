"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules, constants and the dictionary provider
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, MAX_ROUNDS, WORD_LENGTH, DEFAULT_WORDS_FILE,
    normalize_word, is_candidate_word, load_word_list,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ALPHABET', 'MAX_ROUNDS', 'WORD_LENGTH', 'DEFAULT_WORDS_FILE',
    'normalize_word', 'is_candidate_word', 'load_word_list',
    'validate_word_list_integrity', 'get_word_statistics'
]
