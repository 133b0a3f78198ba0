"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv('config.env')


def _optional_int(name):
    """Read an integer setting; unset, blank or non-numeric values give None."""
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    try:
        return int(value)
    except ValueError:
        logging.getLogger('wordle_game').warning(f"Ignoring {name}={value!r}: not an integer")
        return None


class Config:
    """Base configuration class with all settings."""

    # Dictionary Settings
    WORDS_FILE = os.getenv('WORDS_FILE') or None  # None means the bundled word list

    # Game Settings
    SEED = _optional_int('SEED')
    USE_COLOR = os.getenv('USE_COLOR', 'True').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    pass


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SEED = 0
    USE_COLOR = False
    LOG_DIR = ''


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Pick a configuration class by name, falling back to the ENV variable."""
    name = name or os.getenv('ENV', 'default')
    return config.get(name, config['default'])
