"""
Game Logger Module

This module provides structured logging for game sessions: session
start, every submitted guess and its outcome, terminal events and errors.
"""

import logging
import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import get_config


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Game event logging keyed by session id
    - Guess/outcome tracking
    - JSON structured logs for easy parsing
    - Optional daily log file next to a quiet console handler
    """

    def __init__(self, log_dir: Optional[str] = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        # Setup main game logger
        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(level.upper())

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        if self.log_dir is not None:
            file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=_json_default)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (session start, wins, losses).

        Args:
            game_id: Session identifier
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, details)
        self.logger.info(log_message)

    def log_guess(self,
                  game_id: str,
                  raw_input: str,
                  outcome):
        """
        Log a submitted guess together with the outcome it produced.

        Rejected guesses are logged at DEBUG, scored ones at INFO.
        """
        details = {
            'game_id': game_id,
            'input': raw_input,
            'outcome': type(outcome).__name__,
            'result': self._sanitize_outcome(outcome),
        }

        log_message = self._create_log_entry('GUESS', 'submit', details)
        if outcome.consumes_attempt:
            self.logger.info(log_message)
        else:
            self.logger.debug(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None,
                  level: int = logging.ERROR):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Session identifier if applicable
            level: Log level; below WARNING keeps the entry off the console
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, details)
        self.logger.log(level, log_message)

    def _sanitize_outcome(self, outcome) -> Dict[str, Any]:
        """Flatten an outcome into JSON-friendly data."""
        if not is_dataclass(outcome):
            return {'data_type': type(outcome).__name__}
        return asdict(outcome)

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        if self.log_dir is None:
            return {'error': 'File logging is disabled'}

        try:
            log_file = self._log_file()
            if not log_file.exists():
                return {'error': 'No log file found for today'}

            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'guesses': 0,
                'game_events': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if '"GUESS"' in line:
                            stats['guesses'] += 1
                        elif '"GAME_EVENT"' in line:
                            stats['game_events'] += 1
                        elif '"ERROR"' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


def _json_default(value):
    if isinstance(value, Enum):
        return value.value
    return str(value)


def create_game_logger(app_config=None) -> GameLogger:
    """Build a GameLogger from a configuration class, by default the one ENV selects."""
    app_config = app_config or get_config()
    return GameLogger(app_config.LOG_DIR, app_config.LOG_LEVEL)


# Global logger instance
game_logger = create_game_logger()
