"""
Game Logger Module for WordCut

This module provides structured logging for game sessions: games started
and reset, moves accepted or rejected, wins and errors.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import get_config
from ..models.game import MoveResult


class GameLogger:
    """
    Centralized logging system for WordCut game sessions.

    Features:
    - Game event logging (new game, reset, win)
    - Move logging with the points awarded or the rejection reason
    - JSON structured log lines for easy parsing

    Each instance drives the standard logger called ``name``. Two instances
    with the same name share that logger, and the newer one replaces the
    older one's handlers, so give concurrent loggers distinct names.
    """

    def __init__(self,
                 log_dir: str = "logs",
                 level: str = "INFO",
                 log_to_file: bool = True,
                 name: str = "wordcut_game"):
        self.name = name
        self.log_dir = Path(log_dir)
        self.level = logging.getLevelName(level.upper())
        self.log_to_file = log_to_file
        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        # Setup main game logger
        self.logger = self._setup_logger()

    @classmethod
    def from_config(cls, config_class, name: str = "wordcut_game") -> "GameLogger":
        """Build a logger from a configuration class's LOG_* settings."""
        return cls(config_class.LOG_DIR, config_class.LOG_LEVEL, config_class.LOG_TO_FILE, name=name)

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        if self.log_to_file:
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

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
        return json.dumps(log_entry, ensure_ascii=False)

    def log_game_event(self, game_id: str, event: str, **kwargs):
        """
        Log game-specific events.

        Args:
            game_id: Game identifier
            event: Type of game event (e.g. 'new_game', 'reset_game', 'game_won')
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_move(self, game_id: str, current_word: str, next_word: str, result: MoveResult):
        """
        Log a submitted move and its outcome.

        Accepted moves are logged at INFO, rejected ones at DEBUG since they
        are an ordinary part of play.
        """
        details = {
            'game_id': game_id,
            'current_word': current_word,
            'next_word': next_word,
            'valid': result.valid,
            'points_p1': result.points_p1,
            'points_p2': result.points_p2,
            'reason': result.reason
        }
        log_message = self._create_log_entry('MOVE', 'submit_move', details)

        if result.valid:
            self.logger.info(log_message)
        else:
            self.logger.debug(log_message)

    def log_error(self, error: Exception, action: str, game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'game_events': 0,
            'moves': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if not line.strip():
                    continue
                stats['total_entries'] += 1
                if '"GAME_EVENT"' in line:
                    stats['game_events'] += 1
                elif '"MOVE"' in line:
                    stats['moves'] += 1
                elif '"ERROR"' in line:
                    stats['errors'] += 1

        return stats


# Global logger instance, configured from WORDCUT_ENV
game_logger = GameLogger.from_config(get_config())
