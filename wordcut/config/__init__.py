"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, constants and word list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    MIN_LETTERS_REMOVED, MAX_LETTERS_REMOVED, BASE_POINTS, REORDER_BONUS,
    START_WORD_MIN_LENGTH, START_WORD_MAX_LENGTH, WINNING_WORD_MAX_LENGTH,
    load_word_list, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'MIN_LETTERS_REMOVED', 'MAX_LETTERS_REMOVED', 'BASE_POINTS', 'REORDER_BONUS',
    'START_WORD_MIN_LENGTH', 'START_WORD_MAX_LENGTH', 'WINNING_WORD_MAX_LENGTH',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics'
]
