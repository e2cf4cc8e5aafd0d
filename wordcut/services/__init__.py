"""
Services Package

Contains the dictionary, the game rules engine and the session service.
"""

from .dictionary_service import Dictionary, DictionaryError, EmptyDictionaryError, load_dictionary, normalize
from .game_engine import is_game_won, is_letter_subset, is_subsequence, validate_move
from .game_service import GameService

__all__ = [
    'Dictionary', 'DictionaryError', 'EmptyDictionaryError', 'load_dictionary', 'normalize',
    'is_game_won', 'is_letter_subset', 'is_subsequence', 'validate_move',
    'GameService'
]
