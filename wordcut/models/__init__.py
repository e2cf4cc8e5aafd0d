"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import GameMove, GameState, MoveResult

__all__ = ['GameMove', 'GameState', 'MoveResult']
