"""
Game Data Models

Contains all game-related data structures.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class MoveResult:
    """Outcome of validating one proposed move."""
    valid: bool
    points_p1: int = 0
    points_p2: int = 0
    reason: Optional[str] = None  # Only set when the move is invalid

    @property
    def total(self) -> int:
        return self.points_p1 + self.points_p2


@dataclass(frozen=True)
class GameMove:
    """An accepted move: the word reached and the points it earned."""
    word: str
    points_p1: int
    points_p2: int


@dataclass
class GameState:
    """Snapshot of a single game session."""
    game_id: str
    start_word: str
    current_word: str
    history: List[GameMove] = field(default_factory=list)
    total_score: int = 0
    is_won: bool = False
    last_error: Optional[str] = None
