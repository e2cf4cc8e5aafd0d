"""
Game Service

Holds WordCut game sessions and applies the engine's verdicts to them.
"""

import random
import threading
import uuid
from typing import Dict, Optional

from ..models.game import GameMove, GameState, MoveResult
from ..utils.game_logger import GameLogger, game_logger
from .dictionary_service import Dictionary, normalize
from .game_engine import is_game_won, validate_move


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Start word selection from the dictionary
    - Move submission, scoring and win detection
    - Game state snapshots for the front-end

    The dictionary is shared read-only; the games table is the only mutable
    state and is guarded by a lock.
    """

    def __init__(self,
                 dictionary: Dictionary,
                 rng: Optional[random.Random] = None,
                 logger: Optional[GameLogger] = None):
        self.dictionary = dictionary
        self.rng = rng
        self.logger = logger or game_logger
        self.games: Dict[str, Dict] = {}  # Store active games by game_id
        self._lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected start word.

        Returns:
            str: Unique game ID for this session

        Raises:
            EmptyDictionaryError: If the dictionary has no start words
        """
        game_id = str(uuid.uuid4())
        start_word = self.dictionary.get_random_start_word(self.rng)

        with self._lock:
            self.games[game_id] = self._fresh_game(start_word)

        self.logger.log_game_event(game_id, 'new_game', start_word=start_word)
        return game_id

    def _fresh_game(self, start_word: str) -> Dict:
        return {
            "start_word": start_word,
            "current_word": start_word,
            "history": [],
            "total_score": 0,
            "is_won": False,
            "last_error": None
        }

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current state of a game session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            return self._snapshot(game_id, game)

    def _snapshot(self, game_id: str, game: Dict) -> GameState:
        return GameState(
            game_id=game_id,
            start_word=game["start_word"],
            current_word=game["current_word"],
            history=game["history"].copy(),
            total_score=game["total_score"],
            is_won=game["is_won"],
            last_error=game["last_error"]
        )

    def reset_game(self, game_id: str) -> Optional[GameState]:
        """
        Restarts a game from its start word, clearing history and score.

        Returns:
            Updated GameState or None if game not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            game.update(self._fresh_game(game["start_word"]))
            state = self._snapshot(game_id, game)

        self.logger.log_game_event(game_id, 'reset_game', start_word=state.start_word)
        return state

    def make_move(self, game_id: str, next_word: str) -> Optional[MoveResult]:
        """
        Submits a move for a game session.

        An invalid move only records its reason as the game's last error;
        the current word, history and score are left untouched.

        Args:
            game_id: Unique game identifier
            next_word: Word proposed by the player

        Returns:
            MoveResult of the submission, or None if game not found
        """
        next_word = next_word.strip()

        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None

            current_word = game["current_word"]
            if game["is_won"]:
                result = MoveResult(valid=False, reason="Game is already won.")
            else:
                result = validate_move(current_word, next_word, self.dictionary)

            if not result.valid:
                game["last_error"] = result.reason
            else:
                new_word = normalize(next_word)
                game["current_word"] = new_word
                game["history"].append(GameMove(new_word, result.points_p1, result.points_p2))
                game["total_score"] += result.total
                game["is_won"] = is_game_won(new_word)
                game["last_error"] = None

            won = game["is_won"] and result.valid
            total_score = game["total_score"]
            moves = len(game["history"])

        self.logger.log_move(game_id, current_word, next_word, result)
        if won:
            self.logger.log_game_event(game_id, 'game_won', total_score=total_score, moves=moves)

        return result

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False
