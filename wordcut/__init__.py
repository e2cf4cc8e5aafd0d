"""
WordCut Game Package

A single-player word-reduction game: remove 1 to 3 letters from the current
word, rearrange what is left into another dictionary word, and keep going
until a word of 3 letters or fewer is reached.
"""

import random
from typing import Optional

from .config import get_config
from .services.dictionary_service import Dictionary
from .services.game_service import GameService
from .utils.game_logger import GameLogger, game_logger


def create_game_service(config_class=None,
                        rng: Optional[random.Random] = None,
                        word_list_path: Optional[str] = None) -> GameService:
    """
    Factory for a ready-to-use game service.

    Loads the dictionary once from the word list and hands it to a new
    GameService whose logger follows the configuration's LOG_* settings.

    Args:
        config_class: Configuration class to use, selected by WORDCUT_ENV when omitted
        rng: Optional source of randomness for start word selection
        word_list_path: Overrides the configured WORD_LIST_PATH

    Returns:
        GameService backed by the loaded dictionary
    """
    active_config = get_config()
    config_class = config_class or active_config
    if config_class is active_config:
        logger = game_logger
    else:
        logger = GameLogger.from_config(config_class, name=f"wordcut_game_{config_class.__name__.lower()}")

    path = word_list_path or config_class.WORD_LIST_PATH
    try:
        dictionary = Dictionary.from_file(path)
    except (OSError, ValueError) as e:
        logger.log_error(e, 'load_dictionary')
        raise

    logger.logger.info(f"Dictionary loaded from {path}: {len(dictionary)} words")
    return GameService(dictionary, rng=rng, logger=logger)
