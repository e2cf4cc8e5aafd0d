import os
import random

# Keep the module-level game logger from writing into the working directory
os.environ.setdefault('LOG_TO_FILE', 'false')

import pytest

from wordcut.services.dictionary_service import Dictionary
from wordcut.utils.game_logger import GameLogger

WORDS = [
    "matelas", "métal", "lame", "âme", "éléphant",
    "mate", "male", "tale", "mat", "ame", "tas",
    "salé", "sale", "sel", "as",
]


@pytest.fixture
def dictionary():
    return Dictionary.load(WORDS)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game_logger(tmp_path):
    return GameLogger(log_dir=str(tmp_path / "logs"), level="DEBUG")
