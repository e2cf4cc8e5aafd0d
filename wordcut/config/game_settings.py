"""
Game Configuration Constants Module

This module defines the WordCut game rules and the word list file handling.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from collections import Counter
from typing import Dict, Final, Iterable, List

# Number of letters a single move may remove
MIN_LETTERS_REMOVED: Final[int] = 1
MAX_LETTERS_REMOVED: Final[int] = 3

# Scoring: P1 = BASE_POINTS - letters removed, P2 = REORDER_BONUS when letters moved
BASE_POINTS: Final[int] = 4
REORDER_BONUS: Final[int] = 2

# Start words are picked among dictionary words of this length range (inclusive)
START_WORD_MIN_LENGTH: Final[int] = 5
START_WORD_MAX_LENGTH: Final[int] = 12

# Reaching a word this short (or shorter) wins the game
WINNING_WORD_MAX_LENGTH: Final[int] = 3


def load_word_list(path: str) -> List[str]:
    """
    Load a raw word list from disk.

    Two formats are accepted: a JSON array of strings (``.json``), or a
    plain text file with one word per line. Words are returned as stored,
    normalization is the dictionary's job.

    Args:
        path: Path to the word list file

    Returns:
        List[str]: Raw words in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is malformed or holds no words
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Word list file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.endswith('.json'):
            try:
                word_list = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
            if not isinstance(word_list, list):
                raise ValueError(f"{path} must contain an array of words")
            non_strings = [word for word in word_list if not isinstance(word, str)]
            if non_strings:
                raise ValueError(f"{path} contains non-string entries: {non_strings[:5]}")
        else:
            word_list = [line.strip() for line in f if line.strip()]

    if not word_list:
        raise ValueError(f"Word list cannot be empty: {path}")

    return word_list


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity of a raw word list.

    This function checks that:
    1. The list is not empty
    2. Every entry is a non-blank string
    3. No entry appears twice

    Accent variants ("pâte" and "pate") are distinct entries here even though
    they collapse to a single dictionary word.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ValueError(f"Entry at index {index} is not a string: {word!r}")
        if not word.strip():
            raise ValueError(f"Entry at index {index} is blank")

    duplicates = sorted(word for word, count in Counter(words).items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Describes a set of (normalized) words.

    Returns:
        dict: total_words, start_words, avg_length, length_distribution
            and the five most common letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    lengths = Counter(len(word) for word in words)
    letters = Counter(char for word in words for char in word if char.isalpha())
    start_words = sum(
        count for length, count in lengths.items()
        if START_WORD_MIN_LENGTH <= length <= START_WORD_MAX_LENGTH
    )

    return {
        "total_words": len(words),
        "start_words": start_words,
        "avg_length": round(sum(len(word) for word in words) / len(words), 2),
        "length_distribution": dict(sorted(lengths.items())),
        "most_common_letters": letters.most_common(5)
    }
