"""
Dictionary Service

Holds the normalized word set used to validate moves and the pool of start
words a new game is drawn from.

Every word is stored in canonical form: uppercase with diacritics stripped,
so "ÉLÉPHANT", "éléphant" and "ELEPHANT" are the same entry. Player input is
normalized the same way before lookup.
"""

import logging
import random
import re
import unicodedata
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from ..config.game_settings import (
    START_WORD_MIN_LENGTH, START_WORD_MAX_LENGTH, load_word_list, get_word_statistics
)

logger = logging.getLogger(__name__)

_COMBINING_MARKS = re.compile('[\u0300-\u036f]')


class DictionaryError(Exception):
    """Base class for dictionary lifecycle errors."""


class EmptyDictionaryError(DictionaryError):
    """Raised when a start word is requested but none are available."""


def normalize(word: str) -> str:
    """
    Canonical form of a word: uppercase, decomposed (NFD), combining marks removed.

    "ÉLÉPHANT" -> "ELEPHANT", "âme" -> "AME"
    """
    decomposed = unicodedata.normalize('NFD', word.upper())
    return _COMBINING_MARKS.sub('', decomposed)


@dataclass(frozen=True)
class Dictionary:
    """
    Immutable word set built once at startup.

    Build instances with ``load`` or ``from_file``. Those are the supported
    constructors: they normalize every word and derive the start words.
    Calling ``Dictionary(words=..., start_words=...)`` directly skips both, so
    the fields must then already be in canonical form.
    """

    words: FrozenSet[str]
    start_words: Tuple[str, ...]

    @classmethod
    def load(cls, source_words: Iterable[str]) -> "Dictionary":
        """
        Build a dictionary from raw words in a single pass.

        Blank entries are skipped. Start words are the distinct normalized
        words whose length is within the start word range.
        """
        words = set()
        start_words: Dict[str, None] = {}

        for raw in source_words:
            word = normalize(raw.strip())
            if not word:
                continue
            words.add(word)
            if START_WORD_MIN_LENGTH <= len(word) <= START_WORD_MAX_LENGTH:
                start_words[word] = None

        logger.info("Loaded %s words (%s start words)", len(words), len(start_words))
        return cls(words=frozenset(words), start_words=tuple(start_words))

    @classmethod
    def from_file(cls, path: str) -> "Dictionary":
        """Load a dictionary from a JSON array or one-word-per-line file."""
        logger.debug("Reading word list from %s", path)
        return cls.load(load_word_list(path))

    def is_word(self, word: str) -> bool:
        return normalize(word) in self.words

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return len(self.words)

    def get_random_start_word(self, rng: Optional[random.Random] = None) -> str:
        """
        Pick a start word uniformly at random.

        Args:
            rng: Source of randomness (anything with ``choice``); the
                ``random`` module is used when omitted

        Raises:
            EmptyDictionaryError: If the dictionary has no start words
        """
        if not self.start_words:
            raise EmptyDictionaryError(
                f"No start words of {START_WORD_MIN_LENGTH}-{START_WORD_MAX_LENGTH} letters in dictionary"
            )
        return (rng or random).choice(self.start_words)

    def statistics(self) -> Dict:
        return get_word_statistics(self.words)


def load_dictionary(source_words: Iterable[str]) -> Dictionary:
    """Build the dictionary from an in-memory word list."""
    return Dictionary.load(source_words)
