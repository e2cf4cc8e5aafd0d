"""
Game Engine

Pure rules of WordCut. No state, no I/O: every function works only on the
words and the dictionary it is given.

Rules:
- A move removes 1, 2 or 3 letters from the current word.
- The remaining letters, in any order, must form a dictionary word.
- P1 points: 1 letter removed -> 3, 2 -> 2, 3 -> 1.
- P2 points: +2 when the remaining letters were reordered.
- The game is won once a word of 3 letters or fewer is reached.
"""

from collections import Counter

from ..config.game_settings import (
    MIN_LETTERS_REMOVED, MAX_LETTERS_REMOVED, BASE_POINTS, REORDER_BONUS, WINNING_WORD_MAX_LENGTH
)
from ..models.game import MoveResult
from .dictionary_service import Dictionary, normalize


def is_letter_subset(parent: str, child: str) -> bool:
    """
    True if every letter of ``child``, counted with multiplicity, is in ``parent``.

    is_letter_subset("MATELAS", "METAL") -> True
    """
    available = Counter(parent)
    available.subtract(child)
    return all(count >= 0 for count in available.values())


def is_subsequence(sub: str, string: str) -> bool:
    """
    True if the letters of ``sub`` appear in ``string`` in the same order.

    is_subsequence("AME", "LAME") -> True
    is_subsequence("METAL", "MATELAS") -> False  (T comes before E in MATELAS)
    """
    i = 0
    for char in string:
        if i == len(sub):
            break
        if char == sub[i]:
            i += 1
    return i == len(sub)


def validate_move(current_word: str, next_word: str, dictionary: Dictionary) -> MoveResult:
    """
    Validates a move and computes the points it earns.

    Checks run in order and stop at the first failure: empty input, number
    of letters removed, letters drawn from the current word, dictionary
    membership.

    Args:
        current_word: Word shown to the player (e.g. "MATELAS")
        next_word: Word proposed by the player (e.g. "METAL")
        dictionary: Loaded dictionary used for the membership check

    Returns:
        MoveResult: valid with both point components, or invalid with a reason
    """
    current = normalize(current_word)
    nxt = normalize(next_word)

    if not nxt:
        return MoveResult(valid=False, reason="Enter a word.")

    removed = len(current) - len(nxt)

    if removed < MIN_LETTERS_REMOVED or removed > MAX_LETTERS_REMOVED:
        return MoveResult(valid=False, reason=f"Remove 1, 2 or 3 letters (you removed {removed}).")

    if not is_letter_subset(current, nxt):
        return MoveResult(valid=False, reason="Letters are not drawn from the current word.")

    if not dictionary.is_word(nxt):
        return MoveResult(valid=False, reason=f'"{nxt}" is not a valid word.')

    points_p1 = BASE_POINTS - removed
    points_p2 = 0 if is_subsequence(nxt, current) else REORDER_BONUS

    return MoveResult(valid=True, points_p1=points_p1, points_p2=points_p2)


def is_game_won(word: str) -> bool:
    """Checks the length only; the word itself is not looked up."""
    return len(word.strip()) <= WINNING_WORD_MAX_LENGTH
