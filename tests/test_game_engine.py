import itertools

import pytest

from wordcut.models.game import MoveResult
from wordcut.services.game_engine import (
    is_game_won, is_letter_subset, is_subsequence, validate_move
)


def test_matelas_to_metal_scores_both_components(dictionary):
    result = validate_move("MATELAS", "METAL", dictionary)
    assert result == MoveResult(valid=True, points_p1=2, points_p2=2, reason=None)
    assert result.total == 4


def test_lame_to_ame_keeps_order(dictionary):
    result = validate_move("LAME", "AME", dictionary)
    assert result == MoveResult(valid=True, points_p1=3, points_p2=0)


def test_unknown_word_is_rejected(dictionary):
    # Letters and count are fine, only the dictionary lookup fails
    result = validate_move("MATELAS", "SALTE", dictionary)
    assert not result.valid
    assert result.reason == '"SALTE" is not a valid word.'
    assert (result.points_p1, result.points_p2) == (0, 0)


def test_foreign_letter_fails_before_dictionary_lookup(dictionary):
    result = validate_move("MATELAS", "METALX", dictionary)
    assert not result.valid
    assert result.reason == "Letters are not drawn from the current word."


def test_longer_word_reports_negative_count(dictionary):
    result = validate_move("MATELAS", "MATELASSE", dictionary)
    assert not result.valid
    assert "(you removed -2)" in result.reason


@pytest.mark.parametrize("current, nxt, removed", [
    ("MATELAS", "MATELAS", 0),
    ("MATELAS", "SALTEMA", 0),
    ("ELEPHANT", "LAME", 4),
    ("MATELAS", "AS", 5),
])
def test_removed_count_out_of_range(dictionary, current, nxt, removed):
    result = validate_move(current, nxt, dictionary)
    assert not result.valid
    assert f"(you removed {removed})" in result.reason


def test_empty_word_is_rejected(dictionary):
    result = validate_move("MATELAS", "", dictionary)
    assert not result.valid
    assert result.reason == "Enter a word."


def test_letters_must_come_from_current_word(dictionary):
    # SEL has the right length but MATE has no S
    result = validate_move("MATE", "SEL", dictionary)
    assert not result.valid
    assert result.reason == "Letters are not drawn from the current word."


def test_letter_multiplicity_is_respected(dictionary):
    # MATELAS has a single E
    assert validate_move("MATELAS", "EEMAL", dictionary).reason == \
        "Letters are not drawn from the current word."
    assert not is_letter_subset("METAL", "EEL")


def test_input_is_normalized(dictionary):
    result = validate_move("matelas", "métal", dictionary)
    assert result.valid
    assert result.points_p2 == 2


def test_reorder_bonus_only_for_actual_permutation(dictionary):
    assert validate_move("MATELAS", "MATE", dictionary).points_p2 == 0
    assert validate_move("MATELAS", "TALE", dictionary).points_p2 == 2


@pytest.mark.parametrize("current, nxt, expected", [
    ("LAME", "AME", 3),
    ("MATELAS", "METAL", 2),
    ("MATELAS", "MATE", 1),
])
def test_points_p1_decrease_with_letters_removed(dictionary, current, nxt, expected):
    result = validate_move(current, nxt, dictionary)
    assert result.valid
    assert result.points_p1 == expected
    assert result.points_p1 + (len(current) - len(nxt)) == 4
    assert result.points_p2 in (0, 2)


def test_letter_subset_ignores_order():
    assert is_letter_subset("MATELAS", "METAL")
    for permutation in itertools.permutations("METAL"):
        assert is_letter_subset("MATELAS", "".join(permutation))


@pytest.mark.parametrize("sub, string, expected", [
    ("AME", "LAME", True),
    ("METAL", "MATELAS", False),
    ("MATE", "MATELAS", True),
    ("", "LAME", True),
    ("LAME", "", False),
    ("AA", "A", False),
    ("ML", "MATELAS", True),
    ("LM", "MATELAS", False),
])
def test_is_subsequence(sub, string, expected):
    assert is_subsequence(sub, string) is expected


@pytest.mark.parametrize("word, expected", [
    ("AME", True),
    ("METAL", False),
    ("", True),
    ("  AS  ", True),
    (" LAME ", False),
])
def test_is_game_won(word, expected):
    assert is_game_won(word) is expected


def test_is_game_won_does_not_check_dictionary():
    assert is_game_won("XQZ")
