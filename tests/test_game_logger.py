import json
import logging

from wordcut.models.game import MoveResult
from wordcut.utils.game_logger import GameLogger


def _entries(logger):
    return [
        json.loads(line.split(" | ", 2)[2])
        for line in logger.log_file.read_text(encoding="utf-8").splitlines()
    ]


def test_log_file_is_created(game_logger):
    assert game_logger.log_dir.is_dir()
    game_logger.log_game_event("g1", "new_game", start_word="MATELAS")
    assert game_logger.log_file.exists()


def test_entries_are_structured(game_logger):
    game_logger.log_game_event("g1", "new_game", start_word="MATELAS")
    game_logger.log_move("g1", "MATELAS", "METAL", MoveResult(True, 2, 2))
    game_logger.log_error(ValueError("bad list"), "load_dictionary")

    new_game, move, error = _entries(game_logger)

    assert new_game["event_type"] == "GAME_EVENT"
    assert new_game["details"] == {"game_id": "g1", "start_word": "MATELAS"}
    assert move["event_type"] == "MOVE"
    assert move["details"]["points_p1"] == 2
    assert move["details"]["reason"] is None
    assert error["details"]["error_type"] == "ValueError"
    assert error["details"]["game_id"] is None


def test_rejected_moves_are_debug_only(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path), level="INFO")
    logger.log_move("g1", "MATELAS", "X", MoveResult(False, reason="Enter a word."))
    logger.log_move("g1", "MATELAS", "METAL", MoveResult(True, 2, 2))

    entries = _entries(logger)

    assert len(entries) == 1
    assert entries[0]["details"]["valid"] is True


def test_log_stats(game_logger):
    game_logger.log_game_event("g1", "new_game")
    game_logger.log_move("g1", "LAME", "AME", MoveResult(True, 3, 0))
    game_logger.log_move("g1", "AME", "", MoveResult(False, reason="Enter a word."))
    game_logger.log_error(RuntimeError("boom"), "submit_move", "g1")

    stats = game_logger.get_log_stats()

    assert stats["total_entries"] == 4
    assert stats["game_events"] == 1
    assert stats["moves"] == 2
    assert stats["errors"] == 1


def test_log_stats_without_file(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path / "off"), log_to_file=False)
    assert not (tmp_path / "off").exists()
    assert "error" in logger.get_log_stats()


def test_loggers_with_distinct_names_keep_their_handlers(tmp_path):
    first = GameLogger(log_dir=str(tmp_path / "first"), name="wordcut_first")
    second = GameLogger(log_dir=str(tmp_path / "second"), name="wordcut_second")

    first.log_game_event("g1", "new_game")

    assert len(_entries(first)) == 1
    assert second.log_file.read_text(encoding="utf-8") == ""


def test_from_config(tmp_path):
    class QuietConfig:
        LOG_DIR = str(tmp_path / "quiet")
        LOG_LEVEL = "warning"
        LOG_TO_FILE = False

    logger = GameLogger.from_config(QuietConfig, name="wordcut_quiet")

    assert logger.logger.name == "wordcut_quiet"
    assert logger.logger.level == logging.WARNING
    assert not logger.log_to_file
