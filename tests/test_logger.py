"""Tests for apple_collector.logger."""

from __future__ import annotations

from apple_collector.logger import GameLogger
from apple_collector.models import BestScore


def read(path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


class TestGameLogger:
    """Tests for the markdown event log."""

    def test_header_mentions_loaded_record(self, tmp_path):
        path = tmp_path / "log.md"
        GameLogger(str(path), BestScore(4, 12.5))
        text = read(path)
        assert text.startswith("# Apple Collector Game Log")
        assert "Best score on record: 4 at 12.50s" in text
        assert "| Timestamp | Game time (s) | Event | Details |" in text

    def test_new_log_replaces_old_one(self, tmp_path):
        path = tmp_path / "log.md"
        GameLogger(str(path)).log_session_end(3, 9.0)
        GameLogger(str(path))
        assert "END" not in read(path)

    def test_rows_are_appended(self, tmp_path):
        path = tmp_path / "log.md"
        logger = GameLogger(str(path))
        logger.log_collect((104.2, 99.6), 2, 3, 1.5)
        logger.log_new_best(BestScore(3, 1.5))
        logger.log_session_end(3, 7.25)

        rows = [line for line in read(path).splitlines() if line.startswith("| ") and "Timestamp" not in line]
        assert len(rows) == 3
        assert "| 1.50 | COLLECT | 2 apple(s) at (104, 100), score 3 |" in rows[0]
        assert "| NEW BEST | Score 3 |" in rows[1]
        assert "| 7.25 | END | Final score 3 |" in rows[2]

    def test_unwritable_log_is_reported(self, tmp_path, capsys):
        logger = GameLogger(str(tmp_path))
        logger.log_collect((0, 0), 1, 1, 0.1)
        out = capsys.readouterr().out
        assert "Failed to initialize log file" in out
        assert "Failed to log collection" in out
