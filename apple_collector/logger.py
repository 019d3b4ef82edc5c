"""Markdown logger for gameplay events (collections, new best scores)."""

from __future__ import annotations

import datetime

from .models import BestScore


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str, best: BestScore | None = None):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        best : BestScore | None
            Record loaded at startup, written into the header
        """
        self.log_file = log_file
        self.setup_log(best if best is not None else BestScore())

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

    def _append(self, row: str, what: str) -> None:
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(row)
        except Exception as e:
            print(f"Failed to log {what}: {e}")

    def setup_log(self, best: BestScore) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Apple Collector Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write(f"Best score on record: {best.score} at {best.time:.2f}s\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Game time (s) | Event | Details |\n")
                f.write("|-----------|---------------|-------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def log_collect(self, pos: tuple[float, float], count: int, score: int, elapsed: float) -> None:
        """
        Log apples collected during one frame.

        Parameters
        ----------
        pos : tuple[float, float]
            Pacman's position when the apples were collected
        count : int
            Apples collected that frame
        score : int
            Score after the collection
        elapsed : float
            Session time in seconds
        """
        details = f"{count} apple(s) at ({pos[0]:.0f}, {pos[1]:.0f}), score {score}"
        self._append(f"| {self._timestamp()} | {elapsed:.2f} | COLLECT | {details} |\n", "collection")

    def log_new_best(self, best: BestScore) -> None:
        """Log a broken best-score record."""
        self._append(f"| {self._timestamp()} | {best.time:.2f} | NEW BEST | Score {best.score} |\n", "new best")

    def log_session_end(self, score: int, elapsed: float) -> None:
        self._append(f"| {self._timestamp()} | {elapsed:.2f} | END | Final score {score} |\n", "session end")
