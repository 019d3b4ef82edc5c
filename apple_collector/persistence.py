"""Best-score record stored as a small JSON file."""

from __future__ import annotations

import json
import math
import os

from .models import BestScore


def load_best_score(path: str) -> BestScore:
    """
    Read the best-score record.

    A missing, unreadable or malformed file counts as "no record yet" and
    yields BestScore(0, 0.0).
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return BestScore()

    if not isinstance(data, dict):
        return BestScore()
    score = data.get("score")
    time = data.get("time")
    # bool is an int subclass; "true" is not a score
    if isinstance(score, bool) or not isinstance(score, int) or score < 0:
        return BestScore()
    if isinstance(time, bool) or not isinstance(time, (int, float)):
        return BestScore()
    try:
        time = float(time)
    except OverflowError:
        return BestScore()
    # json accepts NaN and Infinity
    if not math.isfinite(time):
        return BestScore()
    return BestScore(score=score, time=time)


def save_best_score(path: str, record: BestScore) -> bool:
    """
    Overwrite the best-score file with `record`.

    The record is written to a temporary file first and moved into place, so
    a failed write leaves the previous record intact.

    Returns
    -------
    bool
        True if the record reached disk, False if writing failed
    """
    tmp_path = path + ".tmp"
    try:
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump({"score": record.score, "time": record.time}, f, indent=2)
        os.replace(tmp_path, path)
        return True
    except OSError as e:
        print(f"Failed to save best score: {e}")
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        return False


def update_best_score(best: BestScore, score: int, elapsed: float, path: str) -> BestScore:
    """
    Replace and persist the record if `score` strictly beats it.

    The returned record advances even when saving fails, so the HUD keeps
    showing the session's best.
    """
    if score <= best.score:
        return best
    record = BestScore(score=score, time=elapsed)
    save_best_score(path, record)
    return record
