"""
storage.py — High-score persistence.

A tiny key/value JSON file; this game only ever uses one key. Reads fall
back to 0 and writes are skipped (with a warning) when the file is
missing, corrupt or not writable.
"""

import json
import logging
import os

from .config import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Get/set one non-negative integer under a fixed key."""

    def __init__(self, path: str, key: str = HIGH_SCORE_KEY):
        self.path = path
        self.key = key

    def get(self) -> int:
        raw = self._read().get(self.key, 0)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring unreadable %s value %r in %s", self.key, raw, self.path)
            return 0
        return max(value, 0)

    def set(self, value: int) -> None:
        data = self._read()
        data[self.key] = int(value)
        tmp_path = self.path + ".tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Could not save %s to %s: %s", self.key, self.path, exc)

    def _read(self) -> dict:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        return raw if isinstance(raw, dict) else {}
