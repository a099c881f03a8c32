"""
analytics.py — Fire-and-forget event reporting.

Events are appended to a JSON-lines file, one object per line:
    {"event": "food_eaten", "params": {"score": 10, "snake_length": 4}, "ts": 1700000000.123}

Nothing in here may raise into the game loop. When the file cannot be
written the event goes to the log instead.
"""

import json
import logging
import os
import time

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, int, float, bool, type(None))


def best_effort(action, *args):
    """Call `action(*args)`; log and swallow any failure, returning None."""
    try:
        return action(*args)
    except Exception:
        name = getattr(action, "__qualname__", repr(action))
        logger.warning("Best-effort call %s failed", name, exc_info=True)
        return None


def flatten_params(params: dict | None) -> dict:
    """Keep the payload flat: string keys, primitive values."""
    flat = {}
    for key, value in (params or {}).items():
        flat[str(key)] = value if isinstance(value, _PRIMITIVES) else str(value)
    return flat


class EventSink:
    """Writes analytics events to `path`; logs them when `path` is None."""

    def __init__(self, path: str | None = None, clock=time.time):
        self.path = path
        self._clock = clock

    def log_event(self, name: str, params: dict | None = None) -> None:
        params = flatten_params(params)
        if self.path is None:
            logger.info("Analytics event (no sink): %s %s", name, params)
            return

        record = {"event": name, "params": params, "ts": round(self._clock(), 3)}
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        except OSError as exc:
            logger.warning("Analytics event failed: %s (%s)", name, exc)
            logger.info("Analytics event (fallback): %s %s", name, params)
