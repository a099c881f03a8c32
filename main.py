"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame

High score and analytics events are kept under ~/.gridsnake
(override with GRIDSNAKE_DATA_DIR). Log level comes from
GRIDSNAKE_LOG_LEVEL (default INFO).
"""

import logging
import sys

from gridsnake.config import LOG_LEVEL
from gridsnake.controller import GameController, SurfaceUnavailableError

logger = logging.getLogger("gridsnake")


def configure_logging(level_name: str) -> int:
    """Set up root logging; unknown level names fall back to INFO."""
    level = logging.getLevelName(level_name.upper())
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known:
        logger.warning("Unknown GRIDSNAKE_LOG_LEVEL %r, using INFO", level_name)
        return logging.INFO
    return level


def main() -> int:
    configure_logging(LOG_LEVEL)
    try:
        controller = GameController()
    except SurfaceUnavailableError:
        logger.exception("Start-up aborted")
        return 1
    controller.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
