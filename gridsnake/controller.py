"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame window and event loop.
  - Translate raw keyboard / mouse / touch events into model commands.
  - Forward scheduler tick events to the model.
  - Ask the view to redraw every frame.
  - Build the external collaborators (high-score store, analytics sink).
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import logging
import os

import pygame

from .analytics import EventSink, best_effort
from .config import (
    WIDTH, HEIGHT, FPS,
    DATA_DIR, STORAGE_FILE, EVENTS_FILE,
    EVENT_PAGE_VIEW, PAGE_TITLE,
)
from .controls import START, key_action, pointer_action
from .model import Direction, SnakeGame
from .scheduler import TickScheduler
from .storage import HighScoreStore
from .view import GameView

logger = logging.getLogger(__name__)


class SurfaceUnavailableError(RuntimeError):
    """The game window could not be created."""


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, store=None, sink=None, rng=None):
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            pygame.quit()
            raise SurfaceUnavailableError(f"Could not open the game window: {exc}") from exc
        pygame.display.set_caption("Snake")

        self.clock     = pygame.time.Clock()
        self.scheduler = TickScheduler()
        self.store     = store or HighScoreStore(os.path.join(DATA_DIR, STORAGE_FILE))
        self.sink      = sink or EventSink(os.path.join(DATA_DIR, EVENTS_FILE))
        self.model     = SnakeGame(self.scheduler, self.store, self.sink, rng=rng)
        self.view      = GameView(self.screen)
        self.running   = True

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        best_effort(self.sink.log_event, EVENT_PAGE_VIEW, {"page_title": PAGE_TITLE})
        while self.running:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)
            self.view.render(self.model)
            pygame.display.flip()
        self.scheduler.cancel()
        pygame.quit()

    # ── Event dispatch ────────────────────────────────────────────
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == self.scheduler.event_type:
            # a batch from pygame.event.get() can still hold ticks of a cancelled timer
            if self.scheduler.is_current(event):
                self.model.tick()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            else:
                self._dispatch(key_action(event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # SDL also synthesises mouse events for touches; FINGERDOWN handles those
            if event.button == 1 and not getattr(event, "touch", False):
                self._dispatch(pointer_action(event.pos))
        elif event.type == pygame.FINGERDOWN:
            self._dispatch(pointer_action((int(event.x * WIDTH), int(event.y * HEIGHT))))

    def _dispatch(self, action) -> None:
        if action is None:
            return
        if action == START:
            self.model.request_start()
        elif isinstance(action, Direction):
            self.model.request_turn(action)
