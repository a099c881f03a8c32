"""
scheduler.py — Periodic tick source.

Backed by a pygame timer that posts TICK_EVENT into the event queue, so
ticks are handled one at a time by the controller's event loop.

Every armed timer stamps its events with a generation number. A tick
fetched from the queue before a cancel/reschedule carries an old
generation and must be dropped by the consumer (see `is_current`).
"""

import logging

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickScheduler:
    """Cancel-and-arm wrapper around `pygame.time.set_timer`."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval: int = 0
        self.generation: int = 0

    def reschedule(self, interval: int) -> None:
        """Stop the current timer (if any) and start a new one at `interval` ms."""
        self.cancel()
        tick = pygame.event.Event(self.event_type, generation=self.generation)
        pygame.time.set_timer(tick, interval)
        self.interval = interval
        logger.debug("Tick timer %d armed at %d ms", self.generation, interval)

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        # ticks already queued by the old timer must not leak into a new run
        pygame.event.clear(self.event_type)
        self.generation += 1
        self.interval = 0

    def is_current(self, event: pygame.event.Event) -> bool:
        """True if `event` was posted by the timer armed right now."""
        return self.interval > 0 and getattr(event, "generation", None) == self.generation
