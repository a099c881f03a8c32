"""
controls.py — Input vocabulary.

Maps raw pygame key codes and pointer positions onto the four directions
plus a START action. Shared with the view so the on-screen buttons are
drawn exactly where they are hit-tested.
"""

import pygame

from .config import WIDTH, BOARD_Y, CANVAS_SIZE, PAD_H
from .model import Direction

START = "start"

# pygame reports letter keys lowercase regardless of shift, so K_w covers W too
KEY_ACTIONS = {
    pygame.K_UP:       Direction.UP,
    pygame.K_w:        Direction.UP,
    pygame.K_DOWN:     Direction.DOWN,
    pygame.K_s:        Direction.DOWN,
    pygame.K_LEFT:     Direction.LEFT,
    pygame.K_a:        Direction.LEFT,
    pygame.K_RIGHT:    Direction.RIGHT,
    pygame.K_d:        Direction.RIGHT,
    pygame.K_RETURN:   START,
    pygame.K_KP_ENTER: START,
    pygame.K_SPACE:    START,
}

# ── On-screen control pad (below the board) ───────────────────────
BUTTON_SIZE = 36
_PAD_CX = WIDTH // 2
_PAD_CY = BOARD_Y + CANVAS_SIZE + PAD_H // 2


def _pad_rect(direction: Direction) -> pygame.Rect:
    rect = pygame.Rect(0, 0, BUTTON_SIZE, BUTTON_SIZE)
    step = BUTTON_SIZE + 2
    rect.center = (_PAD_CX + direction.x * step, _PAD_CY + direction.y * step)
    return rect


CONTROL_BUTTONS = [(d, _pad_rect(d)) for d in
                   (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)]

START_BUTTON = pygame.Rect(0, 0, 240, 40)
START_BUTTON.center = (WIDTH // 2, BOARD_Y + CANVAS_SIZE // 2 + 80)


def key_action(key: int):
    """Direction, START, or None for keys the game does not use."""
    return KEY_ACTIONS.get(key)


def pointer_action(pos: tuple[int, int]):
    """Direction, START, or None for a click/tap at screen position `pos`."""
    for direction, rect in CONTROL_BUTTONS:
        if rect.collidepoint(pos):
            return direction
    if START_BUTTON.collidepoint(pos):
        return START
    return None
