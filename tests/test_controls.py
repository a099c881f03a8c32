import pygame
import pytest

from gridsnake.controls import CONTROL_BUTTONS, START, START_BUTTON, key_action, pointer_action
from gridsnake.model import Direction


@pytest.mark.parametrize("key, expected", [
    (pygame.K_UP, Direction.UP),
    (pygame.K_w, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_s, Direction.DOWN),
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_a, Direction.LEFT),
    (pygame.K_RIGHT, Direction.RIGHT),
    (pygame.K_d, Direction.RIGHT),
    (pygame.K_RETURN, START),
    (pygame.K_SPACE, START),
])
def test_key_action(key, expected):
    assert key_action(key) == expected


def test_unknown_keys_are_ignored():
    assert key_action(pygame.K_x) is None
    assert key_action(pygame.K_F5) is None


def test_every_pad_button_maps_to_its_direction():
    assert {d for d, _ in CONTROL_BUTTONS} == {
        Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
    }
    for direction, rect in CONTROL_BUTTONS:
        assert pointer_action(rect.center) == direction


def test_pad_buttons_do_not_overlap():
    rects = [rect for _, rect in CONTROL_BUTTONS]
    for i, a in enumerate(rects):
        for b in rects[i + 1:]:
            assert not a.colliderect(b)


def test_start_button_and_empty_space():
    assert pointer_action(START_BUTTON.center) == START
    assert pointer_action((1, 1)) is None
