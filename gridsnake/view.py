"""
view.py — View layer.

Draws a SnakeGame snapshot onto a pygame surface:
  - Pre-rendered grid, head/body tiles and food sprite (built once, blitted every frame)
  - Gradient head with a shine square, darker gradient body
  - Food disc with a soft glow
  - HUD strip with score and best score
  - Four-button control pad under the board
  - Start / game-over / board-cleared overlays

Rendering reads the model and never writes to it, so it is safe to call
as often as the controller likes.

Public API:
    GameView(screen)    — bind to a pygame surface
    view.render(model)  — draw the current frame (caller flips the display)
"""

import pygame

from .config import (
    WIDTH, PANEL_H, PAD_H, CANVAS_SIZE, GRID_SIZE, GRID_COUNT,
    BOARD_X, BOARD_Y,
    BG, GRID_COL, HEAD_COL, HEAD_DIM, BODY_COL, BODY_DIM, SHINE_COL,
    FOOD_COL, FOOD_DIM, UI_COL, ACCENT_COL, PANEL_BG, BORDER_COL, OVERLAY_BG,
    STATE_IDLE, STATE_OVER, STATE_WON,
)
from .controls import CONTROL_BUTTONS, START_BUTTON
from .model import SnakeGame


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _gradient_tile(c1: tuple, c2: tuple, size: int) -> pygame.Surface:
    """Square tile shaded diagonally from c1 (top-left) to c2 (bottom-right)."""
    tile = pygame.Surface((size, size))
    span = max(2 * (size - 1), 1)
    for x in range(size):
        for y in range(size):
            tile.set_at((x, y), _lerp_color(c1, c2, (x + y) / span))
    return tile


def cell_rect(cell: tuple[int, int], inset: int = 0) -> pygame.Rect:
    """Screen rectangle of a grid cell, shrunk by `inset` pixels on each side."""
    x, y = cell
    return pygame.Rect(
        BOARD_X + x * GRID_SIZE + inset,
        BOARD_Y + y * GRID_SIZE + inset,
        GRID_SIZE - inset * 2,
        GRID_SIZE - inset * 2,
    )


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a SnakeGame snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: SnakeGame) -> None:
        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (BOARD_X, BOARD_Y))

        if model.food is not None:
            self._draw_food(model.food)
        self._draw_snake(model.snake)

        self._draw_panel(model)
        self._draw_pad()

        if model.state == STATE_IDLE:
            self._draw_start_overlay()
        elif model.state == STATE_OVER:
            self._draw_game_over_overlay(model)
        elif model.state == STATE_WON:
            self._draw_won_overlay(model)

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._grid_surf = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE), pygame.SRCALPHA)
        for i in range(GRID_COUNT + 1):
            pygame.draw.line(self._grid_surf, GRID_COL,
                             (i * GRID_SIZE, 0), (i * GRID_SIZE, CANVAS_SIZE))
            pygame.draw.line(self._grid_surf, GRID_COL,
                             (0, i * GRID_SIZE), (CANVAS_SIZE, i * GRID_SIZE))

        tile = GRID_SIZE - 4
        self._head_tile = _gradient_tile(HEAD_COL, HEAD_DIM, tile)
        self._body_tile = _gradient_tile(BODY_COL, BODY_DIM, tile)

        shine = GRID_SIZE // 3
        self._shine_surf = pygame.Surface((shine, shine), pygame.SRCALPHA)
        self._shine_surf.fill(SHINE_COL)

        # Food: radial gradient core plus a fading glow ring
        r = GRID_SIZE // 2 - 2
        glow_r = GRID_SIZE // 2 + 6
        food = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for gr in range(glow_r, r, -1):
            a = int(70 * (1 - (gr - r) / (glow_r - r)))
            pygame.draw.circle(food, _with_alpha(FOOD_COL, a), (glow_r, glow_r), gr)
        for cr in range(r, 0, -1):
            color = _lerp_color(FOOD_COL, FOOD_DIM, cr / r)
            pygame.draw.circle(food, _with_alpha(color, 255), (glow_r, glow_r), cr)
        self._food_surf = food

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, food: tuple[int, int]) -> None:
        center = cell_rect(food).center
        self.screen.blit(self._food_surf, self._food_surf.get_rect(center=center))

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, snake: list[tuple[int, int]]) -> None:
        # Tail first so the head always ends up on top
        for i in range(len(snake) - 1, -1, -1):
            rect = cell_rect(snake[i], inset=2)
            if i == 0:
                self.screen.blit(self._head_tile, rect)
                self.screen.blit(self._shine_surf, (rect.x + 2, rect.y + 2))
            else:
                self.screen.blit(self._body_tile, rect)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, model: SnakeGame) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, UI_COL), (16, 6))
        self.screen.blit(self.font_big.render(str(model.score), True, HEAD_COL), (16, 22))

        best = self.font_big.render(str(model.high_score), True, ACCENT_COL)
        label = self.font_small.render("BEST", True, UI_COL)
        self.screen.blit(label, label.get_rect(topright=(WIDTH - 16, 6)))
        self.screen.blit(best, best.get_rect(topright=(WIDTH - 16, 22)))

    # ── Control pad ───────────────────────────────────────────────
    def _draw_pad(self) -> None:
        top = BOARD_Y + CANVAS_SIZE
        pygame.draw.rect(self.screen, PANEL_BG, (0, top, WIDTH, PAD_H))
        pygame.draw.line(self.screen, BORDER_COL, (0, top), (WIDTH, top), 1)
        for direction, rect in CONTROL_BUTTONS:
            pygame.draw.rect(self.screen, BORDER_COL, rect, border_radius=6)
            pygame.draw.rect(self.screen, BODY_COL, rect, 2, border_radius=6)
            cx, cy = rect.center
            dx, dy = direction.x, direction.y
            px, py = -dy, dx  # perpendicular
            tip = (cx + dx * 9, cy + dy * 9)
            left = (cx - dx * 6 + px * 8, cy - dy * 6 + py * 8)
            right = (cx - dx * 6 - px * 8, cy - dy * 6 - py * 8)
            pygame.draw.polygon(self.screen, UI_COL, (tip, left, right))

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE), pygame.SRCALPHA)
        surf.fill(OVERLAY_BG)
        self.screen.blit(surf, (BOARD_X, BOARD_Y))

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_button(self, label: str, color: tuple) -> None:
        bg = pygame.Surface(START_BUTTON.size, pygame.SRCALPHA)
        bg.fill(_with_alpha(color, 30))
        self.screen.blit(bg, START_BUTTON)
        pygame.draw.rect(self.screen, color, START_BUTTON, 2, border_radius=4)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=START_BUTTON.center))

    # ── State overlays ────────────────────────────────────────────
    def _draw_start_overlay(self) -> None:
        self._draw_overlay_base()
        cy = BOARD_Y + CANVAS_SIZE // 2 - 70
        cy = self._draw_text_line("SNAKE", HEAD_COL, cy, self.font_title)
        cy = self._draw_text_line("ARROWS / WASD TO STEER", UI_COL, cy, self.font_med)
        self._draw_text_line("ENTER OR SPACE TO START", UI_COL, cy, self.font_med)
        self._draw_button("START GAME", HEAD_COL)

    def _draw_game_over_overlay(self, model: SnakeGame) -> None:
        self._draw_overlay_base()
        cy = BOARD_Y + CANVAS_SIZE // 2 - 70
        cy = self._draw_text_line("GAME OVER", FOOD_COL, cy, self.font_title)
        cy = self._draw_text_line(f"FINAL SCORE: {model.score}", UI_COL, cy, self.font_med)
        if model.is_new_high_score:
            self._draw_text_line("NEW HIGH SCORE!", ACCENT_COL, cy, self.font_small)
        else:
            self._draw_text_line(f"BEST: {model.high_score}", UI_COL, cy, self.font_small)
        self._draw_button("PLAY AGAIN", FOOD_COL)

    def _draw_won_overlay(self, model: SnakeGame) -> None:
        self._draw_overlay_base()
        cy = BOARD_Y + CANVAS_SIZE // 2 - 70
        cy = self._draw_text_line("BOARD CLEARED!", ACCENT_COL, cy, self.font_title)
        self._draw_text_line(f"FINAL SCORE: {model.score}", UI_COL, cy, self.font_med)
        self._draw_button("PLAY AGAIN", ACCENT_COL)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "arial", 40, True),
            ("font_big",   "arial", 24, True),
            ("font_med",   "arial", 17, False),
            ("font_small", "arial", 13, True),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.Font(None, size))
