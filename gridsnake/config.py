"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

# ── Board & Window ────────────────────────────────────────────────
CANVAS_SIZE     = 500
GRID_SIZE       = 20                     # pixels per cell
GRID_COUNT      = CANVAS_SIZE // GRID_SIZE
PANEL_H         = 56                     # HUD strip above the board
PAD_H           = 120                    # control pad strip below the board
BOARD_X         = 0
BOARD_Y         = PANEL_H
WIDTH           = CANVAS_SIZE
HEIGHT          = PANEL_H + CANVAS_SIZE + PAD_H
FPS             = 60

# ── Speed (milliseconds per tick) ─────────────────────────────────
INITIAL_SPEED   = 150
MIN_SPEED       = 50
SPEED_DECREASE  = 3                      # per SPEED_STEP points
SPEED_STEP      = 10

# ── Scoring ───────────────────────────────────────────────────────
SCORE_PER_FOOD  = 10
MILESTONE_EVERY = 50
START_LENGTH    = 3

# ── Colors ────────────────────────────────────────────────────────
BG          = (26,  26,  46)             # #1a1a2e
GRID_COL    = (255, 255, 255, 13)        # rgba(255, 255, 255, 0.05)
HEAD_COL    = (78,  205, 196)            # #4ecdc4
HEAD_DIM    = (68,  160, 141)            # #44a08d
BODY_COL    = (102, 126, 234)            # #667eea
BODY_DIM    = (118, 75,  162)            # #764ba2
SHINE_COL   = (255, 255, 255, 77)
FOOD_COL    = (255, 107, 107)            # #ff6b6b
FOOD_DIM    = (238, 90,  111)            # #ee5a6f
UI_COL      = (200, 200, 230)
ACCENT_COL  = (255, 228, 77)
PANEL_BG    = (18,  18,  34)
BORDER_COL  = (52,  52,  92)
OVERLAY_BG  = (10,  10,  24,  200)

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_RUNNING = "running"
STATE_OVER    = "over"
STATE_WON     = "won"

# ── Analytics event names ─────────────────────────────────────────
EVENT_PAGE_VIEW  = "page_view"
EVENT_START      = "game_start"
EVENT_FOOD       = "food_eaten"
EVENT_MILESTONE  = "score_milestone"
EVENT_HIGH_SCORE = "high_score_achieved"
EVENT_OVER       = "game_over"
PAGE_TITLE       = "Snake Game"

# ── Storage ───────────────────────────────────────────────────────
HIGH_SCORE_KEY  = "snakeHighScore"
DATA_DIR        = os.environ.get(
    "GRIDSNAKE_DATA_DIR", os.path.join(os.path.expanduser("~"), ".gridsnake")
)
STORAGE_FILE    = "storage.json"
EVENTS_FILE     = "events.jsonl"
LOG_LEVEL       = os.environ.get("GRIDSNAKE_LOG_LEVEL", "INFO")
