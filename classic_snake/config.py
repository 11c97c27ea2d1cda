"""
config.py — Shared constants for the entire application.
No logic beyond path resolution, no imports from internal modules.
"""

import os
import sys
from pathlib import Path

# ── Grid ──────────────────────────────────────────────────────────
GRID_SIZE       = 20                      # cells per side
BOARD_SIZE      = 400                     # board edge in pixels
CELL            = BOARD_SIZE // GRID_SIZE
CELL_INSET      = 2                       # gap between a segment and its cell edge

# ── Window layout ─────────────────────────────────────────────────
PANEL_H         = 64
OFFSET_X        = 20
OFFSET_Y        = PANEL_H + 10
FOOTER_Y        = OFFSET_Y + BOARD_SIZE + 16
BUTTON_H        = 40
WIDTH           = BOARD_SIZE + 2 * OFFSET_X
HEIGHT          = FOOTER_Y + BUTTON_H + 110
FPS             = 60
WINDOW_TITLE    = "Snake Game"

# ── Colors ────────────────────────────────────────────────────────
BG              = (24,  20,  44)
BOARD_BG        = (26,  26,  26)
GRID_COL        = (51,  51,  51)
HEAD_COL        = (0,   255, 65)
BODY_LIGHT      = (34,  197, 94)
BODY_DARK       = (21,  128, 61)
APPLE_COL       = (239, 68,  68)
SCORE_COL       = (74,  222, 128)
BEST_COL        = (250, 204, 21)
TEXT_COL        = (255, 255, 255)
MUTED_COL       = (156, 163, 175)
OVER_COL        = (248, 113, 113)
PANEL_BG        = (55,  65,  81)
BORDER_COL      = (75,  85,  99)
BUTTON_COL      = (22,  163, 74)
OVERLAY_RGBA    = (0,   0,   0,   190)

# ── Gameplay ──────────────────────────────────────────────────────
INITIAL_SNAKE     = ((10, 10),)
INITIAL_DIRECTION = (0, -1)               # up
INITIAL_APPLE     = (15, 15)
APPLE_REWARD      = 10

BASE_INTERVAL_MS  = 200                   # tick interval at score 0
MIN_INTERVAL_MS   = 100                   # floor, reached at score 50
INTERVAL_STEP_MS  = 2                     # interval shaved off per point
SPEED_LEVEL_STEP  = 50                    # points per displayed speed level

# ── Game States ───────────────────────────────────────────────────
STATE_NOT_STARTED = "not_started"
STATE_RUNNING     = "running"
STATE_OVER        = "over"


# ── Persistence ───────────────────────────────────────────────────
def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory."""
    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "classic-snake"


DATA_DIR = Path(os.getenv("CLASSIC_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("CLASSIC_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
