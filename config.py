"""Centralised configuration constants for Magic Click."""
from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Screen / display
# ---------------------------------------------------------------------------
SCREEN_W: int = 1920
SCREEN_H: int = 1080
WINDOW_TITLE: str = "Magic Click - Mana Generator"
FRAME_RATE: int = 60

# ---------------------------------------------------------------------------
# Simulation timing
# ---------------------------------------------------------------------------
TICKS_PER_SECOND: int = 60
TICK_SECONDS: float = 1.0 / TICKS_PER_SECOND
MAX_TICKS_PER_FRAME: int = 240         # ticks beyond this in one frame are dropped
FULL_TURN: float = 2 * math.pi

# ---------------------------------------------------------------------------
# Progression
# ---------------------------------------------------------------------------
STARTING_MANA: float = 0.0
MAX_LEVEL: int = 100
MULTIPLIER_INCREMENT: float = 0.01     # added to a producer's multiplier per revolution
BASE_MULTIPLIER: float = 1.0
EVENT_LOG_LENGTH: int = 12

# ---------------------------------------------------------------------------
# HUD text positions (top-left of each line)
# ---------------------------------------------------------------------------
MANA_TEXT_POS: tuple[int, int] = (20, 50)
RATE_TEXT_POS: tuple[int, int] = (20, 100)

# ---------------------------------------------------------------------------
# Hit zones (producer card rectangles, inclusive edges)
# ---------------------------------------------------------------------------
CARD_W: int = 370
CARD_H: int = 130
CARD_MARGIN_X: int = 30
CARD_TOP_Y: int = 120
CARD_RIGHT_INSET: int = 400            # right-anchored cards start at SCREEN_W - inset
CARD_BOTTOM_INSET: int = 200           # bottom-anchored cards start at SCREEN_H - inset

# Corner anchor name -> top-left card origin
CARD_ANCHORS: dict[str, tuple[int, int]] = {
    "top_left": (CARD_MARGIN_X, CARD_TOP_Y),
    "top_right": (SCREEN_W - CARD_RIGHT_INSET, CARD_TOP_Y),
    "bottom_left": (CARD_MARGIN_X, SCREEN_H - CARD_BOTTOM_INSET),
    "bottom_right": (SCREEN_W - CARD_RIGHT_INSET, SCREEN_H - CARD_BOTTOM_INSET),
}

# ---------------------------------------------------------------------------
# Orbit indicators
# ---------------------------------------------------------------------------
ORBIT_BASE_RADIUS: int = 100
ORBIT_RADIUS_STEP: int = 50
INDICATOR_RADIUS: int = 12
INDICATOR_GLOW_RADIUS: int = 20
ORBIT_STROKE: int = 3

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
BACKGROUND: tuple[int, int, int] = (25, 25, 50)
TEXT_COLOR: tuple[int, int, int] = (255, 255, 255)
MUTED_COLOR: tuple[int, int, int] = (200, 200, 200)
MULTIPLIER_COLOR: tuple[int, int, int] = (100, 255, 100)
EVENT_COLOR: tuple[int, int, int] = (255, 236, 160)
INDICATOR_COLORS: list[tuple[int, int, int]] = [
    (255, 100, 100),  # red
    (255, 200, 100),  # orange
    (100, 255, 100),  # green
    (100, 200, 255),  # blue
]
GLOW_ALPHA: int = 100
ORBIT_ALPHA: int = 80
