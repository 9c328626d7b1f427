"""Screen geometry shared by the renderer and the click handler."""
from __future__ import annotations

import math
from typing import Iterable, List, Optional, Tuple

from config import (
    CARD_ANCHORS,
    CARD_H,
    CARD_W,
    ORBIT_BASE_RADIUS,
    ORBIT_RADIUS_STEP,
    SCREEN_H,
    SCREEN_W,
)
from producer_catalog import PRODUCERS, ProducerDefinition

Rect = Tuple[int, int, int, int]


def card_rects(definitions: Iterable[ProducerDefinition] = PRODUCERS) -> List[Rect]:
    """``(x, y, w, h)`` of each producer card, in producer order."""
    rects: List[Rect] = []
    for definition in definitions:
        x, y = CARD_ANCHORS[definition.anchor]
        rects.append((x, y, CARD_W, CARD_H))
    return rects


def producer_at(x: int, y: int, definitions: Iterable[ProducerDefinition] = PRODUCERS) -> Optional[int]:
    # edges are inclusive
    for index, (rx, ry, rw, rh) in enumerate(card_rects(definitions)):
        if rx <= x <= rx + rw and ry <= y <= ry + rh:
            return index
    return None


def orbit_radius(index: int) -> int:
    return ORBIT_BASE_RADIUS + index * ORBIT_RADIUS_STEP


def screen_center() -> Tuple[float, float]:
    return SCREEN_W / 2, SCREEN_H / 2


def indicator_position(index: int, angle: float) -> Tuple[float, float]:
    cx, cy = screen_center()
    radius = orbit_radius(index)
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)
