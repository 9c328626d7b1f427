from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from config import CARD_ANCHORS, MAX_LEVEL

PRODUCER_ID_RE = re.compile(r"^[a-z][a-z0-9_]*$")
PRODUCER_COUNT = 4


@dataclass(frozen=True)
class ProducerDefinition:
    """Static constants for one producer, fixed at construction."""

    key: str
    display_name: str
    description: str
    base_cost: float
    speed_per_level: float
    growth_factor: float
    start_level: int = 0
    anchor: str = "top_left"

    def to_runtime_dict(self) -> Dict[str, str | float | int]:
        return {
            "display_name": self.display_name,
            "description": self.description,
            "base_cost": self.base_cost,
            "speed_per_level": self.speed_per_level,
            "growth_factor": self.growth_factor,
            "start_level": self.start_level,
            "anchor": self.anchor,
        }


DEFAULT_PRODUCERS: Tuple[ProducerDefinition, ...] = (
    ProducerDefinition(
        key="mana_crystal",
        display_name="Mana Crystal",
        description="Basic mana generation crystal",
        base_cost=3.0,
        speed_per_level=0.1,
        growth_factor=1.15,
        start_level=5,
        anchor="top_left",
    ),
    ProducerDefinition(
        key="arcane_tower",
        display_name="Arcane Tower",
        description="Mystical mana channeling tower",
        base_cost=50.0,
        speed_per_level=0.08,
        growth_factor=1.2,
        anchor="top_right",
    ),
    ProducerDefinition(
        key="ley_line_node",
        display_name="Ley Line Node",
        description="Powerful magical energy nexus",
        base_cost=250.0,
        speed_per_level=0.05,
        growth_factor=1.2,
        anchor="bottom_left",
    ),
    ProducerDefinition(
        key="elder_artifact",
        display_name="Elder Artifact",
        description="Ancient relic of immense power",
        base_cost=1000.0,
        speed_per_level=0.02,
        growth_factor=1.2,
        anchor="bottom_right",
    ),
)


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def _is_valid_producer_id(value: str) -> bool:
    return bool(PRODUCER_ID_RE.fullmatch(value))


def _definition_problem(entry: ProducerDefinition) -> str | None:
    if not _is_valid_producer_id(entry.key):
        return f"invalid producer id {entry.key!r}"
    if not entry.display_name.strip():
        return f"{entry.key}: display name must not be blank"
    if not _is_positive_number(entry.base_cost):
        return f"{entry.key}: base cost must be positive"
    if not _is_positive_number(entry.speed_per_level):
        return f"{entry.key}: speed per level must be positive"
    if not _is_positive_number(entry.growth_factor) or entry.growth_factor < 1.0:
        return f"{entry.key}: growth factor must be at least 1.0"
    if isinstance(entry.start_level, bool) or not isinstance(entry.start_level, int):
        return f"{entry.key}: start level must be an integer"
    if not 0 <= entry.start_level <= MAX_LEVEL:
        return f"{entry.key}: start level must be within [0, {MAX_LEVEL}]"
    if entry.anchor not in CARD_ANCHORS:
        return f"{entry.key}: unknown anchor {entry.anchor!r}"
    return None


def validate_producer_catalog(entries: Iterable[ProducerDefinition]) -> Tuple[ProducerDefinition, ...]:
    """Check a static producer catalog and return it as an ordered tuple.

    Raises ``ValueError`` describing the first problem found.  Order is
    preserved because producer indices are positional in the UI.
    """
    catalog = tuple(entries)
    if len(catalog) != PRODUCER_COUNT:
        raise ValueError(f"expected {PRODUCER_COUNT} producers, got {len(catalog)}")

    for entry in catalog:
        problem = _definition_problem(entry)
        if problem is not None:
            raise ValueError(problem)

    keys = [entry.key for entry in catalog]
    if len(set(keys)) != len(keys):
        raise ValueError("producer ids must be unique")
    anchors = [entry.anchor for entry in catalog]
    if len(set(anchors)) != len(anchors):
        raise ValueError("each producer needs its own anchor")
    return catalog


def producer_catalog(entries: Iterable[ProducerDefinition] = DEFAULT_PRODUCERS) -> Dict[str, Dict[str, str | float | int]]:
    return {entry.key: entry.to_runtime_dict() for entry in validate_producer_catalog(entries)}


PRODUCERS: Tuple[ProducerDefinition, ...] = validate_producer_catalog(DEFAULT_PRODUCERS)
