"""Core dataclasses for the Magic Click simulation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from config import BASE_MULTIPLIER
from producer_catalog import ProducerDefinition


class PurchaseResult(str, Enum):
    """Outcome of a purchase attempt.  Only ``PURCHASED`` changes state."""

    PURCHASED = "purchased"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    MAX_LEVEL = "max_level"

    def __bool__(self) -> bool:
        return self is PurchaseResult.PURCHASED


@dataclass
class Producer:
    """A mana producer.

    ``level`` and ``speed_per_level`` only decide how fast ``rotation_angle``
    turns.  Each completed revolution adds to ``mana_multiplier``, which is
    the only thing that feeds production.
    """

    key: str
    name: str
    description: str
    cost: float
    speed_per_level: float
    growth_factor: float
    level: int = 0
    rotation_angle: float = 0.0
    mana_multiplier: float = BASE_MULTIPLIER

    @classmethod
    def from_definition(cls, definition: ProducerDefinition) -> "Producer":
        return cls(
            key=definition.key,
            name=definition.display_name,
            description=definition.description,
            cost=definition.base_cost,
            speed_per_level=definition.speed_per_level,
            growth_factor=definition.growth_factor,
            level=definition.start_level,
        )

    @property
    def speed(self) -> float:
        """Revolutions per simulated second."""
        return self.speed_per_level * self.level


@dataclass(frozen=True)
class ProducerView:
    """Read-only copy of a producer for the renderer."""

    key: str
    name: str
    description: str
    level: int
    cost: float
    speed_per_level: float
    speed: float
    mana_multiplier: float
    rotation_angle: float


@dataclass(frozen=True)
class SimSnapshot:
    mana: float
    total_multiplier: float
    mana_per_sec: int
    tick_counter: int
    animation_time: float
    producers: Tuple[ProducerView, ...]
