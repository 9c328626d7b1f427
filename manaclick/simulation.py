"""ManaSim: deterministic, headless-compatible idle game simulation.

All gameplay constants are imported from ``config`` and ``producer_catalog``.
The simulation has no pygame dependency and is safe to import in headless /
test contexts.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from config import (
    EVENT_LOG_LENGTH,
    FULL_TURN,
    MAX_LEVEL,
    MULTIPLIER_INCREMENT,
    STARTING_MANA,
    TICK_SECONDS,
    TICKS_PER_SECOND,
)
from manaclick.entities import Producer, ProducerView, PurchaseResult, SimSnapshot
from manaclick.hud import multiplier_line
from producer_catalog import PRODUCERS, ProducerDefinition, validate_producer_catalog

logger = logging.getLogger(__name__)


class ManaSim:
    """Fixed-tick mana simulation.

    :meth:`advance` runs exactly one 1/60 s tick and :meth:`purchase` levels
    up one producer.  Both are synchronous and never block, so the caller's
    loop owns the cadence.  Renderers should only read :meth:`snapshot`.
    """

    def __init__(self, definitions: Iterable[ProducerDefinition] = PRODUCERS, mana: float = STARTING_MANA) -> None:
        self.definitions: Tuple[ProducerDefinition, ...] = validate_producer_catalog(definitions)
        self.mana: float = float(mana)
        self.producers: List[Producer] = [Producer.from_definition(d) for d in self.definitions]
        self.tick_counter: int = 0
        self.ticks: int = 0
        self.animation_time: float = 0.0
        self.total_multiplier: float = 1.0
        self.mana_per_sec: int = 0
        self.event_log: List[str] = []
        self._recalculate_production()
        self._log_event("Mana well awakened")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _log_event(self, message: str) -> None:
        self.event_log.append(message)
        self.event_log = self.event_log[-EVENT_LOG_LENGTH:]

    def _recalculate_production(self) -> None:
        self.total_multiplier = math.prod(p.mana_multiplier for p in self.producers)
        # stored as hundredths for display, e.g. 150 == 1.50/sec
        self.mana_per_sec = int(self.total_multiplier * 100 + 0.5)

    def _rotate(self, producer: Producer) -> bool:
        """Turn one producer by a tick.  Returns True if it crossed a full turn.

        Only the first crossing in a tick is credited and the angle is wrapped
        by a single subtraction, so a tick spanning several revolutions still
        counts once.
        """
        old_angle = producer.rotation_angle
        producer.rotation_angle += producer.speed * FULL_TURN / TICKS_PER_SECOND
        crossed = old_angle < FULL_TURN <= producer.rotation_angle
        if crossed:
            producer.mana_multiplier += MULTIPLIER_INCREMENT
        if producer.rotation_angle >= FULL_TURN:
            producer.rotation_angle -= FULL_TURN
        return crossed

    # ------------------------------------------------------------------
    # Main tick
    # ------------------------------------------------------------------

    def advance(self) -> None:
        self.tick_counter += 1
        if self.tick_counter >= TICKS_PER_SECOND:
            self.tick_counter = 0
            self._recalculate_production()
            if self.total_multiplier > 0:
                self.mana += self.total_multiplier

        for producer in self.producers:
            if producer.level <= 0:
                continue
            if self._rotate(producer):
                self._recalculate_production()
                logger.debug(
                    "%s completed a revolution (multiplier %.2f)", producer.name, producer.mana_multiplier
                )
                self._log_event(f"{producer.name} completed a revolution")

        self.animation_time += TICK_SECONDS
        self.ticks += 1

    def advance_many(self, ticks: int) -> None:
        if ticks < 0:
            raise ValueError(f"tick count must be non-negative, got {ticks}")
        for _ in range(ticks):
            self.advance()

    # ------------------------------------------------------------------
    # Purchasing
    # ------------------------------------------------------------------

    def purchase(self, index: int) -> PurchaseResult:
        if not 0 <= index < len(self.producers):
            raise IndexError(f"no producer at index {index}")
        producer = self.producers[index]
        if self.mana < producer.cost:
            return PurchaseResult.INSUFFICIENT_FUNDS
        if producer.level >= MAX_LEVEL:
            return PurchaseResult.MAX_LEVEL

        price = producer.cost
        self.mana -= price
        producer.level += 1
        self._recalculate_production()
        producer.cost = price * producer.growth_factor
        logger.debug("Purchased %s level %d for %.2f mana", producer.name, producer.level, price)
        self._log_event(f"Purchased {producer.name} Lv{producer.level} (-{price:.2f})")
        return PurchaseResult.PURCHASED

    def can_afford(self, index: int) -> bool:
        producer = self.producers[index]
        return self.mana >= producer.cost and producer.level < MAX_LEVEL

    def cheapest_affordable(self) -> Optional[int]:
        candidates = [i for i in range(len(self.producers)) if self.can_afford(i)]
        if not candidates:
            return None
        return min(candidates, key=lambda i: (self.producers[i].cost, i))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def multiplier_breakdown(self) -> str:
        return multiplier_line(self.snapshot())

    def snapshot(self) -> SimSnapshot:
        return SimSnapshot(
            mana=self.mana,
            total_multiplier=self.total_multiplier,
            mana_per_sec=self.mana_per_sec,
            tick_counter=self.tick_counter,
            animation_time=self.animation_time,
            producers=tuple(
                ProducerView(
                    key=p.key,
                    name=p.name,
                    description=p.description,
                    level=p.level,
                    cost=p.cost,
                    speed_per_level=p.speed_per_level,
                    speed=p.speed,
                    mana_multiplier=p.mana_multiplier,
                    rotation_angle=p.rotation_angle,
                )
                for p in self.producers
            ),
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def elapsed_seconds(self) -> float:
        return self.ticks / TICKS_PER_SECOND
