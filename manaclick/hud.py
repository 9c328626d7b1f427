"""HUD text formatting.  Pure functions over snapshots, no pygame."""
from __future__ import annotations

from typing import List

from manaclick.entities import ProducerView, PurchaseResult, SimSnapshot


def mana_line(mana: float) -> str:
    return f"Mana: {mana:.2f}"


def multiplier_line(snapshot: SimSnapshot) -> str:
    factors = " x ".join(f"{p.mana_multiplier:.2f}" for p in snapshot.producers)
    return f"{factors} = {snapshot.total_multiplier:.2f}/sec"


def producer_lines(view: ProducerView) -> List[str]:
    """Name, cost, speed and multiplier lines of one producer card."""
    return [
        f"{view.name}: Lv{view.level}",
        f"Cost: {view.cost:.2f} (+{view.speed_per_level:.2f} speed)",
        f"Speed: {view.speed:.2f}",
        f"Multiplier: x{view.mana_multiplier:.2f}",
    ]


def rejection_line(view: ProducerView, result: PurchaseResult) -> str:
    if result is PurchaseResult.MAX_LEVEL:
        return f"{view.name} is at max level"
    if result is PurchaseResult.INSUFFICIENT_FUNDS:
        return f"Need {view.cost:.2f} mana for {view.name}"
    return ""
