"""Magic Click game package.

Public API:
    from manaclick import ManaSim, Producer, PurchaseResult, SimSnapshot
"""
from manaclick.clock import FixedStepClock
from manaclick.entities import Producer, ProducerView, PurchaseResult, SimSnapshot
from manaclick.simulation import ManaSim

__all__ = ["FixedStepClock", "ManaSim", "Producer", "ProducerView", "PurchaseResult", "SimSnapshot"]
