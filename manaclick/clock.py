"""Wall-clock to fixed-tick conversion for the render loop."""
from __future__ import annotations

import logging

from config import MAX_TICKS_PER_FRAME, TICK_SECONDS

logger = logging.getLogger(__name__)


class FixedStepClock:
    """Accumulates frame time and hands out whole simulation ticks.

    The simulation never sees a variable ``dt``; the loop calls
    ``sim.advance()`` once per tick returned by :meth:`consume`.
    """

    def __init__(self, tick_seconds: float = TICK_SECONDS, max_ticks_per_frame: int = MAX_TICKS_PER_FRAME) -> None:
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        if max_ticks_per_frame < 1:
            raise ValueError("max_ticks_per_frame must be at least 1")
        self.tick_seconds = tick_seconds
        self.max_ticks_per_frame = max_ticks_per_frame
        self.accumulator = 0.0
        self.dropped_ticks = 0

    def consume(self, dt: float) -> int:
        if dt < 0:
            raise ValueError(f"frame duration must be non-negative, got {dt}")
        self.accumulator += dt
        # small epsilon so 1/60 s frames are not lost to float rounding
        ticks = int((self.accumulator + 1e-9) // self.tick_seconds)
        self.accumulator = max(0.0, self.accumulator - ticks * self.tick_seconds)
        if ticks > self.max_ticks_per_frame:
            dropped = ticks - self.max_ticks_per_frame
            self.dropped_ticks += dropped
            logger.warning("Frame stalled; dropping %d simulation ticks", dropped)
            ticks = self.max_ticks_per_frame
        return ticks
