"""Turns frame time into game ticks at the current tick rate."""

import logging

logger = logging.getLogger(__name__)


class TickScheduler:
    """Fixed-period tick source driven by the render loop's frame time"""

    def __init__(self, rate: int, max_catch_up: int = 3):
        self.max_catch_up = max_catch_up
        self.period_ms = 0
        self.move_timer = 0.0
        self.set_rate(rate)

    @property
    def interval(self) -> float:
        """Seconds between ticks"""
        return self.period_ms / 1000.0

    def set_period(self, ms: int):
        if ms <= 0:
            raise ValueError(f"tick period must be positive, got {ms}ms")
        self.period_ms = ms
        logger.debug("Tick period set to %dms", ms)

    def set_rate(self, rate: int):
        """Ticks per second; same delay the game timer always used"""
        if rate <= 0:
            raise ValueError(f"tick rate must be positive, got {rate}")
        self.set_period(1000 // rate)

    def reset(self):
        self.move_timer = 0.0

    def advance(self, dt: float) -> int:
        """Add frame time, return the number of ticks now due"""
        self.move_timer += dt
        due = int(self.move_timer // self.interval)
        if due > self.max_catch_up:
            # Drop the backlog after a stall instead of teleporting the snake
            due = self.max_catch_up
            self.move_timer = 0.0
        else:
            self.move_timer -= due * self.interval
        return due
