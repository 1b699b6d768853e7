from __future__ import annotations

from typing import Optional

from loguru import logger


class GravityTimer:
    """Periodic gravity scheduler driven by host timestamps in milliseconds.

    The host loop calls `poll(now_ms)` and fires one gravity tick per
    interval that has elapsed. Starting again replaces the previous schedule.
    """

    def __init__(self, interval_ms: int = 1000) -> None:
        self.interval_ms = int(interval_ms)
        self._last_fire: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._last_fire is not None

    def start(self, now_ms: int) -> None:
        self._last_fire = int(now_ms)
        logger.debug("Gravity timer started at {} ms ({} ms interval)", now_ms, self.interval_ms)

    def stop(self) -> None:
        if self._last_fire is None:
            return
        self._last_fire = None
        logger.debug("Gravity timer stopped")

    def poll(self, now_ms: int) -> int:
        """Return how many ticks are due since the last poll."""
        if self._last_fire is None:
            return 0
        due = (int(now_ms) - self._last_fire) // self.interval_ms
        if due > 0:
            self._last_fire += due * self.interval_ms
        return max(due, 0)
