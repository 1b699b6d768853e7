from __future__ import annotations

from typing import Optional

from .core import GameConfig, GameSession
from .timer import GravityTimer


class GameController:
    """Binds a session to its gravity timer for a real-time host loop."""

    def __init__(self, session: Optional[GameSession] = None, config: Optional[GameConfig] = None) -> None:
        self.session = session or GameSession(config)
        self.timer = GravityTimer(self.session.config.gravity_interval_ms)

    def start_session(self, now_ms: int, seed: Optional[int] = None) -> None:
        self.session.start(seed)
        self.timer.stop()
        self.timer.start(now_ms)

    def stop(self) -> None:
        self.timer.stop()

    def update(self, now_ms: int) -> int:
        """Fire the gravity ticks that are due and return how many ran."""
        fired = 0
        for _ in range(self.timer.poll(now_ms)):
            if self.session.is_over():
                break
            self.session.tick()
            fired += 1
        if self.session.is_over():
            self.timer.stop()
        return fired
