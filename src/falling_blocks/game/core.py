from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from loguru import logger

from .collision import collides, merge, try_apply
from .grid import GameGrid
from .lines import resolve_lines
from .pieces import Piece, PieceFactory
from .rotation import kick_rotation
from .rules import ScoringRules


# Shapes live in a 4x4 box, so smaller grids cannot spawn anything
MIN_GRID_SIZE = 4


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    NONE = 4


class SessionState(Enum):
    READY = "ready"
    RUNNING = "running"
    OVER = "over"


@dataclass
class GameConfig:
    rows: int = 20
    cols: int = 10
    gravity_interval_ms: int = 1000
    points_per_line: int = 10
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.rows < MIN_GRID_SIZE or self.cols < MIN_GRID_SIZE:
            raise ValueError(
                f"grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {self.rows}x{self.cols}"
            )
        if self.gravity_interval_ms <= 0:
            raise ValueError(f"gravity_interval_ms must be positive, got {self.gravity_interval_ms}")


class GameSession:
    """Owns the grid, the falling and next pieces, and the score.

    Every command runs to completion before returning. Commands report
    whether visible state changed; illegal moves and commands received
    outside the running state are ignored rather than raised.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules(points_per_line=self.config.points_per_line)
        self.rng = rng or random.Random(self.config.random_seed)
        self.factory = PieceFactory(self.config.cols, self.rng)
        self.grid = GameGrid(self.config.cols, self.config.rows)
        self.state = SessionState.READY
        self.score = 0
        self.lines_cleared_total = 0
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None

    def start(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.current_piece = None
        self.next_piece = None
        self.state = SessionState.READY

        self.current_piece = self.factory.spawn()
        self.next_piece = self.factory.spawn()
        self.state = SessionState.RUNNING
        logger.info(
            "Session started on a {}x{} grid (seed={})",
            self.grid.height, self.grid.width, seed,
        )

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING and self.current_piece is not None

    def _commit(self, candidate: Optional[Piece]) -> bool:
        if candidate is None:
            return False
        self.current_piece = candidate
        return True

    def _lock_piece(self) -> None:
        assert self.current_piece is not None and self.next_piece is not None
        merge(self.current_piece, self.grid)
        lines = resolve_lines(self.grid)
        if lines:
            self.lines_cleared_total += lines
            self.score += self.rules.score_for_lines(lines)
            logger.debug("Cleared {} line(s), score is now {}", lines, self.score)

        self.current_piece = self.next_piece
        self.next_piece = self.factory.spawn()
        if collides(self.current_piece, self.grid):
            self.state = SessionState.OVER
            logger.info("Game over with score {}", self.score)

    def tick(self) -> bool:
        """Advance one gravity step, locking the piece if it cannot fall."""
        if not self.running:
            return False
        if not self._commit(try_apply(self.current_piece, lambda p: p.moved(dy=1), self.grid)):
            self._lock_piece()
        return True

    def move_left(self) -> bool:
        if not self.running:
            return False
        return self._commit(try_apply(self.current_piece, lambda p: p.moved(dx=-1), self.grid))

    def move_right(self) -> bool:
        if not self.running:
            return False
        return self._commit(try_apply(self.current_piece, lambda p: p.moved(dx=1), self.grid))

    def soft_drop(self) -> bool:
        return self.tick()

    def rotate(self) -> bool:
        if not self.running:
            return False
        piece = self.current_piece
        shape, x = kick_rotation(piece, self.grid)
        if shape is piece.shape:
            return False
        return self._commit(try_apply(piece, lambda p: p.with_shape(shape, x), self.grid))

    def step(self, action: Action) -> Tuple[np.ndarray, int, bool, dict]:
        if not self.running:
            return self.get_state(), 0, self.is_over(), {}

        score_before = self.score
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.NONE:
            pass

        info = {
            "score": self.score,
            "lines_cleared_total": self.lines_cleared_total,
        }
        return self.get_state(), self.score - score_before, self.is_over(), info

    # Observers for the rendering side

    def get_grid(self) -> GameGrid:
        return self.grid

    def get_current_piece(self) -> Optional[Piece]:
        return self.current_piece

    def get_next_piece(self) -> Optional[Piece]:
        return self.next_piece

    def get_score(self) -> int:
        return self.score

    def is_over(self) -> bool:
        return self.state is SessionState.OVER

    def get_state(self) -> np.ndarray:
        # Overlay the falling piece on a copy of the grid
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.is_over():
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Negative marks the falling piece
                    state[y, x] = -self.current_piece.color
        return state
