from __future__ import annotations

from typing import Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0


class GameGrid:
    """Fixed-size matrix of settled blocks.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values are the identity tokens of the pieces that settled there,
    so a renderer can color them. Row 0 is the top of the playfield.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> int:
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, token: int) -> None:
        self.grid[y, x] = token

    def is_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != EMPTY))

    def clear_row(self, row: int) -> None:
        """Remove `row` and push a fresh empty row in at the top."""
        remaining = np.delete(self.grid, row, axis=0)
        empty = np.zeros((1, self.width), dtype=np.int8)
        self.grid = np.vstack((empty, remaining))

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
