from __future__ import annotations

from typing import Callable, Optional

from .grid import EMPTY, GameGrid
from .pieces import Piece


Transform = Callable[[Piece], Piece]


def collides(piece: Piece, grid: GameGrid) -> bool:
    """True when any filled cell leaves the grid or hits a settled block.

    Cells above the top edge (y < 0) are only checked against the side walls,
    so a piece may stick out of the playfield while it spawns.
    """
    for x, y in piece.cells():
        if x < 0 or x >= grid.width or y >= grid.height:
            return True
        if y >= 0 and grid.grid[y, x] != EMPTY:
            return True
    return False


def merge(piece: Piece, grid: GameGrid) -> None:
    """Write the piece's token into every cell it covers.

    Assumes the caller already checked the position with `collides`.
    """
    token = piece.color
    for x, y in piece.cells():
        if y >= 0:
            grid.set_cell(x, y, token)


def try_apply(piece: Piece, transform: Transform, grid: GameGrid) -> Optional[Piece]:
    """Return the transformed piece if it fits, otherwise None."""
    candidate = transform(piece)
    if collides(candidate, grid):
        return None
    return candidate
