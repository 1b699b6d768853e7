from __future__ import annotations

from .grid import GameGrid


def resolve_lines(grid: GameGrid) -> int:
    """Clear every full row and return how many were removed.

    Rows are scanned bottom to top. After a clear the same index is checked
    again since it now holds the row that used to sit above it.
    """
    cleared = 0
    row = grid.height - 1
    while row >= 0:
        if grid.is_full(row):
            grid.clear_row(row)
            cleared += 1
        else:
            row -= 1
    return cleared
