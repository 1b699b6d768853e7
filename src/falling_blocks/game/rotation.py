from __future__ import annotations

from typing import Tuple

import numpy as np

from .collision import collides
from .grid import GameGrid
from .pieces import Piece, Shape


def rotate_clockwise(shape: Shape) -> Shape:
    """Return a new matrix R with R[c][N-1-r] == shape[r][c]."""
    return np.rot90(shape, 1, axes=(1, 0)).copy()


def kick_rotation(piece: Piece, grid: GameGrid) -> Tuple[Shape, int]:
    """Rotate `piece` clockwise, nudging it sideways if the rotation collides.

    Horizontal steps of +1, -2, +3, -4, ... are applied cumulatively, so the
    candidate columns relative to the original x are 0, +1, -1, +2, ...
    The search gives up once the next step would be wider than the rotated
    shape, in which case the original shape and x come back unchanged.
    The vertical position is never touched.
    """
    rotated = rotate_clockwise(piece.shape)
    limit = rotated.shape[1]
    candidate = piece.with_shape(rotated)
    offset = 1
    while collides(candidate, grid):
        candidate = candidate.moved(dx=offset)
        offset = -(offset + (1 if offset > 0 else -1))
        if abs(offset) > limit:
            return piece.shape, piece.x
    return rotated, candidate.x
