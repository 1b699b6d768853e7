from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    L = 6
    J = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.flags.writeable = False
    return shape


# Rotation-0 bitmaps, all padded to a 4x4 box
BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]]),
    TetrominoType.O: _frozen([[0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.T: _frozen([[0, 1, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.S: _frozen([[1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.Z: _frozen([[0, 1, 1, 0], [1, 1, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.L: _frozen([[1, 1, 1, 0], [1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.J: _frozen([[1, 1, 1, 0], [0, 0, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
}

PIECE_COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "cyan",
    TetrominoType.O: "yellow",
    TetrominoType.T: "purple",
    TetrominoType.S: "green",
    TetrominoType.Z: "red",
    TetrominoType.L: "orange",
    TetrominoType.J: "blue",
}


@dataclass(frozen=True, eq=False)
class Piece:
    """A shape placed on the grid; (x, y) is the shape's top-left corner.

    Pieces are values: moving or rotating one returns a new Piece.
    """

    shape: Shape
    kind: TetrominoType
    x: int
    y: int

    @property
    def color(self) -> int:
        """Identity token written into the grid when the piece settles."""
        return int(self.kind)

    @property
    def color_name(self) -> str:
        return PIECE_COLORS[self.kind]

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    def cells(self) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        for dy in range(self.height):
            for dx in range(self.width):
                if self.shape[dy, dx]:
                    cells.append((self.x + dx, self.y + dy))
        return cells

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.shape, self.kind, self.x + dx, self.y + dy)

    def with_shape(self, shape: Shape, x: Optional[int] = None) -> "Piece":
        return Piece(shape, self.kind, self.x if x is None else x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.x == other.x
            and self.y == other.y
            and np.array_equal(self.shape, other.shape)
        )

    __hash__ = None  # type: ignore[assignment]


def spawn_x(cols: int, shape: Shape) -> int:
    return cols // 2 - math.ceil(shape.shape[1] / 2)


class PieceFactory:
    """Produces randomly chosen pieces at the spawn position.

    The random source is injected so spawn sequences can be replayed.
    """

    def __init__(self, cols: int, rng: Optional[random.Random] = None) -> None:
        self.cols = int(cols)
        self.rng = rng or random.Random()

    def create(self, kind: TetrominoType) -> Piece:
        shape = BASE_SHAPES[kind]
        return Piece(shape=shape, kind=kind, x=spawn_x(self.cols, shape), y=0)

    def spawn(self) -> Piece:
        kind = self.rng.choice(list(TetrominoType))
        return self.create(kind)
