from __future__ import annotations

import random

import pytest

from falling_blocks.game import GameConfig, GameGrid, GameSession, PieceFactory, TetrominoType


def fill_row(grid: GameGrid, row: int, token: int = 9, gap: int | None = None) -> None:
    for x in range(grid.width):
        if x != gap:
            grid.set_cell(x, row, token)


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(10, 20)


@pytest.fixture
def factory() -> PieceFactory:
    return PieceFactory(10, random.Random(0))


@pytest.fixture
def session() -> GameSession:
    s = GameSession(GameConfig(random_seed=1234))
    s.start()
    return s


def i_piece(factory: PieceFactory, x: int, y: int):
    piece = factory.create(TetrominoType.I)
    return piece.moved(dx=x - piece.x, dy=y - piece.y)


class ScriptedRandom(random.Random):
    """Hands out piece kinds in a fixed order."""

    def __init__(self, kinds):
        super().__init__(0)
        self.kinds = list(kinds)
        self.index = 0

    def choice(self, seq):
        kind = self.kinds[self.index % len(self.kinds)]
        self.index += 1
        return kind
