from __future__ import annotations

import random
from collections import Counter

import numpy as np
import pytest

from falling_blocks.game import BASE_SHAPES, PIECE_COLORS, PieceFactory, TetrominoType


def test_catalog_has_seven_4x4_tetrominoes():
    assert len(BASE_SHAPES) == 7
    for kind, shape in BASE_SHAPES.items():
        assert shape.shape == (4, 4)
        assert int(shape.sum()) == 4, kind.name
        assert kind in PIECE_COLORS


def test_catalog_shapes_are_read_only():
    with pytest.raises(ValueError):
        BASE_SHAPES[TetrominoType.T][0, 0] = 1


def test_spawn_position_is_centered_at_top(factory):
    piece = factory.spawn()
    # floor(10 / 2) - ceil(4 / 2)
    assert piece.x == 3
    assert piece.y == 0
    assert np.array_equal(piece.shape, BASE_SHAPES[piece.kind])
    assert piece.color == int(piece.kind)


def test_spawn_sequence_is_reproducible_with_a_seed():
    a = PieceFactory(10, random.Random(42))
    b = PieceFactory(10, random.Random(42))
    assert [a.spawn().kind for _ in range(20)] == [b.spawn().kind for _ in range(20)]


def test_spawn_covers_every_kind():
    factory = PieceFactory(10, random.Random(7))
    counts = Counter(factory.spawn().kind for _ in range(700))
    assert set(counts) == set(TetrominoType)


def test_pieces_are_values(factory):
    piece = factory.create(TetrominoType.L)
    moved = piece.moved(dx=1, dy=2)
    assert (piece.x, piece.y) == (3, 0)
    assert (moved.x, moved.y) == (4, 2)
    assert moved != piece
    assert moved.moved(dx=-1, dy=-2) == piece


def test_cells_are_offset_by_position(factory):
    piece = factory.create(TetrominoType.O).moved(dx=2, dy=5)
    assert sorted(piece.cells()) == [(6, 5), (6, 6), (7, 5), (7, 6)]
