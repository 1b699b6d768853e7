from __future__ import annotations

import numpy as np

from falling_blocks.game import TetrominoType, collides, merge, try_apply

from conftest import i_piece


def test_piece_inside_empty_grid_does_not_collide(grid, factory):
    for kind in TetrominoType:
        piece = factory.create(kind)
        assert not collides(piece, grid)


def test_walls_and_floor(grid, factory):
    # Vertical I occupies shape column 1
    assert not collides(i_piece(factory, -1, 0), grid)
    assert collides(i_piece(factory, -2, 0), grid)
    assert not collides(i_piece(factory, 8, 0), grid)
    assert collides(i_piece(factory, 9, 0), grid)
    assert not collides(i_piece(factory, 3, 16), grid)
    assert collides(i_piece(factory, 3, 17), grid)


def test_cells_above_the_grid_skip_occupancy(grid, factory):
    grid.set_cell(4, 0, 1)
    piece = i_piece(factory, 3, -4)
    assert not collides(piece, grid)
    assert collides(piece.moved(dy=1), grid)
    # Side walls still apply above the top edge
    assert collides(i_piece(factory, -2, -4), grid)


def test_settled_block_collides(grid, factory):
    grid.set_cell(4, 10, 2)
    assert collides(i_piece(factory, 3, 8), grid)
    assert not collides(i_piece(factory, 4, 8), grid)


def test_merge_writes_exactly_the_piece_cells(grid, factory):
    piece = factory.create(TetrominoType.T).moved(dy=10)
    before = grid.clone_state()
    merge(piece, grid)
    after = grid.clone_state()

    cells = set(piece.cells())
    for y in range(grid.height):
        for x in range(grid.width):
            if (x, y) in cells:
                assert after[y, x] == piece.color
            else:
                assert after[y, x] == before[y, x]


def test_merge_skips_cells_above_the_grid(grid, factory):
    merge(i_piece(factory, 3, -2), grid)
    assert grid.filled_count() == 2
    assert not np.any(grid.grid[2:])


def test_try_apply_returns_new_piece_or_none(grid, factory):
    piece = i_piece(factory, 0, 0)
    moved = try_apply(piece, lambda p: p.moved(dx=-1), grid)
    assert moved is not None and moved.x == -1
    assert try_apply(moved, lambda p: p.moved(dx=-1), grid) is None
    assert piece.x == 0
