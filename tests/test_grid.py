from __future__ import annotations

import numpy as np

from falling_blocks.game import GameGrid

from conftest import fill_row


def test_new_grid_is_empty_with_fixed_shape():
    grid = GameGrid(10, 20)
    assert grid.grid.shape == (20, 10)
    assert grid.filled_count() == 0


def test_is_full_needs_every_cell():
    grid = GameGrid(10, 20)
    fill_row(grid, 19, gap=4)
    assert not grid.is_full(19)
    grid.set_cell(4, 19, 3)
    assert grid.is_full(19)


def test_clear_row_shifts_rows_above_down():
    grid = GameGrid(4, 5)
    grid.set_cell(0, 1, 1)
    grid.set_cell(1, 2, 2)
    fill_row(grid, 3)
    grid.set_cell(2, 4, 5)

    grid.clear_row(3)

    assert grid.grid.shape == (5, 4)
    assert not grid.grid[0].any()
    assert grid.cell(0, 2) == 1
    assert grid.cell(1, 3) == 2
    # Rows below the cleared one stay put
    assert grid.cell(2, 4) == 5
    assert grid.filled_count() == 3


def test_clone_state_is_a_copy():
    grid = GameGrid(4, 4)
    state = grid.clone_state()
    state[0, 0] = 7
    assert grid.cell(0, 0) == 0
    assert np.array_equal(grid.clone_state(), np.zeros((4, 4)))
