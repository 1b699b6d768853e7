from __future__ import annotations

from falling_blocks.game import TetrominoType
from falling_blocks.visualization.renderer import Renderer, preview_origin


def test_preview_centers_the_shape_box(factory):
    # Shape matrices already fill the 4x4 preview box
    assert preview_origin(factory.create(TetrominoType.I)) == (0, 0)
    assert preview_origin(factory.create(TetrominoType.T), box=6) == (1, 1)


def test_window_leaves_room_for_the_preview():
    renderer = Renderer(cell_size=10, margin=5)
    assert renderer.window_size(20, 10) == (5 * 3 + 14 * 10, 5 * 2 + 200)
