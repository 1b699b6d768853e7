from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import GameSession, Piece


PREVIEW_BOX = 4


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (240, 160, 0),  # L
        7: (0, 0, 240),    # J
    }
    return palette.get(abs(v), (200, 200, 200))


def preview_origin(piece: Piece, box: int = PREVIEW_BOX) -> Tuple[int, int]:
    """Top-left cell that centers the piece's shape matrix inside the preview box."""
    return (box - piece.width) // 2, (box - piece.height) // 2


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, rows: int, cols: int) -> Tuple[int, int]:
        width = self.margin * 3 + (cols + PREVIEW_BOX) * self.cell_size
        height = self.margin * 2 + rows * self.cell_size
        return width, height

    def _cell_rect(self, ox: int, oy: int, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            ox + x * self.cell_size,
            oy + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), self._cell_rect(0, 0, x, y))
        return surf

    def _draw_next(self, screen: pygame.Surface, piece: Optional[Piece], ox: int, oy: int) -> None:
        box = pygame.Rect(ox, oy, PREVIEW_BOX * self.cell_size, PREVIEW_BOX * self.cell_size)
        pygame.draw.rect(screen, (30, 30, 36), box)
        if piece is None:
            return
        px, py = preview_origin(piece)
        color = _color_for_value(piece.color)
        for dy in range(piece.height):
            for dx in range(piece.width):
                if piece.shape[dy, dx]:
                    pygame.draw.rect(screen, color, self._cell_rect(ox, oy, px + dx, py + dy))

    def draw(self, screen: pygame.Surface, session: GameSession) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        state = session.get_state()
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin))

        side_x = self.margin * 2 + state.shape[1] * self.cell_size
        label = self._font.render("Next", True, (230, 230, 230))
        screen.blit(label, (side_x, self.margin))
        preview_y = self.margin + label.get_height() + 6
        self._draw_next(screen, session.get_next_piece(), side_x, preview_y)

        score_y = preview_y + PREVIEW_BOX * self.cell_size + 16
        score = self._font.render(f"Score: {session.get_score()}", True, (230, 230, 230))
        screen.blit(score, (side_x, score_y))

        if session.is_over():
            over = self._font.render("Game Over - R to restart", True, (255, 100, 100))
            rect = over.get_rect(center=(screen.get_width() // 2, self.margin // 2 + 8))
            screen.blit(over, rect)
        pygame.display.flip()
