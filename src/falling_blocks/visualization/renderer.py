from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from falling_blocks.game import GameSnapshot, Piece
from .palette import BACKGROUND, color_for_value


PREVIEW_CELLS = 4


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, board_shape: tuple[int, int]) -> tuple[int, int]:
        h, w = board_shape
        width = self.margin * 3 + (w + PREVIEW_CELLS) * self.cell_size
        height = self.margin * 2 + h * self.cell_size
        return width, height

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.cell_size + 1, y * self.cell_size + 1, self.cell_size - 2, self.cell_size - 2)

    def _grid_surface(self, board: np.ndarray) -> pygame.Surface:
        h, w = board.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill(BACKGROUND)
        for y in range(h):
            for x in range(w):
                v = int(board[y, x])
                if v:
                    pygame.draw.rect(surf, color_for_value(v), self._cell_rect(x, y))
        return surf

    def _preview_surface(self, piece: Optional[Piece]) -> pygame.Surface:
        size = PREVIEW_CELLS * self.cell_size
        surf = pygame.Surface((size, size))
        surf.fill(BACKGROUND)
        if piece is None:
            return surf
        # Centre the piece inside the preview box
        off_x = (PREVIEW_CELLS - piece.width) // 2
        off_y = (PREVIEW_CELLS - piece.height) // 2
        color = color_for_value(int(piece.kind))
        for dy, dx in np.argwhere(piece.shape):
            pygame.draw.rect(surf, color, self._cell_rect(off_x + int(dx), off_y + int(dy)))
        return surf

    def draw(self, screen: pygame.Surface, board: np.ndarray, snapshot: GameSnapshot) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(board), (self.margin, self.margin))

        side_x = self.margin * 2 + board.shape[1] * self.cell_size
        screen.blit(self._preview_surface(snapshot.next), (side_x, self.margin))

        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        info_lines = [
            f"Score: {snapshot.score}",
            f"Level: {snapshot.level}",
            f"Lines: {snapshot.lines}",
        ]
        if snapshot.paused:
            info_lines.append("Paused")
        y_text = self.margin * 2 + PREVIEW_CELLS * self.cell_size
        for i, txt in enumerate(info_lines):
            img = self._font.render(txt, True, (230, 230, 230))
            screen.blit(img, (side_x, y_text + i * 24))
        pygame.display.flip()
