from __future__ import annotations

import numpy as np

from .pieces import PieceKind, Shape


GRID_WIDTH = 10
GRID_HEIGHT = 20


class GameGrid:
    """Playfield of settled cells.

    The grid uses 0 for empty cells and the piece kind value for filled cells.
    Row 0 is the top. The falling piece is never stored here.
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> None:
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.cells.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        # Anything outside the playfield blocks
        if not self.is_inside(x, y):
            return True
        return bool(self.cells[y, x] != 0)

    def merge(self, shape: Shape, x: int, y: int, kind: PieceKind) -> None:
        """Write `kind` into every in-bounds cell covered by `shape` at (x, y)."""
        assert shape.ndim == 2, "malformed shape matrix"
        for sy, sx in np.argwhere(shape):
            px, py = x + int(sx), y + int(sy)
            if self.is_inside(px, py):
                self.cells[py, px] = int(kind)

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.cells != 0, axis=1))[0]

    def clear_full_rows(self) -> int:
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.cells, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.cells = np.vstack((new_rows, kept))
        assert self.cells.shape == (self.height, self.width)
        return num

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()


def collides(grid: GameGrid, shape: Shape, x: int, y: int) -> bool:
    """True if `shape` placed with its origin at (x, y) leaves the playfield
    sideways or through the floor, or lands on a settled cell.

    Cells above the top row only count against the side walls.
    """
    assert shape.ndim == 2, "malformed shape matrix"
    for sy, sx in np.argwhere(shape):
        px, py = x + int(sx), y + int(sy)
        if px < 0 or px >= grid.width or py >= grid.height:
            return True
        if py >= 0 and grid.is_occupied(px, py):
            return True
    return False
