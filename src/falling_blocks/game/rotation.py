from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .grid import GameGrid, collides
from .pieces import Shape


# Horizontal nudges tried in order when a rotation does not fit in place
KICKS: Tuple[int, ...] = (0, -1, 1, -2, 2)


def rotate(shape: Shape) -> Shape:
    """Rotate a h x w matrix a quarter turn clockwise into a new w x h matrix."""
    return np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))


def resolve_rotation(grid: GameGrid, shape: Shape, x: int, y: int) -> Optional[Tuple[Shape, int]]:
    """Return the rotated shape and its kicked x, or None if every kick collides."""
    rotated = rotate(shape)
    for kick in KICKS:
        if not collides(grid, rotated, x + kick, y):
            return rotated, x + kick
    return None
