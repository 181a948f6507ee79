from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Protocol, Sequence

import numpy as np


class PieceKind(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


BASE_SHAPES = {
    PieceKind.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    PieceKind.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    PieceKind.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
    PieceKind.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    PieceKind.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    PieceKind.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    PieceKind.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
}


def base_shape(kind: PieceKind) -> Shape:
    """Canonical matrix for `kind`, as a copy the caller may mutate."""
    return BASE_SHAPES[kind].copy()


@dataclass(eq=False)
class Piece:
    kind: PieceKind
    shape: Optional[Shape] = None

    def __post_init__(self) -> None:
        if self.shape is None:
            self.shape = BASE_SHAPES[self.kind]
        # Always own the matrix, never share it with the template or another piece
        self.shape = np.array(self.shape, dtype=np.int8, copy=True)
        assert self.shape.ndim == 2 and self.shape.size > 0, "malformed shape matrix"

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def with_shape(self, shape: Shape) -> "Piece":
        return Piece(self.kind, shape)

    def cells_at(self, origin_x: int, origin_y: int) -> list[tuple[int, int]]:
        return [(origin_x + int(dx), origin_y + int(dy)) for dy, dx in np.argwhere(self.shape)]


class RandomSource(Protocol):
    def choice(self, seq: Sequence[Any]) -> Any: ...


class PieceFactory:
    """Produces pieces of a uniformly random kind.

    The random source is injectable so tests can feed a fixed kind order;
    anything with a ``choice(seq)`` method works, ``random.Random`` by default.
    """

    def __init__(self, rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)

    def new_piece(self) -> Piece:
        kind = PieceKind(self.rng.choice(list(PieceKind)))
        return Piece(kind, base_shape(kind))
