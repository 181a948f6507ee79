from __future__ import annotations

from typing import Tuple

from falling_blocks.game import PieceKind


BACKGROUND = (7, 20, 34)

PALETTE = {
    0: BACKGROUND,
    int(PieceKind.I): (0, 240, 240),
    int(PieceKind.J): (0, 0, 240),
    int(PieceKind.L): (240, 160, 0),
    int(PieceKind.O): (240, 240, 0),
    int(PieceKind.S): (0, 240, 0),
    int(PieceKind.T): (160, 0, 240),
    int(PieceKind.Z): (240, 0, 0),
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    # Falling piece cells are negative
    return PALETTE.get(abs(v), (200, 200, 200))
