import numpy as np
import pytest

from falling_blocks.game import KICKS, GameGrid, PieceKind, base_shape, resolve_rotation, rotate


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_return_the_original(kind):
    shape = base_shape(kind)
    rotated = shape
    for _ in range(4):
        rotated = rotate(rotated)
    np.testing.assert_array_equal(rotated, shape)


def test_rotate_follows_transpose_then_reverse():
    shape = base_shape(PieceKind.J)
    rotated = rotate(shape)
    h, w = shape.shape
    assert rotated.shape == (w, h)
    for y in range(h):
        for x in range(w):
            assert rotated[x, h - 1 - y] == shape[y, x]
    assert rotated.tolist() == [[1, 1], [1, 0], [1, 0]]


def test_rotate_returns_an_independent_matrix():
    shape = base_shape(PieceKind.T)
    rotated = rotate(shape)
    rotated[0, 0] = 9
    assert shape.max() == 1


def test_kick_order():
    assert KICKS == (0, -1, 1, -2, 2)


def test_rotation_in_place_when_free():
    shape, x = resolve_rotation(GameGrid(), base_shape(PieceKind.T), 4, 5)
    assert x == 4
    assert shape.shape == (3, 2)


def test_rotation_kicks_away_from_the_wall():
    vertical_i = rotate(base_shape(PieceKind.I))
    shape, x = resolve_rotation(GameGrid(), vertical_i, 8, 5)
    # 8, 7 and 9 all overflow the right wall; -2 fits
    assert x == 6
    assert shape.tolist() == [[1, 1, 1, 1]]


def test_rotation_rejected_when_no_kick_fits():
    vertical_i = rotate(base_shape(PieceKind.I))
    assert resolve_rotation(GameGrid(), vertical_i, 9, 5) is None
