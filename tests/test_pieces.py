import numpy as np

from falling_blocks.game import BASE_SHAPES, Piece, PieceFactory, PieceKind, base_shape

from conftest import FixedKinds


def test_shape_library_matches_canonical_forms():
    assert base_shape(PieceKind.I).tolist() == [[1, 1, 1, 1]]
    assert base_shape(PieceKind.J).tolist() == [[1, 0, 0], [1, 1, 1]]
    assert base_shape(PieceKind.L).tolist() == [[0, 0, 1], [1, 1, 1]]
    assert base_shape(PieceKind.O).tolist() == [[1, 1], [1, 1]]
    assert base_shape(PieceKind.S).tolist() == [[0, 1, 1], [1, 1, 0]]
    assert base_shape(PieceKind.T).tolist() == [[0, 1, 0], [1, 1, 1]]
    assert base_shape(PieceKind.Z).tolist() == [[1, 1, 0], [0, 1, 1]]


def test_every_kind_has_four_cells():
    for kind in PieceKind:
        assert int(np.sum(BASE_SHAPES[kind])) == 4


def test_new_piece_owns_its_matrix():
    factory = PieceFactory(FixedKinds(PieceKind.T))
    a = factory.new_piece()
    b = factory.new_piece()
    a.shape[0, 0] = 1
    assert BASE_SHAPES[PieceKind.T][0, 0] == 0
    assert b.shape[0, 0] == 0


def test_piece_copies_the_shape_it_is_given():
    shape = np.array([[1, 1]], dtype=np.int8)
    piece = Piece(PieceKind.O, shape)
    shape[0, 0] = 0
    assert piece.shape.tolist() == [[1, 1]]


def test_factory_follows_injected_sequence():
    factory = PieceFactory(FixedKinds(PieceKind.S, PieceKind.Z, PieceKind.L))
    kinds = [factory.new_piece().kind for _ in range(4)]
    assert kinds == [PieceKind.S, PieceKind.Z, PieceKind.L, PieceKind.S]


def test_seeded_factory_is_reproducible():
    a = PieceFactory(seed=7)
    b = PieceFactory(seed=7)
    assert [a.new_piece().kind for _ in range(20)] == [b.new_piece().kind for _ in range(20)]


def test_cells_at_offsets_true_cells():
    piece = Piece(PieceKind.T)
    assert sorted(piece.cells_at(3, 5)) == [(3, 6), (4, 5), (4, 6), (5, 6)]
