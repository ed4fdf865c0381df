import pytest

from tetrix.pieces import SHAPES, Piece


def test_new_piece_spawn_position():
    piece = Piece(2)
    assert (piece.x, piece.y) == (3, 0)
    assert piece.rotation == 0


def test_i_piece_shape():
    assert Piece(0).shape == ((1, 1, 1, 1),)


def test_kind_wraps_modulo_seven():
    piece = Piece(7)
    assert piece.kind == 0
    assert piece.shape == SHAPES[0]
    assert Piece(13).kind == 6


@pytest.mark.parametrize("kind", range(7))
def test_four_rotations_restore_shape(kind):
    piece = Piece(kind)
    original = piece.shape
    for _ in range(4):
        piece.rotate()
    assert piece.shape == original
    assert piece.rotation == 0


@pytest.mark.parametrize("kind", range(7))
def test_rotation_swaps_dimensions_and_keeps_cells(kind):
    piece = Piece(kind)
    rows, cols = len(piece.shape), len(piece.shape[0])
    count = sum(map(sum, piece.shape))
    piece.rotate()
    assert (len(piece.shape), len(piece.shape[0])) == (cols, rows)
    assert sum(map(sum, piece.shape)) == count
    assert piece.rotation == 1


def test_i_piece_rotates_to_vertical():
    piece = Piece(0)
    piece.rotate()
    assert piece.shape == ((1,), (1,), (1,), (1,))


def test_cells_are_offset_by_position():
    piece = Piece(1)
    piece.x, piece.y = 5, 7
    assert sorted(piece.cells()) == [(5, 7), (5, 8), (6, 7), (6, 8)]


def test_every_shape_has_four_cells():
    for kind in range(7):
        assert len(list(Piece(kind).cells())) == 4