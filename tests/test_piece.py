import pytest

from reversi.core import InvalidColorError, Piece, PieceColor


def test_flip_inverts_colour() -> None:
    piece = Piece(PieceColor.BLACK)
    piece.flip()
    assert piece.color is PieceColor.WHITE


def test_double_flip_is_identity() -> None:
    piece = Piece("white")
    piece.flip()
    piece.flip()
    assert piece.color is PieceColor.WHITE


def test_str_encodes_colour() -> None:
    assert str(Piece("black")) == "B"
    assert str(Piece("white")) == "W"


def test_piece_rejects_unknown_colour() -> None:
    with pytest.raises(InvalidColorError):
        Piece("purple")


def test_color_parse_and_opposite() -> None:
    assert PieceColor.parse("BLACK") is PieceColor.BLACK
    assert PieceColor.parse(PieceColor.WHITE) is PieceColor.WHITE
    assert PieceColor.BLACK.opposite is PieceColor.WHITE
    assert PieceColor.WHITE.opposite is PieceColor.BLACK
    assert PieceColor.from_code(PieceColor.WHITE.code) is PieceColor.WHITE
    with pytest.raises(InvalidColorError):
        PieceColor.parse(None)
