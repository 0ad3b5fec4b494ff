"""Tests for square coordinates and the Piece value object."""

from __future__ import annotations

import pytest

from mindboard.core.enums import Color, PieceType
from mindboard.core.piece import Piece, occupied_squares, piece_symbol
from mindboard.core.types import (
    A1,
    A8,
    E4,
    H1,
    H8,
    check_square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquares:
    def test_layout_corners(self) -> None:
        assert (A8, H8, A1, H1) == (0, 7, 56, 63)

    def test_row_and_col(self) -> None:
        assert row_of(E4) == 4
        assert col_of(E4) == 4
        assert make_square(4, 4) == E4

    def test_square_name(self) -> None:
        assert square_name(0) == "a8"
        assert square_name(63) == "h1"
        assert square_name(E4) == "e4"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == 36
        assert parse_square("a8") == A8

    @pytest.mark.parametrize("name", ["", "e", "i4", "e9", "e44", "E4"])
    def test_parse_square_rejects_garbage(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_names_round_trip(self) -> None:
        assert all(parse_square(square_name(sq)) == sq for sq in range(64))

    @pytest.mark.parametrize("bad", [-1, 64, 100, True, 1.5, "a1"])
    def test_check_square_rejects(self, bad: object) -> None:
        with pytest.raises(ValueError):
            check_square(bad)  # type: ignore[arg-type]

    def test_check_square_passes_valid(self) -> None:
        assert check_square(0) == 0
        assert check_square(63) == 63


class TestPiece:
    def test_defaults(self) -> None:
        piece = Piece("p-0", PieceType.ROOK, A1)
        assert piece.color == Color.WHITE
        assert piece.is_visible

    def test_off_board_square_rejected(self) -> None:
        with pytest.raises(ValueError):
            Piece("p-0", PieceType.ROOK, 64)

    def test_moved_to_keeps_identity(self) -> None:
        piece = Piece("p-0", PieceType.KNIGHT, A8)
        moved = piece.moved_to(E4)
        assert moved.id == "p-0"
        assert moved.square == E4
        assert piece.square == A8

    def test_hidden_and_shown(self) -> None:
        piece = Piece("p-0", PieceType.QUEEN, E4).hidden()
        assert not piece.is_visible
        assert piece.shown().is_visible

    def test_symbols(self) -> None:
        assert Piece("p-0", PieceType.KNIGHT, E4).symbol == "♘"
        assert piece_symbol(PieceType.QUEEN) == "♕"
        assert piece_symbol(PieceType.ROOK, Color.BLACK) == "♜"

    def test_occupied_squares(self) -> None:
        pieces = [
            Piece("p-0", PieceType.ROOK, A1),
            Piece("p-1", PieceType.BISHOP, H8),
        ]
        assert occupied_squares(pieces) == {A1, H8}
