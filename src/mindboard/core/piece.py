"""Piece value object."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from mindboard.core.enums import Color, PieceType
from mindboard.core.types import Square, check_square

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for one piece on the drill board.

    ``id`` stays the same for the lifetime of a drill; relocating or hiding
    the piece yields a new ``Piece`` with the same id.
    """

    id: str
    piece_type: PieceType
    square: Square
    color: Color = Color.WHITE
    is_visible: bool = True

    def __post_init__(self) -> None:
        check_square(self.square)

    # ── Derived copies ───────────────────────────────────────────────────

    def moved_to(self, square: Square) -> Piece:
        """Same piece relocated to *square*."""
        return replace(self, square=square)

    def hidden(self) -> Piece:
        return replace(self, is_visible=False)

    def shown(self) -> Piece:
        return replace(self, is_visible=True)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♘."""
        return _UNICODE[(self.color, self.piece_type)]


def piece_symbol(piece_type: PieceType, color: Color = Color.WHITE) -> str:
    """Unicode chess symbol for a kind, e.g. KNIGHT → ♘."""
    return _UNICODE[(color, piece_type)]


def occupied_squares(pieces: Iterable[Piece]) -> set[Square]:
    """Squares currently occupied by any of *pieces*."""
    return {p.square for p in pieces}
