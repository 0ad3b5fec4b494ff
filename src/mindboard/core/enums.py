"""Core enumerations for the drill domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Drills place a single color on the board."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def label(self) -> str:
        """Display name, e.g. 'Knight'."""
        return self.name.capitalize()


# Kinds a drill may deal, in the order the piece panel lists them.
DRILL_KINDS: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
