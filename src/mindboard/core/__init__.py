"""Core domain layer — pure drill logic with zero external dependencies.

Quick start::

    import random

    from mindboard.core import can_reach, generate_pieces, next_target

    rng = random.Random(7)
    pieces = generate_pieces(3, rng)
    target = next_target(pieces, [], rng=rng)
"""

from mindboard.core.enums import DRILL_KINDS, Color, PieceType
from mindboard.core.history import DEFAULT_HISTORY_CAPACITY, MoveHistory
from mindboard.core.move_generator import (
    blockers_for,
    can_reach,
    find_mover,
    legal_moves,
)
from mindboard.core.piece import Piece, occupied_squares
from mindboard.core.selector import (
    NO_TARGET,
    compute_reachability,
    generate_pieces,
    next_target,
    piece_weights,
    random_square,
)
from mindboard.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "DRILL_KINDS",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "DEFAULT_HISTORY_CAPACITY",
    "MoveHistory",
    "Piece",
    "occupied_squares",
    # Move generation
    "blockers_for",
    "can_reach",
    "find_mover",
    "legal_moves",
    # Target selection
    "NO_TARGET",
    "compute_reachability",
    "generate_pieces",
    "next_target",
    "piece_weights",
    "random_square",
]
