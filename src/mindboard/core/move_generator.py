"""Destination generation on an empty board with blockers + reachability checks.

There are no captures in a drill, so a blocker only ends a slide: the blocked
square itself is still reported as a destination.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Protocol

from mindboard.core.enums import PieceType
from mindboard.core.piece import Piece
from mindboard.core.types import Square, check_square, make_square


class HasSquare(Protocol):
    square: Square


# (row delta, col delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        row = sq >> 3
        col = sq & 7
        moves: list[Square] = []
        for dr, dc in offsets:
            r = row + dr
            c = col + dc
            if 0 <= r < 8 and 0 <= c < 8:
                moves.append(make_square(r, c))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        row = sq >> 3
        col = sq & 7
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            ray: list[Square] = []
            while 0 <= r < 8 and 0 <= c < 8:
                ray.append(make_square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_STEP_TARGETS: dict[PieceType, tuple[tuple[Square, ...], ...]] = {
    PieceType.KNIGHT: _KNIGHT_TARGETS,
    PieceType.KING: _KING_TARGETS,
}

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


# -- Public API ---------------------------------------------------------------


def legal_moves(
    square: Square,
    kind: PieceType,
    blockers: Collection[Square] = (),
) -> list[Square]:
    """Destinations for a *kind* piece standing on *square*.

    *blockers* are squares held by other pieces; the mover's own square must
    not be among them. Sliders include the first blocked square of every ray
    and stop there. The result is duplicate-free and ordered by direction,
    then distance, so equal inputs always give equal output. Pawns have no
    destinations in a drill.

    Raises:
        ValueError: *square* is off the board or *kind* is not a PieceType.
    """
    check_square(square)
    if not isinstance(kind, PieceType):
        raise ValueError(f"Unsupported piece kind: {kind!r}")

    step_targets = _STEP_TARGETS.get(kind)
    if step_targets is not None:
        return list(step_targets[square])

    rays = _SLIDER_RAYS.get(kind)
    if rays is None:
        return []

    blocked = blockers if isinstance(blockers, (set, frozenset)) else set(blockers)
    moves: list[Square] = []
    append = moves.append
    for ray in rays[square]:
        for to_sq in ray:
            append(to_sq)
            if to_sq in blocked:
                break
    return moves


def blockers_for(from_sq: Square, pieces: Iterable[HasSquare]) -> set[Square]:
    """Squares of every piece except the one standing on *from_sq*."""
    return {p.square for p in pieces if p.square != from_sq}


def can_reach(
    from_sq: Square,
    to_sq: Square,
    kind: PieceType,
    pieces: Iterable[HasSquare],
) -> bool:
    """Can a *kind* piece on *from_sq* land on *to_sq* given the other *pieces*?"""
    return to_sq in legal_moves(from_sq, kind, blockers_for(from_sq, pieces))


def find_mover(
    kind: PieceType,
    to_sq: Square,
    pieces: list[Piece],
) -> Piece | None:
    """First piece of *kind* (in list order) able to reach *to_sq*, if any."""
    for piece in pieces:
        if piece.piece_type == kind and can_reach(piece.square, to_sq, kind, pieces):
            return piece
    return None
