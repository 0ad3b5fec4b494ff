"""Target selection: pick the next square the player must find.

A good target is reachable by exactly one piece, so the answer is never
ambiguous. Among those, pieces that moved recently are down-weighted so the
drill keeps every piece in play.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from mindboard.core.enums import DRILL_KINDS, Color, PieceType
from mindboard.core.history import DEFAULT_HISTORY_CAPACITY
from mindboard.core.move_generator import blockers_for, legal_moves
from mindboard.core.piece import Piece, occupied_squares
from mindboard.core.types import Square

NO_TARGET: None = None  # no piece can reach any empty square

REPEAT_PENALTY = 0.3
LAST_MOVED_PENALTY = 0.6


@dataclass(frozen=True, slots=True)
class Reachability:
    """Empty squares the pieces can reach, with their reach counts.

    Dict insertion order follows the piece list, then each piece's move order.
    """

    valid_moves: dict[str, list[Square]]  # piece id -> empty destinations
    counts: dict[Square, int]
    reachers: dict[Square, str]  # first piece id found to reach the square

    @property
    def unique_targets(self) -> list[Square]:
        """Squares exactly one piece can reach."""
        return [sq for sq, count in self.counts.items() if count == 1]

    @property
    def all_targets(self) -> list[Square]:
        """Union of every piece's empty destinations."""
        return list(self.counts)


@dataclass(frozen=True, slots=True)
class PoolEntry:
    square: Square
    weight: float


def compute_reachability(pieces: Sequence[Piece]) -> Reachability:
    occupied = occupied_squares(pieces)
    valid_moves: dict[str, list[Square]] = {}
    counts: dict[Square, int] = {}
    reachers: dict[Square, str] = {}

    for piece in pieces:
        moves = legal_moves(
            piece.square, piece.piece_type, blockers_for(piece.square, pieces)
        )
        valid = [sq for sq in moves if sq not in occupied]
        valid_moves[piece.id] = valid
        for sq in valid:
            count = counts.get(sq, 0)
            counts[sq] = count + 1
            if count == 0:
                reachers[sq] = piece.id

    return Reachability(valid_moves=valid_moves, counts=counts, reachers=reachers)


def piece_weights(
    pieces: Iterable[Piece],
    history: Iterable[str],
    capacity: int = DEFAULT_HISTORY_CAPACITY,
) -> dict[str, float]:
    """Selection weight per piece id, in ``[0, 1]``.

    Each appearance in the recent *history* costs ``REPEAT_PENALTY``; being the
    last piece moved costs ``LAST_MOVED_PENALTY`` more. A piece that moved on
    both of the last two turns gets weight 0.
    """
    recent = list(history)[-capacity:] if capacity > 0 else []
    last = recent[-1] if recent else None
    second_last = recent[-2] if len(recent) >= 2 else None

    weights: dict[str, float] = {}
    for piece in pieces:
        weight = 1.0 - recent.count(piece.id) * REPEAT_PENALTY
        if piece.id == last:
            weight -= LAST_MOVED_PENALTY
            if piece.id == second_last:
                weight = 0.0
        weights[piece.id] = max(0.0, weight)
    return weights


def weighted_pool(
    reach: Reachability,
    weights: dict[str, float],
) -> list[PoolEntry]:
    """Unique targets, each weighted by the weight of its only reacher."""
    return [
        PoolEntry(sq, weights.get(reach.reachers[sq], 0.0))
        for sq in reach.unique_targets
    ]


def draw_weighted(pool: Sequence[PoolEntry], rng: random.Random) -> Square:
    """Draw one square with probability proportional to its weight.

    Total weight must be positive. Rounding leftovers fall to the last entry.
    """
    total = sum(entry.weight for entry in pool)
    threshold = rng.random() * total
    cumulative = 0.0
    for entry in pool:
        cumulative += entry.weight
        if threshold < cumulative:
            return entry.square
    return pool[-1].square


def next_target(
    pieces: Sequence[Piece],
    history: Iterable[str],
    capacity: int = DEFAULT_HISTORY_CAPACITY,
    rng: random.Random | None = None,
) -> Square | None:
    """Choose the next target square, or ``NO_TARGET`` when nothing can move.

    Pure: neither *pieces* nor *history* is modified. Only the last
    *capacity* history entries affect weighting.
    """
    if rng is None:
        rng = random.Random()

    reach = compute_reachability(pieces)
    unique = reach.unique_targets

    if not unique:
        candidates = reach.all_targets
        if not candidates:
            return NO_TARGET
        return rng.choice(candidates)

    pool = weighted_pool(reach, piece_weights(pieces, history, capacity))
    if sum(entry.weight for entry in pool) <= 0.0:
        return rng.choice(unique)
    return draw_weighted(pool, rng)


# -- Drill setup ----------------------------------------------------------------


def random_square(
    exclude: Iterable[Square] = (),
    rng: random.Random | None = None,
) -> Square:
    """Uniformly random square not in *exclude*."""
    if rng is None:
        rng = random.Random()
    excluded = set(exclude)
    free = [sq for sq in range(64) if sq not in excluded]
    if not free:
        raise ValueError("No free square left on the board")
    return rng.choice(free)


def generate_pieces(
    count: int,
    rng: random.Random | None = None,
    kinds: Sequence[PieceType] = DRILL_KINDS,
    color: Color = Color.WHITE,
) -> list[Piece]:
    """Deal *count* pieces of distinct kinds on distinct random squares."""
    if not 1 <= count <= len(kinds):
        raise ValueError(f"Piece count must be within 1..{len(kinds)}: {count!r}")
    if rng is None:
        rng = random.Random()

    chosen = rng.sample(list(kinds), count)
    pieces: list[Piece] = []
    used: list[Square] = []
    for i, kind in enumerate(chosen):
        square = random_square(used, rng)
        used.append(square)
        pieces.append(Piece(f"p-{i}", kind, square, color))
    return pieces
