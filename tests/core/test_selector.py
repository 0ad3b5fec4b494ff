"""Tests for target selection and drill dealing."""

from __future__ import annotations

import random

import pytest

from mindboard.core.enums import DRILL_KINDS, PieceType
from mindboard.core.move_generator import can_reach, legal_moves
from mindboard.core.piece import Piece, occupied_squares
from mindboard.core.selector import (
    NO_TARGET,
    PoolEntry,
    compute_reachability,
    draw_weighted,
    generate_pieces,
    next_target,
    piece_weights,
    random_square,
    weighted_pool,
)
from mindboard.core.types import A1, A5, A8, E4, H1, H7, H8


class _FixedRandom(random.Random):
    """``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


def _three_pieces() -> list[Piece]:
    return [
        Piece("p-0", PieceType.ROOK, A1),
        Piece("p-1", PieceType.KNIGHT, E4),
        Piece("p-2", PieceType.BISHOP, H8),
    ]


def _two_rooks() -> list[Piece]:
    # Shared targets: a8 and h1.
    return [
        Piece("p-0", PieceType.ROOK, A1),
        Piece("p-1", PieceType.ROOK, H8),
    ]


# ── Weights ──────────────────────────────────────────────────────────────────


class TestPieceWeights:
    def test_no_history_full_weight(self) -> None:
        weights = piece_weights(_three_pieces(), [])
        assert weights == {"p-0": 1.0, "p-1": 1.0, "p-2": 1.0}

    def test_repeat_and_last_moved_penalties(self) -> None:
        weights = piece_weights(_three_pieces(), ["p-2", "p-1"])
        assert weights["p-0"] == pytest.approx(1.0)
        assert weights["p-1"] == pytest.approx(0.1)  # 1 - 0.3 - 0.6
        assert weights["p-2"] == pytest.approx(0.7)

    def test_clamped_at_zero(self) -> None:
        weights = piece_weights(_three_pieces(), ["p-0", "p-1", "p-0"])
        assert weights["p-0"] == 0.0  # 1 - 0.6 - 0.6 clamps
        assert weights["p-1"] == pytest.approx(0.7)

    def test_last_two_moves_zero_weight(self) -> None:
        weights = piece_weights(_three_pieces(), ["p-1", "p-0", "p-0"])
        assert weights["p-0"] == 0.0

    def test_capacity_limits_history(self) -> None:
        history = ["p-1", "p-1", "p-0", "p-0", "p-2", "p-2", "p-2"]
        weights = piece_weights(_three_pieces(), history, capacity=5)
        assert weights["p-1"] == pytest.approx(1.0)
        assert weights["p-0"] == pytest.approx(0.4)


class TestReachability:
    def test_counts_and_unique_targets(self) -> None:
        reach = compute_reachability(_two_rooks())
        assert reach.counts[A8] == 2
        assert reach.counts[H1] == 2
        assert A8 not in reach.unique_targets
        assert H1 not in reach.unique_targets
        assert len(reach.unique_targets) == 24

    def test_occupied_squares_excluded(self) -> None:
        pieces = [
            Piece("p-0", PieceType.ROOK, A1),
            Piece("p-1", PieceType.KNIGHT, A8),
        ]
        reach = compute_reachability(pieces)
        assert A8 not in reach.valid_moves["p-0"]
        assert A1 not in reach.counts

    def test_reacher_recorded(self) -> None:
        reach = compute_reachability(_two_rooks())
        assert reach.reachers[A5] == "p-0"
        assert reach.reachers[H7] == "p-1"


# ── Weighted draw ────────────────────────────────────────────────────────────


class TestWeightedPool:
    def test_entries_take_their_reacher_weight(self) -> None:
        pieces = _two_rooks()
        reach = compute_reachability(pieces)
        pool = weighted_pool(reach, piece_weights(pieces, ["p-1"]))

        assert len(pool) == 24
        assert A8 not in {entry.square for entry in pool}
        by_square = {entry.square: entry.weight for entry in pool}
        assert by_square[A5] == pytest.approx(1.0)
        assert by_square[H7] == pytest.approx(0.1)


class TestDrawWeighted:
    def test_low_threshold_picks_first(self) -> None:
        pool = [PoolEntry(1, 1.0), PoolEntry(2, 3.0)]
        assert draw_weighted(pool, _FixedRandom(0.0)) == 1

    def test_high_threshold_picks_last(self) -> None:
        pool = [PoolEntry(1, 1.0), PoolEntry(2, 3.0)]
        assert draw_weighted(pool, _FixedRandom(0.99999)) == 2

    def test_zero_weight_entry_skipped(self) -> None:
        pool = [PoolEntry(1, 0.0), PoolEntry(2, 1.0)]
        assert draw_weighted(pool, _FixedRandom(0.0)) == 2

    def test_frequencies_follow_weights(self) -> None:
        pool = [PoolEntry(1, 1.0), PoolEntry(2, 3.0)]
        rng = random.Random(7)
        draws = [draw_weighted(pool, rng) for _ in range(4000)]
        assert draws.count(2) / len(draws) == pytest.approx(0.75, abs=0.03)


# ── next_target ──────────────────────────────────────────────────────────────


class TestNextTarget:
    def test_never_returns_occupied_square(self) -> None:
        rng = random.Random(99)
        for _ in range(200):
            pieces = generate_pieces(4, rng)
            target = next_target(pieces, [], rng=rng)
            assert target is not NO_TARGET
            assert target not in occupied_squares(pieces)
            assert any(
                can_reach(p.square, target, p.piece_type, pieces) for p in pieces
            )

    def test_prefers_unique_targets(self) -> None:
        rng = random.Random(3)
        for _ in range(100):
            assert next_target(_two_rooks(), [], rng=rng) not in (A8, H1)

    def test_zero_weight_piece_never_targeted(self) -> None:
        pieces = _two_rooks()
        rng = random.Random(5)
        for _ in range(100):
            target = next_target(pieces, ["p-0", "p-0"], rng=rng)
            assert target is not None
            assert can_reach(H8, target, PieceType.ROOK, pieces)
            assert not can_reach(A1, target, PieceType.ROOK, pieces)

    def test_draws_follow_reacher_weights(self) -> None:
        pieces = _two_rooks()  # 12 unique targets each
        rng = random.Random(21)
        draws = [next_target(pieces, ["p-1"], rng=rng) for _ in range(3000)]

        first_share = sum(
            1 for sq in draws if can_reach(A1, sq, PieceType.ROOK, pieces)
        ) / len(draws)
        # weights 1.0 and 0.1 spread over 12 squares each
        assert first_share == pytest.approx(12 / 13.2, abs=0.03)

    def test_zero_total_weight_spreads_over_unique_targets(self) -> None:
        pieces = [Piece("p-0", PieceType.KNIGHT, E4)]
        rng = random.Random(6)
        draws = {next_target(pieces, ["p-0", "p-0"], rng=rng) for _ in range(400)}
        assert draws == set(legal_moves(E4, PieceType.KNIGHT))

    def test_lone_zero_weight_target_still_returned(self) -> None:
        pieces = [Piece("p-0", PieceType.KNIGHT, A8)]
        target = next_target(pieces, ["p-0", "p-0"], rng=random.Random(1))
        assert target in (10, 17)

    def test_no_target_on_full_board(self) -> None:
        pieces = [Piece(f"p-{sq}", PieceType.ROOK, sq) for sq in range(64)]
        assert next_target(pieces, []) is NO_TARGET

    def test_falls_back_to_shared_targets(self) -> None:
        empty = {28, 35}  # e5, d4
        pieces = [
            Piece(f"p-{sq}", PieceType.ROOK, sq) for sq in range(64) if sq not in empty
        ]
        assert compute_reachability(pieces).unique_targets == []
        assert next_target(pieces, [], rng=random.Random(2)) in empty

    def test_inputs_not_modified(self) -> None:
        pieces = _three_pieces()
        history = ["p-0", "p-1"]
        next_target(pieces, history, rng=random.Random(0))
        assert pieces == _three_pieces()
        assert history == ["p-0", "p-1"]

    def test_seeded_rng_is_reproducible(self) -> None:
        first = next_target(_three_pieces(), ["p-1"], rng=random.Random(42))
        second = next_target(_three_pieces(), ["p-1"], rng=random.Random(42))
        assert first == second


# ── Dealing ──────────────────────────────────────────────────────────────────


class TestGeneratePieces:
    @pytest.mark.parametrize("count", [1, 2, 3, 4])
    def test_distinct_kinds_and_squares(self, count: int) -> None:
        pieces = generate_pieces(count, random.Random(count))
        assert len(pieces) == count
        assert len({p.square for p in pieces}) == count
        assert len({p.piece_type for p in pieces}) == count
        assert all(p.piece_type in DRILL_KINDS for p in pieces)
        assert [p.id for p in pieces] == [f"p-{i}" for i in range(count)]

    @pytest.mark.parametrize("count", [0, 5])
    def test_bad_count_rejected(self, count: int) -> None:
        with pytest.raises(ValueError):
            generate_pieces(count)

    def test_random_square_respects_exclusions(self) -> None:
        exclude = set(range(63))
        assert random_square(exclude, random.Random(0)) == 63

    def test_random_square_full_board(self) -> None:
        with pytest.raises(ValueError):
            random_square(range(64))
