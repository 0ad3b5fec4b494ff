"""Tests for DrillState."""

import random

from mindboard.core.enums import PieceType
from mindboard.core.piece import Piece
from mindboard.core.types import A1, A5, H8
from mindboard.game.interfaces import Difficulty, DrillEndReason, DrillPhase
from mindboard.game.state import DrillState


def _state_with_pieces() -> DrillState:
    state = DrillState()
    state.setup(Difficulty.EASY, random.Random(0))
    state.pieces = [
        Piece("p-0", PieceType.ROOK, A1),
        Piece("p-1", PieceType.KNIGHT, H8),
    ]
    return state


class TestSetup:
    def test_initial_phase(self) -> None:
        assert DrillState().phase == DrillPhase.NOT_STARTED

    def test_setup_deals_pieces(self) -> None:
        state = DrillState()
        state.setup(Difficulty.HARD, random.Random(1))
        assert state.phase == DrillPhase.OBSERVING
        assert len(state.pieces) == 4
        assert all(p.is_visible for p in state.pieces)

    def test_setup_resets_counters(self) -> None:
        state = _state_with_pieces()
        state.apply_move(state.pieces[0], A5, 10)
        state.register_strike(PieceType.KNIGHT)
        state.setup(Difficulty.INTERMEDIATE, random.Random(2), history_capacity=3)
        assert (state.score, state.strikes, state.correct_moves) == (0, 0, 0)
        assert len(state.history) == 0
        assert state.history.capacity == 3
        assert state.move_log == []
        assert state.disabled_kinds == set()
        assert len(state.pieces) == 3

    def test_hide_pieces(self) -> None:
        state = _state_with_pieces()
        state.hide_pieces()
        assert not any(p.is_visible for p in state.pieces)


class TestAnswers:
    def test_apply_move_relocates_piece(self) -> None:
        state = _state_with_pieces()
        record = state.apply_move(state.pieces[0], A5, 10)
        assert record.from_sq == A1
        assert record.to_sq == A5
        assert state.piece_by_id("p-0").square == A5  # type: ignore[union-attr]
        assert state.last_move == (A1, A5)
        assert state.history == ["p-0"]
        assert state.move_log == [record]

    def test_apply_move_scores_and_streaks(self) -> None:
        state = _state_with_pieces()
        state.apply_move(state.pieces[0], A5, 10)
        state.apply_move(state.pieces[0], A1, 10)
        assert state.score == 20
        assert state.correct_moves == 2
        assert state.current_streak == 2
        assert state.best_streak == 2

    def test_strike_resets_streak_and_disables_kind(self) -> None:
        state = _state_with_pieces()
        state.apply_move(state.pieces[0], A5, 10)
        assert state.register_strike(PieceType.KNIGHT) == 1
        assert state.current_streak == 0
        assert state.best_streak == 1
        assert state.disabled_kinds == {PieceType.KNIGHT}

    def test_correct_move_clears_disabled_kinds(self) -> None:
        state = _state_with_pieces()
        state.register_strike(PieceType.KNIGHT)
        state.apply_move(state.pieces[0], A5, 10)
        assert state.disabled_kinds == set()

    def test_accuracy(self) -> None:
        state = _state_with_pieces()
        assert state.accuracy == 0.0
        state.apply_move(state.pieces[0], A5, 10)
        state.register_strike(PieceType.KNIGHT)
        assert state.accuracy == 0.5

    def test_available_kinds_in_dealing_order(self) -> None:
        state = _state_with_pieces()
        assert state.available_kinds == [PieceType.ROOK, PieceType.KNIGHT]

    def test_finish(self) -> None:
        state = _state_with_pieces()
        state.hide_pieces()
        state.phase = DrillPhase.PLAYING
        state.paused = True
        state.finish(DrillEndReason.TIME_UP)
        assert state.is_over
        assert not state.paused
        assert state.end_reason == DrillEndReason.TIME_UP
        assert all(p.is_visible for p in state.pieces)
