"""Drill state machine — tracks phase, board, score and move history."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from mindboard.core.enums import PieceType
from mindboard.core.history import DEFAULT_HISTORY_CAPACITY, MoveHistory
from mindboard.core.piece import Piece
from mindboard.core.selector import generate_pieces
from mindboard.core.types import Square
from mindboard.game.interfaces import Difficulty, DrillEndReason, DrillPhase


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single correct answer: which piece went where."""

    piece_id: str
    piece_type: PieceType
    from_sq: Square
    to_sq: Square


@dataclass
class DrillState:
    """Manages one drill: phase, pieces, target, score, strikes, history.

    This is a pure data/logic class — no timers, no UI.
    """

    phase: DrillPhase = field(default=DrillPhase.NOT_STARTED, init=False)
    difficulty: Difficulty = field(default=Difficulty.EASY, init=False)
    pieces: list[Piece] = field(default_factory=list, init=False)
    target: Square | None = field(default=None, init=False)
    score: int = field(default=0, init=False)
    strikes: int = field(default=0, init=False)
    correct_moves: int = field(default=0, init=False)
    current_streak: int = field(default=0, init=False)
    best_streak: int = field(default=0, init=False)
    history: MoveHistory = field(default_factory=MoveHistory, init=False)
    last_move: tuple[Square, Square] | None = field(default=None, init=False)
    disabled_kinds: set[PieceType] = field(default_factory=set, init=False)
    paused: bool = field(default=False, init=False)
    end_reason: DrillEndReason = field(default=DrillEndReason.NONE, init=False)
    move_log: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        difficulty: Difficulty,
        rng: random.Random,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
    ) -> None:
        """Deal a fresh board and reset every counter."""
        self.difficulty = difficulty
        self.pieces = generate_pieces(difficulty.piece_count, rng)
        self.phase = DrillPhase.OBSERVING
        self.target = None
        self.score = 0
        self.strikes = 0
        self.correct_moves = 0
        self.current_streak = 0
        self.best_streak = 0
        self.history = MoveHistory(capacity=history_capacity)
        self.last_move = None
        self.disabled_kinds = set()
        self.paused = False
        self.end_reason = DrillEndReason.NONE
        self.move_log = []

    def hide_pieces(self) -> None:
        self.pieces = [p.hidden() for p in self.pieces]

    # ── Answers ──────────────────────────────────────────────────────────

    def apply_move(self, piece: Piece, to_sq: Square, points: int) -> MoveRecord:
        """Move *piece* to *to_sq* after a correct answer.

        Caller is responsible for the reachability check.
        """
        record = MoveRecord(
            piece_id=piece.id,
            piece_type=piece.piece_type,
            from_sq=piece.square,
            to_sq=to_sq,
        )
        self.pieces = [
            p.moved_to(to_sq) if p.id == piece.id else p for p in self.pieces
        ]
        self.history.append(piece.id)
        self.move_log.append(record)
        self.last_move = (record.from_sq, record.to_sq)

        self.score += points
        self.correct_moves += 1
        self.current_streak += 1
        self.best_streak = max(self.best_streak, self.current_streak)
        self.disabled_kinds.clear()
        return record

    def register_strike(self, kind: PieceType) -> int:
        """Count a wrong answer; *kind* stays disabled until the next hit."""
        self.strikes += 1
        self.current_streak = 0
        self.disabled_kinds.add(kind)
        return self.strikes

    def finish(self, reason: DrillEndReason) -> None:
        """End the drill and reveal the final position."""
        self.pieces = [p.shown() for p in self.pieces]
        self.phase = DrillPhase.GAME_OVER
        self.end_reason = reason
        self.paused = False

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_over(self) -> bool:
        return self.phase == DrillPhase.GAME_OVER

    @property
    def is_active(self) -> bool:
        """Playing and not paused."""
        return self.phase == DrillPhase.PLAYING and not self.paused

    @property
    def accuracy(self) -> float:
        attempts = self.correct_moves + self.strikes
        return self.correct_moves / (attempts or 1)

    @property
    def available_kinds(self) -> list[PieceType]:
        """Distinct kinds on the board, in dealing order."""
        kinds: list[PieceType] = []
        for piece in self.pieces:
            if piece.piece_type not in kinds:
                kinds.append(piece.piece_type)
        return kinds

    def piece_by_id(self, piece_id: str) -> Piece | None:
        for piece in self.pieces:
            if piece.id == piece_id:
                return piece
        return None
