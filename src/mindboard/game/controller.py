"""DrillController — the central orchestrator of a visualization drill.

Coordinates: DrillState, DrillClock, the move generator and the target
selector. Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from mindboard.core.enums import PieceType
from mindboard.core.move_generator import find_mover
from mindboard.core.piece import Piece
from mindboard.core.selector import NO_TARGET, next_target
from mindboard.core.types import Square, square_name
from mindboard.game.clock import DrillClock
from mindboard.game.grading import Grade, grade_drill
from mindboard.game.interfaces import (
    Difficulty,
    DrillEndReason,
    DrillPhase,
    DrillRules,
    IDrillController,
)
from mindboard.game.state import DrillState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

PhaseCallback = Callable[[DrillPhase], None]
TargetCallback = Callable[[Square | None], None]
MoveCallback = Callable[[MoveRecord, DrillState], None]
StrikeCallback = Callable[[PieceType, int], None]  # kind, strikes so far
DrillOverCallback = Callable[[DrillEndReason], None]
PauseCallback = Callable[[bool], None]


@dataclass
class DrillEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_target_changed: list[TargetCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_strike: list[StrikeCallback] = field(default_factory=list)
    on_drill_over: list[DrillOverCallback] = field(default_factory=list)
    on_pause_changed: list[PauseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class DrillController(IDrillController):
    """Runs a drill: deals pieces, asks targets, judges answers, keeps time.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread); Qt timers drive ``tick`` and the countdown.

    Args:
        rules: Drill parameters; ``DrillRules.standard()`` when omitted.
        rng: Random source for dealing and target draws. Pass a seeded
            ``random.Random`` for reproducible drills.
    """

    __slots__ = ("_state", "_rules", "_rng", "_clock", "events")

    def __init__(
        self,
        rules: DrillRules | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._rules = rules or DrillRules.standard()
        self._rng = rng or random.Random()
        self._state = DrillState()
        self._clock = DrillClock(self._rules.time_limit_seconds)
        self.events = DrillEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> DrillState:
        return self._state

    @property
    def rules(self) -> DrillRules:
        return self._rules

    @property
    def clock(self) -> DrillClock:
        return self._clock

    def set_rules(self, rules: DrillRules) -> None:
        """Use *rules* from the next drill on."""
        self._rules = rules

    # ── IDrillController impl ────────────────────────────────────────────

    def new_drill(self, difficulty: Difficulty) -> None:
        self._clock = DrillClock(self._rules.time_limit_seconds)
        self._state.setup(difficulty, self._rng, self._rules.history_capacity)
        _LOGGER.debug(
            "New %s drill: %s",
            difficulty.name,
            ", ".join(
                f"{p.piece_type.name}@{square_name(p.square)}"
                for p in self._state.pieces
            ),
        )
        self._emit_phase(DrillPhase.OBSERVING)
        self._emit_target(None)

    def begin_drill(self) -> bool:
        if self._state.phase != DrillPhase.OBSERVING:
            return False

        self._state.hide_pieces()
        self._state.phase = DrillPhase.PLAYING
        self._state.last_move = None
        self._emit_phase(DrillPhase.PLAYING)

        if not self._ask_next_target():
            return True
        self._clock.start()
        return True

    def find_mover(self, kind: PieceType) -> Piece | None:
        """The piece that would answer the current target for *kind*."""
        target = self._state.target
        if target is None:
            return None
        return find_mover(kind, target, self._state.pieces)

    def is_kind_enabled(self, kind: PieceType) -> bool:
        """Can the player answer with *kind* right now?"""
        return (
            self._state.is_active
            and self._state.target is not None
            and kind in self._state.available_kinds
            and kind not in self._state.disabled_kinds
        )

    def select_kind(self, kind: PieceType) -> bool:
        if not self.is_kind_enabled(kind):
            return False
        if self._clock.is_flag_fallen():
            self._finish(DrillEndReason.TIME_UP)
            return False

        target = self._state.target
        assert target is not None
        mover = find_mover(kind, target, self._state.pieces)

        if mover is None:
            strikes = self._state.register_strike(kind)
            _LOGGER.debug(
                "Strike %d/%d: %s cannot reach %s",
                strikes,
                self._rules.max_strikes,
                kind.name,
                square_name(target),
            )
            self._emit_strike(kind, strikes)
            if strikes >= self._rules.max_strikes:
                self._finish(DrillEndReason.STRIKES)
            return False

        record = self._state.apply_move(mover, target, self._rules.points_per_move)
        _LOGGER.debug(
            "%s %s: %s -> %s",
            mover.id,
            mover.piece_type.name,
            square_name(record.from_sq),
            square_name(record.to_sq),
        )
        self._emit_move(record)
        self._ask_next_target()
        return True

    def pause(self) -> bool:
        if not self._state.is_active:
            return False
        self._clock.stop()
        self._state.paused = True
        self._emit_pause(True)
        return True

    def resume(self) -> bool:
        if self._state.phase != DrillPhase.PLAYING or not self._state.paused:
            return False
        self._state.paused = False
        self._clock.start()
        self._emit_pause(False)
        return True

    def toggle_pause(self) -> bool:
        """Pause or resume. Returns True if the state changed."""
        if self._state.paused:
            return self.resume()
        return self.pause()

    def abandon(self) -> None:
        self._clock.stop()
        self._state.paused = False
        self._state.phase = DrillPhase.NOT_STARTED
        self._emit_phase(DrillPhase.NOT_STARTED)

    # ── Extra operations ─────────────────────────────────────────────────

    def restart(self) -> None:
        """Deal a new drill at the current difficulty."""
        self._clock.stop()
        self.new_drill(self._state.difficulty)

    def tick(self) -> float:
        """Heartbeat from the UI timer. Ends the drill when time runs out.

        Returns the seconds left.
        """
        remaining = self._clock.remaining()
        if self._state.phase == DrillPhase.PLAYING and self._clock.is_flag_fallen():
            self._finish(DrillEndReason.TIME_UP)
        return remaining

    def grade(self) -> Grade:
        s = self._state
        return grade_drill(s.score, s.correct_moves, s.strikes)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _ask_next_target(self) -> bool:
        """Pick and publish the next target. False if the drill had to end."""
        target = next_target(
            self._state.pieces,
            self._state.history,
            capacity=self._rules.history_capacity,
            rng=self._rng,
        )
        self._state.target = target
        self._emit_target(target)
        if target is NO_TARGET:
            _LOGGER.info("No reachable empty square left; ending drill")
            self._finish(DrillEndReason.NO_TARGET)
            return False
        return True

    def _finish(self, reason: DrillEndReason) -> None:
        self._clock.stop()
        self._state.finish(reason)
        _LOGGER.debug(
            "Drill over (%s): score=%d strikes=%d",
            reason.name,
            self._state.score,
            self._state.strikes,
        )
        self._emit_phase(DrillPhase.GAME_OVER)
        for cb in self.events.on_drill_over:
            cb(reason)

    def _emit_phase(self, phase: DrillPhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_target(self, target: Square | None) -> None:
        for cb in self.events.on_target_changed:
            cb(target)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_strike(self, kind: PieceType, strikes: int) -> None:
        for cb in self.events.on_strike:
            cb(kind, strikes)

    def _emit_pause(self, paused: bool) -> None:
        for cb in self.events.on_pause_changed:
            cb(paused)
