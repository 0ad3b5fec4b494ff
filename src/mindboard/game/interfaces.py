"""Abstract interfaces and value types for the drill layer.

The DrillController depends on these ABCs, not on the concrete clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

from mindboard.core.enums import PieceType
from mindboard.core.history import DEFAULT_HISTORY_CAPACITY

# ── Drill phase FSM states ───────────────────────────────────────────────────


class DrillPhase(IntEnum):
    """Finite-state-machine states for one drill."""

    NOT_STARTED = auto()
    OBSERVING = auto()  # pieces shown, player memorises the board
    PLAYING = auto()  # pieces hidden, targets being asked
    GAME_OVER = auto()


class DrillEndReason(IntEnum):
    NONE = 0
    TIME_UP = auto()
    STRIKES = auto()
    NO_TARGET = auto()


class Difficulty(IntEnum):
    """Drill difficulty; decides how many pieces are dealt."""

    EASY = auto()
    INTERMEDIATE = auto()
    HARD = auto()

    @property
    def piece_count(self) -> int:
        return _PIECE_COUNTS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_PIECE_COUNTS: dict[Difficulty, int] = {
    Difficulty.EASY: 2,
    Difficulty.INTERMEDIATE: 3,
    Difficulty.HARD: 4,
}

_LABELS: dict[Difficulty, str] = {
    Difficulty.EASY: "Easy",
    Difficulty.INTERMEDIATE: "Medium",
    Difficulty.HARD: "Hard",
}


# ── Drill rules presets ──────────────────────────────────────────────────────


class DrillRules:
    """Immutable drill parameters.

    Args:
        time_limit_seconds: Drill length; ``inf`` disables the clock.
        max_strikes: Wrong answers allowed before the drill ends.
        points_per_move: Score awarded per correct answer.
        history_capacity: Recent moves remembered for target weighting.
        countdown_seconds: Length of the "3, 2, 1" lead-in.
    """

    __slots__ = (
        "time_limit_seconds",
        "max_strikes",
        "points_per_move",
        "history_capacity",
        "countdown_seconds",
    )

    def __init__(
        self,
        time_limit_seconds: float = 120,
        max_strikes: int = 5,
        points_per_move: int = 10,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
        countdown_seconds: int = 3,
    ) -> None:
        if max_strikes < 1:
            raise ValueError(f"max_strikes must be positive: {max_strikes!r}")
        if history_capacity < 1:
            raise ValueError(
                f"history_capacity must be positive: {history_capacity!r}"
            )
        self.time_limit_seconds = time_limit_seconds
        self.max_strikes = max_strikes
        self.points_per_move = points_per_move
        self.history_capacity = history_capacity
        self.countdown_seconds = countdown_seconds

    # Common presets
    @classmethod
    def standard(cls) -> DrillRules:
        return cls()

    @classmethod
    def sprint_60s(cls) -> DrillRules:
        return cls(time_limit_seconds=60)

    @classmethod
    def unlimited(cls) -> DrillRules:
        """No time limit."""
        return cls(time_limit_seconds=float("inf"))

    def __repr__(self) -> str:
        return (
            f"DrillRules({self.time_limit_seconds:.0f}s, "
            f"strikes={self.max_strikes})"
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface for the drill countdown clock."""

    @abstractmethod
    def start(self) -> None:
        """Start (or resume) counting down."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the clock, keeping the remaining time."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left."""

    @abstractmethod
    def is_flag_fallen(self) -> bool:
        """Has the drill run out of time?"""


class IDrillController(ABC):
    """Interface for the drill orchestrator."""

    @abstractmethod
    def new_drill(self, difficulty: Difficulty) -> None:
        """Deal a fresh board and enter the observing phase."""

    @abstractmethod
    def begin_drill(self) -> bool:
        """Hide the pieces and ask the first target."""

    @abstractmethod
    def select_kind(self, kind: PieceType) -> bool:
        """Answer the current target with a piece kind. True if correct."""

    @abstractmethod
    def pause(self) -> bool:
        """Suspend a running drill."""

    @abstractmethod
    def resume(self) -> bool:
        """Resume a paused drill."""

    @abstractmethod
    def abandon(self) -> None:
        """Leave the drill and return to the start screen."""
