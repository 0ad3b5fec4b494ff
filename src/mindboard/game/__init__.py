"""Drill management layer — controller, clock, state machine, grading.

Quick start::

    from mindboard.core import PieceType
    from mindboard.game import Difficulty, DrillController

    ctrl = DrillController()
    ctrl.new_drill(Difficulty.INTERMEDIATE)
    ctrl.begin_drill()
    ctrl.select_kind(PieceType.KNIGHT)
"""

from mindboard.game.clock import DrillClock
from mindboard.game.controller import DrillController, DrillEvents
from mindboard.game.grading import Grade, grade_drill
from mindboard.game.interfaces import (
    Difficulty,
    DrillEndReason,
    DrillPhase,
    DrillRules,
    IClock,
    IDrillController,
)
from mindboard.game.state import DrillState, MoveRecord

__all__ = [
    # Interfaces
    "Difficulty",
    "DrillEndReason",
    "DrillPhase",
    "DrillRules",
    "IClock",
    "IDrillController",
    # Concrete
    "DrillClock",
    "DrillController",
    "DrillEvents",
    "DrillState",
    "Grade",
    "MoveRecord",
    "grade_drill",
]
