"""Post-drill grading."""

from __future__ import annotations

from enum import StrEnum


class Grade(StrEnum):
    """Letter grade shown on the game-over screen."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def label(self) -> str:
        return _GRADE_LABEL[self]

    @property
    def description(self) -> str:
        return _GRADE_DESCRIPTION[self]


_GRADE_LABEL: dict[Grade, str] = {
    Grade.S: "Grandmaster Sight",
    Grade.A: "Masterful Control",
    Grade.B: "Tactical Competence",
    Grade.C: "Developing Vision",
    Grade.D: "Vision Under Review",
}

_GRADE_DESCRIPTION: dict[Grade, str] = {
    Grade.S: (
        "Flawless board tracking. Your visualization capacity exceeds "
        "standard academy metrics."
    ),
    Grade.A: (
        "High accuracy and speed. You possess a strong mental grasp of "
        "board dynamics."
    ),
    Grade.B: (
        "Solid performance. Continue drilling to reduce tracking errors "
        "under time pressure."
    ),
    Grade.C: (
        "Basic visualization established. Focus on identifying piece paths "
        "more consistently."
    ),
    Grade.D: (
        "Concentrate on static board memory before attempting rapid "
        "sequence tracking."
    ),
}


def grade_drill(score: int, correct_moves: int, strikes: int) -> Grade:
    """Grade a finished drill by score and answer accuracy."""
    accuracy = correct_moves / ((correct_moves + strikes) or 1)
    if score >= 200 and accuracy >= 0.9:
        return Grade.S
    if score >= 150 and accuracy >= 0.8:
        return Grade.A
    if score >= 80:
        return Grade.B
    if score >= 40:
        return Grade.C
    return Grade.D
