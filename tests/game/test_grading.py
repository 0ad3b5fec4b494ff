"""Tests for post-drill grading."""

import pytest

from mindboard.game.grading import Grade, grade_drill


class TestGradeDrill:
    @pytest.mark.parametrize(
        ("score", "correct", "strikes", "expected"),
        [
            (200, 20, 0, Grade.S),
            (200, 20, 3, Grade.A),  # accuracy 0.87
            (150, 15, 3, Grade.A),
            (150, 15, 5, Grade.B),  # accuracy 0.75
            (80, 8, 5, Grade.B),
            (40, 4, 5, Grade.C),
            (30, 3, 0, Grade.D),
            (0, 0, 0, Grade.D),
        ],
    )
    def test_thresholds(
        self, score: int, correct: int, strikes: int, expected: Grade
    ) -> None:
        assert grade_drill(score, correct, strikes) == expected

    def test_every_grade_has_text(self) -> None:
        for grade in Grade:
            assert grade.label
            assert grade.description
