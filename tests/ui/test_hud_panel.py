"""Tests for HudPanel and clock formatting."""

from __future__ import annotations

import pytest

from mindboard.ui.panels.hud_panel import HudPanel, format_time


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (120, "2:00"),
        (75, "1:15"),
        (9.2, "0:10"),
        (0.2, "0:01"),
        (0, "0:00"),
        (-3, "0:00"),
        (float("inf"), "∞"),
    ],
)
def test_format_time(seconds: float, expected: str) -> None:
    assert format_time(seconds) == expected


class TestHudPanel:
    def test_initial_values(self) -> None:
        hud = HudPanel()
        assert hud.score_text == "0000"
        assert hud.time_text == "0:00"
        assert len(hud.strike_marks) == 5

    def test_update_score_and_time(self) -> None:
        hud = HudPanel()
        hud.update_score(40)
        hud.update_time(95)
        assert hud.score_text == "0040"
        assert hud.time_text == "1:35"

    def test_set_max_strikes_rebuilds_marks(self) -> None:
        hud = HudPanel()
        hud.set_max_strikes(3)
        assert len(hud.strike_marks) == 3

    def test_strikes_are_coloured(self) -> None:
        hud = HudPanel()
        hud.update_strikes(2)
        sheets = [mark.styleSheet() for mark in hud.strike_marks]
        assert sheets[0] == sheets[1]
        assert sheets[1] != sheets[2]

    def test_pause_and_mute_labels(self) -> None:
        hud = HudPanel()
        hud.set_paused(True)
        hud.set_muted(True)
        assert hud._btn_pause.text() == "Resume"
        assert hud._btn_mute.text() == "Unmute"

        hud.reset(120)
        assert hud._btn_pause.text() == "Pause"
        assert hud.time_text == "2:00"

    def test_buttons_emit_signals(self) -> None:
        hud = HudPanel()
        clicks: list[str] = []
        hud.pause_clicked.connect(lambda: clicks.append("pause"))
        hud.mute_clicked.connect(lambda: clicks.append("mute"))
        hud.fullscreen_clicked.connect(lambda: clicks.append("fullscreen"))

        hud._btn_pause.click()
        hud._btn_mute.click()
        hud._btn_fullscreen.click()

        assert clicks == ["pause", "mute", "fullscreen"]
