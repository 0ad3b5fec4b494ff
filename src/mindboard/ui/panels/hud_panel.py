"""HudPanel — score, time, strikes and drill control buttons."""

from __future__ import annotations

import math

from PyQt6.QtCore import Qt, pyqtBoundSignal, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from mindboard.ui.styles.theme import STRIKE_COLOR, TEXT_COLOR

_LOW_TIME_SECONDS = 15


def format_time(seconds: float) -> str:
    """Clock text, e.g. 75 → '1:15'. Infinite time shows '∞'."""
    if math.isinf(seconds):
        return "∞"
    s = max(0, math.ceil(seconds))
    return f"{s // 60}:{s % 60:02d}"


class _Stat(QWidget):
    """Caption above a large value."""

    def __init__(self, caption: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self._caption = QLabel(caption.upper())
        self._caption.setObjectName("caption")
        layout.addWidget(self._caption)

        self.value = QLabel()
        self.value.setFont(QFont("Adwaita Sans", 22, QFont.Weight.Black))
        layout.addWidget(self.value)


class HudPanel(QWidget):
    """Heads-up display shown above the board during a drill."""

    pause_clicked = pyqtSignal()
    mute_clicked = pyqtSignal()
    fullscreen_clicked = pyqtSignal()

    def __init__(self, max_strikes: int = 5, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._strike_marks: list[QFrame] = []
        self._setup_ui()
        self.set_max_strikes(max_strikes)
        self.reset(0.0)

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 10, 16, 10)
        layout.setSpacing(24)

        self._score = _Stat("Score")
        layout.addWidget(self._score)
        self._time = _Stat("Time")
        layout.addWidget(self._time)
        layout.addStretch(1)

        strikes_box = QVBoxLayout()
        strikes_caption = QLabel("STRIKES")
        strikes_caption.setObjectName("caption")
        strikes_caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        strikes_box.addWidget(strikes_caption)
        self._strikes_row = QHBoxLayout()
        self._strikes_row.setSpacing(6)
        strikes_box.addLayout(self._strikes_row)
        layout.addLayout(strikes_box)
        layout.addStretch(1)

        self._btn_pause = self._make_button("Pause", self.pause_clicked)
        layout.addWidget(self._btn_pause)
        self._btn_mute = self._make_button("Mute", self.mute_clicked)
        layout.addWidget(self._btn_mute)
        self._btn_fullscreen = self._make_button("Fullscreen", self.fullscreen_clicked)
        layout.addWidget(self._btn_fullscreen)

    def _make_button(self, text: str, signal: pyqtBoundSignal) -> QPushButton:
        btn = QPushButton(text)
        btn.setMinimumHeight(32)
        btn.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        btn.clicked.connect(signal)
        return btn

    # ── Public API ───────────────────────────────────────────────────────

    def set_max_strikes(self, max_strikes: int) -> None:
        for mark in self._strike_marks:
            self._strikes_row.removeWidget(mark)
            mark.deleteLater()
        self._strike_marks = []
        for _ in range(max_strikes):
            mark = QFrame()
            mark.setFixedSize(28, 8)
            self._strikes_row.addWidget(mark)
            self._strike_marks.append(mark)
        self.update_strikes(0)

    def update_score(self, score: int) -> None:
        self._score.value.setText(f"{score:04d}")

    def update_time(self, seconds: float) -> None:
        self._time.value.setText(format_time(seconds))
        color = STRIKE_COLOR if seconds < _LOW_TIME_SECONDS else TEXT_COLOR
        self._time.value.setStyleSheet(f"color: {color};")

    def update_strikes(self, strikes: int) -> None:
        for i, mark in enumerate(self._strike_marks):
            color = STRIKE_COLOR if i < strikes else "rgba(141, 92, 71, 40)"
            mark.setStyleSheet(f"background-color: {color}; border-radius: 2px;")

    def set_paused(self, paused: bool) -> None:
        self._btn_pause.setText("Resume" if paused else "Pause")

    def set_muted(self, muted: bool) -> None:
        self._btn_mute.setText("Unmute" if muted else "Mute")

    def set_pause_enabled(self, enabled: bool) -> None:
        self._btn_pause.setEnabled(enabled)

    def reset(self, seconds: float) -> None:
        self.update_score(0)
        self.update_time(seconds)
        self.update_strikes(0)
        self.set_paused(False)

    @property
    def score_text(self) -> str:
        return self._score.value.text()

    @property
    def time_text(self) -> str:
        return self._time.value.text()

    @property
    def strike_marks(self) -> list[QFrame]:
        return list(self._strike_marks)
