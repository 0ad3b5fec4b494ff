"""Visual theme constants and QSS styles for MindBoard."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the drill board."""

    light_square: QColor
    dark_square: QColor
    target_fill: QColor  # square the player must find
    target_border: QColor
    move_arrow: QColor  # last answered move
    piece: QColor
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(232, 213, 183),  # parchment
            dark_square=QColor(141, 92, 71),  # mahogany
            target_fill=QColor(255, 255, 255, 26),
            target_border=QColor(255, 255, 255, 153),
            move_arrow=QColor(255, 255, 255, 204),
            piece=QColor(250, 246, 238),
            coord_light=QColor(141, 92, 71),
            coord_dark=QColor(232, 213, 183),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            target_fill=QColor(255, 255, 255, 26),
            target_border=QColor(255, 255, 255, 153),
            move_arrow=QColor(255, 255, 255, 204),
            piece=QColor(250, 250, 250),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            target_fill=QColor(255, 255, 255, 26),
            target_border=QColor(255, 255, 255, 153),
            move_arrow=QColor(255, 255, 255, 204),
            piece=QColor(250, 246, 238),
            coord_light=QColor(118, 74, 47),
            coord_dark=QColor(228, 210, 184),
        )


BOARD_THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Slate": BoardTheme.slate(),
    "Walnut": BoardTheme.walnut(),
}

STRIKE_COLOR = "#b91c1c"
CORRECT_COLOR = "#15803d"
TEXT_COLOR = "#551e19"

# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #f4ece1;
}

QLabel {
    color: #551e19;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#title {
    font-size: 34px;
    font-weight: bold;
}

QLabel#caption {
    font-size: 10px;
    font-weight: bold;
    letter-spacing: 3px;
}

QPushButton {
    background: #fbf7f0;
    color: #551e19;
    border: 1px solid #d9c7b3;
    border-radius: 4px;
    padding: 8px 18px;
    font-size: 13px;
    font-weight: bold;
}
QPushButton:hover {
    background: #ffffff;
}
QPushButton:pressed {
    background: #eadccb;
}
QPushButton:disabled {
    color: #b8a596;
    background: #efe6da;
}
"""
