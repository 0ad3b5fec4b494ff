"""PiecePanel — one answer button per piece kind in the drill."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from mindboard.core.enums import DRILL_KINDS, PieceType
from mindboard.core.piece import piece_symbol
from mindboard.ui.styles.theme import CORRECT_COLOR, STRIKE_COLOR


class PiecePanel(QWidget):
    """Answer buttons. The player names a piece *kind*, never a square.

    Signals:
        kind_selected(PieceType): A kind button was clicked.
    """

    kind_selected = pyqtSignal(PieceType)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._buttons: dict[PieceType, QPushButton] = {}
        self._kinds: list[PieceType] = []
        self._disabled: set[PieceType] = set()
        self._locked = True
        self._feedback: PieceType | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        for kind in DRILL_KINDS:
            btn = QPushButton(f"{piece_symbol(kind)}\n{kind.name}")
            btn.setFont(QFont("DejaVu Sans", 12, QFont.Weight.Bold))
            btn.setMinimumSize(112, 96)
            btn.clicked.connect(lambda _checked=False, k=kind: self._on_clicked(k))
            btn.setVisible(False)
            layout.addWidget(btn)
            self._buttons[kind] = btn
        layout.addStretch(1)

    # ── Public API ───────────────────────────────────────────────────────

    def set_kinds(self, kinds: list[PieceType]) -> None:
        """Show buttons only for kinds present in the drill."""
        self._kinds = [k for k in DRILL_KINDS if k in kinds]
        for kind, btn in self._buttons.items():
            btn.setVisible(kind in self._kinds)
        self._refresh()

    def set_disabled_kinds(self, kinds: set[PieceType]) -> None:
        self._disabled = set(kinds)
        self._refresh()

    def set_locked(self, locked: bool) -> None:
        """Lock every button (observing, paused or while feedback plays)."""
        self._locked = locked
        self._refresh()

    def show_feedback(self, kind: PieceType, correct: bool) -> None:
        """Flash CORRECT / FAILED on *kind*'s button."""
        self.clear_feedback()
        btn = self._buttons[kind]
        color = CORRECT_COLOR if correct else STRIKE_COLOR
        btn.setText("CORRECT" if correct else "FAILED")
        btn.setStyleSheet(f"QPushButton {{ color: {color}; border: 2px solid {color}; }}")
        self._feedback = kind

    def clear_feedback(self) -> None:
        if self._feedback is None:
            return
        btn = self._buttons[self._feedback]
        btn.setText(f"{piece_symbol(self._feedback)}\n{self._feedback.name}")
        btn.setStyleSheet("")
        self._feedback = None

    def button(self, kind: PieceType) -> QPushButton:
        return self._buttons[kind]

    @property
    def kinds(self) -> list[PieceType]:
        return list(self._kinds)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _refresh(self) -> None:
        for kind, btn in self._buttons.items():
            btn.setEnabled(not self._locked and kind not in self._disabled)

    def _on_clicked(self, kind: PieceType) -> None:
        if self._locked or kind in self._disabled:
            return
        self.kind_selected.emit(kind)
