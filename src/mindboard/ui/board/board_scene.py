"""BoardScene — QGraphicsScene that draws the drill board."""

from __future__ import annotations

import math

from PyQt6.QtCore import QLineF, QObject, QPointF, Qt, QVariantAnimation
from PyQt6.QtGui import QBrush, QColor, QFont, QPen, QPolygonF
from PyQt6.QtWidgets import (
    QGraphicsLineItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from mindboard.core.piece import Piece
from mindboard.core.types import Square, col_of, row_of
from mindboard.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, visible pieces, the target and the
    last-move arrow. Purely a view: it never decides anything.
    """

    TILE = 80  # px per square

    _PULSE_MS = 1600
    _ARROW_HEAD = 14.0

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._pieces: list[Piece] = []
        self._target: Square | None = None
        self._last_move: tuple[Square, Square] | None = None
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._target_item: QGraphicsRectItem | None = None
        self._arrow_items: list[QGraphicsLineItem | QGraphicsPolygonItem] = []

        self._pulse = QVariantAnimation(self)
        self._pulse.setStartValue(1.0)
        self._pulse.setKeyValueAt(0.5, 0.35)
        self._pulse.setEndValue(1.0)
        self._pulse.setDuration(self._PULSE_MS)
        self._pulse.setLoopCount(-1)
        self._pulse.valueChanged.connect(self._on_pulse)

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_pieces(self, pieces: list[Piece]) -> None:
        """Show *pieces*; hidden pieces are not drawn."""
        self._pieces = list(pieces)
        self._sync_pieces()

    def set_target(self, target: Square | None) -> None:
        """Highlight the square the player has to find."""
        self._target = target
        self._sync_target()

    def set_last_move(self, move: tuple[Square, Square] | None) -> None:
        """Draw an arrow for the last answered move (or clear it)."""
        self._last_move = move
        self._sync_arrow()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()
        self._sync_target()
        self._sync_arrow()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    @property
    def target(self) -> Square | None:
        return self._target

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in range(64):
            row, col = row_of(sq), col_of(sq)
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_light if is_light else self._theme.coord_dark

            # Rank numbers (left edge)
            if col == 0:
                self._add_coord(str(8 - row), font, text_color, col * t + 2, row * t + 1)

            # File letters (bottom edge)
            if row == 7:
                letter = chr(ord("a") + col)
                self._add_coord(letter, font, text_color, col * t + t - 12, row * t + t - 16)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Layer synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create glyphs for every visible piece."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for piece in self._pieces:
            if not piece.is_visible:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece))
            item.setPen(QPen(QColor(0, 0, 0, 140), 1.2))
            bounds = item.boundingRect()
            center = self._square_center(piece.square)
            item.setPos(
                center.x() - bounds.width() / 2, center.y() - bounds.height() / 2
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[piece.square] = item

    def _sync_target(self) -> None:
        self._pulse.stop()
        if self._target_item is not None:
            self.removeItem(self._target_item)
            self._target_item = None
        if self._target is None:
            return

        rect = self._make_square_rect(self._target)
        rect.setBrush(QBrush(self._theme.target_fill))
        rect.setPen(QPen(self._theme.target_border, 4))
        rect.setZValue(0.8)
        self._target_item = rect
        self._pulse.start()

    def _sync_arrow(self) -> None:
        for item in self._arrow_items:
            self.removeItem(item)
        self._arrow_items.clear()
        if self._last_move is None:
            return

        start = self._square_center(self._last_move[0])
        end = self._square_center(self._last_move[1])
        color = self._theme.move_arrow

        pen = QPen(color, 4)
        pen.setStyle(Qt.PenStyle.DotLine)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        line = QGraphicsLineItem(QLineF(start, end))
        line.setPen(pen)
        line.setZValue(2)
        self.addItem(line)
        self._arrow_items.append(line)

        angle = math.atan2(end.y() - start.y(), end.x() - start.x())
        size = self._ARROW_HEAD
        head = QPolygonF(
            [
                end,
                QPointF(
                    end.x() - size * math.cos(angle - math.pi / 6),
                    end.y() - size * math.sin(angle - math.pi / 6),
                ),
                QPointF(
                    end.x() - size * math.cos(angle + math.pi / 6),
                    end.y() - size * math.sin(angle + math.pi / 6),
                ),
            ]
        )
        head_item = QGraphicsPolygonItem(head)
        head_item.setBrush(QBrush(color))
        head_item.setPen(QPen(Qt.PenStyle.NoPen))
        head_item.setZValue(2)
        self.addItem(head_item)
        self._arrow_items.append(head_item)

    def _on_pulse(self, value: object) -> None:
        if self._target_item is not None and isinstance(value, float):
            self._target_item.setOpacity(value)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _square_center(self, sq: Square) -> QPointF:
        t = self.TILE
        return QPointF(col_of(sq) * t + t / 2, row_of(sq) * t + t / 2)

    def _make_square_rect(self, sq: Square) -> QGraphicsRectItem:
        """Create an overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(col_of(sq) * t, row_of(sq) * t, t, t)
        self.addItem(rect)
        return rect
