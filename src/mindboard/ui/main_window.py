"""MainWindow — top-level window assembling the drill screens."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from mindboard.core.enums import PieceType
from mindboard.core.types import Square
from mindboard.game.controller import DrillController
from mindboard.game.interfaces import Difficulty, DrillEndReason, DrillPhase, DrillRules
from mindboard.game.state import DrillState, MoveRecord
from mindboard.ui.board.board_view import BoardView
from mindboard.ui.panels.hud_panel import HudPanel
from mindboard.ui.panels.piece_panel import PiecePanel
from mindboard.ui.settings import AppSettings, apply_settings
from mindboard.ui.sounds import SoundPlayer

_LOGGER = logging.getLogger(__name__)

_CORRECT_DELAY_MS = 500
_INCORRECT_DELAY_MS = 400
_CLOCK_REFRESH_MS = 250
_GO_BANNER_MS = 800

_END_REASON_TEXT: dict[DrillEndReason, str] = {
    DrillEndReason.NONE: "",
    DrillEndReason.TIME_UP: "Time is up.",
    DrillEndReason.STRIKES: "Out of strikes.",
    DrillEndReason.NO_TARGET: "No piece can reach an empty square.",
}


class MainWindow(QMainWindow):
    """Main application window for MindBoard.

    Args:
        rules: Drill parameters handed to the controller.
        rng: Random source, mostly for tests.
        sound_player: Injected player; a real one is created when omitted.
    """

    def __init__(
        self,
        rules: DrillRules | None = None,
        rng: random.Random | None = None,
        sound_player: SoundPlayer | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("MindBoard - Blindfold Chess Trainer")
        self.setMinimumSize(900, 680)
        self.resize(1100, 800)

        self._controller = DrillController(rules=rules, rng=rng)
        self._settings = AppSettings()
        self._sound_player = sound_player or SoundPlayer()
        self._processing = False  # input lock while answer feedback plays
        self._answer_token = 0  # invalidates delayed callbacks of old drills
        self._countdown: int | None = None

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(_CLOCK_REFRESH_MS)
        self._clock_timer.timeout.connect(self._on_clock_tick)

        self._countdown_timer = QTimer(self)
        self._countdown_timer.setInterval(1000)
        self._countdown_timer.timeout.connect(self._on_countdown_tick)

        self._setup_ui()
        self._setup_actions()
        self._connect_signals()
        self._connect_drill_events()
        apply_settings(self)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._start_page = self._build_start_page()
        self._drill_page = self._build_drill_page()
        self._over_page = self._build_game_over_page()
        for page in (self._start_page, self._drill_page, self._over_page):
            self._stack.addWidget(page)
        self._stack.setCurrentWidget(self._start_page)

    def _build_start_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(18)

        title = QLabel("Blindfold Chess Trainer - MindBoard")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("TRAIN YOUR BLINDFOLD CHESS THE RIGHT WAY")
        subtitle.setObjectName("caption")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(subtitle)
        layout.addSpacing(24)

        self._difficulty_buttons: dict[Difficulty, QPushButton] = {}
        for difficulty in Difficulty:
            btn = QPushButton(difficulty.label.upper())
            btn.setMinimumSize(320, 56)
            btn.clicked.connect(
                lambda _checked=False, d=difficulty: self.start_drill(d)
            )
            layout.addWidget(btn, alignment=Qt.AlignmentFlag.AlignCenter)
            self._difficulty_buttons[difficulty] = btn

        layout.addSpacing(24)
        quote = QLabel('"Vision is the art of seeing what is invisible to others."')
        quote.setAlignment(Qt.AlignmentFlag.AlignCenter)
        quote.setStyleSheet("font-style: italic;")
        layout.addWidget(quote)
        return page

    def _build_drill_page(self) -> QWidget:
        page = QWidget()
        root = QVBoxLayout(page)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        self._hud = HudPanel(self._controller.rules.max_strikes)
        root.addWidget(self._hud)

        self._banner = QLabel()
        self._banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._banner.setStyleSheet("font-size: 24px; font-style: italic;")
        root.addWidget(self._banner)

        row = QHBoxLayout()
        row.setSpacing(16)

        self._board_view = BoardView()
        row.addWidget(self._board_view, stretch=3)

        side = QVBoxLayout()
        side.setSpacing(10)

        self._btn_begin = QPushButton("START BLINDFOLD DRILL")
        self._btn_begin.setMinimumHeight(48)
        side.addWidget(self._btn_begin)

        self._piece_panel = PiecePanel()
        side.addWidget(self._piece_panel)

        self._pause_box = QWidget()
        pause_layout = QVBoxLayout(self._pause_box)
        pause_layout.setContentsMargins(0, 0, 0, 0)
        pause_title = QLabel("Session Paused")
        pause_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pause_title.setStyleSheet("font-size: 20px; font-style: italic;")
        pause_layout.addWidget(pause_title)
        self._btn_resume = QPushButton("Resume Game")
        self._btn_restart_paused = QPushButton("Restart Game")
        self._btn_home_paused = QPushButton("Exit to Home")
        for btn in (self._btn_resume, self._btn_restart_paused, self._btn_home_paused):
            pause_layout.addWidget(btn)
        self._pause_box.setVisible(False)
        side.addWidget(self._pause_box)
        side.addStretch(1)

        side_widget = QWidget()
        side_widget.setLayout(side)
        side_widget.setFixedWidth(220)
        row.addWidget(side_widget)

        root.addLayout(row, stretch=1)
        return page

    def _build_game_over_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(12)

        title = QLabel("Game Over")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._over_reason = QLabel()
        self._over_reason.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._over_reason)

        self._over_score = QLabel()
        self._over_score.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._over_score.setStyleSheet("font-size: 96px; font-weight: 900;")
        layout.addWidget(self._over_score)

        caption = QLabel("FINAL SCORE")
        caption.setObjectName("caption")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(caption)

        self._over_grade = QLabel()
        self._over_grade.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._over_grade.setStyleSheet("font-size: 22px; font-weight: bold;")
        layout.addWidget(self._over_grade)

        self._over_grade_desc = QLabel()
        self._over_grade_desc.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._over_grade_desc.setWordWrap(True)
        layout.addWidget(self._over_grade_desc)

        self._over_stats = QLabel()
        self._over_stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._over_stats)

        # Final position with every piece revealed
        self._over_board = BoardView()
        self._over_board.setMinimumSize(240, 240)
        layout.addWidget(self._over_board, alignment=Qt.AlignmentFlag.AlignCenter)

        buttons = QHBoxLayout()
        self._btn_restart_over = QPushButton("Restart Game")
        self._btn_home_over = QPushButton("Exit to Home")
        buttons.addWidget(self._btn_restart_over)
        buttons.addWidget(self._btn_home_over)
        layout.addLayout(buttons)
        return page

    def _setup_actions(self) -> None:
        self._act_fullscreen = QAction("Fullscreen", self)
        self._act_fullscreen.setShortcut("F11")
        self._act_fullscreen.triggered.connect(self.toggle_fullscreen)
        self.addAction(self._act_fullscreen)

        self._act_pause = QAction("Pause", self)
        self._act_pause.setShortcut("P")
        self._act_pause.triggered.connect(self.toggle_pause)
        self.addAction(self._act_pause)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._btn_begin.clicked.connect(self.begin_countdown)
        self._piece_panel.kind_selected.connect(self.select_kind)
        self._hud.pause_clicked.connect(self.toggle_pause)
        self._hud.mute_clicked.connect(self.toggle_mute)
        self._hud.fullscreen_clicked.connect(self.toggle_fullscreen)
        self._btn_resume.clicked.connect(self.toggle_pause)
        self._btn_restart_paused.clicked.connect(self.restart_drill)
        self._btn_home_paused.clicked.connect(self.go_home)
        self._btn_restart_over.clicked.connect(self.restart_drill)
        self._btn_home_over.clicked.connect(self.go_home)

    def _connect_drill_events(self) -> None:
        events = self._controller.events
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_target_changed.append(self._on_target_changed)
        events.on_move.append(self._on_drill_move)
        events.on_strike.append(self._on_strike)
        events.on_pause_changed.append(self._on_pause_changed)

    # ── Public actions ───────────────────────────────────────────────────

    @property
    def controller(self) -> DrillController:
        return self._controller

    def start_drill(self, difficulty: Difficulty) -> None:
        self._reset_transients()
        self._controller.new_drill(difficulty)

    def restart_drill(self) -> None:
        self._reset_transients()
        self._controller.restart()

    def go_home(self) -> None:
        self._reset_transients()
        self._controller.abandon()

    def begin_countdown(self) -> None:
        """Run the 3-2-1 lead-in, then hide the pieces and start the drill."""
        if self._controller.state.phase != DrillPhase.OBSERVING:
            return
        if self._countdown is not None:
            return
        self._btn_begin.setVisible(False)
        self._countdown = self._controller.rules.countdown_seconds
        if self._countdown <= 0:
            self._finish_countdown()
            return
        self._banner.setText(str(self._countdown))
        self._countdown_timer.start()

    def select_kind(self, kind: PieceType) -> None:
        """Handle a kind button: judge, give feedback, then apply."""
        if self._processing or not self._controller.is_kind_enabled(kind):
            return

        self._processing = True
        self._piece_panel.set_locked(True)
        token = self._answer_token

        if self._controller.find_mover(kind) is not None:
            self._sound_player.play_correct()
            self._piece_panel.show_feedback(kind, correct=True)
            QTimer.singleShot(
                _CORRECT_DELAY_MS, lambda: self._apply_correct(kind, token)
            )
            return

        self._sound_player.play_incorrect()
        self._piece_panel.show_feedback(kind, correct=False)
        self._controller.select_kind(kind)
        QTimer.singleShot(_INCORRECT_DELAY_MS, lambda: self._unlock_input(token))

    def toggle_pause(self) -> None:
        """Pause or resume. Ignored while an answer is still being applied."""
        if self._processing:
            return
        self._controller.toggle_pause()

    def toggle_mute(self) -> None:
        self._settings.sound_enabled = not self._settings.sound_enabled
        apply_settings(self)

    def toggle_fullscreen(self) -> None:
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()

    # ── Drill event handlers ─────────────────────────────────────────────

    def _on_phase_changed(self, phase: DrillPhase) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene

        if phase == DrillPhase.NOT_STARTED:
            self._clock_timer.stop()
            self._stack.setCurrentWidget(self._start_page)
            return

        if phase == DrillPhase.OBSERVING:
            self._clock_timer.stop()
            self._hud.reset(self._controller.clock.remaining())
            self._hud.set_pause_enabled(False)
            scene.set_pieces(state.pieces)
            scene.set_last_move(None)
            self._piece_panel.set_kinds(state.available_kinds)
            self._piece_panel.set_disabled_kinds(set())
            self._piece_panel.set_locked(True)
            self._piece_panel.clear_feedback()
            self._pause_box.setVisible(False)
            self._btn_begin.setVisible(True)
            self._banner.setText("Analyze piece positions carefully.")
            self._stack.setCurrentWidget(self._drill_page)
            return

        if phase == DrillPhase.PLAYING:
            scene.set_pieces(state.pieces)
            scene.set_last_move(None)
            self._hud.set_pause_enabled(True)
            self._piece_panel.set_kinds(state.available_kinds)
            self._piece_panel.set_locked(False)
            self._clock_timer.start()
            return

        if phase == DrillPhase.GAME_OVER:
            self._clock_timer.stop()
            self._reset_transients()
            self._show_game_over(state)

    def _on_target_changed(self, target: Square | None) -> None:
        if not self._controller.state.paused:
            self._board_view.board_scene.set_target(target)

    def _on_drill_move(self, record: MoveRecord, state: DrillState) -> None:
        scene = self._board_view.board_scene
        scene.set_pieces(state.pieces)
        scene.set_last_move((record.from_sq, record.to_sq))
        self._hud.update_score(state.score)
        self._piece_panel.set_disabled_kinds(state.disabled_kinds)

    def _on_strike(self, kind: PieceType, strikes: int) -> None:
        self._hud.update_strikes(strikes)
        self._piece_panel.set_disabled_kinds(self._controller.state.disabled_kinds)

    def _on_pause_changed(self, paused: bool) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene
        self._hud.set_paused(paused)
        self._pause_box.setVisible(paused)
        self._banner.setText("Analysis Suspended" if paused else "")
        scene.set_target(None if paused else state.target)
        scene.set_last_move(None if paused else state.last_move)
        self._piece_panel.set_locked(paused or self._processing)

    def _on_clock_tick(self) -> None:
        remaining = self._controller.tick()
        self._hud.update_time(remaining)

    def _on_countdown_tick(self) -> None:
        if self._countdown is None:
            self._countdown_timer.stop()
            return
        self._countdown -= 1
        if self._countdown > 0:
            self._banner.setText(str(self._countdown))
            return
        self._finish_countdown()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish_countdown(self) -> None:
        self._countdown_timer.stop()
        self._countdown = None
        if self._controller.begin_drill():
            self._sound_player.play_correct()
            self._banner.setText("GO!")
            token = self._answer_token
            QTimer.singleShot(_GO_BANNER_MS, lambda: self._clear_banner(token))

    def _apply_correct(self, kind: PieceType, token: int) -> None:
        if token != self._answer_token:
            return
        self._piece_panel.clear_feedback()
        self._controller.select_kind(kind)
        self._unlock_input(token)

    def _unlock_input(self, token: int) -> None:
        if token != self._answer_token:
            return
        self._processing = False
        self._piece_panel.clear_feedback()
        state = self._controller.state
        self._piece_panel.set_locked(not state.is_active)

    def _clear_banner(self, token: int) -> None:
        if token == self._answer_token and not self._controller.state.paused:
            self._banner.setText("")

    def _reset_transients(self) -> None:
        """Drop pending feedback, countdown and input locks."""
        self._answer_token += 1
        self._processing = False
        self._countdown = None
        self._countdown_timer.stop()
        self._piece_panel.clear_feedback()

    def _show_game_over(self, state: DrillState) -> None:
        grade = self._controller.grade()
        self._over_reason.setText(_END_REASON_TEXT[state.end_reason])
        self._over_score.setText(str(state.score))
        self._over_grade.setText(f"{grade.value} · {grade.label}")
        self._over_grade_desc.setText(grade.description)
        self._over_stats.setText(
            f"Correct moves: {state.correct_moves}    "
            f"Peak streak: {state.best_streak}"
        )
        over_scene = self._over_board.board_scene
        over_scene.set_pieces(state.pieces)
        over_scene.set_last_move(state.last_move)
        _LOGGER.info(
            "Drill finished: score=%d grade=%s reason=%s",
            state.score,
            grade.value,
            state.end_reason.name,
        )
        self._stack.setCurrentWidget(self._over_page)

    # ── Qt overrides ─────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._clock_timer.stop()
        self._countdown_timer.stop()
        self._controller.abandon()
        super().closeEvent(event)
