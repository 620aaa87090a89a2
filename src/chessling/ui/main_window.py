"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from chessling.engine.search import Difficulty
from chessling.game.controller import GameController
from chessling.game.session import GameOverInfo
from chessling.i18n import set_language, t
from chessling.settings import AppSettings
from chessling.ui.board.board_view import BoardView
from chessling.ui.game_sync import GameSync
from chessling.ui.panels.captured_panel import CapturedPanel
from chessling.ui.panels.coach_panel import CoachPanel
from chessling.ui.panels.control_panel import ControlPanel
from chessling.ui.panels.move_panel import MovePanel
from chessling.ui.panels.progress_panel import ProgressPanel
from chessling.ui.scheduler import QtScheduler
from chessling.ui.sounds import SoundPlayer
from chessling.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Chessling."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        controller: GameController | None = None,
        show_dialogs: bool = True,
    ) -> None:
        super().__init__()
        self.setMinimumSize(900, 640)
        self.resize(1120, 760)

        self._settings = settings or AppSettings()
        self._show_dialogs = show_dialogs
        self._scheduler = QtScheduler(self)
        self._controller = controller or GameController(
            scheduler=self._scheduler,
            think_delay_ms=self._settings.think_delay_ms,
        )
        self._sound_player = SoundPlayer()

        self._setup_ui()
        self._sync = GameSync(
            controller=self._controller,
            board_scene=self._board_view.board_scene,
            move_panel=self._move_panel,
            coach_panel=self._coach_panel,
            progress_panel=self._progress_panel,
            captured_panel=self._captured_panel,
            sound_player=self._sound_player,
            show_game_over_dialog=self._show_game_over_dialog,
        )
        self._sync.connect()
        self._connect_signals()

        self.apply_settings(self._settings)
        self._controller.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        # Left: coach and progress
        left = QVBoxLayout()
        left.setSpacing(8)
        self._coach_panel = CoachPanel()
        left.addWidget(self._coach_panel)
        self._progress_panel = ProgressPanel()
        left.addWidget(self._progress_panel)
        self._captured_panel = CapturedPanel()
        left.addWidget(self._captured_panel)
        left.addStretch(1)

        left_widget = QWidget()
        left_widget.setLayout(left)
        left_widget.setFixedWidth(260)
        root.addWidget(left_widget)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right: moves and controls
        right = QVBoxLayout()
        right.setSpacing(8)
        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)
        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

    def _connect_signals(self) -> None:
        self._board_view.move_attempted.connect(self._on_move_attempted)
        self._board_view.square_selected.connect(self._on_square_selected)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.difficulty_changed.connect(self._on_difficulty_changed)
        self._control_panel.theme_changed.connect(self._on_theme_changed)
        self._control_panel.sound_toggled.connect(self._on_sound_toggled)
        self._control_panel.language_changed.connect(self._on_language_changed)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def coach_panel(self) -> CoachPanel:
        return self._coach_panel

    @property
    def progress_panel(self) -> ProgressPanel:
        return self._progress_panel

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    @property
    def captured_panel(self) -> CapturedPanel:
        return self._captured_panel

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self, settings: AppSettings) -> None:
        """Push *settings* into the controller, board, sound and texts."""
        self._settings = settings
        set_language(settings.language)
        self._controller.set_difficulty(settings.difficulty)

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(settings.board_theme))
        scene.set_show_legal_moves(settings.show_legal_moves)
        self._sync.set_learning_mode(settings.learning_mode)

        self._sound_player.set_enabled(settings.sound_enabled)
        self._sound_player.set_volume(settings.sound_volume)

        self._control_panel.set_values(
            difficulty=settings.difficulty,
            theme=settings.board_theme,
            sound=settings.sound_enabled,
            language=settings.language,
        )
        self._retranslate_ui()

    def _retranslate_ui(self) -> None:
        self.setWindowTitle(t().app_title)
        self._coach_panel.retranslate_ui()
        self._progress_panel.retranslate_ui()
        self._captured_panel.retranslate_ui()
        self._move_panel.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._sync.update_turn_indicator()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_attempted(self, from_sq: int, to_sq: int) -> None:
        self._controller.submit_human_move(from_sq, to_sq)

    def _on_square_selected(self, square: int) -> None:
        if self._controller.is_human_turn:
            self._controller.select_square(square)

    def _on_new_game(self) -> None:
        self._scheduler.stop_all()
        self._controller.new_game()

    def _on_difficulty_changed(self, value: int) -> None:
        self._settings.difficulty = Difficulty(value)
        self._controller.set_difficulty(self._settings.difficulty)
        _LOGGER.debug("Difficulty set to %s", self._settings.difficulty.label)

    def _on_theme_changed(self, name: str) -> None:
        self._settings.board_theme = name
        self._board_view.board_scene.set_theme(BoardTheme.by_name(name))

    def _on_sound_toggled(self, enabled: bool) -> None:
        self._settings.sound_enabled = enabled
        self._sound_player.set_enabled(enabled)

    def _on_language_changed(self, language: str) -> None:
        self._settings.language = language
        set_language(language)
        self._retranslate_ui()

    # ── Game over ────────────────────────────────────────────────────────

    def _show_game_over_dialog(self, info: GameOverInfo) -> None:
        if self._show_dialogs:
            # Open after the controller has finished emitting events
            QTimer.singleShot(0, lambda: self._ask_play_again(info))

    def _ask_play_again(self, info: GameOverInfo) -> None:
        if self._controller.game_over is not info:
            return  # a new game already started
        s = t()
        box = QMessageBox(self)
        box.setWindowTitle(s.game_over_title)
        box.setText(self._controller.session.last_feedback)
        again = box.addButton(s.play_again, QMessageBox.ButtonRole.AcceptRole)
        box.addButton(QMessageBox.StandardButton.Close)
        box.exec()
        if box.clickedButton() is again:
            _LOGGER.debug("Play again after %s", info.verdict.name)
            self._on_new_game()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._scheduler.stop_all()
        super().closeEvent(event)
