"""UI/game state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from chessling.core.enums import Color
from chessling.core.move import Move
from chessling.game.captures import CapturedSets
from chessling.game.controller import GameController
from chessling.game.interfaces import GamePhase, Verdict
from chessling.game.progression import ProgressionState, XpAward
from chessling.game.session import GameOverInfo
from chessling.i18n import t
from chessling.ui.board.board_scene import BoardScene
from chessling.ui.panels.captured_panel import CapturedPanel
from chessling.ui.panels.coach_panel import CoachPanel
from chessling.ui.panels.move_panel import MovePanel
from chessling.ui.panels.progress_panel import ProgressPanel
from chessling.ui.sounds import SoundPlayer


class GameSync:
    """Applies controller events to UI widgets."""

    __slots__ = (
        "_controller",
        "_board_scene",
        "_move_panel",
        "_coach_panel",
        "_progress_panel",
        "_captured_panel",
        "_sound_player",
        "_show_game_over_dialog",
        "_learning_mode",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        board_scene: BoardScene,
        move_panel: MovePanel,
        coach_panel: CoachPanel,
        progress_panel: ProgressPanel,
        captured_panel: CapturedPanel,
        sound_player: SoundPlayer,
        show_game_over_dialog: Callable[[GameOverInfo], None],
    ) -> None:
        self._controller = controller
        self._board_scene = board_scene
        self._move_panel = move_panel
        self._coach_panel = coach_panel
        self._progress_panel = progress_panel
        self._captured_panel = captured_panel
        self._sound_player = sound_player
        self._show_game_over_dialog = show_game_over_dialog
        self._learning_mode = True

    def connect(self) -> None:
        """Subscribe to every controller event."""
        events = self._controller.events
        events.on_new_game.append(self.after_new_game)
        events.on_move.append(self.on_move)
        events.on_feedback.append(self._coach_panel.set_message)
        events.on_progress.append(self.on_progress)
        events.on_level_up.append(self.on_level_up)
        events.on_captures.append(self.on_captures)
        events.on_phase_changed.append(self.on_phase_changed)
        events.on_game_over.append(self.on_game_over)

    def set_learning_mode(self, enabled: bool) -> None:
        self._learning_mode = enabled
        self.refresh_danger()

    # ── Event handlers ───────────────────────────────────────────────────

    def after_new_game(self) -> None:
        """Sync UI state after a new game starts."""
        self._board_scene.set_position(self._controller.session.rules)
        self._board_scene.highlight_last_move(None)
        self._board_scene.highlight_check()
        self._board_scene.highlight_danger(())
        self._move_panel.clear()
        self._progress_panel.set_progress(self._controller.progression)

    def on_move(self, move: Move, san: str, _mover: Color) -> None:
        self._sound_player.play_move(capture=move.is_capture)
        self._board_scene.set_position(self._controller.session.rules)
        self._board_scene.highlight_last_move(move)
        self._board_scene.highlight_check()
        self.refresh_danger()
        self._move_panel.add_move(san)

    def on_progress(self, state: ProgressionState, _award: XpAward) -> None:
        self._progress_panel.set_progress(state)

    def on_level_up(self, _level: int) -> None:
        self._sound_player.play_fanfare()

    def on_captures(self, captured: CapturedSets) -> None:
        self._captured_panel.set_captures(captured)

    def on_phase_changed(self, phase: GamePhase) -> None:
        """Enable board input only while the human is to move."""
        self._board_scene.set_interactive(phase == GamePhase.AWAITING_HUMAN_MOVE)
        self.update_turn_indicator()

    def on_game_over(self, info: GameOverInfo) -> None:
        self._board_scene.set_interactive(False)
        self._board_scene.highlight_danger(())
        self.update_turn_indicator()
        if info.verdict != Verdict.LOSS:
            self._sound_player.play_fanfare()
        self._show_game_over_dialog(info)

    # ── Derived display ──────────────────────────────────────────────────

    def refresh_danger(self) -> None:
        """Mark attacked human pieces while learning mode is on."""
        controller = self._controller
        if self._learning_mode and not controller.session.is_game_over:
            self._board_scene.highlight_danger(controller.threatened_squares())
        else:
            self._board_scene.highlight_danger(())

    def update_turn_indicator(self) -> None:
        s = t()
        session = self._controller.session
        if session.is_game_over:
            text = s.game_over_title
        elif session.phase == GamePhase.AWAITING_COMPUTER_MOVE:
            text = s.turn_thinking
        elif session.rules.side_to_move == Color.WHITE:
            text = s.turn_white
        else:
            text = s.turn_black
        self._coach_panel.set_turn_text(text)
