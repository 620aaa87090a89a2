"""Integration tests: MainWindow wired to a real GameController."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import chess

from chessling.engine.search import Difficulty
from chessling.game.controller import GameController
from chessling.game.interfaces import GamePhase
from chessling.i18n import t
from chessling.settings import AppSettings
from chessling.ui.main_window import MainWindow

if TYPE_CHECKING:
    from conftest import ManualScheduler


def _make_window(
    scheduler: ManualScheduler, settings: AppSettings | None = None
) -> MainWindow:
    controller = GameController(scheduler=scheduler, rng=random.Random(3))
    return MainWindow(settings, controller=controller, show_dialogs=False)


def test_initial_state(scheduler: ManualScheduler) -> None:
    window = _make_window(scheduler)
    assert window.board_view.board_scene.piece_count() == 32
    assert window.coach_panel.message() == t().coach_welcome
    assert window.coach_panel.turn_text() == t().turn_white
    assert window.progress_panel.level_text() == "Level 1"
    assert window.board_view.board_scene.is_interactive()


def test_human_move_then_computer_reply(scheduler: ManualScheduler) -> None:
    window = _make_window(scheduler)
    window._on_move_attempted(chess.E2, chess.E4)

    assert window.move_panel.sans == ["e4"]
    assert window.progress_panel.bar_value() == 2
    assert window.coach_panel.turn_text() == t().turn_thinking
    assert not window.board_view.board_scene.is_interactive()

    scheduler.run_all()
    assert len(window.move_panel.sans) == 2
    assert window.coach_panel.turn_text() == t().turn_white
    assert window.coach_panel.message().startswith("Computer moved")
    assert window.board_view.board_scene.is_interactive()


def test_illegal_drop_shows_coach_tip(scheduler: ManualScheduler) -> None:
    window = _make_window(scheduler)
    window._on_move_attempted(chess.E2, chess.E5)
    assert window.coach_panel.message() == t().coach_illegal
    assert window.move_panel.sans == []
    assert scheduler.pending == []


def test_new_game_discards_pending_reply(scheduler: ManualScheduler) -> None:
    window = _make_window(scheduler)
    window._on_move_attempted(chess.E2, chess.E4)
    window._on_new_game()
    scheduler.run_all()

    assert window.move_panel.sans == []
    assert window.controller.phase == GamePhase.AWAITING_HUMAN_MOVE
    assert window.controller.session.rules.ply_count == 0
    assert window.progress_panel.bar_value() == 2


def test_apply_settings(scheduler: ManualScheduler) -> None:
    settings = AppSettings(
        language="Russian",
        board_theme="Candy",
        difficulty=Difficulty.HARD,
        sound_enabled=False,
    )
    window = _make_window(scheduler, settings)
    assert window.controller.difficulty == Difficulty.HARD
    assert window.windowTitle() == t().app_title
    assert window.coach_panel.turn_text() == t().turn_white
    assert window._control_panel._combo_theme.currentData() == "Candy"


def test_difficulty_combo_reaches_controller(scheduler: ManualScheduler) -> None:
    window = _make_window(scheduler)
    window._control_panel._combo_difficulty.setCurrentIndex(1)
    assert window.controller.difficulty == Difficulty.MEDIUM
    assert window.settings.difficulty == Difficulty.MEDIUM


def test_square_selection_hint(scheduler: ManualScheduler) -> None:
    window = _make_window(scheduler)
    window._on_square_selected(chess.G1)
    assert window.coach_panel.message() == t().coach_selected
