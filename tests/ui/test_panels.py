"""Tests for the side panels."""

from __future__ import annotations

from chessling.core.enums import Color, PieceType
from chessling.engine.search import Difficulty
from chessling.game.captures import CapturedSets
from chessling.game.progression import ProgressionState
from chessling.i18n import set_language
from chessling.ui.panels.captured_panel import CapturedPanel, tray_text
from chessling.ui.panels.control_panel import ControlPanel
from chessling.ui.panels.move_panel import MovePanel, figurine_san
from chessling.ui.panels.progress_panel import ProgressPanel


def test_figurine_san_replaces_leading_piece_and_promotion() -> None:
    assert figurine_san("Nf3", Color.WHITE) == "♘f3"
    assert figurine_san("e8=Q+", Color.WHITE) == "e8=♕+"
    assert figurine_san("Qxd5", Color.BLACK) == "♛xd5"
    assert figurine_san("O-O", Color.WHITE) == "O-O"


def test_move_panel_pairs_moves_per_row() -> None:
    panel = MovePanel()
    for san in ("e4", "e5", "Nf3"):
        panel.add_move(san)
    assert panel.sans == ["e4", "e5", "Nf3"]
    assert panel.row_count() == 2
    assert panel._list.item(0).text() == "1. e4   e5"
    assert panel._list.item(1).text() == "2. ♘f3"

    panel.clear()
    assert panel.row_count() == 0


def test_progress_panel_shows_level_and_bar() -> None:
    panel = ProgressPanel()
    panel.set_progress(ProgressionState(experience_points=40, level=3))
    assert panel.level_text() == "Level 3"
    assert panel.bar_value() == 40

    set_language("Russian")
    panel.retranslate_ui()
    assert panel.level_text() != "Level 3"


def test_tray_text_orders_by_value() -> None:
    text = tray_text((PieceType.PAWN, PieceType.QUEEN, PieceType.KNIGHT), Color.BLACK)
    assert text == "♛♞♟"


def test_captured_panel_trays() -> None:
    panel = CapturedPanel()
    panel.set_captures(
        CapturedSets(by_white=(PieceType.PAWN,), by_black=(PieceType.ROOK,))
    )
    white_tray, black_tray = panel.tray_texts()
    assert white_tray == "♟"
    assert black_tray == "♖"


def test_control_panel_emits_difficulty_and_theme() -> None:
    panel = ControlPanel()
    levels: list[int] = []
    themes: list[str] = []
    panel.difficulty_changed.connect(levels.append)
    panel.theme_changed.connect(themes.append)

    panel._combo_difficulty.setCurrentIndex(2)
    panel._combo_theme.setCurrentIndex(3)
    assert levels == [int(Difficulty.HARD)]
    assert themes == ["Wood"]


def test_control_panel_set_values_is_silent() -> None:
    panel = ControlPanel()
    levels: list[int] = []
    panel.difficulty_changed.connect(levels.append)
    panel.set_values(
        difficulty=Difficulty.MEDIUM, theme="Candy", sound=False, language="English"
    )
    assert levels == []
    assert panel._combo_difficulty.currentData() == int(Difficulty.MEDIUM)
    assert panel._combo_theme.currentData() == "Candy"
    assert not panel._chk_sound.isChecked()
