"""MovePanel — scrollable list of moves in SAN notation."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from chessling.core.enums import Color
from chessling.i18n import t

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}


def figurine_san(san: str, color: Color) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols for *color*."""
    table = _FIGURINE[color]

    # Leading piece letter (Nf3, Qxd5, Ke2…)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Promotion target (e8=Q → e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        san = prefix + "=" + table.get(promo[0], promo[0]) + promo[1:]

    return san


class MovePanel(QWidget):
    """Move history, one row per full move: ``12. ♘f3  ♝g4``."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._sans: list[str] = []
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("DejaVu Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def retranslate_ui(self) -> None:
        self._header.setText(t().panel_moves)

    @property
    def sans(self) -> list[str]:
        return list(self._sans)

    def row_count(self) -> int:
        return self._list.count()

    def clear(self) -> None:
        self._sans.clear()
        self._list.clear()

    def add_move(self, san: str) -> None:
        """Append the next move; White's moves open a new row."""
        self._sans.append(san)
        ply = len(self._sans) - 1
        move_num = ply // 2 + 1
        if ply % 2 == 0:
            self._list.addItem(f"{move_num}. {figurine_san(san, Color.WHITE)}")
        else:
            item = self._list.item(self._list.count() - 1)
            if item is not None:
                item.setText(f"{item.text()}   {figurine_san(san, Color.BLACK)}")
        self._list.scrollToBottom()
