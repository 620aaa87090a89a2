"""CapturedPanel — trays of pieces each side has taken."""

from __future__ import annotations

import chess
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chessling.core.enums import Color, PieceType
from chessling.game.captures import CapturedSets
from chessling.i18n import t

# Most valuable first, as the tray reads left to right
_TRAY_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


def tray_text(pieces: tuple[PieceType, ...], owner: Color) -> str:
    """Glyph string for captured *pieces* that belonged to *owner*."""
    chess_color = owner.chess_color
    ordered = sorted(pieces, key=_TRAY_ORDER.index)
    return "".join(
        chess.Piece(int(kind), chess_color).unicode_symbol() for kind in ordered
    )


class CapturedPanel(QWidget):
    """Two labelled rows: what White took and what Black took."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._captured = CapturedSets()
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        glyph_font = QFont("DejaVu Sans", 18)

        self._white_header = QLabel()
        layout.addWidget(self._white_header)
        self._white_tray = QLabel()
        self._white_tray.setFont(glyph_font)
        self._white_tray.setMinimumHeight(28)
        layout.addWidget(self._white_tray)

        self._black_header = QLabel()
        layout.addWidget(self._black_header)
        self._black_tray = QLabel()
        self._black_tray.setFont(glyph_font)
        self._black_tray.setMinimumHeight(28)
        layout.addWidget(self._black_tray)

    def retranslate_ui(self) -> None:
        s = t()
        self._white_header.setText(s.captured_by_white)
        self._black_header.setText(s.captured_by_black)

    def set_captures(self, captured: CapturedSets) -> None:
        self._captured = captured
        # White's tray holds black pieces and vice versa
        self._white_tray.setText(tray_text(captured.by_white, Color.BLACK))
        self._black_tray.setText(tray_text(captured.by_black, Color.WHITE))

    def tray_texts(self) -> tuple[str, str]:
        return self._white_tray.text(), self._black_tray.text()
