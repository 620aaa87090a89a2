"""PieceItem — draggable chess piece drawn as a Unicode glyph."""

from __future__ import annotations

import chess
from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chessling.core.enums import Color, PieceType
from chessling.core.move import Square

_WHITE_FILL = QColor("#FFFFFF")
_BLACK_FILL = QColor("#1F2937")
_OUTLINE = QColor("#111827")


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Both sides use the solid glyph; colour comes from the fill so white
    pieces stay readable on light squares.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self, piece_type: PieceType, color: Color, square: Square, tile_size: int
    ) -> None:
        glyph = chess.Piece(int(piece_type), chess.BLACK).unicode_symbol()
        super().__init__(glyph)
        self.piece_type = piece_type
        self.color = color
        self.square = square
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None

        self.setBrush(QBrush(_WHITE_FILL if color == Color.WHITE else _BLACK_FILL))
        self.setPen(QPen(_OUTLINE, 1.2))
        self._update_size(tile_size)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    def place_at(self, x: float, y: float) -> None:
        """Centre the glyph inside the tile whose top-left corner is (x, y)."""
        bounds = self.boundingRect()
        self.setPos(
            x + (self._tile_size - bounds.width()) / 2,
            y + (self._tile_size - bounds.height()) / 2,
        )

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont("DejaVu Sans")
        font.setPixelSize(max(8, int(size * self._FONT_RATIO)))
        self.setFont(font)
