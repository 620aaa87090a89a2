"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Iterable

import chess
from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessling.core.enums import Color
from chessling.core.move import Move, Square
from chessling.core.rules import RulesEngine
from chessling.ui.board.piece_item import PieceItem
from chessling.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    The scene never decides legality on its own behalf: every drop or
    click on another square is reported through ``move_attempted`` and
    the controller answers.  Legal targets are only used for the dots
    and to decide whether a dragged piece snaps back.

    Signals:
        move_attempted(int, int): origin and target square of a gesture.
        square_selected(int): the player picked up the piece on a square.
    """

    move_attempted = pyqtSignal(int, int)
    square_selected = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.classic()
        self._rules: RulesEngine | None = None
        self._player_color = Color.WHITE

        # Interaction state
        self._selected_sq: Square | None = None
        self._legal_moves: list[Move] = []
        self._dragging_item: PieceItem | None = None
        self._interactive = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._last_move_highlights: list[QGraphicsItem] = []
        self._check_highlights: list[QGraphicsItem] = []
        self._danger_highlights: list[QGraphicsItem] = []
        self._legal_dot_items: list[QGraphicsItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, rules: RulesEngine) -> None:
        """Show the position held by *rules* (full redraw of pieces)."""
        self._rules = rules
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._rules is not None:
            self._sync_pieces()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def piece_count(self) -> int:
        return len(self._piece_items)

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_highlights)
        if move is None:
            return
        for sq in (move.from_sq, move.to_sq):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def highlight_check(self) -> None:
        """Highlight the king of the side to move if it is in check."""
        self._clear_items(self._check_highlights)
        rules = self._rules
        if rules is None or not rules.is_in_check():
            return
        king_sq = rules.king_square(rules.side_to_move)
        if king_sq is None:
            return
        rect = self._make_highlight(king_sq, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_highlights.append(rect)

    def highlight_danger(self, squares: Iterable[Square]) -> None:
        """Mark the player's pieces that are under attack."""
        self._clear_items(self._danger_highlights)
        for sq in squares:
            rect = self._make_highlight(sq, self._theme.highlight_danger)
            rect.setZValue(0.55)
            self._danger_highlights.append(rect)

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
        font = QFont("DejaVu Sans", max(9, t // 8))

        for sq in chess.SQUARES:
            f, r = chess.square_file(sq), chess.square_rank(sq)
            vf, vr = self._visual_coords(f, r)
            is_light = (f + r) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if f == 0:
                self._add_coord(str(r + 1), font, coord_color, vf * t + 2, vr * t + 1)
            # File letters (bottom edge)
            if r == 0:
                self._add_coord(
                    chess.FILE_NAMES[f], font, coord_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        if self._rules is None:
            return

        t = self.TILE
        for sq, kind, color in self._rules.pieces():
            item = PieceItem(kind, color, sq, t)
            vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
            item.place_at(vf * t, vr * t)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._rules is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        occupant = self._rules.piece_at(sq)
        is_own = occupant is not None and occupant[1] == self._player_color

        # Second click with a piece selected → attempt the move
        if self._selected_sq is not None and sq != self._selected_sq and not is_own:
            origin = self._selected_sq
            self._clear_selection()
            self.move_attempted.emit(origin, sq)
            return

        if occupant is not None:
            self.square_selected.emit(sq)
        if is_own:
            self._select_square(sq)
            item = self._piece_items.get(sq)
            if item is not None:
                item.enable_drag(True)
                item.start_drag()
                self._dragging_item = item
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            self._dragging_item = None
            drop_sq = self._pos_to_square(event.scenePos())

            if drop_sq is not None and drop_sq != item.square:
                origin = item.square
                if any(m.to_sq == drop_sq for m in self._legal_moves):
                    item.finish_drag()
                else:
                    item.cancel_drag()
                item.enable_drag(False)
                self._clear_selection()
                self.move_attempted.emit(origin, drop_sq)
                return

            # Dropped in place: keep the selection for click-to-move
            item.cancel_drag()
            item.enable_drag(False)

        super().mouseReleaseEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq

        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._rules is None:
            return
        self._legal_moves = self._rules.legal_moves(sq)
        if self._show_legal_moves:
            seen: set[Square] = set()
            for m in self._legal_moves:
                if m.to_sq in seen:
                    continue  # one dot per target, even with several promotions
                seen.add(m.to_sq)
                color = (
                    self._theme.highlight_capture
                    if m.is_capture
                    else self._theme.highlight_to
                )
                self._legal_dot_items.append(self._make_dot(m.to_sq, color))

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._legal_moves = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._player_color == Color.BLACK:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._player_color == Color.BLACK:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return chess.square(f, r)

    def square_center(self, sq: Square) -> QPointF:
        """Scene coordinates of the middle of *sq*."""
        t = self.TILE
        vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
        return QPointF(vf * t + t / 2, vr * t + t / 2)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square, color: QColor) -> QGraphicsEllipseItem:
        """Create a round legal-target marker in the middle of a square."""
        t = self.TILE
        radius = t * 0.17
        center = self.square_center(sq)
        dot = QGraphicsEllipseItem(
            QRectF(center.x() - radius, center.y() - radius, 2 * radius, 2 * radius)
        )
        dot.setBrush(QBrush(color))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot
