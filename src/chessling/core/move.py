"""Move value object (UCI-style representation with semantic flags)."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chessling.core.enums import (
    CAPTURE_FLAGS,
    CASTLE_FLAGS,
    PROMOTION_FLAGS,
    Color,
    MoveFlag,
    PieceType,
)

Square = int

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object describing an applied or legal move."""

    from_sq: Square
    to_sq: Square
    piece: PieceType
    color: Color
    flags: frozenset[MoveFlag] = frozenset({MoveFlag.NORMAL})
    promotion: PieceType | None = None

    # ── Flag queries ─────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return not self.flags.isdisjoint(CAPTURE_FLAGS)

    @property
    def is_castle(self) -> bool:
        return not self.flags.isdisjoint(CASTLE_FLAGS)

    @property
    def is_promotion(self) -> bool:
        return not self.flags.isdisjoint(PROMOTION_FLAGS)

    # ── Conversion ───────────────────────────────────────────────────────

    def to_chess(self) -> chess.Move:
        promotion = int(self.promotion) if self.promotion is not None else None
        return chess.Move(self.from_sq, self.to_sq, promotion=promotion)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{chess.square_name(self.from_sq)}{chess.square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


def describe_move(board: chess.Board, move: chess.Move) -> Move:
    """Build a :class:`Move` for *move* played from *board* (before pushing)."""
    piece_type = board.piece_type_at(move.from_square)
    if piece_type is None:
        raise ValueError(f"No piece on {chess.square_name(move.from_square)}")

    flags: set[MoveFlag] = set()
    is_capture = board.is_capture(move)
    if board.is_en_passant(move):
        flags.add(MoveFlag.EN_PASSANT)
    elif is_capture:
        flags.add(MoveFlag.CAPTURE)
    if board.is_kingside_castling(move):
        flags.add(MoveFlag.KINGSIDE_CASTLE)
    elif board.is_queenside_castling(move):
        flags.add(MoveFlag.QUEENSIDE_CASTLE)
    if move.promotion is not None:
        flags.add(MoveFlag.PROMOTION)
        if is_capture:
            flags.add(MoveFlag.PROMOTION_CAPTURE)
    if not flags:
        flags.add(MoveFlag.NORMAL)

    return Move(
        from_sq=move.from_square,
        to_sq=move.to_square,
        piece=PieceType(piece_type),
        color=Color.from_chess(board.turn),
        flags=frozenset(flags),
        promotion=PieceType(move.promotion) if move.promotion is not None else None,
    )
