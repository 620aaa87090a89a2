"""Rules engine: board state, legality and game-end detection.

Thin adapter over :mod:`chess` (python-chess).  The rest of the
application never touches ``chess.Board`` directly; it queries and
mutates the position only through :class:`RulesEngine`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum, auto

import chess

from chessling.core.enums import Color, GameResult, PieceType
from chessling.core.move import Move, Square, describe_move

_LOGGER = logging.getLogger(__name__)

SquareLike = Square | str


class GameEndReason(IntEnum):
    """Why a game ended."""

    CHECKMATE = auto()
    STALEMATE = auto()
    INSUFFICIENT_MATERIAL = auto()
    FIFTY_MOVES = auto()
    THREEFOLD_REPETITION = auto()
    SEVENTYFIVE_MOVES = auto()
    FIVEFOLD_REPETITION = auto()


_TERMINATION_REASONS: dict[chess.Termination, GameEndReason] = {
    chess.Termination.CHECKMATE: GameEndReason.CHECKMATE,
    chess.Termination.STALEMATE: GameEndReason.STALEMATE,
    chess.Termination.INSUFFICIENT_MATERIAL: GameEndReason.INSUFFICIENT_MATERIAL,
    chess.Termination.FIFTY_MOVES: GameEndReason.FIFTY_MOVES,
    chess.Termination.THREEFOLD_REPETITION: GameEndReason.THREEFOLD_REPETITION,
    chess.Termination.SEVENTYFIVE_MOVES: GameEndReason.SEVENTYFIVE_MOVES,
    chess.Termination.FIVEFOLD_REPETITION: GameEndReason.FIVEFOLD_REPETITION,
}


@dataclass(frozen=True, slots=True)
class Outcome:
    """Terminal state of a finished game."""

    result: GameResult
    reason: GameEndReason
    winner: Color | None


def parse_square(value: SquareLike) -> Square | None:
    """Normalise a square index or name ("e4"); ``None`` if malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value < 64 else None
    if isinstance(value, str):
        name = value.strip().lower()
        if name in chess.SQUARE_NAMES:
            return chess.parse_square(name)
    return None


class RulesEngine:
    """Owns the position and answers every rules question about it.

    Draw policy: the fifty-move rule and threefold repetition end the
    game as soon as they have actually happened; nobody has to claim
    them.  A repetition that one more move *could* produce does not count.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self, fen: str | None = None) -> None:
        """Return to the standard starting arrangement (or *fen*)."""
        if fen:
            self._board.set_fen(fen)
        else:
            self._board.reset()

    def copy(self) -> RulesEngine:
        clone = RulesEngine.__new__(RulesEngine)
        clone._board = self._board.copy()
        return clone

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return Color.from_chess(self._board.turn)

    @property
    def ply_count(self) -> int:
        return len(self._board.move_stack)

    def fen(self) -> str:
        return self._board.fen()

    def legal_moves(self, from_sq: SquareLike | None = None) -> list[Move]:
        """All legal moves, or only those starting on *from_sq*."""
        board = self._board
        if from_sq is None:
            return [describe_move(board, m) for m in board.legal_moves]
        square = parse_square(from_sq)
        if square is None:
            return []
        return [
            describe_move(board, m)
            for m in board.generate_legal_moves(from_mask=chess.BB_SQUARES[square])
        ]

    def piece_at(self, square: SquareLike) -> tuple[PieceType, Color] | None:
        sq = parse_square(square)
        if sq is None:
            return None
        piece = self._board.piece_at(sq)
        if piece is None:
            return None
        return PieceType(piece.piece_type), Color.from_chess(piece.color)

    def pieces(self) -> Iterator[tuple[Square, PieceType, Color]]:
        """Every piece on the board as ``(square, kind, color)``."""
        for sq, piece in self._board.piece_map().items():
            yield sq, PieceType(piece.piece_type), Color.from_chess(piece.color)

    def count(self, piece_type: PieceType, color: Color) -> int:
        return len(self._board.pieces(int(piece_type), color.chess_color))

    def king_square(self, color: Color) -> Square | None:
        return self._board.king(color.chess_color)

    def is_square_attacked(self, square: SquareLike, by_color: Color) -> bool:
        sq = parse_square(square)
        if sq is None:
            return False
        return self._board.is_attacked_by(by_color.chess_color, sq)

    def is_in_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_draw(self) -> bool:
        outcome = self.outcome()
        return outcome is not None and outcome.winner is None

    def is_game_over(self) -> bool:
        return self.outcome() is not None

    def outcome(self) -> Outcome | None:
        """Terminal result and reason, or ``None`` while the game runs."""
        board = self._board
        outcome = board.outcome()
        if outcome is not None:
            reason = _TERMINATION_REASONS.get(outcome.termination)
            if reason is None:
                raise RuntimeError(f"Unsupported termination: {outcome.termination!r}")
            if outcome.winner is None:
                return Outcome(GameResult.DRAW, reason, None)
            winner = Color.from_chess(outcome.winner)
            result = (
                GameResult.WHITE_WINS if winner == Color.WHITE else GameResult.BLACK_WINS
            )
            return Outcome(result, reason, winner)
        if board.is_fifty_moves():
            return Outcome(GameResult.DRAW, GameEndReason.FIFTY_MOVES, None)
        if board.is_repetition(3):
            return Outcome(GameResult.DRAW, GameEndReason.THREEFOLD_REPETITION, None)
        return None

    def move_history_san(self) -> list[str]:
        """SAN of every move played, in order."""
        replay = self._board.root()
        history: list[str] = []
        for move in self._board.move_stack:
            history.append(replay.san(move))
            replay.push(move)
        return history

    def last_move_san(self) -> str | None:
        if not self._board.move_stack:
            return None
        move = self._board.pop()
        try:
            return self._board.san(move)
        finally:
            self._board.push(move)

    def last_move(self) -> Move | None:
        """The most recent move, re-described against the prior position."""
        if not self._board.move_stack:
            return None
        move = self._board.pop()
        try:
            return describe_move(self._board, move)
        finally:
            self._board.push(move)

    # ── Mutations ────────────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: SquareLike,
        to_sq: SquareLike,
        promotion: PieceType | None = None,
    ) -> Move | None:
        """Play the move *from_sq* → *to_sq* if legal.

        Promotion moves use *promotion* (queen when omitted).  Returns the
        applied :class:`Move`, or ``None`` when the move is illegal or a
        square is malformed; the position is untouched in that case.
        """
        origin = parse_square(from_sq)
        target = parse_square(to_sq)
        if origin is None or target is None:
            return None

        wanted = int(promotion or PieceType.QUEEN)
        candidates = list(
            self._board.generate_legal_moves(
                from_mask=chess.BB_SQUARES[origin], to_mask=chess.BB_SQUARES[target]
            )
        )
        if not candidates:
            return None
        chosen = next(
            (m for m in candidates if m.promotion in (None, wanted)), candidates[0]
        )

        applied = describe_move(self._board, chosen)
        self._board.push(chosen)
        _LOGGER.debug("Applied %s (%s)", applied.uci, self._board.fen())
        return applied

    def undo_last_move(self) -> Move | None:
        """Take back the last move; returns it, or ``None`` if none played."""
        if not self._board.move_stack:
            return None
        move = self._board.pop()
        return describe_move(self._board, move)

    @contextmanager
    def hypothetical(self, move: Move) -> Iterator[RulesEngine]:
        """Apply *move* for the duration of the ``with`` block, then undo it.

        The undo runs even when the block raises.
        """
        self._board.push(move.to_chess())
        try:
            yield self
        finally:
            self._board.pop()
