"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto

import chess


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def chess_color(self) -> chess.Color:
        """The python-chess boolean for this side."""
        return self == Color.WHITE

    @classmethod
    def from_chess(cls, color: chess.Color) -> Color:
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value.

    Values match python-chess piece type constants.
    """

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class MoveFlag(Enum):
    """Semantic move flags. A move carries a set of these."""

    NORMAL = auto()
    CAPTURE = auto()
    EN_PASSANT = auto()
    KINGSIDE_CASTLE = auto()
    QUEENSIDE_CASTLE = auto()
    PROMOTION = auto()
    PROMOTION_CAPTURE = auto()


CAPTURE_FLAGS = frozenset(
    {MoveFlag.CAPTURE, MoveFlag.EN_PASSANT, MoveFlag.PROMOTION_CAPTURE}
)
CASTLE_FLAGS = frozenset({MoveFlag.KINGSIDE_CASTLE, MoveFlag.QUEENSIDE_CASTLE})
PROMOTION_FLAGS = frozenset({MoveFlag.PROMOTION, MoveFlag.PROMOTION_CAPTURE})


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
