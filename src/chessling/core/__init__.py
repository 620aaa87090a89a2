"""Core domain layer — chess types and the rules engine adapter.

Quick start::

    from chessling.core import RulesEngine

    rules = RulesEngine()
    for move in rules.legal_moves("e2"):
        print(move, move.flags)
"""

from chessling.core.enums import Color, GameResult, MoveFlag, PieceType
from chessling.core.move import Move, Square, describe_move
from chessling.core.rules import (
    GameEndReason,
    Outcome,
    RulesEngine,
    parse_square,
)

__all__ = [
    # Enums / flags
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Domain objects
    "Move",
    "Square",
    "describe_move",
    # Rules
    "GameEndReason",
    "Outcome",
    "RulesEngine",
    "parse_square",
]
