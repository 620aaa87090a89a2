"""Computer opponent: difficulty levels and move selection."""

from chessling.engine.search import Difficulty, IMoveSelector, NoLegalMoveError
from chessling.engine.selector import PIECE_VALUES, MoveSelector, material_score

__all__ = [
    "PIECE_VALUES",
    "Difficulty",
    "IMoveSelector",
    "MoveSelector",
    "NoLegalMoveError",
    "material_score",
]
