"""Shared move-selection models and protocol."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessling.core.move import Move
    from chessling.core.rules import RulesEngine


class Difficulty(IntEnum):
    """Computer opponent strength, picked once per session."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class NoLegalMoveError(RuntimeError):
    """The selector was asked to move in a position without legal moves.

    Game-over detection always runs first, so reaching this is a bug.
    """


class IMoveSelector(Protocol):
    """Protocol for computer move choosers used by the game layer."""

    def select_move(self, rules: RulesEngine, difficulty: Difficulty) -> Move: ...
