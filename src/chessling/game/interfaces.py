"""Abstract interfaces for the game layer.

High-level GameController depends on these abstractions, not on the
Qt event loop or a concrete move selector.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessling.core.move import Square
    from chessling.engine.search import Difficulty
    from chessling.game.session import GameOverInfo


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for one human-vs-computer game."""

    AWAITING_HUMAN_MOVE = auto()
    VALIDATING = auto()
    REJECTED = auto()
    APPLIED = auto()
    CHECKING_GAME_OVER = auto()
    AWAITING_COMPUTER_MOVE = auto()  # think delay running
    COMPUTER_APPLIED = auto()
    GAME_OVER = auto()


class Verdict(IntEnum):
    """Game result from the human player's point of view."""

    WIN = auto()
    LOSS = auto()
    DRAW = auto()


# ── Deferred work ────────────────────────────────────────────────────────────

#: ``scheduler(delay_ms, callback)`` runs *callback* once, later, on the
#: same thread that owns the controller.
Scheduler = Callable[[int, Callable[[], None]], None]


def run_immediately(_delay_ms: int, callback: Callable[[], None]) -> None:
    """Scheduler that skips the delay (headless use)."""
    callback()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Reset the board (or set up *fen*) and start a fresh game.

        Progression is kept.
        """

    @abstractmethod
    def submit_human_move(self, from_sq: Square | str, to_sq: Square | str) -> bool:
        """Attempt a human move. Returns True if legal and applied."""

    @abstractmethod
    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Choose the computer's strength for subsequent replies."""

    @abstractmethod
    def check_game_over(self) -> GameOverInfo | None:
        """Detect the end of the game, awarding bonuses once."""
