"""GameSession — the aggregate owning everything one player's session needs."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessling.core.enums import Color, GameResult
from chessling.core.rules import GameEndReason, RulesEngine
from chessling.engine.search import Difficulty
from chessling.game.captures import CapturedSets, compute_captures
from chessling.game.interfaces import GamePhase, Verdict
from chessling.game.progression import ProgressionState


@dataclass(frozen=True, slots=True)
class GameOverInfo:
    """How a finished game ended and what bonus it paid out."""

    result: GameResult
    reason: GameEndReason
    winner: Color | None
    human_color: Color
    bonus_xp: int = 0

    @property
    def verdict(self) -> Verdict:
        if self.winner is None:
            return Verdict.DRAW
        return Verdict.WIN if self.winner == self.human_color else Verdict.LOSS


@dataclass
class GameSession:
    """Board, progression and settings for one run of the application.

    ``reset_game`` restarts the board in place and bumps ``epoch`` so
    that deferred work scheduled for the previous game can tell it is
    stale.  Progression survives resets.
    """

    rules: RulesEngine = field(default_factory=RulesEngine)
    progression: ProgressionState = field(default_factory=ProgressionState)
    difficulty: Difficulty = Difficulty.EASY
    human_color: Color = Color.WHITE
    epoch: int = 0
    phase: GamePhase = GamePhase.AWAITING_HUMAN_MOVE
    game_over: GameOverInfo | None = None
    last_feedback: str = ""

    @property
    def computer_color(self) -> Color:
        return self.human_color.opposite

    @property
    def is_game_over(self) -> bool:
        return self.game_over is not None

    @property
    def is_human_turn(self) -> bool:
        return self.rules.side_to_move == self.human_color

    def captures(self) -> CapturedSets:
        return compute_captures(self.rules)

    def reset_game(self, fen: str | None = None) -> int:
        """Fresh starting position (or *fen*); returns the new epoch."""
        self.epoch += 1
        self.rules.reset(fen)
        self.game_over = None
        self.phase = GamePhase.AWAITING_HUMAN_MOVE
        return self.epoch
