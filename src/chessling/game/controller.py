"""GameController — the central orchestrator of a human-vs-computer game.

Coordinates: GameSession (rules engine + progression), MoveSelector,
and a scheduler for the computer's think delay.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chessling.core.enums import Color, PieceType
from chessling.core.move import Move, Square
from chessling.core.rules import GameEndReason, Outcome
from chessling.engine.search import Difficulty, IMoveSelector
from chessling.engine.selector import MoveSelector
from chessling.game.captures import CapturedSets
from chessling.game.coach import (
    explain_computer_move,
    game_over_text,
    selection_hint,
    threatened_squares,
)
from chessling.game.interfaces import (
    GamePhase,
    IGameController,
    Scheduler,
    run_immediately,
)
from chessling.game.progression import (
    CHECKMATE_BONUS_XP,
    DRAW_BONUS_XP,
    ProgressionState,
    XpAward,
    award_xp,
    classify_move,
)
from chessling.game.session import GameOverInfo, GameSession
from chessling.i18n import t

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, Color], None]  # move, san, mover
FeedbackCallback = Callable[[str], None]
ProgressCallback = Callable[[ProgressionState, XpAward], None]
LevelUpCallback = Callable[[int], None]  # new level
CapturesCallback = Callable[[CapturedSets], None]
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[GameOverInfo], None]
NewGameCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_feedback: list[FeedbackCallback] = field(default_factory=list)
    on_progress: list[ProgressCallback] = field(default_factory=list)
    on_level_up: list[LevelUpCallback] = field(default_factory=list)
    on_captures: list[CapturesCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Drives one session: validates human moves, awards XP, schedules
    the computer's reply, and detects the end of each game.

    Thread-safety: every method must be called from the thread that
    owns the session (the Qt main thread).  The computer's reply is
    deferred through *scheduler* and carries the session epoch it was
    scheduled under; a reply from an earlier game is dropped.
    """

    __slots__ = (
        "_session",
        "_selector",
        "_scheduler",
        "_rng",
        "_think_delay_ms",
        "events",
    )

    def __init__(
        self,
        session: GameSession | None = None,
        *,
        selector: IMoveSelector | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        think_delay_ms: tuple[int, int] = (500, 1500),
    ) -> None:
        low, high = think_delay_ms
        if low < 0 or high < low:
            raise ValueError(f"Invalid think delay range: {think_delay_ms}")

        self._rng = rng or random.Random()
        self._session = session or GameSession()
        self._selector = selector or MoveSelector(self._rng)
        self._scheduler = scheduler or run_immediately
        self._think_delay_ms = (low, high)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def phase(self) -> GamePhase:
        return self._session.phase

    @property
    def progression(self) -> ProgressionState:
        return self._session.progression

    @property
    def difficulty(self) -> Difficulty:
        return self._session.difficulty

    @property
    def captures(self) -> CapturedSets:
        return self._session.captures()

    @property
    def game_over(self) -> GameOverInfo | None:
        return self._session.game_over

    @property
    def is_human_turn(self) -> bool:
        return self._session.phase == GamePhase.AWAITING_HUMAN_MOVE

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        session = self._session
        epoch = session.reset_game(fen)
        _LOGGER.info(
            "New game (epoch %d, difficulty %s, level %d)",
            epoch,
            session.difficulty.label,
            session.progression.level,
        )
        for cb in self.events.on_new_game:
            cb()
        self._emit_captures()
        self._feedback(t().coach_welcome)
        if self.check_game_over() is None:
            self._advance_turn()

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self._session.difficulty = difficulty

    def submit_human_move(self, from_sq: Square | str, to_sq: Square | str) -> bool:
        session = self._session
        if session.phase != GamePhase.AWAITING_HUMAN_MOVE:
            _LOGGER.debug("Ignoring human move during %s", session.phase.name)
            s = t()
            self._feedback(
                s.coach_game_finished if session.is_game_over else s.coach_not_your_turn
            )
            return False

        self._set_phase(GamePhase.VALIDATING)
        move = session.rules.apply_move(from_sq, to_sq, PieceType.QUEEN)
        if move is None:
            _LOGGER.debug("Rejected human move %s -> %s", from_sq, to_sq)
            self._set_phase(GamePhase.REJECTED)
            self._feedback(t().coach_illegal)
            self._set_phase(GamePhase.AWAITING_HUMAN_MOVE)
            return False

        self._set_phase(GamePhase.APPLIED)
        self._emit_move(move)

        classification = classify_move(move)
        award = self._apply_xp(classification.xp)
        self._feedback(t().coach_level_up if award.leveled_up else classification.message)
        self._emit_captures()

        self._set_phase(GamePhase.CHECKING_GAME_OVER)
        if self.check_game_over() is None:
            self._advance_turn()
        return True

    def check_game_over(self) -> GameOverInfo | None:
        session = self._session
        if session.game_over is not None:
            return session.game_over
        outcome = session.rules.outcome()
        if outcome is None:
            return None
        return self._finish_game(outcome)

    # ── Coaching helpers for the board UI ────────────────────────────────

    def select_square(self, square: Square | str) -> str:
        """Coach tip for picking up the piece on *square*."""
        hint = selection_hint(self._session.rules, square, self._session.human_color)
        self._feedback(hint)
        return hint

    def legal_targets(self, square: Square | str) -> list[Move]:
        """Legal human moves from *square* (empty unless it's the human's turn)."""
        if not self.is_human_turn:
            return []
        return self._session.rules.legal_moves(square)

    def threatened_squares(self) -> list[Square]:
        """Human pieces currently attacked by the computer."""
        return threatened_squares(self._session.rules, self._session.human_color)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _advance_turn(self) -> None:
        """Hand the move to whoever is next."""
        session = self._session
        if session.is_human_turn:
            self._set_phase(GamePhase.AWAITING_HUMAN_MOVE)
            return

        self._set_phase(GamePhase.AWAITING_COMPUTER_MOVE)
        epoch = session.epoch
        delay_ms = self._rng.randint(*self._think_delay_ms)
        self._scheduler(delay_ms, lambda: self._on_computer_turn_due(epoch))

    def _on_computer_turn_due(self, epoch: int) -> None:
        session = self._session
        if epoch != session.epoch or session.phase != GamePhase.AWAITING_COMPUTER_MOVE:
            _LOGGER.debug(
                "Discarding stale computer move (scheduled epoch %d, now %d, %s)",
                epoch,
                session.epoch,
                session.phase.name,
            )
            return

        rules = session.rules
        choice = self._selector.select_move(rules, session.difficulty)
        move = rules.apply_move(choice.from_sq, choice.to_sq, choice.promotion)
        if move is None:
            raise RuntimeError(f"Selector produced an illegal move: {choice.uci}")

        self._set_phase(GamePhase.COMPUTER_APPLIED)
        self._emit_move(move)
        self._emit_captures()
        self._feedback(explain_computer_move(move, rules))

        self._set_phase(GamePhase.CHECKING_GAME_OVER)
        if self.check_game_over() is None:
            self._advance_turn()

    def _finish_game(self, outcome: Outcome) -> GameOverInfo:
        session = self._session
        bonus = 0
        if outcome.winner is None:
            bonus = DRAW_BONUS_XP
        elif (
            outcome.reason == GameEndReason.CHECKMATE
            and outcome.winner == session.human_color
        ):
            bonus = CHECKMATE_BONUS_XP

        info = GameOverInfo(
            result=outcome.result,
            reason=outcome.reason,
            winner=outcome.winner,
            human_color=session.human_color,
            bonus_xp=bonus,
        )
        # Recorded before any callback runs so re-entrant checks see it.
        session.game_over = info
        _LOGGER.info(
            "Game over: %s by %s (bonus %d XP)",
            info.verdict.name,
            info.reason.name,
            bonus,
        )

        if bonus:
            self._apply_xp(bonus)
        self._feedback(game_over_text(info))
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(info)
        return info

    def _apply_xp(self, amount: int) -> XpAward:
        progression = self._session.progression
        award = award_xp(progression, amount)
        for cb in self.events.on_progress:
            cb(progression, award)
        if award.leveled_up:
            _LOGGER.info("Level up: now level %d", progression.level)
            for cb in self.events.on_level_up:
                cb(progression.level)
        return award

    def _set_phase(self, phase: GamePhase) -> None:
        self._session.phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _feedback(self, message: str) -> None:
        self._session.last_feedback = message
        for cb in self.events.on_feedback:
            cb(message)

    def _emit_move(self, move: Move) -> None:
        san = self._session.rules.last_move_san() or move.uci
        for cb in self.events.on_move:
            cb(move, san, move.color)

    def _emit_captures(self) -> None:
        captured = self._session.captures()
        for cb in self.events.on_captures:
            cb(captured)
