"""Computer move selection for the three difficulty levels."""

from __future__ import annotations

import logging
import random

from chessling.core.enums import Color, PieceType
from chessling.core.move import Move
from chessling.core.rules import RulesEngine
from chessling.engine.search import Difficulty, IMoveSelector, NoLegalMoveError

_LOGGER = logging.getLogger(__name__)

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}

_CAPTURE_PREFERENCE = 0.7
_NOISE_AMPLITUDE = 2.5
_TIE_WINDOW = 1.0


def material_score(rules: RulesEngine) -> int:
    """White-centric material balance of the current position."""
    score = 0
    for _sq, piece_type, color in rules.pieces():
        value = PIECE_VALUES[piece_type]
        score += value if color == Color.WHITE else -value
    return score


class MoveSelector(IMoveSelector):
    """Picks one legal move for the side to move.

    Easy plays at random, Medium prefers captures, Hard runs a noisy
    one-ply material search.  All randomness comes from *rng* so tests
    can seed it.
    """

    __slots__ = ("_rng", "_noise")

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        noise: float = _NOISE_AMPLITUDE,
    ) -> None:
        self._rng = rng or random.Random()
        self._noise = noise

    def select_move(self, rules: RulesEngine, difficulty: Difficulty) -> Move:
        legal = rules.legal_moves()
        if not legal:
            raise NoLegalMoveError(
                f"No legal moves for {rules.side_to_move} in {rules.fen()}"
            )

        if difficulty == Difficulty.EASY:
            move = self._rng.choice(legal)
        elif difficulty == Difficulty.MEDIUM:
            move = self._select_aggressive(legal)
        else:
            move = self._select_material(rules, legal)

        _LOGGER.debug("%s selector chose %s", difficulty.label, move.uci)
        return move

    # ── Strategies ───────────────────────────────────────────────────────

    def _select_aggressive(self, legal: list[Move]) -> Move:
        captures = [m for m in legal if m.is_capture]
        if captures and self._rng.random() < _CAPTURE_PREFERENCE:
            return self._rng.choice(captures)
        return self._rng.choice(legal)

    def _select_material(self, rules: RulesEngine, legal: list[Move]) -> Move:
        # Scores are white-centric; the mover always minimises its own view.
        sign = 1 if rules.side_to_move == Color.BLACK else -1

        scored: list[tuple[float, Move]] = []
        for move in legal:
            with rules.hypothetical(move):
                score = sign * material_score(rules)
            score += self._rng.uniform(-self._noise, self._noise)
            scored.append((score, move))

        best = min(score for score, _ in scored)
        candidates = [move for score, move in scored if score - best < _TIE_WINDOW]
        return self._rng.choice(candidates)
