"""Experience points and levels earned by the human player.

Every accepted human move is classified into one of four kinds and
earns a fixed XP amount.  XP rolls over into levels at 100.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chessling.core.move import Move
from chessling.i18n import t

XP_PER_LEVEL = 100

CASTLE_XP = 15
CAPTURE_XP = 10
PROMOTION_XP = 20
QUIET_XP = 2

CHECKMATE_BONUS_XP = 50
DRAW_BONUS_XP = 20


class MoveKind(IntEnum):
    """Coaching category of a human move."""

    CASTLE = auto()
    PROMOTION = auto()
    CAPTURE = auto()
    QUIET = auto()


@dataclass
class ProgressionState:
    """XP within the current level (0–99) and the level itself (≥ 1)."""

    experience_points: int = 0
    level: int = 1


@dataclass(frozen=True, slots=True)
class MoveClassification:
    kind: MoveKind
    xp: int
    message: str


@dataclass(frozen=True, slots=True)
class XpAward:
    """What a single :func:`award_xp` call did."""

    amount: int
    levels_gained: int = 0

    @property
    def leveled_up(self) -> bool:
        return self.levels_gained > 0


def classify_move(move: Move) -> MoveClassification:
    """Map *move* to its XP value and coach message.

    First match wins: castle, promotion, capture, anything else.  A
    promotion that also captures counts as a promotion.
    """
    s = t()
    if move.is_castle:
        return MoveClassification(
            MoveKind.CASTLE, CASTLE_XP, s.coach_castle.format(xp=CASTLE_XP)
        )
    if move.is_promotion:
        return MoveClassification(
            MoveKind.PROMOTION, PROMOTION_XP, s.coach_promotion.format(xp=PROMOTION_XP)
        )
    if move.is_capture:
        return MoveClassification(
            MoveKind.CAPTURE, CAPTURE_XP, s.coach_capture.format(xp=CAPTURE_XP)
        )
    return MoveClassification(MoveKind.QUIET, QUIET_XP, s.coach_quiet)


def award_xp(state: ProgressionState, amount: int) -> XpAward:
    """Add *amount* XP to *state*, rolling over into new levels."""
    if amount < 0:
        raise ValueError(f"XP award must be non-negative, got {amount}")

    state.experience_points += amount
    levels = 0
    while state.experience_points >= XP_PER_LEVEL:
        state.experience_points -= XP_PER_LEVEL
        state.level += 1
        levels += 1
    return XpAward(amount, levels)
