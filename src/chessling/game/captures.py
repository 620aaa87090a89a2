"""Captured-piece trays derived from the pieces still on the board."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from chessling.core.enums import Color, PieceType
from chessling.core.rules import RulesEngine

MaterialCount = dict[PieceType, int]

STANDARD_COUNTS: MaterialCount = {
    PieceType.PAWN: 8,
    PieceType.KNIGHT: 2,
    PieceType.BISHOP: 2,
    PieceType.ROOK: 2,
    PieceType.QUEEN: 1,
    PieceType.KING: 1,
}


@dataclass(frozen=True, slots=True)
class CapturedSets:
    """Pieces each side has taken, most valuable kinds last.

    A pawn that promoted and then got captured cannot be told apart
    from an original piece, so promotions can hide captures.
    """

    by_white: tuple[PieceType, ...] = ()
    by_black: tuple[PieceType, ...] = ()

    def by(self, color: Color) -> tuple[PieceType, ...]:
        return self.by_white if color == Color.WHITE else self.by_black

    def counts(self, color: Color) -> Counter[PieceType]:
        return Counter(self.by(color))

    @property
    def is_empty(self) -> bool:
        return not self.by_white and not self.by_black


def material_count(rules: RulesEngine, color: Color) -> MaterialCount:
    """Current number of *color* pieces of each kind."""
    return {kind: rules.count(kind, color) for kind in PieceType}


def missing_pieces(rules: RulesEngine, color: Color) -> tuple[PieceType, ...]:
    """*color* pieces absent from the board relative to a full set."""
    current = material_count(rules, color)
    missing: list[PieceType] = []
    for kind, standard in STANDARD_COUNTS.items():
        missing.extend([kind] * max(0, standard - current[kind]))
    return tuple(missing)


def compute_captures(rules: RulesEngine) -> CapturedSets:
    """Derive both capture trays from the position, no history needed."""
    return CapturedSets(
        by_white=missing_pieces(rules, Color.BLACK),
        by_black=missing_pieces(rules, Color.WHITE),
    )
