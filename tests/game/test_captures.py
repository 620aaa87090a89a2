"""Tests for captured-piece accounting."""

from chessling.core.enums import Color, PieceType
from chessling.core.rules import RulesEngine
from chessling.game.captures import (
    STANDARD_COUNTS,
    CapturedSets,
    compute_captures,
    material_count,
)


def _play(rules: RulesEngine, *moves: str) -> None:
    for uci in moves:
        assert rules.apply_move(uci[:2], uci[2:4]) is not None, uci


class TestComputeCaptures:
    def test_empty_at_start(self) -> None:
        captured = compute_captures(RulesEngine())
        assert captured == CapturedSets()
        assert captured.is_empty

    def test_material_count_at_start(self) -> None:
        assert material_count(RulesEngine(), Color.WHITE) == STANDARD_COUNTS

    def test_single_pawn_capture(self) -> None:
        rules = RulesEngine()
        _play(rules, "e2e4", "d7d5", "e4d5")
        captured = compute_captures(rules)
        assert captured.by_white == (PieceType.PAWN,)
        assert captured.by_black == ()

    def test_both_sides(self) -> None:
        rules = RulesEngine()
        # 1.e4 d5 2.exd5 Qxd5
        _play(rules, "e2e4", "d7d5", "e4d5", "d8d5")
        captured = compute_captures(rules)
        assert captured.by(Color.WHITE) == (PieceType.PAWN,)
        assert captured.by(Color.BLACK) == (PieceType.PAWN,)

    def test_counts(self) -> None:
        # White has lost both knights and a rook
        rules = RulesEngine("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/2BQKB1R w Kkq - 0 1")
        captured = compute_captures(rules)
        counts = captured.counts(Color.BLACK)
        assert counts[PieceType.KNIGHT] == 2
        assert counts[PieceType.ROOK] == 1
        assert captured.by_white == ()

    def test_promotion_can_hide_a_capture(self) -> None:
        # White promoted the a-pawn and lost the h1 rook; the promoted pawn
        # is reported as captured and the extra queen is ignored.
        rules = RulesEngine("Q3k3/8/8/8/8/8/1PPPPPPP/RNBQKBN1 b Q - 0 1")
        captured = compute_captures(rules)
        assert sorted(captured.by_black) == [PieceType.PAWN, PieceType.ROOK]

    def test_never_negative(self) -> None:
        # Three white queens: surplus is ignored rather than counted negative
        rules = RulesEngine("4k3/8/8/8/8/8/8/QQQ1K3 w - - 0 1")
        captured = compute_captures(rules)
        assert PieceType.QUEEN not in captured.by_black
