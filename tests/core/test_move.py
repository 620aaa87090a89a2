"""Tests for Move flags produced by describe_move."""

import chess

from chessling.core.enums import Color, MoveFlag, PieceType
from chessling.core.move import Move
from chessling.core.rules import RulesEngine


def _only(rules: RulesEngine, from_sq: str, to_sq: str) -> Move:
    target = chess.parse_square(to_sq)
    moves = [m for m in rules.legal_moves(from_sq) if m.to_sq == target]
    assert moves, f"{from_sq}{to_sq} not legal"
    return moves[0]


class TestFlags:
    def test_quiet_move(self) -> None:
        move = _only(RulesEngine(), "e2", "e4")
        assert move.flags == frozenset({MoveFlag.NORMAL})
        assert not (move.is_capture or move.is_castle or move.is_promotion)

    def test_capture(self) -> None:
        rules = RulesEngine("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        move = _only(rules, "e4", "d5")
        assert move.flags == frozenset({MoveFlag.CAPTURE})
        assert move.is_capture

    def test_en_passant(self) -> None:
        rules = RulesEngine("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        move = _only(rules, "e5", "d6")
        assert MoveFlag.EN_PASSANT in move.flags
        assert move.is_capture

    def test_castling(self) -> None:
        rules = RulesEngine("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        kingside = _only(rules, "e1", "g1")
        queenside = _only(rules, "e1", "c1")
        assert MoveFlag.KINGSIDE_CASTLE in kingside.flags
        assert MoveFlag.QUEENSIDE_CASTLE in queenside.flags
        assert kingside.is_castle and not kingside.is_capture

    def test_promotion_with_capture(self) -> None:
        rules = RulesEngine("1r5k/P7/8/8/8/8/8/K7 w - - 0 1")
        move = rules.apply_move("a7", "b8")
        assert move is not None
        assert move.flags == frozenset(
            {MoveFlag.CAPTURE, MoveFlag.PROMOTION, MoveFlag.PROMOTION_CAPTURE}
        )
        assert move.is_promotion and move.is_capture

    def test_promotion_capture_flag_alone_counts_as_capture(self) -> None:
        move = Move(chess.A7, chess.B8, PieceType.PAWN, Color.WHITE,
                    frozenset({MoveFlag.PROMOTION_CAPTURE}), PieceType.QUEEN)
        assert move.is_capture
        assert move.is_promotion


class TestConversion:
    def test_uci(self) -> None:
        move = Move(chess.A7, chess.A8, PieceType.PAWN, Color.WHITE,
                    frozenset({MoveFlag.PROMOTION}), PieceType.QUEEN)
        assert move.uci == "a7a8q"
        assert move.to_chess() == chess.Move.from_uci("a7a8q")
