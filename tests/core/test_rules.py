"""Tests for RulesEngine: legality, game-end detection, history."""

import chess
import pytest

from chessling.core.enums import Color, GameResult, PieceType
from chessling.core.rules import GameEndReason, Outcome, RulesEngine, parse_square

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
BARE_KINGS = "8/8/8/4k3/8/8/8/4K3 w - - 0 1"


class TestParseSquare:
    def test_names_and_indices(self) -> None:
        assert parse_square("e4") == chess.E4
        assert parse_square(" E4 ") == chess.E4
        assert parse_square(0) == chess.A1
        assert parse_square(63) == chess.H8

    @pytest.mark.parametrize("value", ["z9", "", "e", "e44", -1, 64, True, None, 4.0])
    def test_malformed(self, value: object) -> None:
        assert parse_square(value) is None  # type: ignore[arg-type]


class TestLegalMoves:
    def test_starting_position_has_twenty(self) -> None:
        assert len(RulesEngine().legal_moves()) == 20

    def test_from_square(self) -> None:
        targets = {m.to_sq for m in RulesEngine().legal_moves("e2")}
        assert targets == {chess.E3, chess.E4}

    def test_from_empty_square(self) -> None:
        assert RulesEngine().legal_moves("e4") == []

    def test_malformed_square_gives_empty_list(self) -> None:
        rules = RulesEngine()
        assert rules.legal_moves("z9") == []
        assert rules.legal_moves(99) == []

    def test_moves_belong_to_side_to_move(self) -> None:
        rules = RulesEngine()
        rules.apply_move("e2", "e4")
        assert all(m.color == Color.BLACK for m in rules.legal_moves())


class TestApplyMove:
    def test_legal_move_changes_turn(self) -> None:
        rules = RulesEngine()
        move = rules.apply_move("e2", "e4")
        assert move is not None
        assert move.piece == PieceType.PAWN
        assert move.color == Color.WHITE
        assert rules.side_to_move == Color.BLACK
        assert rules.ply_count == 1

    def test_illegal_move_leaves_position_untouched(self) -> None:
        rules = RulesEngine()
        before = rules.fen()
        assert rules.apply_move("e2", "e5") is None
        assert rules.apply_move("e7", "e5") is None  # not Black's turn
        assert rules.apply_move("z9", "e4") is None
        assert rules.fen() == before
        assert rules.ply_count == 0

    def test_promotion_defaults_to_queen(self) -> None:
        rules = RulesEngine("8/P7/8/8/8/8/8/k6K w - - 0 1")
        move = rules.apply_move("a7", "a8")
        assert move is not None
        assert move.promotion == PieceType.QUEEN
        assert rules.piece_at("a8") == (PieceType.QUEEN, Color.WHITE)

    def test_promotion_to_chosen_piece(self) -> None:
        rules = RulesEngine("8/P7/8/8/8/8/8/k6K w - - 0 1")
        move = rules.apply_move("a7", "a8", PieceType.KNIGHT)
        assert move is not None
        assert rules.piece_at("a8") == (PieceType.KNIGHT, Color.WHITE)

    def test_undo_last_move(self) -> None:
        rules = RulesEngine()
        start = rules.fen()
        rules.apply_move("g1", "f3")
        undone = rules.undo_last_move()
        assert undone is not None and undone.from_sq == chess.G1
        assert rules.fen() == start
        assert rules.undo_last_move() is None


class TestHypothetical:
    def test_restores_position(self) -> None:
        rules = RulesEngine()
        before = rules.fen()
        move = rules.legal_moves("d2")[0]
        with rules.hypothetical(move):
            assert rules.side_to_move == Color.BLACK
        assert rules.fen() == before

    def test_restores_after_exception(self) -> None:
        rules = RulesEngine()
        before = rules.fen()
        move = rules.legal_moves("g1")[0]
        with pytest.raises(KeyError):
            with rules.hypothetical(move):
                raise KeyError("boom")
        assert rules.fen() == before
        assert rules.ply_count == 0


class TestQueries:
    def test_piece_at(self) -> None:
        rules = RulesEngine()
        assert rules.piece_at("e1") == (PieceType.KING, Color.WHITE)
        assert rules.piece_at("d8") == (PieceType.QUEEN, Color.BLACK)
        assert rules.piece_at("e4") is None
        assert rules.piece_at("nope") is None

    def test_count_and_pieces(self) -> None:
        rules = RulesEngine()
        assert rules.count(PieceType.PAWN, Color.WHITE) == 8
        assert rules.count(PieceType.QUEEN, Color.BLACK) == 1
        assert len(list(rules.pieces())) == 32

    def test_king_square(self) -> None:
        rules = RulesEngine()
        assert rules.king_square(Color.WHITE) == chess.E1
        assert rules.king_square(Color.BLACK) == chess.E8

    def test_square_attacked(self) -> None:
        rules = RulesEngine()
        assert rules.is_square_attacked("f3", Color.WHITE)
        assert not rules.is_square_attacked("e4", Color.WHITE)

    def test_history_san(self) -> None:
        rules = RulesEngine()
        for from_sq, to_sq in (("e2", "e4"), ("e7", "e5"), ("g1", "f3")):
            rules.apply_move(from_sq, to_sq)
        assert rules.move_history_san() == ["e4", "e5", "Nf3"]
        assert rules.last_move_san() == "Nf3"
        last = rules.last_move()
        assert last is not None and last.piece == PieceType.KNIGHT


class TestGameEnd:
    def test_in_progress(self) -> None:
        rules = RulesEngine()
        assert rules.outcome() is None
        assert not rules.is_game_over()

    def test_checkmate(self) -> None:
        rules = RulesEngine(FOOLS_MATE)
        assert rules.is_in_check()
        assert rules.is_checkmate()
        assert rules.outcome() == Outcome(
            GameResult.BLACK_WINS, GameEndReason.CHECKMATE, Color.BLACK
        )

    def test_stalemate(self) -> None:
        rules = RulesEngine(STALEMATE)
        assert rules.is_draw()
        outcome = rules.outcome()
        assert outcome is not None and outcome.reason == GameEndReason.STALEMATE

    def test_insufficient_material(self) -> None:
        outcome = RulesEngine(BARE_KINGS).outcome()
        assert outcome is not None
        assert outcome.reason == GameEndReason.INSUFFICIENT_MATERIAL
        assert outcome.winner is None

    def test_threefold_repetition_only_once_it_happened(self) -> None:
        rules = RulesEngine()
        shuffle = [("g1", "f3"), ("g8", "f6"), ("f3", "g1"), ("f6", "g8")] * 2
        for from_sq, to_sq in shuffle[:-1]:
            rules.apply_move(from_sq, to_sq)
        assert rules.outcome() is None  # one move away is not enough
        rules.apply_move(*shuffle[-1])
        outcome = rules.outcome()
        assert outcome is not None
        assert outcome.reason == GameEndReason.THREEFOLD_REPETITION

    def test_fifty_move_rule(self) -> None:
        rules = RulesEngine("4k3/8/8/8/8/8/8/R3K3 w - - 99 80")
        assert rules.outcome() is None
        rules.apply_move("a1", "a2")
        outcome = rules.outcome()
        assert outcome is not None and outcome.reason == GameEndReason.FIFTY_MOVES
