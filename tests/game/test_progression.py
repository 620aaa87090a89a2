"""Tests for move classification and XP / level bookkeeping."""

import chess
import pytest

from chessling.core.enums import Color, MoveFlag, PieceType
from chessling.core.move import Move
from chessling.game.progression import (
    MoveKind,
    ProgressionState,
    award_xp,
    classify_move,
)
from chessling.i18n import set_language


def _move(*flags: MoveFlag, promotion: PieceType | None = None) -> Move:
    return Move(
        chess.E2,
        chess.E4,
        PieceType.PAWN,
        Color.WHITE,
        frozenset(flags) or frozenset({MoveFlag.NORMAL}),
        promotion,
    )


class TestClassifyMove:
    def test_quiet(self) -> None:
        result = classify_move(_move())
        assert result.kind == MoveKind.QUIET
        assert result.xp == 2
        assert result.message == "Nice move! Keep controlling the center!"

    def test_capture(self) -> None:
        result = classify_move(_move(MoveFlag.CAPTURE))
        assert (result.kind, result.xp) == (MoveKind.CAPTURE, 10)
        assert "+10 XP" in result.message

    def test_en_passant_counts_as_capture(self) -> None:
        result = classify_move(_move(MoveFlag.EN_PASSANT))
        assert result.kind == MoveKind.CAPTURE

    @pytest.mark.parametrize(
        "flag", [MoveFlag.KINGSIDE_CASTLE, MoveFlag.QUEENSIDE_CASTLE]
    )
    def test_castle(self, flag: MoveFlag) -> None:
        result = classify_move(_move(flag))
        assert (result.kind, result.xp) == (MoveKind.CASTLE, 15)

    def test_promotion(self) -> None:
        result = classify_move(_move(MoveFlag.PROMOTION, promotion=PieceType.QUEEN))
        assert (result.kind, result.xp) == (MoveKind.PROMOTION, 20)

    def test_promotion_with_capture_earns_promotion_xp(self) -> None:
        move = _move(
            MoveFlag.CAPTURE,
            MoveFlag.PROMOTION,
            MoveFlag.PROMOTION_CAPTURE,
            promotion=PieceType.QUEEN,
        )
        result = classify_move(move)
        assert (result.kind, result.xp) == (MoveKind.PROMOTION, 20)

    def test_message_follows_language(self) -> None:
        set_language("Russian")
        assert classify_move(_move()).message != "Nice move! Keep controlling the center!"


class TestAwardXp:
    def test_accumulates_within_level(self) -> None:
        state = ProgressionState()
        award = award_xp(state, 10)
        assert (state.experience_points, state.level) == (10, 1)
        assert not award.leveled_up

    def test_single_level_up(self) -> None:
        state = ProgressionState(experience_points=80, level=1)
        award = award_xp(state, 60)
        assert (state.experience_points, state.level) == (40, 2)
        assert award.leveled_up
        assert award.levels_gained == 1

    def test_multiple_level_ups(self) -> None:
        state = ProgressionState()
        award = award_xp(state, 250)
        assert (state.experience_points, state.level) == (50, 3)
        assert award.levels_gained == 2

    def test_exact_threshold(self) -> None:
        state = ProgressionState(experience_points=85, level=4)
        award_xp(state, 15)
        assert (state.experience_points, state.level) == (0, 5)

    def test_zero_is_a_no_op(self) -> None:
        state = ProgressionState(experience_points=42, level=2)
        award = award_xp(state, 0)
        assert (state.experience_points, state.level) == (42, 2)
        assert award.amount == 0 and not award.leveled_up

    def test_negative_rejected(self) -> None:
        state = ProgressionState(experience_points=5)
        with pytest.raises(ValueError):
            award_xp(state, -1)
        assert state.experience_points == 5
