"""Coach messages: plain-language commentary for young players."""

from __future__ import annotations

import chess

from chessling.core.enums import Color, PieceType
from chessling.core.move import Move, Square
from chessling.core.rules import GameEndReason, RulesEngine
from chessling.game.interfaces import Verdict
from chessling.game.session import GameOverInfo
from chessling.i18n import t


def piece_name(piece_type: PieceType) -> str:
    s = t()
    names = {
        PieceType.PAWN: s.piece_pawn,
        PieceType.KNIGHT: s.piece_knight,
        PieceType.BISHOP: s.piece_bishop,
        PieceType.ROOK: s.piece_rook,
        PieceType.QUEEN: s.piece_queen,
        PieceType.KING: s.piece_king,
    }
    return names[piece_type]


def explain_computer_move(move: Move, rules: RulesEngine) -> str:
    """Describe the computer's reply; *rules* is the position after it."""
    s = t()
    text = s.computer_moved.format(
        piece=piece_name(move.piece),
        from_sq=chess.square_name(move.from_sq),
        to_sq=chess.square_name(move.to_sq),
    )
    if move.is_capture:
        return text + s.computer_captured
    if rules.is_in_check():
        return text + s.computer_check
    return text + s.computer_your_turn


def selection_hint(rules: RulesEngine, square: Square, player: Color) -> str:
    """Tip shown when the player picks up the piece on *square*."""
    s = t()
    occupant = rules.piece_at(square)
    if occupant is None or occupant[1] != player:
        return s.coach_not_your_piece
    if rules.legal_moves(square):
        return s.coach_selected
    return s.coach_stuck


def threatened_squares(rules: RulesEngine, color: Color) -> list[Square]:
    """Squares holding *color* pieces that the opponent attacks."""
    enemy = color.opposite
    return sorted(
        sq
        for sq, _kind, owner in rules.pieces()
        if owner == color and rules.is_square_attacked(sq, enemy)
    )


def _reason_text(reason: GameEndReason) -> str:
    s = t()
    if reason == GameEndReason.STALEMATE:
        return s.reason_stalemate
    if reason == GameEndReason.INSUFFICIENT_MATERIAL:
        return s.reason_insufficient_material
    if reason in (GameEndReason.FIFTY_MOVES, GameEndReason.SEVENTYFIVE_MOVES):
        return s.reason_move_rule
    if reason in (
        GameEndReason.THREEFOLD_REPETITION,
        GameEndReason.FIVEFOLD_REPETITION,
    ):
        return s.reason_repetition
    return ""


def game_over_text(info: GameOverInfo) -> str:
    s = t()
    if info.verdict == Verdict.WIN:
        return s.game_won_checkmate.format(xp=info.bonus_xp)
    if info.verdict == Verdict.LOSS:
        return s.game_lost_checkmate
    reason = _reason_text(info.reason)
    text = s.game_draw.format(xp=info.bonus_xp)
    return f"{text} {reason}" if reason else text
