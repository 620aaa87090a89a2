"""Internationalisation strings for Chessling.

Usage::

    from chessling.i18n import t, set_language

    set_language("Russian")
    print(t().btn_new_game)          # "Новая игра"
    print(t().coach_capture.format(xp=10))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    app_title: str
    turn_white: str
    turn_black: str
    turn_thinking: str
    game_over_title: str
    play_again: str

    # ── Panels ───────────────────────────────────────────────────────────
    panel_coach: str
    panel_moves: str
    level_label: str  # "Level {level}"
    xp_label: str  # "{xp} / {total} XP"
    captured_by_white: str
    captured_by_black: str

    # ── Controls ─────────────────────────────────────────────────────────
    btn_new_game: str
    label_difficulty: str
    difficulty_easy: str
    difficulty_medium: str
    difficulty_hard: str
    label_theme: str
    theme_classic: str
    theme_blue: str
    theme_candy: str
    theme_wood: str
    label_sound: str
    label_language: str

    # ── Coach: human moves ───────────────────────────────────────────────
    coach_welcome: str
    coach_castle: str  # "{xp}"
    coach_capture: str  # "{xp}"
    coach_promotion: str  # "{xp}"
    coach_quiet: str
    coach_level_up: str
    coach_illegal: str
    coach_not_your_turn: str
    coach_game_finished: str
    coach_selected: str
    coach_stuck: str
    coach_not_your_piece: str

    # ── Coach: computer moves ────────────────────────────────────────────
    computer_moved: str  # "{piece} {from_sq} {to_sq}"
    computer_captured: str
    computer_check: str
    computer_your_turn: str

    # ── Game over ────────────────────────────────────────────────────────
    game_won_checkmate: str  # "{xp}"
    game_lost_checkmate: str
    game_draw: str  # "{xp}"
    reason_stalemate: str
    reason_insufficient_material: str
    reason_move_rule: str
    reason_repetition: str

    # ── Piece names ──────────────────────────────────────────────────────
    piece_pawn: str
    piece_knight: str
    piece_bishop: str
    piece_rook: str
    piece_queen: str
    piece_king: str


_EN = Strings(
    app_title="Chessling",
    turn_white="White's Turn",
    turn_black="Black's Turn",
    turn_thinking="Computer is thinking...",
    game_over_title="Game over",
    play_again="Play again",
    panel_coach="Coach",
    panel_moves="Moves",
    level_label="Level {level}",
    xp_label="{xp} / {total} XP",
    captured_by_white="Captured by White",
    captured_by_black="Captured by Black",
    btn_new_game="New Game",
    label_difficulty="Difficulty:",
    difficulty_easy="Easy",
    difficulty_medium="Medium",
    difficulty_hard="Hard",
    label_theme="Board:",
    theme_classic="Classic",
    theme_blue="Blue",
    theme_candy="Candy",
    theme_wood="Wood",
    label_sound="Sound",
    label_language="Language:",
    coach_welcome="Good luck! You are playing as White. Drag a pawn to start!",
    coach_castle="King safety is important! Good castle! +{xp} XP",
    coach_capture="Awesome capture! +{xp} XP!",
    coach_promotion="Promotion! You got a Queen! +{xp} XP!",
    coach_quiet="Nice move! Keep controlling the center!",
    coach_level_up="LEVEL UP! You are getting stronger!",
    coach_illegal="Oops! You can't go there. Try a green circle!",
    coach_not_your_turn="Hold on! The computer is still thinking.",
    coach_game_finished="This game is over. Press New Game to play again!",
    coach_selected="You selected a piece! It can move to the green dots!",
    coach_stuck="Uh oh, this piece is stuck! Try another one.",
    coach_not_your_piece="That's not your piece! You are playing White.",
    computer_moved="Computer moved {piece} from {from_sq} to {to_sq}.",
    computer_captured=" It captured your piece! Oh no!",
    computer_check=" Your King is in check!",
    computer_your_turn=" Your turn!",
    game_won_checkmate="Checkmate! You won! +{xp} XP!",
    game_lost_checkmate="Oh no! Checkmate. The computer won.",
    game_draw="It's a draw! Good game! +{xp} XP",
    reason_stalemate="Nobody can move, so it is a stalemate.",
    reason_insufficient_material="There are not enough pieces left to checkmate.",
    reason_move_rule="Too many moves went by without a capture or a pawn move.",
    reason_repetition="The same position came up again and again.",
    piece_pawn="Pawn",
    piece_knight="Knight",
    piece_bishop="Bishop",
    piece_rook="Rook",
    piece_queen="Queen",
    piece_king="King",
)

_RU = Strings(
    app_title="Chessling",
    turn_white="Ход белых",
    turn_black="Ход чёрных",
    turn_thinking="Компьютер думает...",
    game_over_title="Игра окончена",
    play_again="Сыграть ещё",
    panel_coach="Тренер",
    panel_moves="Ходы",
    level_label="Уровень {level}",
    xp_label="{xp} / {total} XP",
    captured_by_white="Взяли белые",
    captured_by_black="Взяли чёрные",
    btn_new_game="Новая игра",
    label_difficulty="Сложность:",
    difficulty_easy="Лёгкая",
    difficulty_medium="Средняя",
    difficulty_hard="Сложная",
    label_theme="Доска:",
    theme_classic="Классика",
    theme_blue="Синяя",
    theme_candy="Конфетная",
    theme_wood="Дерево",
    label_sound="Звук",
    label_language="Язык:",
    coach_welcome="Удачи! Ты играешь белыми. Перетащи пешку, чтобы начать!",
    coach_castle="Безопасность короля — это важно! Отличная рокировка! +{xp} XP",
    coach_capture="Классное взятие! +{xp} XP!",
    coach_promotion="Превращение! У тебя новый ферзь! +{xp} XP!",
    coach_quiet="Хороший ход! Продолжай контролировать центр!",
    coach_level_up="НОВЫЙ УРОВЕНЬ! Ты становишься сильнее!",
    coach_illegal="Ой! Туда нельзя. Попробуй зелёный кружок!",
    coach_not_your_turn="Подожди! Компьютер ещё думает.",
    coach_game_finished="Эта игра закончена. Нажми «Новая игра», чтобы сыграть ещё!",
    coach_selected="Фигура выбрана! Она может пойти на зелёные точки!",
    coach_stuck="Ой, эта фигура застряла! Попробуй другую.",
    coach_not_your_piece="Это не твоя фигура! Ты играешь белыми.",
    computer_moved="Компьютер пошёл: {piece} с {from_sq} на {to_sq}.",
    computer_captured=" Он взял твою фигуру! Ой-ой!",
    computer_check=" Твоему королю шах!",
    computer_your_turn=" Твой ход!",
    game_won_checkmate="Мат! Победа за тобой! +{xp} XP!",
    game_lost_checkmate="Ой! Мат. Компьютер победил.",
    game_draw="Ничья! Хорошая игра! +{xp} XP",
    reason_stalemate="Никто не может ходить — это пат.",
    reason_insufficient_material="Осталось слишком мало фигур, чтобы поставить мат.",
    reason_move_rule="Слишком много ходов без взятий и ходов пешкой.",
    reason_repetition="Одна и та же позиция повторилась несколько раз.",
    piece_pawn="Пешка",
    piece_knight="Конь",
    piece_bishop="Слон",
    piece_rook="Ладья",
    piece_queen="Ферзь",
    piece_king="Король",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
