"""User-configurable settings (kept in memory for the session only)."""

from __future__ import annotations

from dataclasses import dataclass

from chessling.engine.search import Difficulty

BOARD_THEMES: tuple[str, ...] = ("Classic", "Blue", "Candy", "Wood")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True
    learning_mode: bool = True  # highlight pieces under attack

    # Sound
    sound_enabled: bool = True
    sound_volume: int = 80  # 0–100

    # Computer opponent
    difficulty: Difficulty = Difficulty.EASY
    think_delay_min_ms: int = 500
    think_delay_max_ms: int = 1500

    @property
    def think_delay_ms(self) -> tuple[int, int]:
        return self.think_delay_min_ms, self.think_delay_max_ms
