"""Visual theme constants and QSS styles for Chessling."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # quiet move targets
    highlight_capture: QColor  # capture targets
    highlight_check: QColor  # king in check
    highlight_danger: QColor  # own piece under attack
    last_move: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def _build(cls, light: QColor, dark: QColor) -> BoardTheme:
        return cls(
            light_square=light,
            dark_square=dark,
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(34, 197, 94, 150),
            highlight_capture=QColor(239, 68, 68, 150),
            highlight_check=QColor(255, 0, 0, 120),
            highlight_danger=QColor(249, 115, 22, 110),
            last_move=QColor(250, 204, 21, 90),
            coord_light=dark,
            coord_dark=light,
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls._build(QColor("#F0FDF4"), QColor("#4ADE80"))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls._build(QColor("#EEF2FF"), QColor("#6366F1"))

    @classmethod
    def candy(cls) -> BoardTheme:
        return cls._build(QColor("#FFF1F2"), QColor("#FB7185"))

    @classmethod
    def wood(cls) -> BoardTheme:
        return cls._build(QColor("#EAD8B1"), QColor("#966F33"))

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names give Classic."""
        factories = {
            "Classic": cls.classic,
            "Blue": cls.blue,
            "Candy": cls.candy,
            "Wood": cls.wood,
        }
        return factories.get(name, cls.classic)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #FEFCE8;
}

QLabel {
    color: #1F2937;
    font-family: "Nunito", "Comic Sans MS", "Helvetica Neue", sans-serif;
}

QLabel#coachMessage {
    background: #FFFFFF;
    border: 2px solid #FACC15;
    border-radius: 10px;
    padding: 10px;
    font-size: 15px;
}

QLabel#turnIndicator {
    font-size: 16px;
    font-weight: bold;
}

QListWidget {
    background: #FFFFFF;
    color: #1F2937;
    border: 1px solid #E5E7EB;
    border-radius: 6px;
    font-size: 13px;
}

QProgressBar {
    background: #E5E7EB;
    border: none;
    border-radius: 8px;
    height: 16px;
    text-align: center;
}
QProgressBar::chunk {
    background: #8B5CF6;
    border-radius: 8px;
}

QPushButton {
    background: #8B5CF6;
    color: #FFFFFF;
    border: none;
    border-radius: 8px;
    padding: 8px 16px;
    font-size: 14px;
    font-weight: bold;
}
QPushButton:hover {
    background: #7C3AED;
}
QPushButton:pressed {
    background: #6D28D9;
}

QComboBox {
    background: #FFFFFF;
    color: #1F2937;
    border: 1px solid #D1D5DB;
    border-radius: 6px;
    padding: 4px 8px;
}
"""
