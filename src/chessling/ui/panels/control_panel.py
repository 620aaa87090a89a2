"""ControlPanel — new game button and session options."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessling.engine.search import Difficulty
from chessling.i18n import LANGUAGES, t
from chessling.settings import BOARD_THEMES


class ControlPanel(QWidget):
    """New Game button plus difficulty, board theme, sound and language."""

    new_game_clicked = pyqtSignal()
    difficulty_changed = pyqtSignal(int)  # Difficulty value
    theme_changed = pyqtSignal(str)
    sound_toggled = pyqtSignal(bool)
    language_changed = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._btn_new = QPushButton()
        self._btn_new.setFont(QFont("DejaVu Sans", 11))
        self._btn_new.setMinimumHeight(38)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        form = QFormLayout()
        form.setSpacing(6)

        self._lbl_difficulty = QLabel()
        self._combo_difficulty = QComboBox()
        for level in Difficulty:
            self._combo_difficulty.addItem("", int(level))
        self._combo_difficulty.currentIndexChanged.connect(self._on_difficulty_index)
        form.addRow(self._lbl_difficulty, self._combo_difficulty)

        self._lbl_theme = QLabel()
        self._combo_theme = QComboBox()
        for name in BOARD_THEMES:
            self._combo_theme.addItem("", name)
        self._combo_theme.currentIndexChanged.connect(self._on_theme_index)
        form.addRow(self._lbl_theme, self._combo_theme)

        self._lbl_language = QLabel()
        self._combo_language = QComboBox()
        self._combo_language.addItems(LANGUAGES)
        self._combo_language.currentTextChanged.connect(self.language_changed)
        form.addRow(self._lbl_language, self._combo_language)

        layout.addLayout(form)

        self._chk_sound = QCheckBox()
        self._chk_sound.setChecked(True)
        self._chk_sound.toggled.connect(self.sound_toggled)
        layout.addWidget(self._chk_sound)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_new_game)
        self._lbl_difficulty.setText(s.label_difficulty)
        self._lbl_theme.setText(s.label_theme)
        self._lbl_language.setText(s.label_language)
        self._chk_sound.setText(s.label_sound)

        difficulty_names = {
            Difficulty.EASY: s.difficulty_easy,
            Difficulty.MEDIUM: s.difficulty_medium,
            Difficulty.HARD: s.difficulty_hard,
        }
        for index in range(self._combo_difficulty.count()):
            level = Difficulty(self._combo_difficulty.itemData(index))
            self._combo_difficulty.setItemText(index, difficulty_names[level])

        theme_names = {
            "Classic": s.theme_classic,
            "Blue": s.theme_blue,
            "Candy": s.theme_candy,
            "Wood": s.theme_wood,
        }
        for index in range(self._combo_theme.count()):
            name = self._combo_theme.itemData(index)
            self._combo_theme.setItemText(index, theme_names.get(name, name))

    # ── Programmatic updates (no signals) ────────────────────────────────

    def set_values(
        self, *, difficulty: Difficulty, theme: str, sound: bool, language: str
    ) -> None:
        """Reflect settings in the widgets without re-emitting them."""
        widgets = (
            self._combo_difficulty,
            self._combo_theme,
            self._combo_language,
            self._chk_sound,
        )
        for widget in widgets:
            widget.blockSignals(True)
        try:
            self._combo_difficulty.setCurrentIndex(
                max(0, self._combo_difficulty.findData(int(difficulty)))
            )
            self._combo_theme.setCurrentIndex(max(0, self._combo_theme.findData(theme)))
            self._combo_language.setCurrentIndex(
                max(0, self._combo_language.findText(language))
            )
            self._chk_sound.setChecked(sound)
        finally:
            for widget in widgets:
                widget.blockSignals(False)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_difficulty_index(self, index: int) -> None:
        value = self._combo_difficulty.itemData(index)
        if value is not None:
            self.difficulty_changed.emit(int(value))

    def _on_theme_index(self, index: int) -> None:
        name = self._combo_theme.itemData(index)
        if name is not None:
            self.theme_changed.emit(str(name))
