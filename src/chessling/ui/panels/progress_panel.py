"""ProgressPanel — level badge and XP bar."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QVBoxLayout, QWidget

from chessling.game.progression import XP_PER_LEVEL, ProgressionState
from chessling.i18n import t


class ProgressPanel(QWidget):
    """Shows the player's level and experience towards the next one."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._state = ProgressionState()
        self._setup_ui()
        self.set_progress(self._state)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        row = QHBoxLayout()
        self._level = QLabel()
        self._level.setFont(QFont("DejaVu Sans", 13, QFont.Weight.Bold))
        row.addWidget(self._level)

        self._xp = QLabel()
        self._xp.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        row.addWidget(self._xp)
        layout.addLayout(row)

        self._bar = QProgressBar()
        self._bar.setRange(0, XP_PER_LEVEL)
        self._bar.setTextVisible(False)
        layout.addWidget(self._bar)

    def retranslate_ui(self) -> None:
        self.set_progress(self._state)

    def set_progress(self, state: ProgressionState) -> None:
        self._state = state
        s = t()
        self._level.setText(s.level_label.format(level=state.level))
        self._xp.setText(
            s.xp_label.format(xp=state.experience_points, total=XP_PER_LEVEL)
        )
        self._bar.setValue(state.experience_points)

    def bar_value(self) -> int:
        return self._bar.value()

    def level_text(self) -> str:
        return self._level.text()
