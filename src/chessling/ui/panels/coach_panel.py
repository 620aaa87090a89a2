"""CoachPanel — turn indicator and the coach's speech bubble."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chessling.i18n import t


class CoachPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._turn = QLabel()
        self._turn.setObjectName("turnIndicator")
        self._turn.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn)

        self._header = QLabel()
        self._header.setFont(QFont("DejaVu Sans", 12, QFont.Weight.Bold))
        layout.addWidget(self._header)

        self._message = QLabel()
        self._message.setObjectName("coachMessage")
        self._message.setWordWrap(True)
        self._message.setMinimumHeight(72)
        self._message.setAlignment(
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop
        )
        layout.addWidget(self._message)

    def retranslate_ui(self) -> None:
        self._header.setText(t().panel_coach)

    def set_message(self, text: str) -> None:
        self._message.setText(text)

    def message(self) -> str:
        return self._message.text()

    def set_turn_text(self, text: str) -> None:
        self._turn.setText(text)

    def turn_text(self) -> str:
        return self._turn.text()
