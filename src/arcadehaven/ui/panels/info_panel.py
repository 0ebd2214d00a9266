"""InfoPanel — status, score, high score, timer and control hints."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFormLayout, QLabel, QVBoxLayout, QWidget

from arcadehaven.game.host import HostStatus
from arcadehaven.game.interfaces import Score
from arcadehaven.games.catalog import GameInfo
from arcadehaven.ui.i18n import status_text, t

_STATUS_COLORS = {
    HostStatus.LOADING: "#aaaaaa",
    HostStatus.READY: "#64b5f6",
    HostStatus.PLAYING: "#81c784",
    HostStatus.PAUSED: "#ffb74d",
    HostStatus.GAME_OVER: "#e57373",
}


class InfoPanel(QWidget):
    def __init__(self, info: GameInfo, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._info = info
        self._status = HostStatus.LOADING
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self._title = QLabel(self._info.name)
        self._title.setObjectName("titleLabel")
        layout.addWidget(self._title)

        self._description = QLabel(self._info.description)
        self._description.setWordWrap(True)
        layout.addWidget(self._description)

        form = QFormLayout()
        value_font = QFont("Helvetica Neue", 14, QFont.Weight.Bold)
        self._status_caption = QLabel()
        self._status_value = QLabel()
        self._status_value.setFont(value_font)
        self._score_caption = QLabel()
        self._score_value = QLabel("0")
        self._score_value.setFont(value_font)
        self._high_caption = QLabel()
        self._high_value = QLabel("0")
        self._high_value.setFont(value_font)
        self._time_caption = QLabel()
        self._time_value = QLabel("–")
        self._time_value.setFont(value_font)
        form.addRow(self._status_caption, self._status_value)
        form.addRow(self._score_caption, self._score_value)
        form.addRow(self._high_caption, self._high_value)
        form.addRow(self._time_caption, self._time_value)
        layout.addLayout(form)

        self._controls_caption = QLabel()
        self._controls_caption.setFont(QFont("Helvetica Neue", 11, QFont.Weight.Bold))
        layout.addWidget(self._controls_caption)
        self._controls = QLabel()
        self._controls.setTextFormat(Qt.TextFormat.PlainText)
        self._controls.setWordWrap(True)
        layout.addWidget(self._controls)
        layout.addStretch()

    def retranslate_ui(self) -> None:
        s = t()
        self._status_caption.setText(s.info_status)
        self._score_caption.setText(s.info_score)
        self._high_caption.setText(s.info_high_score)
        self._time_caption.setText(s.info_time_left)
        self._controls_caption.setText(s.info_controls)
        self._controls.setText(
            "\n".join(f"{hint.key}: {hint.action}" for hint in self._info.controls)
        )
        self.set_status(self._status)

    # ── Public API ───────────────────────────────────────────────────────

    def set_status(self, status: HostStatus) -> None:
        self._status = status
        self._status_value.setText(status_text(status))
        self._status_value.setStyleSheet(f"color: {_STATUS_COLORS[status]};")

    def set_score(self, score: Score) -> None:
        self._score_value.setText(str(score))

    def set_high_score(self, value: int) -> None:
        self._high_value.setText(str(value))

    def set_time_left(self, seconds: int | None) -> None:
        self._time_value.setText("–" if seconds is None else f"{seconds}s")

    @property
    def status_text(self) -> str:
        return self._status_value.text()

    @property
    def score_text(self) -> str:
        return self._score_value.text()

    @property
    def high_score_text(self) -> str:
        return self._high_value.text()
