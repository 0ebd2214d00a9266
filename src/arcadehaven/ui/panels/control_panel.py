"""ControlPanel — start / pause / exit buttons for the game page."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from arcadehaven.game.host import HostStatus
from arcadehaven.ui.i18n import t


class ControlPanel(QWidget):
    """Start/Restart, Pause/Resume and Exit, enabled per host status."""

    start_clicked = pyqtSignal()
    pause_clicked = pyqtSignal()
    exit_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._status = HostStatus.LOADING
        self._setup_ui()
        self.retranslate_ui()
        self.sync(HostStatus.LOADING)

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)

        self._btn_start = QPushButton()
        self._btn_start.setFont(btn_font)
        self._btn_start.setMinimumHeight(36)
        self._btn_start.setStyleSheet(
            "QPushButton { background-color: #2e7d32; }"
            "QPushButton:hover { background-color: #388e3c; }"
            "QPushButton:disabled { background-color: #1b1b2f; }"
        )
        self._btn_start.clicked.connect(self.start_clicked)
        layout.addWidget(self._btn_start)

        self._btn_pause = QPushButton()
        self._btn_pause.setFont(btn_font)
        self._btn_pause.setMinimumHeight(36)
        self._btn_pause.clicked.connect(self.pause_clicked)
        layout.addWidget(self._btn_pause)

        self._btn_exit = QPushButton()
        self._btn_exit.setFont(btn_font)
        self._btn_exit.setMinimumHeight(36)
        self._btn_exit.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_exit.clicked.connect(self.exit_clicked)
        layout.addWidget(self._btn_exit)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_exit.setText(s.btn_exit)
        self._apply_labels()

    def sync(self, status: HostStatus) -> None:
        """Enable/disable buttons for *status*."""
        self._status = status
        self._btn_start.setEnabled(status in (HostStatus.READY, HostStatus.GAME_OVER))
        self._btn_pause.setEnabled(status in (HostStatus.PLAYING, HostStatus.PAUSED))
        self._apply_labels()

    def _apply_labels(self) -> None:
        s = t()
        self._btn_start.setText(
            s.btn_restart if self._status == HostStatus.GAME_OVER else s.btn_start
        )
        self._btn_pause.setText(
            s.btn_resume if self._status == HostStatus.PAUSED else s.btn_pause
        )
