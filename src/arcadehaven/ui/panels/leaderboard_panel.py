"""LeaderboardPanel — per-game top scores table."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QComboBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from arcadehaven.games.catalog import list_games
from arcadehaven.services.models import LeaderboardEntry
from arcadehaven.ui.i18n import t


class LeaderboardPanel(QWidget):
    """Game selector plus a rank / player / score / date table.

    Emits ``refresh_requested(game_id)`` whenever the selected game changes
    or the user presses *Refresh*; the owner answers with
    :meth:`set_entries` or :meth:`set_error`.
    """

    refresh_requested = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        self._title = QLabel()
        self._title.setObjectName("titleLabel")
        layout.addWidget(self._title)

        row = QHBoxLayout()
        self._game_caption = QLabel()
        row.addWidget(self._game_caption)
        self._game_combo = QComboBox()
        for info in list_games():
            self._game_combo.addItem(info.name, info.game_id)
        self._game_combo.currentIndexChanged.connect(self._emit_refresh)
        row.addWidget(self._game_combo, stretch=1)
        self._btn_refresh = QPushButton()
        self._btn_refresh.clicked.connect(self._emit_refresh)
        row.addWidget(self._btn_refresh)
        layout.addLayout(row)

        self._table = QTableWidget(0, 4)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.verticalHeader().setVisible(False)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self._table, stretch=1)

        self._message = QLabel()
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._message)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.leaderboard_title)
        self._game_caption.setText(s.leaderboard_game)
        self._btn_refresh.setText(s.leaderboard_refresh)
        self._table.setHorizontalHeaderLabels(
            [s.col_rank, s.col_player, s.col_score, s.col_date]
        )

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selected_game_id(self) -> str:
        return self._game_combo.currentData()

    def select_game(self, game_id: str) -> None:
        index = self._game_combo.findData(game_id)
        if index >= 0:
            self._game_combo.setCurrentIndex(index)

    def set_loading(self) -> None:
        self._message.setText(t().leaderboard_loading)

    def set_entries(self, entries: list[LeaderboardEntry]) -> None:
        self._table.setRowCount(len(entries))
        for row, entry in enumerate(entries):
            cells = (
                str(entry.rank),
                entry.username,
                str(entry.score_value),
                entry.timestamp.strftime("%Y-%m-%d %H:%M"),
            )
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if col != 1:
                    item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self._table.setItem(row, col, item)
        self._message.setText("" if entries else t().leaderboard_empty)

    def set_error(self, message: str) -> None:
        self._table.setRowCount(0)
        self._message.setText(t().leaderboard_error.format(msg=message))

    def row_count(self) -> int:
        return self._table.rowCount()

    def cell_text(self, row: int, col: int) -> str:
        item = self._table.item(row, col)
        return item.text() if item is not None else ""

    @property
    def message_text(self) -> str:
        return self._message.text()

    def _emit_refresh(self) -> None:
        self.refresh_requested.emit(self.selected_game_id)
