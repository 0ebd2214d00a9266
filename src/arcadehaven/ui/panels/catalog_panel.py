"""CatalogPanel — home page listing every game."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from arcadehaven.games.catalog import GameInfo, list_games
from arcadehaven.ui.i18n import t


class CatalogPanel(QWidget):
    """Game list; double-click or *Play* emits ``game_selected(game_id)``."""

    game_selected = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self._title = QLabel()
        self._title.setObjectName("titleLabel")
        layout.addWidget(self._title)
        self._subtitle = QLabel()
        layout.addWidget(self._subtitle)

        self._list = QListWidget()
        for info in list_games():
            item = QListWidgetItem(self._item_text(info))
            item.setData(Qt.ItemDataRole.UserRole, info.game_id)
            self._list.addItem(item)
        self._list.setCurrentRow(0)
        self._list.itemDoubleClicked.connect(self._on_item_activated)
        layout.addWidget(self._list, stretch=1)

        self._btn_play = QPushButton()
        self._btn_play.setMinimumHeight(36)
        self._btn_play.clicked.connect(self._emit_current)
        layout.addWidget(self._btn_play)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.home_title)
        self._subtitle.setText(s.home_subtitle)
        self._btn_play.setText(s.btn_play)

    def selected_game_id(self) -> str | None:
        item = self._list.currentItem()
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    @staticmethod
    def _item_text(info: GameInfo) -> str:
        return f"{info.name}\n    {info.description}"

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.game_selected.emit(item.data(Qt.ItemDataRole.UserRole))

    def _emit_current(self) -> None:
        game_id = self.selected_game_id()
        if game_id is not None:
            self.game_selected.emit(game_id)
