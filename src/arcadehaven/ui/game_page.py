"""GamePage — hosts one mounted game: view, info panel and controls."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget

from arcadehaven.core.rng import RandomSource
from arcadehaven.game.host import GameHost, HostStatus
from arcadehaven.game.interfaces import GameOutcome, IFrameScheduler, Score
from arcadehaven.ui.frame_scheduler import QtFrameScheduler
from arcadehaven.ui.game_view import GameView
from arcadehaven.ui.panels.control_panel import ControlPanel
from arcadehaven.ui.panels.info_panel import InfoPanel


class GamePage(QWidget):
    """Qt shell around :class:`GameHost`.

    Raises:
        GameNotFoundError: when *game_id* is unknown (nothing is built).
    """

    exit_requested = pyqtSignal()
    game_finished = pyqtSignal(str, int)  # game_id, score_value

    _TIME_REFRESH_MS = 250

    def __init__(
        self,
        game_id: str,
        *,
        submit_score: Callable[[str, int], object] | None = None,
        high_score: int = 0,
        scheduler: IFrameScheduler | None = None,
        rng: RandomSource | None = None,
        frame_interval_ms: int = 16,
        parent: QWidget | None = None,
    ) -> None:
        self._scheduler = scheduler or QtFrameScheduler(frame_interval_ms=frame_interval_ms)
        self._host = GameHost(
            game_id,
            self._scheduler,
            rng=rng,
            submit_score=submit_score,
            high_score=high_score,
        )
        super().__init__(parent)
        self._setup_ui()
        self._connect_host()
        self._host.mount()
        self._sync_time()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        left = QVBoxLayout()
        self._view = GameView(self._host, self)
        self._view.pause_requested.connect(self._on_pause_clicked)
        left.addWidget(self._view, stretch=1)
        self._controls = ControlPanel(self)
        self._controls.start_clicked.connect(self._on_start_clicked)
        self._controls.pause_clicked.connect(self._on_pause_clicked)
        self._controls.exit_clicked.connect(self.exit_requested)
        left.addWidget(self._controls)
        layout.addLayout(left, stretch=3)

        self._info = InfoPanel(self._host.info, self)
        self._info.set_high_score(self._host.high_score)
        layout.addWidget(self._info, stretch=1)

    def _connect_host(self) -> None:
        events = self._host.events
        events.on_status_changed.append(self._on_status_changed)
        events.on_score_changed.append(self._on_score_changed)
        events.on_game_over.append(self._on_game_over)
        self._time_timer = QTimer(self)
        self._time_timer.timeout.connect(self._sync_time)
        self._time_timer.start(self._TIME_REFRESH_MS)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def host(self) -> GameHost:
        return self._host

    @property
    def view(self) -> GameView:
        return self._view

    @property
    def controls(self) -> ControlPanel:
        return self._controls

    @property
    def info_panel(self) -> InfoPanel:
        return self._info

    def retranslate_ui(self) -> None:
        self._controls.retranslate_ui()
        self._info.retranslate_ui()

    def shutdown(self) -> None:
        """Unmount the session and stop every timer this page owns."""
        self._view.stop_repaint()
        self._time_timer.stop()
        self._host.exit()
        if isinstance(self._scheduler, QtFrameScheduler):
            self._scheduler.cancel_all()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_start_clicked(self) -> None:
        if self._host.start():
            self._view.setFocus()

    def _on_pause_clicked(self) -> None:
        self._host.toggle_pause()
        self._view.update()

    def _on_status_changed(self, status: HostStatus) -> None:
        self._controls.sync(status)
        self._info.set_status(status)
        self._view.update()

    def _on_score_changed(self, score: Score) -> None:
        self._info.set_score(score)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        self._info.set_high_score(self._host.high_score)
        self.game_finished.emit(self._host.info.game_id, outcome.score_value)

    def _sync_time(self) -> None:
        self._info.set_time_left(self._host.controller.time_left)
