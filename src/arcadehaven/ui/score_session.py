"""Score-service session orchestration for the main UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from arcadehaven.services.interfaces import (
    DEFAULT_LEADERBOARD_LIMIT,
    IAuthService,
    IScoreService,
)
from arcadehaven.services.models import LeaderboardEntry, ScoreRecord
from arcadehaven.services.qt_bridge import ScoreWorker

_LOGGER = logging.getLogger(__name__)


class _ScoreCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    submit_requested = pyqtSignal(str, int, int)
    leaderboard_requested = pyqtSignal(str, int, int)


class ScoreSession:
    """Owns the worker thread that talks to the score service.

    Submissions are fire-and-forget; leaderboard replies for anything but
    the most recent request are dropped.
    """

    _THREAD_WAIT_MS = 2000

    __slots__ = (
        "__weakref__",
        "_command_bus",
        "_thread",
        "_worker",
        "_request_id",
        "_pending_leaderboard",
        "_leaderboard_limit",
        "_on_submitted",
        "_on_submit_failed",
        "_on_leaderboard",
        "_on_leaderboard_failed",
        "_is_started",
    )

    def __init__(
        self,
        *,
        scores: IScoreService,
        auth: IAuthService | None,
        on_submitted: Callable[[ScoreRecord], None],
        on_submit_failed: Callable[[str], None],
        on_leaderboard: Callable[[str, list[LeaderboardEntry]], None],
        on_leaderboard_failed: Callable[[str, str], None],
        parent: QObject | None = None,
        leaderboard_limit: int = DEFAULT_LEADERBOARD_LIMIT,
    ) -> None:
        self._command_bus = _ScoreCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = ScoreWorker(scores, auth)
        self._request_id = 0
        self._pending_leaderboard: int | None = None
        self._leaderboard_limit = leaderboard_limit
        self._on_submitted = on_submitted
        self._on_submit_failed = on_submit_failed
        self._on_leaderboard = on_leaderboard
        self._on_leaderboard_failed = on_leaderboard_failed
        self._is_started = False

    @property
    def is_started(self) -> bool:
        return self._is_started

    def setup(self) -> None:
        """Start the worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._worker.moveToThread(self._thread)
        self._command_bus.submit_requested.connect(self._worker.submit)
        self._command_bus.leaderboard_requested.connect(self._worker.fetch_leaderboard)
        self._worker.score_submitted.connect(self._handle_submitted)
        self._worker.submit_failed.connect(self._handle_submit_failed)
        self._worker.leaderboard_ready.connect(self._handle_leaderboard)
        self._worker.leaderboard_failed.connect(self._handle_leaderboard_failed)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        if not self._is_started:
            return
        self._pending_leaderboard = None
        self._thread.quit()
        self._thread.wait(self._THREAD_WAIT_MS)
        self._is_started = False

    def submit(self, game_name: str, score_value: int) -> None:
        if not self._is_started:
            _LOGGER.warning("Score session not started; dropping %s score", game_name)
            return
        self._request_id += 1
        self._command_bus.submit_requested.emit(game_name, score_value, self._request_id)

    def request_leaderboard(self, game_name: str) -> None:
        if not self._is_started:
            return
        self._request_id += 1
        self._pending_leaderboard = self._request_id
        self._command_bus.leaderboard_requested.emit(
            game_name, self._leaderboard_limit, self._request_id
        )

    # ── Worker results ───────────────────────────────────────────────────

    def _handle_submitted(self, _request_id: int, record: object) -> None:
        if isinstance(record, ScoreRecord):
            self._on_submitted(record)

    def _handle_submit_failed(self, _request_id: int, game_name: str) -> None:
        self._on_submit_failed(game_name)

    def _handle_leaderboard(self, request_id: int, game_name: str, entries: object) -> None:
        if request_id != self._pending_leaderboard:
            return
        self._pending_leaderboard = None
        self._on_leaderboard(game_name, list(entries) if isinstance(entries, list) else [])

    def _handle_leaderboard_failed(self, request_id: int, game_name: str, message: str) -> None:
        if request_id != self._pending_leaderboard:
            return
        self._pending_leaderboard = None
        self._on_leaderboard_failed(game_name, message)
