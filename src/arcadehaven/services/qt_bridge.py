"""Qt bridge to run score-service calls in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from arcadehaven.services.errors import ServiceError
from arcadehaven.services.interfaces import IAuthService, IScoreService
from arcadehaven.services.submission import ScoreSubmitter


class ScoreWorker(QObject):
    """Thread-affine worker for score submission and leaderboard fetches."""

    score_submitted = pyqtSignal(int, object)
    submit_failed = pyqtSignal(int, str)
    leaderboard_ready = pyqtSignal(int, str, object)
    leaderboard_failed = pyqtSignal(int, str, str)

    def __init__(self, scores: IScoreService, auth: IAuthService | None = None) -> None:
        super().__init__()
        self._scores = scores
        self._submitter = ScoreSubmitter(scores, auth)

    @pyqtSlot(str, int, int)
    def submit(self, game_name: str, score_value: int, request_id: int) -> None:
        """Submit a final score; failures are logged and reported, never raised."""
        record = self._submitter.submit(game_name, score_value)
        if record is None:
            self.submit_failed.emit(request_id, game_name)
            return
        self.score_submitted.emit(request_id, record)

    @pyqtSlot(str, int, int)
    def fetch_leaderboard(self, game_name: str, limit: int, request_id: int) -> None:
        try:
            entries = self._scores.get_leaderboard(game_name, limit)
        except ServiceError as exc:
            self.leaderboard_failed.emit(request_id, game_name, str(exc))
            return
        self.leaderboard_ready.emit(request_id, game_name, entries)
