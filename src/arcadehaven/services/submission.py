"""Fire-and-forget score submission."""

from __future__ import annotations

import logging

from arcadehaven.services.errors import ServiceError
from arcadehaven.services.interfaces import IAuthService, IScoreService
from arcadehaven.services.models import ScoreRecord

_LOGGER = logging.getLogger(__name__)


class ScoreSubmitter:
    """Submits final scores, logging instead of raising on failure.

    Anonymous players are skipped quietly: the game still counts locally.
    """

    __slots__ = ("_scores", "_auth")

    def __init__(self, scores: IScoreService, auth: IAuthService | None = None) -> None:
        self._scores = scores
        self._auth = auth

    def submit(self, game_name: str, score_value: int) -> ScoreRecord | None:
        if self._auth is not None and self._auth.current_user is None:
            _LOGGER.info("Not signed in; %s score %d kept locally", game_name, score_value)
            return None
        try:
            record = self._scores.submit_score(game_name, score_value)
        except ServiceError as exc:
            _LOGGER.warning("Failed to submit %s score %d: %s", game_name, score_value, exc)
            return None
        _LOGGER.info("Submitted %s score %d", game_name, score_value)
        return record
