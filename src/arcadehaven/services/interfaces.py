"""Abstract score and auth collaborators.

The game layer never imports these: the host only sees a
``submit(game_name, score_value)`` callable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from arcadehaven.services.models import AuthSession, LeaderboardEntry, ScoreRecord, User

DEFAULT_LEADERBOARD_LIMIT = 10


class IAuthService(ABC):
    @property
    @abstractmethod
    def current_user(self) -> User | None: ...

    @abstractmethod
    def register(self, username: str, email: str, password: str) -> User:
        """Create an account. Raises ValidationError on bad or duplicate data."""

    @abstractmethod
    def login(self, email_or_username: str, password: str) -> AuthSession:
        """Authenticate. Raises AuthError on bad credentials."""

    @abstractmethod
    def logout(self) -> None: ...


class IScoreService(ABC):
    @abstractmethod
    def submit_score(self, game_name: str, score_value: int) -> ScoreRecord:
        """Record a score for the signed-in user."""

    @abstractmethod
    def get_leaderboard(
        self, game_name: str, limit: int = DEFAULT_LEADERBOARD_LIMIT
    ) -> list[LeaderboardEntry]:
        """Top scores, highest first, ranked from 1."""

    @abstractmethod
    def get_user_scores(self, user_id: int) -> list[ScoreRecord]:
        """The signed-in user's own scores, newest first."""
