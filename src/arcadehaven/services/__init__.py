"""Score, leaderboard and auth collaborators.

Quick start::

    from arcadehaven.services import InMemoryAuthService, InMemoryScoreService

    auth = InMemoryAuthService()
    auth.register("alice", "alice@example.com", "secret")
    auth.login("alice", "secret")
    scores = InMemoryScoreService(auth)
    scores.submit_score("cosmicrush", 420)
    scores.get_leaderboard("cosmicrush")

The Qt worker lives in :mod:`arcadehaven.services.qt_bridge` so importing
this package does not pull in Qt.
"""

from arcadehaven.services.errors import (
    AuthError,
    ServiceError,
    ServiceUnavailableError,
    ValidationError,
)
from arcadehaven.services.http import ArcadeApiClient, HttpAuthService, HttpScoreService
from arcadehaven.services.interfaces import (
    DEFAULT_LEADERBOARD_LIMIT,
    IAuthService,
    IScoreService,
)
from arcadehaven.services.memory import InMemoryAuthService, InMemoryScoreService
from arcadehaven.services.models import (
    AuthSession,
    LeaderboardEntry,
    ScoreRecord,
    User,
)
from arcadehaven.services.submission import ScoreSubmitter

__all__ = [
    # Errors
    "AuthError",
    "ServiceError",
    "ServiceUnavailableError",
    "ValidationError",
    # Interfaces
    "DEFAULT_LEADERBOARD_LIMIT",
    "IAuthService",
    "IScoreService",
    # Records
    "AuthSession",
    "LeaderboardEntry",
    "ScoreRecord",
    "User",
    # Implementations
    "ArcadeApiClient",
    "HttpAuthService",
    "HttpScoreService",
    "InMemoryAuthService",
    "InMemoryScoreService",
    "ScoreSubmitter",
]
