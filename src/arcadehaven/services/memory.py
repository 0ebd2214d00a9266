"""In-process auth and score services.

Used for offline play (no API URL configured) and in tests. Behaviour
mirrors the REST backend: same validation messages, same ordering rules.
"""

from __future__ import annotations

import itertools
import logging
import re
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

import bcrypt

from arcadehaven.services.errors import AuthError, ValidationError
from arcadehaven.services.interfaces import (
    DEFAULT_LEADERBOARD_LIMIT,
    IAuthService,
    IScoreService,
)
from arcadehaven.services.models import (
    AuthSession,
    LeaderboardEntry,
    ScoreRecord,
    User,
    rank_records,
)

_LOGGER = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
# bcrypt only reads the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72
_BCRYPT_ROUNDS = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class _Account:
    user: User
    password_hash: bytes


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def _hash_password(password: str) -> bytes:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(_BCRYPT_ROUNDS))


def _check_password(password: str, password_hash: bytes) -> bool:
    return bcrypt.checkpw(_password_bytes(password), password_hash)


class InMemoryAuthService(IAuthService):
    __slots__ = ("_accounts", "_ids", "_session")

    def __init__(self) -> None:
        self._accounts: list[_Account] = []
        self._ids = itertools.count(1)
        self._session: AuthSession | None = None

    @property
    def current_user(self) -> User | None:
        return self._session.user if self._session is not None else None

    @property
    def token(self) -> str | None:
        return self._session.token if self._session is not None else None

    def register(self, username: str, email: str, password: str) -> User:
        username, email = username.strip(), email.strip()
        if not username or not email or not password:
            raise ValidationError("Username, email, and password are required.", 400)
        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            raise ValidationError(
                f"Username must be between {USERNAME_MIN_LENGTH} and "
                f"{USERNAME_MAX_LENGTH} characters.",
                400,
            )
        if not _EMAIL_RE.match(email):
            raise ValidationError("Must be a valid email address.", 400)
        if any(a.user.email.lower() == email.lower() for a in self._accounts):
            raise ValidationError("User with this email already exists.", 400)
        if any(a.user.username.lower() == username.lower() for a in self._accounts):
            raise ValidationError("Username is already taken.", 400)

        user = User(next(self._ids), username, email)
        self._accounts.append(_Account(user, _hash_password(password)))
        _LOGGER.info("Registered user %s", username)
        return user

    def login(self, email_or_username: str, password: str) -> AuthSession:
        ident = email_or_username.strip().lower()
        if not ident or not password:
            raise ValidationError("Email/Username and password are required.", 400)
        account = next(
            (
                a
                for a in self._accounts
                if ident in (a.user.username.lower(), a.user.email.lower())
            ),
            None,
        )
        if account is None or not _check_password(password, account.password_hash):
            raise AuthError("Invalid credentials.", 401)

        token = secrets.token_urlsafe(24)
        self._session = AuthSession(token, account.user)
        return self._session

    def logout(self) -> None:
        self._session = None


class InMemoryScoreService(IScoreService):
    """Score store bound to an :class:`InMemoryAuthService` session."""

    __slots__ = ("_auth", "_records", "_ids", "_clock")

    def __init__(
        self,
        auth: InMemoryAuthService,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._auth = auth
        self._records: list[ScoreRecord] = []
        self._ids = itertools.count(1)
        self._clock = clock

    def submit_score(self, game_name: str, score_value: int) -> ScoreRecord:
        user = self._require_user()
        if not game_name or not game_name.strip():
            raise ValidationError("Game name and score value are required.", 400)
        if isinstance(score_value, bool) or not isinstance(score_value, int):
            raise ValidationError("Score value must be an integer.", 400)
        if score_value < 0:
            raise ValidationError("Score value cannot be negative.", 400)

        record = ScoreRecord(
            id=next(self._ids),
            game_name=game_name,
            score_value=score_value,
            user_id=user.id,
            created_at=self._clock(),
            username=user.username,
        )
        self._records.append(record)
        return record

    def get_leaderboard(
        self, game_name: str, limit: int = DEFAULT_LEADERBOARD_LIMIT
    ) -> list[LeaderboardEntry]:
        matching = [r for r in self._records if r.game_name == game_name]
        # Stable sort keeps earlier records ahead on ties.
        matching.sort(key=lambda r: r.score_value, reverse=True)
        return rank_records(matching[: max(0, limit)])

    def get_user_scores(self, user_id: int) -> list[ScoreRecord]:
        user = self._require_user()
        if user.id != user_id:
            raise AuthError("Forbidden: You can only view your own scores.", 403)
        mine = [r for r in self._records if r.user_id == user_id]
        mine.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return mine

    def _require_user(self) -> User:
        user = self._auth.current_user
        if user is None:
            raise AuthError("No token, authorization denied.", 401)
        return user
