"""REST clients for the Arcade Haven backend.

Usage::

    client = ArcadeApiClient("https://arcade.example.com")
    auth = HttpAuthService(client)
    auth.login("alice", "secret")
    scores = HttpScoreService(client)
    scores.submit_score("cosmicrush", 420)
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from arcadehaven.services.errors import (
    AuthError,
    ServiceError,
    ServiceUnavailableError,
    ValidationError,
)
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

DEFAULT_TIMEOUT = 5.0


class ArcadeApiClient:
    """Thin wrapper around a ``requests.Session`` with bearer-token auth."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("API base URL must be provided")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": "arcadehaven-desktop/0.1",
            }
        )
        self._token: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        else:
            self.session.headers.pop("Authorization", None)

    # ---------- Low-level request wrapper ----------
    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        _LOGGER.debug("API %s %s", method, url)
        kwargs.setdefault("timeout", self.timeout)
        try:
            resp = self.session.request(method=method, url=url, **kwargs)
        except requests.RequestException as exc:
            _LOGGER.warning("API %s %s failed: %s", method, url, exc)
            raise ServiceUnavailableError(str(exc)) from exc

        if resp.status_code >= 400:
            message = _error_message(resp)
            _LOGGER.error("API error %s on %s %s: %s", resp.status_code, method, path, message)
            if resp.status_code in (401, 403):
                raise AuthError(message, resp.status_code)
            if resp.status_code == 400:
                raise ValidationError(message, resp.status_code)
            raise ServiceError(message, resp.status_code)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise ServiceError(f"Malformed response from {path}", resp.status_code) from exc


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {resp.status_code}"


class HttpAuthService(IAuthService):
    def __init__(self, client: ArcadeApiClient) -> None:
        self._client = client
        self._user: User | None = None

    @property
    def current_user(self) -> User | None:
        return self._user

    def register(self, username: str, email: str, password: str) -> User:
        data = self._client.request(
            "POST",
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        return User.from_dict(data["user"])

    def login(self, email_or_username: str, password: str) -> AuthSession:
        data = self._client.request(
            "POST",
            "/api/auth/login",
            json={"emailOrUsername": email_or_username, "password": password},
        )
        token = (data or {}).get("token")
        if not token:
            raise AuthError("Login response did not include a token")
        session = AuthSession(str(token), User.from_dict(data["user"]))
        self._client.set_token(session.token)
        self._user = session.user
        _LOGGER.info("Signed in as %s", session.user.username)
        return session

    def logout(self) -> None:
        self._client.set_token(None)
        self._user = None


class HttpScoreService(IScoreService):
    def __init__(self, client: ArcadeApiClient) -> None:
        self._client = client

    def submit_score(self, game_name: str, score_value: int) -> ScoreRecord:
        if self._client.token is None:
            raise AuthError("Sign in to submit scores")
        data = self._client.request(
            "POST",
            "/api/scores",
            json={"gameName": game_name, "scoreValue": score_value},
        )
        return ScoreRecord.from_dict(data["score"])

    def get_leaderboard(
        self, game_name: str, limit: int = DEFAULT_LEADERBOARD_LIMIT
    ) -> list[LeaderboardEntry]:
        data = self._client.request(
            "GET", f"/api/scores/{quote(game_name, safe='')}", params={"limit": limit}
        )
        records = [ScoreRecord.from_dict(item) for item in data or []]
        records.sort(key=lambda r: r.score_value, reverse=True)
        return rank_records(records[:limit])

    def get_user_scores(self, user_id: int) -> list[ScoreRecord]:
        data = self._client.request("GET", f"/api/scores/user/{int(user_id)}")
        return [ScoreRecord.from_dict(item) for item in data or []]
