"""Record types exchanged with the score and auth services.

``to_dict``/``from_dict`` use the REST API's camelCase field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        return datetime.now(timezone.utc)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _format_timestamp(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class User:
    id: int
    username: str
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(int(data["id"]), str(data["username"]), str(data.get("email", "")))


@dataclass(frozen=True, slots=True)
class AuthSession:
    """Successful login: bearer token plus the signed-in user."""

    token: str
    user: User


@dataclass(frozen=True, slots=True)
class ScoreRecord:
    id: int
    game_name: str
    score_value: int
    user_id: int
    created_at: datetime
    username: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "gameName": self.game_name,
            "scoreValue": self.score_value,
            "userId": self.user_id,
            "createdAt": _format_timestamp(self.created_at),
        }
        if self.username is not None:
            data["User"] = {"id": self.user_id, "username": self.username}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScoreRecord:
        # Some server builds store the value under "score".
        value = data.get("scoreValue", data.get("score", 0))
        user = data.get("User") or {}
        return cls(
            id=int(data.get("id", 0)),
            game_name=str(data.get("gameName", "")),
            score_value=int(value or 0),
            user_id=int(data.get("userId", user.get("id", 0)) or 0),
            created_at=_parse_timestamp(data.get("createdAt")),
            username=user.get("username"),
        )


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    rank: int
    username: str
    score_value: int
    timestamp: datetime

    @classmethod
    def from_record(cls, rank: int, record: ScoreRecord) -> LeaderboardEntry:
        return cls(rank, record.username or "Unknown", record.score_value, record.created_at)


def rank_records(records: list[ScoreRecord]) -> list[LeaderboardEntry]:
    """Number already-ordered records from 1."""
    return [LeaderboardEntry.from_record(i, r) for i, r in enumerate(records, start=1)]
