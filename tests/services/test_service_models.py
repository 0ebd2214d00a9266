"""Tests for the service record types and their REST JSON shape."""

from __future__ import annotations

from datetime import datetime, timezone

from arcadehaven.services.models import LeaderboardEntry, ScoreRecord, User, rank_records

_CREATED = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


class TestUser:
    def test_dict_round_trip(self) -> None:
        user = User(7, "alice", "alice@example.com")
        assert user.to_dict() == {"id": 7, "username": "alice", "email": "alice@example.com"}
        assert User.from_dict(user.to_dict()) == user

    def test_email_is_optional(self) -> None:
        assert User.from_dict({"id": "3", "username": "bob"}) == User(3, "bob", "")


class TestScoreRecord:
    def test_camel_case_fields(self) -> None:
        record = ScoreRecord(1, "cosmicrush", 42, 7, _CREATED, username="alice")
        assert record.to_dict() == {
            "id": 1,
            "gameName": "cosmicrush",
            "scoreValue": 42,
            "userId": 7,
            "createdAt": "2024-03-01T12:30:00Z",
            "User": {"id": 7, "username": "alice"},
        }

    def test_dict_round_trip(self) -> None:
        record = ScoreRecord(1, "cosmicrush", 42, 7, _CREATED, username="alice")
        assert ScoreRecord.from_dict(record.to_dict()) == record

    def test_round_trip_without_username(self) -> None:
        record = ScoreRecord(2, "mazerunnerx", 0, 3, _CREATED)
        data = record.to_dict()
        assert "User" not in data
        assert ScoreRecord.from_dict(data) == record

    def test_legacy_score_key(self) -> None:
        record = ScoreRecord.from_dict(
            {"id": 5, "gameName": "pixelpong", "score": 3, "userId": 1, "createdAt": "2024-03-01T12:30:00Z"}
        )
        assert record.score_value == 3
        assert record.created_at == _CREATED


class TestRankRecords:
    def test_ranks_from_one(self) -> None:
        records = [
            ScoreRecord(1, "cosmicrush", 90, 1, _CREATED, username="alice"),
            ScoreRecord(2, "cosmicrush", 40, 2, _CREATED),
        ]
        assert rank_records(records) == [
            LeaderboardEntry(1, "alice", 90, _CREATED),
            LeaderboardEntry(2, "Unknown", 40, _CREATED),
        ]
