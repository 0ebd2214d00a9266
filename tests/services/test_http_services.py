"""Tests for the REST clients (HTTP mocked with ``responses``)."""

from __future__ import annotations

import json

import pytest
import requests
import responses

from arcadehaven.services.errors import (
    AuthError,
    ServiceError,
    ServiceUnavailableError,
    ValidationError,
)
from arcadehaven.services.http import ArcadeApiClient, HttpAuthService, HttpScoreService

BASE = "https://arcade.test"

_USER = {"id": 7, "username": "alice", "email": "alice@example.com"}


def _client() -> ArcadeApiClient:
    return ArcadeApiClient(BASE + "/", timeout=1.0)


def _signed_in() -> tuple[ArcadeApiClient, HttpAuthService]:
    client = _client()
    responses.add(
        responses.POST,
        f"{BASE}/api/auth/login",
        json={"token": "tok-123", "user": _USER},
        status=200,
    )
    auth = HttpAuthService(client)
    auth.login("alice", "secret")
    return client, auth


class TestApiClient:
    def test_requires_base_url(self) -> None:
        with pytest.raises(ValueError):
            ArcadeApiClient("")

    @responses.activate
    def test_connection_error(self) -> None:
        responses.add(
            responses.GET,
            f"{BASE}/api/scores/pixelpong",
            body=requests.ConnectionError("refused"),
        )
        with pytest.raises(ServiceUnavailableError):
            _client().request("GET", "/api/scores/pixelpong")

    @pytest.mark.parametrize(
        ("status", "error"),
        [(400, ValidationError), (401, AuthError), (403, AuthError), (500, ServiceError)],
    )
    @responses.activate
    def test_status_mapping(self, status: int, error: type[ServiceError]) -> None:
        responses.add(
            responses.GET,
            f"{BASE}/api/thing",
            body=json.dumps({"message": "nope"}),
            status=status,
        )
        with pytest.raises(error, match="nope") as info:
            _client().request("GET", "/api/thing")
        assert info.value.status == status

    @responses.activate
    def test_plain_text_error(self) -> None:
        responses.add(responses.GET, f"{BASE}/api/thing", body="Bad Gateway", status=502)
        with pytest.raises(ServiceError, match="Bad Gateway"):
            _client().request("GET", "/api/thing")

    @responses.activate
    def test_malformed_json(self) -> None:
        responses.add(responses.GET, f"{BASE}/api/thing", body="{not json", status=200)
        with pytest.raises(ServiceError, match="Malformed"):
            _client().request("GET", "/api/thing")

    @responses.activate
    def test_empty_body(self) -> None:
        responses.add(responses.DELETE, f"{BASE}/api/thing", body="", status=204)
        assert _client().request("DELETE", "/api/thing") is None


class TestHttpAuth:
    @responses.activate
    def test_login_sets_bearer_token(self) -> None:
        client, auth = _signed_in()
        assert client.token == "tok-123"
        assert client.session.headers["Authorization"] == "Bearer tok-123"
        assert auth.current_user is not None
        assert auth.current_user.username == "alice"
        sent = json.loads(responses.calls[0].request.body)
        assert sent == {"emailOrUsername": "alice", "password": "secret"}

    @responses.activate
    def test_login_failure(self) -> None:
        responses.add(
            responses.POST,
            f"{BASE}/api/auth/login",
            json={"message": "Invalid credentials."},
            status=400,
        )
        auth = HttpAuthService(_client())
        with pytest.raises(ValidationError, match="Invalid credentials"):
            auth.login("alice", "bad")
        assert auth.current_user is None

    @responses.activate
    def test_register(self) -> None:
        responses.add(
            responses.POST,
            f"{BASE}/api/auth/register",
            json={"message": "User registered successfully!", "user": _USER},
            status=201,
        )
        user = HttpAuthService(_client()).register("alice", "alice@example.com", "pw")
        assert user.id == 7

    @responses.activate
    def test_logout_clears_token(self) -> None:
        client, auth = _signed_in()
        auth.logout()
        assert client.token is None
        assert "Authorization" not in client.session.headers
        assert auth.current_user is None


class TestHttpScores:
    def test_submit_requires_token(self) -> None:
        with pytest.raises(AuthError):
            HttpScoreService(_client()).submit_score("cosmicrush", 5)

    @responses.activate
    def test_submit(self) -> None:
        client, _ = _signed_in()
        responses.add(
            responses.POST,
            f"{BASE}/api/scores",
            json={
                "message": "Score submitted successfully!",
                "score": {
                    "id": 3,
                    "gameName": "cosmicrush",
                    "scoreValue": 420,
                    "userId": 7,
                    "createdAt": "2024-05-01T12:00:00.000Z",
                },
            },
            status=201,
        )
        record = HttpScoreService(client).submit_score("cosmicrush", 420)
        assert record.id == 3
        assert record.score_value == 420
        assert record.created_at.year == 2024
        request = responses.calls[1].request
        assert request.headers["Authorization"] == "Bearer tok-123"
        assert json.loads(request.body) == {"gameName": "cosmicrush", "scoreValue": 420}

    @responses.activate
    def test_leaderboard_sorted_and_ranked(self) -> None:
        responses.add(
            responses.GET,
            f"{BASE}/api/scores/pixelpong",
            json=[
                {
                    "id": 1,
                    "gameName": "pixelpong",
                    "score": 3,
                    "userId": 1,
                    "createdAt": "2024-05-01T12:00:00Z",
                    "User": {"id": 1, "username": "bob"},
                },
                {
                    "id": 2,
                    "gameName": "pixelpong",
                    "scoreValue": 5,
                    "userId": 7,
                    "createdAt": "2024-05-02T12:00:00Z",
                    "User": {"id": 7, "username": "alice"},
                },
            ],
            status=200,
        )
        board = HttpScoreService(_client()).get_leaderboard("pixelpong", limit=5)
        assert [(e.rank, e.username, e.score_value) for e in board] == [
            (1, "alice", 5),
            (2, "bob", 3),
        ]
        assert "limit=5" in responses.calls[0].request.url

    @responses.activate
    def test_leaderboard_unavailable(self) -> None:
        responses.add(
            responses.GET,
            f"{BASE}/api/scores/pixelpong",
            body=requests.Timeout("slow"),
        )
        with pytest.raises(ServiceUnavailableError):
            HttpScoreService(_client()).get_leaderboard("pixelpong")

    @responses.activate
    def test_user_scores(self) -> None:
        client, _ = _signed_in()
        responses.add(
            responses.GET,
            f"{BASE}/api/scores/user/7",
            json=[{"id": 9, "gameName": "mazerunnerx", "scoreValue": 1500, "userId": 7}],
            status=200,
        )
        records = HttpScoreService(client).get_user_scores(7)
        assert [r.game_name for r in records] == ["mazerunnerx"]
