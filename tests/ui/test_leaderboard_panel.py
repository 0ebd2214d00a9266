"""Tests for the leaderboard panel."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from PyQt6.QtTest import QSignalSpy

from arcadehaven.services.models import LeaderboardEntry
from arcadehaven.ui.panels.leaderboard_panel import LeaderboardPanel

_WHEN = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.mark.usefixtures("qapp")
class TestLeaderboardPanel:
    def test_defaults_to_first_game(self) -> None:
        panel = LeaderboardPanel()
        assert panel.selected_game_id == "cosmicrush"

    def test_selecting_game_requests_refresh(self) -> None:
        panel = LeaderboardPanel()
        spy = QSignalSpy(panel.refresh_requested)
        panel.select_game("pixelpong")
        assert panel.selected_game_id == "pixelpong"
        assert len(spy) == 1
        assert spy[0][0] == "pixelpong"

    def test_unknown_game_keeps_selection(self) -> None:
        panel = LeaderboardPanel()
        panel.select_game("tetris")
        assert panel.selected_game_id == "cosmicrush"

    def test_refresh_button(self) -> None:
        panel = LeaderboardPanel()
        spy = QSignalSpy(panel.refresh_requested)
        panel._btn_refresh.click()
        assert len(spy) == 1

    def test_entries(self) -> None:
        panel = LeaderboardPanel()
        panel.set_loading()
        assert panel.message_text == "Loading…"
        panel.set_entries(
            [
                LeaderboardEntry(1, "alice", 900, _WHEN),
                LeaderboardEntry(2, "bob", 450, _WHEN),
            ]
        )
        assert panel.row_count() == 2
        assert panel.cell_text(0, 1) == "alice"
        assert panel.cell_text(1, 2) == "450"
        assert panel.cell_text(0, 3) == "2024-05-01 12:30"
        assert panel.message_text == ""

    def test_empty(self) -> None:
        panel = LeaderboardPanel()
        panel.set_entries([])
        assert panel.row_count() == 0
        assert "No scores yet" in panel.message_text

    def test_error_clears_table(self) -> None:
        panel = LeaderboardPanel()
        panel.set_entries([LeaderboardEntry(1, "alice", 900, _WHEN)])
        panel.set_error("timed out")
        assert panel.row_count() == 0
        assert panel.message_text == "Could not load leaderboard: timed out"
