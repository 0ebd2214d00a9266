"""Tests for GameHost (headless game page)."""

from __future__ import annotations

import logging

import pytest

from arcadehaven.core.input import Key, KeyPress
from arcadehaven.core.rng import SequenceRandom
from arcadehaven.game.host import GameHost, HostStatus
from arcadehaven.game.interfaces import GameOutcome, LifecycleState
from arcadehaven.game.scheduler import ManualScheduler
from arcadehaven.games.catalog import GameNotFoundError
from arcadehaven.games.pong import PongGame


class _Submissions:
    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def __call__(self, game_name: str, score_value: int) -> None:
        self.calls.append((game_name, score_value))


def _stacker(**kwargs: object) -> tuple[ManualScheduler, GameHost]:
    sched = ManualScheduler()
    host = GameHost("blockstacker", sched, **kwargs)  # type: ignore[arg-type]
    host.mount()
    return sched, host


def _play_one_block(sched: ManualScheduler, host: GameHost) -> None:
    """Land one block (x == 60) then miss: final score 1."""
    sched.run_frames(20)
    host.handle_input(KeyPress(Key.ACTION))
    host.handle_input(KeyPress(Key.ACTION))


class TestHostLifecycle:
    def test_unknown_game_raises(self) -> None:
        with pytest.raises(GameNotFoundError):
            GameHost("nope", ManualScheduler())

    def test_mount_is_ready(self) -> None:
        _, host = _stacker()
        assert host.status == HostStatus.READY
        assert host.info.name == "Block Stacker"

    def test_start_plays(self) -> None:
        _, host = _stacker()
        assert host.start()
        assert host.status == HostStatus.PLAYING
        assert host.controller.state == LifecycleState.RUNNING

    def test_start_while_playing_ignored(self) -> None:
        _, host = _stacker()
        host.start()
        assert not host.start()

    def test_toggle_pause(self) -> None:
        _, host = _stacker()
        assert not host.toggle_pause()
        host.start()
        assert host.toggle_pause()
        assert host.status == HostStatus.PAUSED
        assert host.toggle_pause()
        assert host.status == HostStatus.PLAYING

    def test_exit_unmounts(self) -> None:
        sched, host = _stacker()
        host.start()
        host.exit()
        assert host.status == HostStatus.LOADING
        assert host.controller.state == LifecycleState.UNINITIALIZED
        assert sched.pending_frames == 0

    def test_status_events_only_on_change(self) -> None:
        sched = ManualScheduler()
        host = GameHost("blockstacker", sched)
        seen: list[HostStatus] = []
        host.events.on_status_changed.append(seen.append)
        host.mount()
        host.start()
        host.start()
        host.toggle_pause()
        assert seen == [HostStatus.READY, HostStatus.PLAYING, HostStatus.PAUSED]


class TestHostScores:
    def test_game_over_submits_and_updates_high_score(self) -> None:
        submit = _Submissions()
        sched, host = _stacker(submit_score=submit, high_score=0)
        outcomes: list[GameOutcome] = []
        host.events.on_game_over.append(outcomes.append)
        host.start()
        _play_one_block(sched, host)
        assert host.status == HostStatus.GAME_OVER
        assert host.current_score == 1
        assert host.high_score == 1
        assert [o.score for o in outcomes] == [1]
        assert submit.calls == [("blockstacker", 1)]

    def test_lower_score_keeps_high_score(self) -> None:
        sched, host = _stacker(high_score=7)
        host.start()
        _play_one_block(sched, host)
        assert host.high_score == 7
        assert host.last_outcome is not None

    def test_restart_after_game_over(self) -> None:
        sched, host = _stacker()
        host.start()
        _play_one_block(sched, host)
        assert host.start()
        assert host.status == HostStatus.PLAYING
        assert host.current_score == 0
        assert host.last_outcome is None

    def test_submission_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def failing(game_name: str, score_value: int) -> None:
            raise ConnectionError("offline")

        sched, host = _stacker(submit_score=failing)
        host.start()
        with caplog.at_level(logging.ERROR, logger="arcadehaven.game.host"):
            _play_one_block(sched, host)
        assert host.status == HostStatus.GAME_OVER
        assert "Score submission for blockstacker failed" in caplog.text

    def test_score_events(self) -> None:
        sched, host = _stacker()
        scores: list[object] = []
        host.events.on_score_changed.append(scores.append)
        host.start()
        _play_one_block(sched, host)
        assert scores == [0, 1]

    def test_timed_game_ends_by_clock(self) -> None:
        sched = ManualScheduler()
        submit = _Submissions()
        host = GameHost("speedclicker", sched, submit_score=submit)
        host.mount()
        host.start()
        sched.advance_time(10.0)
        assert host.status == HostStatus.GAME_OVER
        assert submit.calls == [("speedclicker", 0)]

    def test_no_submission_after_exit(self) -> None:
        sched = ManualScheduler()
        submit = _Submissions()
        host = GameHost("speedclicker", sched, submit_score=submit)
        host.mount()
        host.start()
        host.exit()
        sched.advance_time(30.0)
        assert submit.calls == []


class TestPausedWorld:
    def test_pong_entities_frozen_while_paused(
        self, scheduler: ManualScheduler, rng: SequenceRandom
    ) -> None:
        sched = scheduler
        host = GameHost("pixelpong", sched, rng=rng)
        host.mount()
        host.start()
        sched.run_frames(3)
        host.toggle_pause()
        variant = host.controller.variant
        assert isinstance(variant, PongGame)
        before = (variant.ball.x, variant.ball.y, variant.ai_y, variant.score)
        sched.run_frames(120)
        sched.advance_time(5.0)
        assert (variant.ball.x, variant.ball.y, variant.ai_y, variant.score) == before
