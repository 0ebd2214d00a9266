"""GameHost — Qt-free orchestration of one game page.

Resolves the game from the catalog, owns its session controller, tracks the
status line, current score and high score, and forwards final scores to a
submission callable without letting submission failures leak back in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from arcadehaven.core.input import InputEvent
from arcadehaven.core.rng import RandomSource
from arcadehaven.game.controller import GameSessionController
from arcadehaven.game.interfaces import (
    GameOutcome,
    IFrameScheduler,
    LifecycleState,
    Score,
)
from arcadehaven.games.catalog import GameInfo, get_game

_LOGGER = logging.getLogger(__name__)

SubmitScore = Callable[[str, int], object]


class HostStatus(Enum):
    LOADING = "Loading"
    READY = "Ready"
    PLAYING = "Playing"
    PAUSED = "Paused"
    GAME_OVER = "Game Over"


@dataclass
class HostEvents:
    on_status_changed: list[Callable[[HostStatus], None]] = field(default_factory=list)
    on_score_changed: list[Callable[[Score], None]] = field(default_factory=list)
    on_game_over: list[Callable[[GameOutcome], None]] = field(default_factory=list)


class GameHost:
    """Headless counterpart of the game page.

    Raises:
        GameNotFoundError: from the constructor when *game_id* is unknown;
            no session is created in that case.
    """

    __slots__ = (
        "_info",
        "_controller",
        "_status",
        "_current_score",
        "_high_score",
        "_last_outcome",
        "_submit_score",
        "events",
    )

    def __init__(
        self,
        game_id: str,
        scheduler: IFrameScheduler,
        *,
        rng: RandomSource | None = None,
        submit_score: SubmitScore | None = None,
        high_score: int = 0,
    ) -> None:
        self._info = get_game(game_id)
        self._controller = GameSessionController(self._info.create(rng), scheduler)
        self._status = HostStatus.LOADING
        self._current_score: Score = 0
        self._high_score = high_score
        self._last_outcome: GameOutcome | None = None
        self._submit_score = submit_score
        self.events = HostEvents()

        session = self._controller.events
        session.on_ready.append(self._on_ready)
        session.on_score_update.append(self._on_score_update)
        session.on_game_over.append(self._on_game_over)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def info(self) -> GameInfo:
        return self._info

    @property
    def controller(self) -> GameSessionController:
        return self._controller

    @property
    def status(self) -> HostStatus:
        return self._status

    @property
    def current_score(self) -> Score:
        return self._current_score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def last_outcome(self) -> GameOutcome | None:
        return self._last_outcome

    # ── Commands ─────────────────────────────────────────────────────────

    def mount(self) -> None:
        self._controller.mount()

    def start(self) -> bool:
        """Start or restart; only acts from Ready or Game Over."""
        if not self._controller.start():
            return False
        self._last_outcome = None
        self._set_status(HostStatus.PLAYING)
        return True

    def toggle_pause(self) -> bool:
        state = self._controller.state
        if state == LifecycleState.RUNNING and self._controller.pause():
            self._set_status(HostStatus.PAUSED)
            return True
        if state == LifecycleState.PAUSED and self._controller.resume():
            self._set_status(HostStatus.PLAYING)
            return True
        return False

    def handle_input(self, event: InputEvent) -> bool:
        return self._controller.handle_input(event)

    def exit(self) -> None:
        """Unmount the session; no callbacks fire afterwards."""
        self._controller.unmount()
        self._set_status(HostStatus.LOADING)

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_ready(self) -> None:
        self._set_status(HostStatus.READY)

    def _on_score_update(self, score: Score) -> None:
        self._current_score = score
        for cb in self.events.on_score_changed:
            cb(score)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        self._last_outcome = outcome
        value = outcome.score_value
        if value > self._high_score:
            self._high_score = value
        self._set_status(HostStatus.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)
        self._submit(value)

    def _submit(self, value: int) -> None:
        if self._submit_score is None:
            return
        try:
            self._submit_score(self._info.game_id, value)
        except Exception:
            _LOGGER.exception(
                "Score submission for %s failed; keeping the local result",
                self._info.game_id,
            )

    def _set_status(self, status: HostStatus) -> None:
        if status == self._status:
            return
        self._status = status
        for cb in self.events.on_status_changed:
            cb(status)
