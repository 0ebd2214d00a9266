"""GameSessionController — the lifecycle state machine shared by every game.

Owns the frame loop and countdown for one mounted variant, translates host
commands into state transitions and pushes score / game-over notifications
through simple callbacks so the UI and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from arcadehaven.core.input import InputEvent
from arcadehaven.game.countdown import Countdown
from arcadehaven.game.interfaces import (
    GameOutcome,
    GameVariant,
    IFrameScheduler,
    LifecycleState,
    Score,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

ReadyCallback = Callable[[], None]
ScoreCallback = Callable[[Score], None]
GameOverCallback = Callable[[GameOutcome], None]
StateCallback = Callable[[LifecycleState], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_ready: list[ReadyCallback] = field(default_factory=list)
    on_score_update: list[ScoreCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameSessionController:
    """Drives one :class:`GameVariant` through its lifecycle.

    Host commands are edge-triggered: ``start`` only acts from READY or
    GAME_OVER, ``pause``/``resume`` only between RUNNING and PAUSED. Every
    scheduled callback carries the generation it was armed under and is
    dropped once a reset or unmount has bumped it.

    Thread-safety: call from a single thread (the UI thread); the scheduler
    must deliver callbacks on that same thread.
    """

    __slots__ = (
        "_variant",
        "_scheduler",
        "_state",
        "_generation",
        "_frame_handle",
        "_countdown",
        "_last_score",
        "_game_over_sent",
        "events",
    )

    def __init__(self, variant: GameVariant, scheduler: IFrameScheduler) -> None:
        self._variant = variant
        self._scheduler = scheduler
        self._state = LifecycleState.UNINITIALIZED
        self._generation = 0
        self._frame_handle: int | None = None
        self._countdown: Countdown | None = (
            Countdown(scheduler, self._on_second) if variant.time_limit else None
        )
        self._last_score: Score | None = None
        self._game_over_sent = False
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def variant(self) -> GameVariant:
        return self._variant

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_active(self) -> bool:
        return self._state in (LifecycleState.RUNNING, LifecycleState.PAUSED)

    @property
    def time_left(self) -> int | None:
        return self._variant.time_left

    # ── Host commands ────────────────────────────────────────────────────

    def mount(self) -> None:
        """Attach to the host: UNINITIALIZED → READY, then ``on_ready``."""
        if self._state != LifecycleState.UNINITIALIZED:
            return
        self._set_state(LifecycleState.READY)
        for cb in self.events.on_ready:
            cb()

    def start(self) -> bool:
        """Begin a fresh play-through. Returns True if one was started."""
        if self._state == LifecycleState.UNINITIALIZED:
            _LOGGER.debug("start() ignored: %s is not mounted", self._variant.game_id)
            return False
        if self.is_active:
            return False

        self._cancel_timers()
        self._generation += 1
        self._game_over_sent = False
        self._last_score = None
        self._variant.reset()
        self._set_state(LifecycleState.RUNNING)
        self._emit_score(self._variant.score)
        self._request_frame()
        if self._countdown is not None:
            self._countdown.start()
        _LOGGER.debug(
            "Started %s (generation %d)", self._variant.game_id, self._generation
        )
        return True

    def stop(self) -> None:
        """Host withdrew "running" without pausing.

        A no-op mid-game: the session keeps its state until the
        host pauses, restarts or unmounts it.
        """
        if self.is_active:
            _LOGGER.debug(
                "stop() ignored while %s is %s",
                self._variant.game_id,
                self._state.name,
            )

    def pause(self) -> bool:
        if self._state != LifecycleState.RUNNING:
            return False
        if self._countdown is not None:
            self._countdown.pause()
        self._set_state(LifecycleState.PAUSED)
        return True

    def resume(self) -> bool:
        if self._state != LifecycleState.PAUSED:
            return False
        self._set_state(LifecycleState.RUNNING)
        if self._countdown is not None:
            self._countdown.resume()
        return True

    def set_paused(self, paused: bool) -> bool:
        return self.pause() if paused else self.resume()

    def toggle_pause(self) -> bool:
        if self._state == LifecycleState.RUNNING:
            return self.pause()
        return self.resume()

    def handle_input(self, event: InputEvent) -> bool:
        """Forward *event* to the variant while RUNNING."""
        if self._state != LifecycleState.RUNNING:
            return False
        changed = self._variant.handle_input(event)
        if changed:
            self._sync()
        return changed

    def unmount(self) -> None:
        """Cancel every pending callback and detach from the host."""
        self._cancel_timers()
        self._generation += 1
        if self._state != LifecycleState.UNINITIALIZED:
            self._set_state(LifecycleState.UNINITIALIZED)

    # ── Loop ─────────────────────────────────────────────────────────────

    def _request_frame(self) -> None:
        generation = self._generation
        self._frame_handle = self._scheduler.request_frame(
            lambda dt: self._on_frame(generation, dt)
        )

    def _on_frame(self, generation: int, dt: float) -> None:
        if generation != self._generation:
            return
        self._frame_handle = None
        if self._state == LifecycleState.PAUSED:
            self._request_frame()
            return
        if self._state != LifecycleState.RUNNING:
            return

        self._variant.tick(dt)
        self._sync()
        if self._state == LifecycleState.RUNNING:
            self._request_frame()

    def _on_second(self) -> None:
        if self._state != LifecycleState.RUNNING:
            return
        self._variant.second_elapsed()
        self._sync()

    # ── Internal ─────────────────────────────────────────────────────────

    def _sync(self) -> None:
        if self._game_over_sent:
            return
        score = self._variant.score
        if score != self._last_score:
            self._emit_score(score)
        if self._variant.is_terminal():
            self._finish()

    def _finish(self) -> None:
        self._cancel_timers()
        self._set_state(LifecycleState.GAME_OVER)
        self._game_over_sent = True
        outcome = self._variant.outcome()
        _LOGGER.debug("Game over in %s: %s", self._variant.game_id, outcome)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _cancel_timers(self) -> None:
        if self._frame_handle is not None:
            self._scheduler.cancel(self._frame_handle)
            self._frame_handle = None
        if self._countdown is not None:
            self._countdown.stop()

    def _set_state(self, state: LifecycleState) -> None:
        self._state = state
        for cb in self.events.on_state_changed:
            cb(state)

    def _emit_score(self, score: Score) -> None:
        self._last_score = score
        for cb in self.events.on_score_update:
            cb(score)
