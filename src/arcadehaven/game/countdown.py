"""Pause-aware one-second countdown driven through a frame scheduler."""

from __future__ import annotations

from collections.abc import Callable

from arcadehaven.game.interfaces import IFrameScheduler


class Countdown:
    """Fires *on_tick* once per *interval* of running time.

    At most one timer is pending. Pausing records how much of the current
    interval is still owed and cancels the timer; resuming arms only that
    remainder, so toggling pause never adds or drops a tick.
    """

    __slots__ = (
        "_scheduler",
        "_on_tick",
        "_interval",
        "_handle",
        "_armed_at",
        "_armed_delay",
        "_remaining",
        "_paused",
        "_generation",
    )

    def __init__(
        self,
        scheduler: IFrameScheduler,
        on_tick: Callable[[], None],
        interval: float = 1.0,
    ) -> None:
        if interval <= 0:
            raise ValueError("Countdown interval must be positive")
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._interval = interval
        self._handle: int | None = None
        self._armed_at = 0.0
        self._armed_delay = 0.0
        self._remaining = interval
        self._paused = False
        self._generation = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def remaining_in_interval(self) -> float:
        """Seconds until the next tick (frozen while paused)."""
        if self._handle is None:
            return self._remaining
        elapsed = self._scheduler.now() - self._armed_at
        return max(0.0, self._armed_delay - elapsed)

    # ── Commands ─────────────────────────────────────────────────────────

    def start(self) -> None:
        """(Re)start from a full interval."""
        self.stop()
        self._arm(self._interval)

    def pause(self) -> None:
        if self._handle is None:
            return
        self._remaining = self.remaining_in_interval
        self._disarm()
        self._paused = True

    def resume(self) -> None:
        if not self._paused:
            return
        self._paused = False
        self._arm(self._remaining)

    def stop(self) -> None:
        self._disarm()
        self._paused = False
        self._remaining = self._interval

    # ── Internal ─────────────────────────────────────────────────────────

    def _arm(self, delay: float) -> None:
        self._generation += 1
        generation = self._generation
        self._armed_at = self._scheduler.now()
        self._armed_delay = delay
        self._handle = self._scheduler.call_later(delay, lambda: self._fire(generation))

    def _disarm(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._handle = None
        # Re-arm before notifying: the callback may stop us.
        self._arm(self._interval)
        self._on_tick()
