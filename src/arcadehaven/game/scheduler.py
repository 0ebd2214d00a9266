"""Deterministic scheduler with virtual time.

Used by tests and headless runs in place of the Qt-backed scheduler: time
only moves when the caller advances it, so every frame and timer fires in a
reproducible order.
"""

from __future__ import annotations

from arcadehaven.game.interfaces import FrameCallback, IFrameScheduler, TimerCallback

DEFAULT_FRAME_DT = 1.0 / 60.0


class ManualScheduler(IFrameScheduler):
    """Frame/timer source driven explicitly by the caller."""

    __slots__ = ("_time", "_next_handle", "_frames", "_timers", "_frame_dt")

    def __init__(self, frame_dt: float = DEFAULT_FRAME_DT) -> None:
        self._time = 0.0
        self._next_handle = 1
        self._frames: dict[int, FrameCallback] = {}
        self._timers: dict[int, tuple[float, TimerCallback]] = {}
        self._frame_dt = frame_dt

    # ── IFrameScheduler ──────────────────────────────────────────────────

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._allocate()
        self._frames[handle] = callback
        return handle

    def call_later(self, delay: float, callback: TimerCallback) -> int:
        handle = self._allocate()
        self._timers[handle] = (self._time + max(0.0, delay), callback)
        return handle

    def cancel(self, handle: int) -> None:
        self._frames.pop(handle, None)
        self._timers.pop(handle, None)

    def now(self) -> float:
        return self._time

    # ── Driving ──────────────────────────────────────────────────────────

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def advance_time(self, seconds: float) -> None:
        """Move the clock forward, firing due timers but no frames."""
        self._run_timers_until(self._time + seconds)

    def advance_frame(self, dt: float | None = None) -> int:
        """Advance by one frame of *dt* seconds.

        Timers due within the frame fire first, then every frame callback
        that was queued before this call. Returns the number of frame
        callbacks run.
        """
        step = self._frame_dt if dt is None else dt
        self._run_timers_until(self._time + step)
        queued, self._frames = self._frames, {}
        for callback in queued.values():
            callback(step)
        return len(queued)

    def run_frames(self, count: int, dt: float | None = None) -> int:
        """Advance *count* frames; returns the total callbacks run."""
        return sum(self.advance_frame(dt) for _ in range(count))

    def cancel_all(self) -> None:
        self._frames.clear()
        self._timers.clear()

    # ── Internal ─────────────────────────────────────────────────────────

    def _allocate(self) -> int:
        handle = self._next_handle
        self._next_handle += 1
        return handle

    def _run_timers_until(self, target: float) -> None:
        while True:
            due = [
                (deadline, handle)
                for handle, (deadline, _) in self._timers.items()
                if deadline <= target
            ]
            if not due:
                break
            deadline, handle = min(due)
            _, callback = self._timers.pop(handle)
            self._time = max(self._time, deadline)
            callback()
        self._time = target
