"""QTimer-backed frame scheduler for sessions hosted in the Qt event loop."""

from __future__ import annotations

import time

from PyQt6.QtCore import QObject, QTimer

from arcadehaven.game.interfaces import FrameCallback, IFrameScheduler, TimerCallback

DEFAULT_FRAME_INTERVAL_MS = 16


class QtFrameScheduler(IFrameScheduler):
    """One single-shot QTimer per pending handle.

    ``dt`` passed to frame callbacks is the real time elapsed since the frame
    was requested.
    """

    __slots__ = ("_parent", "_frame_interval_ms", "_timers", "_next_handle")

    def __init__(
        self,
        parent: QObject | None = None,
        frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS,
    ) -> None:
        self._parent = parent
        self._frame_interval_ms = frame_interval_ms
        self._timers: dict[int, QTimer] = {}
        self._next_handle = 1

    def request_frame(self, callback: FrameCallback) -> int:
        requested_at = time.monotonic()
        return self._schedule(
            self._frame_interval_ms,
            lambda: callback(time.monotonic() - requested_at),
        )

    def call_later(self, delay: float, callback: TimerCallback) -> int:
        return self._schedule(max(0, round(delay * 1000)), callback)

    def cancel(self, handle: int) -> None:
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def now(self) -> float:
        return time.monotonic()

    @property
    def pending(self) -> int:
        return len(self._timers)

    def cancel_all(self) -> None:
        for handle in list(self._timers):
            self.cancel(handle)

    def _schedule(self, interval_ms: int, fn: TimerCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(handle, fn))
        self._timers[handle] = timer
        timer.start(interval_ms)
        return handle

    def _fire(self, handle: int, fn: TimerCallback) -> None:
        timer = self._timers.pop(handle, None)
        if timer is None:
            return
        timer.deleteLater()
        fn()
