"""Abstract interfaces for the game-session layer.

The session controller depends on these ABCs only: a variant never talks to
Qt, the network or another variant, and the controller never knows which
game it is running.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import ClassVar

from arcadehaven.core.input import InputEvent
from arcadehaven.core.rng import DefaultRandom, RandomSource

# ── Lifecycle FSM states ─────────────────────────────────────────────────────


class LifecycleState(IntEnum):
    """Finite-state-machine states shared by every mini-game."""

    UNINITIALIZED = auto()
    READY = auto()
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


# ── Scores and outcomes ──────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PongScore:
    """Two-sided score used by the pong variant."""

    player: int = 0
    ai: int = 0

    def __str__(self) -> str:
        return f"{self.player} : {self.ai}"


Score = int | PongScore


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Payload delivered with ``on_game_over``."""

    score: Score
    won: bool = False
    winner: str | None = None

    @property
    def score_value(self) -> int:
        """Non-negative integer submitted to the leaderboard."""
        if isinstance(self.score, PongScore):
            return self.score.player
        return max(0, int(self.score))


# ── Scheduling ───────────────────────────────────────────────────────────────

FrameCallback = Callable[[float], None]  # dt in seconds
TimerCallback = Callable[[], None]


class IFrameScheduler(ABC):
    """Source of animation frames and one-shot timers.

    Handles are opaque integers; cancelling an unknown or already fired
    handle is a no-op.
    """

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> int:
        """Run *callback(dt)* once on the next frame."""

    @abstractmethod
    def call_later(self, delay: float, callback: TimerCallback) -> int:
        """Run *callback()* once after *delay* seconds."""

    @abstractmethod
    def cancel(self, handle: int) -> None:
        """Drop a pending frame request or timer."""

    @abstractmethod
    def now(self) -> float:
        """Monotonic time in seconds."""


# ── Variant contract ─────────────────────────────────────────────────────────


class GameVariant(ABC):
    """One mini-game: owns its entities, knows nothing about its host.

    Subclasses set ``game_id``, ``field_size`` and (for timed games)
    ``time_limit``, then implement :meth:`reset`, :meth:`handle_input`,
    :meth:`is_terminal` and :meth:`outcome`. ``tick`` and the countdown hooks
    default to no-ops.
    """

    game_id: ClassVar[str] = ""
    field_size: ClassVar[tuple[int, int]] = (600, 400)
    time_limit: ClassVar[int | None] = None

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng: RandomSource = rng if rng is not None else DefaultRandom()
        self.time_left: int | None = self.time_limit

    @property
    @abstractmethod
    def score(self) -> Score: ...

    @abstractmethod
    def reset(self) -> None:
        """Rebuild every entity for a fresh play-through."""

    def tick(self, dt: float) -> None:
        """Advance the simulation by one frame."""

    @abstractmethod
    def handle_input(self, event: InputEvent) -> bool:
        """Apply *event*. Returns True if the game state changed."""

    @abstractmethod
    def is_terminal(self) -> bool: ...

    @abstractmethod
    def outcome(self) -> GameOutcome: ...

    # ── Countdown hooks ──────────────────────────────────────────────────

    def second_elapsed(self) -> None:
        """Consume one second of the time limit (called by the controller)."""
        if self.time_left is None or self.time_left <= 0 or self.is_terminal():
            return
        self.time_left -= 1
        self.on_second()
        if self.time_left == 0:
            self.on_time_expired()

    def on_second(self) -> None:
        pass

    def on_time_expired(self) -> None:
        pass

    def _reset_timer(self) -> None:
        self.time_left = self.time_limit
