"""Game-session layer — lifecycle state machine, scheduling, countdown.

Quick start::

    from arcadehaven.game import GameSessionController, ManualScheduler
    from arcadehaven.games import get_game

    scheduler = ManualScheduler()
    session = GameSessionController(get_game("cosmicrush").create(), scheduler)
    session.mount()
    session.start()
    scheduler.run_frames(60)

The page-level orchestration lives in :mod:`arcadehaven.game.host`.
"""

from arcadehaven.game.controller import GameSessionController, SessionEvents
from arcadehaven.game.countdown import Countdown
from arcadehaven.game.interfaces import (
    GameOutcome,
    GameVariant,
    IFrameScheduler,
    LifecycleState,
    PongScore,
    Score,
)
from arcadehaven.game.scheduler import ManualScheduler

__all__ = [
    # Interfaces
    "GameOutcome",
    "GameVariant",
    "IFrameScheduler",
    "LifecycleState",
    "PongScore",
    "Score",
    # Concrete
    "Countdown",
    "GameSessionController",
    "ManualScheduler",
    "SessionEvents",
]
