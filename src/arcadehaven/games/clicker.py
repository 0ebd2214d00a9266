"""Speed Clicker — hit the shrinking target as often as possible."""

from __future__ import annotations

from arcadehaven.core.geometry import Rect, random_origin
from arcadehaven.core.input import InputEvent, PointerPress
from arcadehaven.core.rng import RandomSource
from arcadehaven.game.interfaces import GameOutcome, GameVariant

FIELD_WIDTH = 600
FIELD_HEIGHT = 400
GAME_DURATION = 10
INITIAL_TARGET_SIZE = 60
TARGET_SIZE_STEP = 4
MIN_TARGET_SIZE = 24


class SpeedClickerGame(GameVariant):
    game_id = "speedclicker"
    field_size = (FIELD_WIDTH, FIELD_HEIGHT)
    time_limit = GAME_DURATION

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)
        self.target = Rect(0, 0, INITIAL_TARGET_SIZE, INITIAL_TARGET_SIZE)
        self._hits = 0
        self._finished = False
        self.reset()

    @property
    def score(self) -> int:
        return self._hits

    @property
    def target_size(self) -> float:
        return self.target.width

    def reset(self) -> None:
        self._reset_timer()
        self._hits = 0
        self._finished = False
        self._place_target(INITIAL_TARGET_SIZE)

    def handle_input(self, event: InputEvent) -> bool:
        if self._finished or not isinstance(event, PointerPress):
            return False
        if not self.target.contains(event.x, event.y):
            return False
        self._hits += 1
        self._place_target(max(MIN_TARGET_SIZE, self.target.width - TARGET_SIZE_STEP))
        return True

    def is_terminal(self) -> bool:
        return self._finished

    def outcome(self) -> GameOutcome:
        return GameOutcome(self._hits)

    def on_time_expired(self) -> None:
        self._finished = True

    def _place_target(self, size: float) -> None:
        self.target = Rect(
            random_origin(self._rng, FIELD_WIDTH, size),
            random_origin(self._rng, FIELD_HEIGHT, size),
            size,
            size,
        )
