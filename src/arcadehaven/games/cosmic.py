"""Cosmic Rush — dodge the falling obstacles for as long as possible."""

from __future__ import annotations

from dataclasses import dataclass

from arcadehaven.core.geometry import Rect, clamp, random_origin
from arcadehaven.core.input import InputEvent, Key, KeyPress
from arcadehaven.core.rng import RandomSource
from arcadehaven.game.interfaces import GameOutcome, GameVariant

FIELD_WIDTH = 600
FIELD_HEIGHT = 400
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 20
PLAYER_STEP = 20
OBSTACLE_SIZE = 30
OBSTACLE_SPEED = 5
SPAWN_PROBABILITY = 0.05


@dataclass(slots=True)
class Obstacle:
    id: int
    x: float
    y: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, OBSTACLE_SIZE, OBSTACLE_SIZE)


class CosmicRushGame(GameVariant):
    """+1 point per tick survived; any AABB hit ends the run."""

    game_id = "cosmicrush"
    field_size = (FIELD_WIDTH, FIELD_HEIGHT)

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)
        self.player_x = 0.0
        self.obstacles: list[Obstacle] = []
        self._next_id = 0
        self._score = 0
        self._crashed = False
        self.reset()

    @property
    def score(self) -> int:
        return self._score

    @property
    def player_rect(self) -> Rect:
        return Rect(self.player_x, FIELD_HEIGHT - PLAYER_HEIGHT, PLAYER_WIDTH, PLAYER_HEIGHT)

    def reset(self) -> None:
        self.player_x = (FIELD_WIDTH - PLAYER_WIDTH) / 2
        self.obstacles = []
        self._next_id = 0
        self._score = 0
        self._crashed = False

    def tick(self, dt: float) -> None:
        if self._crashed:
            return
        for obstacle in self.obstacles:
            obstacle.y += OBSTACLE_SPEED
        self.obstacles = [o for o in self.obstacles if o.y < FIELD_HEIGHT]

        if self._rng.next() < SPAWN_PROBABILITY:
            self.spawn(random_origin(self._rng, FIELD_WIDTH, OBSTACLE_SIZE))

        player = self.player_rect
        if any(o.rect.intersects(player) for o in self.obstacles):
            self._crashed = True
            return
        self._score += 1

    def spawn(self, x: float, y: float = 0.0) -> Obstacle:
        obstacle = Obstacle(self._next_id, x, y)
        self._next_id += 1
        self.obstacles.append(obstacle)
        return obstacle

    def handle_input(self, event: InputEvent) -> bool:
        if self._crashed or not isinstance(event, KeyPress):
            return False
        if event.key == Key.LEFT:
            target = self.player_x - PLAYER_STEP
        elif event.key == Key.RIGHT:
            target = self.player_x + PLAYER_STEP
        else:
            return False
        target = clamp(target, 0.0, FIELD_WIDTH - PLAYER_WIDTH)
        if target == self.player_x:
            return False
        self.player_x = target
        return True

    def is_terminal(self) -> bool:
        return self._crashed

    def outcome(self) -> GameOutcome:
        return GameOutcome(self._score)
