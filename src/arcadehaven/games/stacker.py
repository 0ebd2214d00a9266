"""Block Stacker — drop the sliding block onto the tower."""

from __future__ import annotations

from dataclasses import dataclass

from arcadehaven.core.geometry import overlap_1d
from arcadehaven.core.input import InputEvent, Key, KeyPress
from arcadehaven.core.rng import RandomSource
from arcadehaven.game.interfaces import GameOutcome, GameVariant

FIELD_WIDTH = 300
FIELD_HEIGHT = 400
BLOCK_HEIGHT = 20
INITIAL_BLOCK_WIDTH = 100
INITIAL_SPEED = 3.0
SPEED_STEP = 0.2


@dataclass(slots=True)
class Block:
    x: float
    width: float
    level: int

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def y(self) -> float:
        """Top edge in field coordinates (the tower can grow above 0)."""
        return FIELD_HEIGHT - (self.level + 1) * BLOCK_HEIGHT


@dataclass(slots=True)
class MovingBlock:
    x: float
    width: float
    speed: float
    direction: int = 1

    @property
    def right(self) -> float:
        return self.x + self.width


class BlockStackerGame(GameVariant):
    game_id = "blockstacker"
    field_size = (FIELD_WIDTH, FIELD_HEIGHT)

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)
        self.stack: list[Block] = []
        self.current = MovingBlock(0.0, INITIAL_BLOCK_WIDTH, INITIAL_SPEED)
        self._score = 0
        self._finished = False
        self.reset()

    @property
    def score(self) -> int:
        return self._score

    @property
    def top(self) -> Block:
        return self.stack[-1]

    def reset(self) -> None:
        base_x = (FIELD_WIDTH - INITIAL_BLOCK_WIDTH) / 2
        self.stack = [Block(base_x, INITIAL_BLOCK_WIDTH, level=0)]
        self.current = MovingBlock(0.0, INITIAL_BLOCK_WIDTH, INITIAL_SPEED)
        self._score = 0
        self._finished = False

    def tick(self, dt: float) -> None:
        if self._finished:
            return
        block = self.current
        block.x += block.speed * block.direction
        if block.x <= 0:
            block.x = 0.0
            block.direction = 1
        elif block.right >= FIELD_WIDTH:
            block.x = FIELD_WIDTH - block.width
            block.direction = -1

    def handle_input(self, event: InputEvent) -> bool:
        if isinstance(event, KeyPress) and event.key == Key.ACTION:
            return self.drop()
        return False

    def drop(self) -> bool:
        """Land the moving block; a miss ends the game."""
        if self._finished:
            return False
        top, block = self.top, self.current
        overlap = overlap_1d(block.x, block.right, top.x, top.right)
        if overlap <= 0:
            self._finished = True
            return True
        self.stack.append(Block(max(block.x, top.x), overlap, level=top.level + 1))
        self._score += 1
        self.current = MovingBlock(0.0, overlap, block.speed + SPEED_STEP)
        return True

    def is_terminal(self) -> bool:
        return self._finished

    def outcome(self) -> GameOutcome:
        return GameOutcome(self._score)
