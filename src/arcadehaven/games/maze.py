"""Maze Runner X — reach the exit before the clock runs out."""

from __future__ import annotations

from enum import IntEnum

from arcadehaven.core.input import InputEvent, Key, KeyPress
from arcadehaven.core.rng import RandomSource
from arcadehaven.game.interfaces import GameOutcome, GameVariant


class Cell(IntEnum):
    PATH = 0
    WALL = 1
    EXIT = 2


# fmt: off
MAZE_GRID: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
    (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 1, 0, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 1, 1, 0, 1, 1, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 0, 1, 1, 1, 0, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 0, 1, 1, 1, 0, 1, 1, 1),
    (1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)
# fmt: on

PLAYER_START = (1, 1)  # (x, y)
CELL_SIZE = 30
TIME_LIMIT = 60
POINTS_PER_SECOND = 5
EXIT_BONUS = 1000
TIME_BONUS_PER_SECOND = 10

_STEPS: dict[Key, tuple[int, int]] = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


class MazeGame(GameVariant):
    """Grid maze: unit steps, walls block, the exit cell wins."""

    game_id = "mazerunnerx"
    field_size = (len(MAZE_GRID[0]) * CELL_SIZE, len(MAZE_GRID) * CELL_SIZE)
    time_limit = TIME_LIMIT

    def __init__(
        self,
        rng: RandomSource | None = None,
        grid: tuple[tuple[int, ...], ...] = MAZE_GRID,
        start: tuple[int, int] = PLAYER_START,
    ) -> None:
        super().__init__(rng)
        widths = {len(row) for row in grid}
        if not grid or len(widths) != 1:
            raise ValueError("Maze grid must be a non-empty rectangle")
        self._grid = tuple(tuple(Cell(c) for c in row) for row in grid)
        self._start = start
        self.position = start
        self._score = 0
        self._won = False
        self._finished = False
        self.reset()

    # ── Grid queries ─────────────────────────────────────────────────────

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        return self._grid

    @property
    def width(self) -> int:
        return len(self._grid[0])

    @property
    def height(self) -> int:
        return len(self._grid)

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Cell kind at column *x*, row *y*; None when off the grid."""
        if 0 <= y < self.height and 0 <= x < self.width:
            return self._grid[y][x]
        return None

    def can_enter(self, x: int, y: int) -> bool:
        cell = self.cell_at(x, y)
        return cell is not None and cell != Cell.WALL

    # ── GameVariant ──────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self._score

    @property
    def won(self) -> bool:
        return self._won

    def reset(self) -> None:
        self._reset_timer()
        self.position = self._start
        self._score = 0
        self._won = False
        self._finished = False

    def handle_input(self, event: InputEvent) -> bool:
        if not isinstance(event, KeyPress) or event.key not in _STEPS:
            return False
        dx, dy = _STEPS[event.key]
        return self.move(dx, dy)

    def move(self, dx: int, dy: int) -> bool:
        """Step by (dx, dy); rejected moves leave the position unchanged."""
        if self._finished:
            return False
        x, y = self.position
        nx, ny = x + dx, y + dy
        if not self.can_enter(nx, ny):
            return False
        self.position = (nx, ny)
        if self._grid[ny][nx] == Cell.EXIT:
            self._won = True
            self._finished = True
            self._score = EXIT_BONUS + (self.time_left or 0) * TIME_BONUS_PER_SECOND
        return True

    def is_terminal(self) -> bool:
        return self._finished

    def outcome(self) -> GameOutcome:
        return GameOutcome(self._score, won=self._won)

    def on_second(self) -> None:
        elapsed = TIME_LIMIT - (self.time_left or 0)
        self._score = elapsed * POINTS_PER_SECOND

    def on_time_expired(self) -> None:
        self._finished = True
