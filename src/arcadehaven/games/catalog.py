"""Catalog of playable games: display metadata plus a variant factory."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from arcadehaven.core.rng import RandomSource
from arcadehaven.game.interfaces import GameVariant
from arcadehaven.games.clicker import SpeedClickerGame
from arcadehaven.games.cosmic import CosmicRushGame
from arcadehaven.games.maze import MazeGame
from arcadehaven.games.memory import MemoryMatchGame
from arcadehaven.games.pong import PongGame
from arcadehaven.games.stacker import BlockStackerGame

VariantFactory = Callable[[RandomSource | None], GameVariant]


class GameNotFoundError(LookupError):
    """Raised when a game id has no catalog entry."""

    def __init__(self, game_id: str) -> None:
        super().__init__(f"Game not found: {game_id!r}")
        self.game_id = game_id


@dataclass(frozen=True, slots=True)
class ControlHint:
    key: str
    action: str


@dataclass(frozen=True, slots=True)
class GameInfo:
    game_id: str
    name: str
    description: str
    controls: tuple[ControlHint, ...]
    factory: VariantFactory

    def create(self, rng: RandomSource | None = None) -> GameVariant:
        """Build a fresh variant instance for one session."""
        return self.factory(rng)


_PAUSE = ControlHint("P", "Pause Game")

GAMES: tuple[GameInfo, ...] = (
    GameInfo(
        "cosmicrush",
        "Cosmic Rush",
        "Navigate your ship through an asteroid field. How long can you survive?",
        (ControlHint("Left/Right Arrows", "Steer Ship"), _PAUSE),
        CosmicRushGame,
    ),
    GameInfo(
        "blockstacker",
        "Block Stacker",
        "Stack blocks perfectly to build the tallest tower. Precision is key!",
        (ControlHint("Spacebar", "Drop Block"), _PAUSE),
        BlockStackerGame,
    ),
    GameInfo(
        "pixelpong",
        "Pixel Pong",
        "A modern twist on a classic. Beat the AI to five points!",
        (ControlHint("W/S or Up/Down Arrows", "Move Paddle"), _PAUSE),
        PongGame,
    ),
    GameInfo(
        "memorymatch",
        "Memory Match",
        "Test your memory by matching pairs of cards against the clock.",
        (ControlHint("Mouse Click", "Flip Card"), _PAUSE),
        MemoryMatchGame,
    ),
    GameInfo(
        "speedclicker",
        "Speed Clicker",
        "How many times can you click the target in 10 seconds? Test your reflexes!",
        (ControlHint("Mouse Click", "Click Target"), _PAUSE),
        SpeedClickerGame,
    ),
    GameInfo(
        "mazerunnerx",
        "Maze Runner X",
        "Navigate complex mazes. Find the exit before time runs out!",
        (ControlHint("Arrow Keys", "Move"), _PAUSE),
        MazeGame,
    ),
)

_BY_ID: dict[str, GameInfo] = {info.game_id: info for info in GAMES}


def list_games() -> tuple[GameInfo, ...]:
    return GAMES


def get_game(game_id: str) -> GameInfo:
    """Look up *game_id* case-insensitively.

    Raises:
        GameNotFoundError: when the id is unknown.
    """
    try:
        return _BY_ID[game_id.strip().lower()]
    except KeyError:
        raise GameNotFoundError(game_id) from None
