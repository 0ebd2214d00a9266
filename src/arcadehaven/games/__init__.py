"""The six arcade variants and the catalog that names them.

Quick start::

    from arcadehaven.games import get_game

    info = get_game("PixelPong")
    variant = info.create()
"""

from arcadehaven.games.catalog import (
    GAMES,
    ControlHint,
    GameInfo,
    GameNotFoundError,
    get_game,
    list_games,
)
from arcadehaven.games.clicker import SpeedClickerGame
from arcadehaven.games.cosmic import CosmicRushGame
from arcadehaven.games.maze import MazeGame
from arcadehaven.games.memory import MemoryMatchGame
from arcadehaven.games.pong import PongGame
from arcadehaven.games.stacker import BlockStackerGame

__all__ = [
    # Catalog
    "GAMES",
    "ControlHint",
    "GameInfo",
    "GameNotFoundError",
    "get_game",
    "list_games",
    # Variants
    "BlockStackerGame",
    "CosmicRushGame",
    "MazeGame",
    "MemoryMatchGame",
    "PongGame",
    "SpeedClickerGame",
]
