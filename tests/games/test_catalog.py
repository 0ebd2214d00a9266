"""Tests for the game catalog."""

import pytest

from arcadehaven.core.rng import SequenceRandom
from arcadehaven.games.catalog import GameInfo, GameNotFoundError, get_game, list_games
from arcadehaven.games.pong import PongGame


class TestCatalog:
    def test_six_games_in_order(self) -> None:
        assert [info.game_id for info in list_games()] == [
            "cosmicrush",
            "blockstacker",
            "pixelpong",
            "memorymatch",
            "speedclicker",
            "mazerunnerx",
        ]

    def test_lookup_is_case_insensitive(self) -> None:
        assert get_game("PixelPong").name == "Pixel Pong"
        assert get_game("  mazerunnerx ").game_id == "mazerunnerx"

    def test_unknown_game(self) -> None:
        with pytest.raises(GameNotFoundError, match="Game not found") as info:
            get_game("tetris")
        assert info.value.game_id == "tetris"
        assert isinstance(info.value, LookupError)

    def test_create_builds_fresh_variant(self) -> None:
        info = get_game("pixelpong")
        first = info.create(SequenceRandom([0.5]))
        second = info.create(SequenceRandom([0.5]))
        assert isinstance(first, PongGame)
        assert first is not second

    @pytest.mark.parametrize("info", list_games(), ids=lambda i: i.game_id)
    def test_variant_ids_match_catalog(self, info: GameInfo) -> None:
        variant = info.create(SequenceRandom([0.5]))
        assert variant.game_id == info.game_id
        assert info.controls
