"""Tests for the Block Stacker variant."""

from arcadehaven.core.input import Key, KeyPress
from arcadehaven.games.stacker import (
    BLOCK_HEIGHT,
    FIELD_HEIGHT,
    INITIAL_SPEED,
    SPEED_STEP,
    BlockStackerGame,
)


def _slide(game: BlockStackerGame, frames: int) -> None:
    for _ in range(frames):
        game.tick(1 / 60)


class TestSliding:
    def test_initial_layout(self) -> None:
        game = BlockStackerGame()
        assert len(game.stack) == 1
        assert (game.top.x, game.top.width) == (100, 100)
        assert game.top.y == FIELD_HEIGHT - BLOCK_HEIGHT
        assert game.current.x == 0
        assert game.current.speed == INITIAL_SPEED

    def test_bounces_off_right_wall(self) -> None:
        game = BlockStackerGame()
        _slide(game, 67)
        assert game.current.x == 200
        assert game.current.direction == -1
        _slide(game, 1)
        assert game.current.x == 197

    def test_bounces_off_left_wall(self) -> None:
        game = BlockStackerGame()
        game.current.x = 2
        game.current.direction = -1
        _slide(game, 1)
        assert game.current.x == 0
        assert game.current.direction == 1


class TestDropping:
    def test_partial_overlap_trims_block(self) -> None:
        game = BlockStackerGame()
        _slide(game, 20)  # x == 60
        assert game.handle_input(KeyPress(Key.ACTION))
        assert game.score == 1
        assert (game.top.x, game.top.width, game.top.level) == (100, 60, 1)
        assert game.current.width == 60
        assert game.current.x == 0
        assert game.current.speed == INITIAL_SPEED + SPEED_STEP

    def test_miss_ends_game(self) -> None:
        game = BlockStackerGame()
        assert game.drop()
        assert game.is_terminal()
        assert game.score == 0
        assert len(game.stack) == 1

    def test_touching_edges_is_a_miss(self) -> None:
        game = BlockStackerGame()
        game.current.x = 200
        game.drop()
        assert game.is_terminal()

    def test_perfect_drop_keeps_width(self) -> None:
        game = BlockStackerGame()
        game.current.x = 100
        game.drop()
        assert game.top.width == 100
        assert game.top.y == FIELD_HEIGHT - 2 * BLOCK_HEIGHT

    def test_no_drop_after_game_over(self) -> None:
        game = BlockStackerGame()
        game.drop()
        assert not game.drop()
        assert not game.handle_input(KeyPress(Key.ACTION))

    def test_other_keys_ignored(self) -> None:
        assert not BlockStackerGame().handle_input(KeyPress(Key.UP))

    def test_reset_rebuilds_tower(self) -> None:
        game = BlockStackerGame()
        game.current.x = 100
        game.drop()
        game.reset()
        assert len(game.stack) == 1
        assert game.score == 0
        assert not game.is_terminal()
