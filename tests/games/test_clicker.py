"""Tests for the Speed Clicker variant."""

from arcadehaven.core.geometry import Rect
from arcadehaven.core.input import Key, KeyPress, PointerPress
from arcadehaven.core.rng import SequenceRandom
from arcadehaven.games.clicker import (
    GAME_DURATION,
    INITIAL_TARGET_SIZE,
    MIN_TARGET_SIZE,
    SpeedClickerGame,
)


def _game() -> SpeedClickerGame:
    return SpeedClickerGame(SequenceRandom([0.5]))


class TestTarget:
    def test_initial_target_placed_inside_field(self) -> None:
        game = _game()
        assert game.target == Rect(270, 170, INITIAL_TARGET_SIZE, INITIAL_TARGET_SIZE)

    def test_hit_scores_and_shrinks(self) -> None:
        game = _game()
        assert game.handle_input(PointerPress(300, 200))
        assert game.score == 1
        assert game.target == Rect(272, 172, 56, 56)

    def test_edge_click_counts(self) -> None:
        game = _game()
        assert game.handle_input(PointerPress(270, 170))

    def test_miss_is_ignored(self) -> None:
        game = _game()
        assert not game.handle_input(PointerPress(5, 5))
        assert game.score == 0

    def test_keys_are_ignored(self) -> None:
        assert not _game().handle_input(KeyPress(Key.ACTION))

    def test_size_shrinks_by_step_per_hit(self) -> None:
        game = _game()
        for hits in range(1, 9):
            target = game.target
            game.handle_input(PointerPress(target.x + 1, target.y + 1))
            assert game.target_size == INITIAL_TARGET_SIZE - 4 * hits

    def test_size_floor(self) -> None:
        game = _game()
        for _ in range(20):
            target = game.target
            game.handle_input(PointerPress(target.x + 1, target.y + 1))
        assert game.score == 20
        assert game.target_size == MIN_TARGET_SIZE


class TestClickerClock:
    def test_expires_after_duration(self) -> None:
        game = _game()
        for _ in range(GAME_DURATION - 1):
            game.second_elapsed()
        assert not game.is_terminal()
        game.second_elapsed()
        assert game.is_terminal()
        assert game.time_left == 0

    def test_no_hits_after_expiry(self) -> None:
        game = _game()
        for _ in range(GAME_DURATION):
            game.second_elapsed()
        assert not game.handle_input(PointerPress(300, 200))
        assert game.outcome().score == 0
