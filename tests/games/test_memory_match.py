"""Tests for the Memory Match variant."""

from collections import Counter

from arcadehaven.core.input import PointerPress
from arcadehaven.core.rng import DefaultRandom, SequenceRandom
from arcadehaven.games.memory import CARD_SYMBOLS, TIME_LIMIT, MemoryMatchGame


def _game() -> MemoryMatchGame:
    # top draws leave the deck unshuffled: card i shows CARD_SYMBOLS[i % 8]
    return MemoryMatchGame(SequenceRandom([0.999]))


class TestDeck:
    def test_sixteen_cards_in_pairs(self) -> None:
        game = MemoryMatchGame(DefaultRandom(5))
        counts = Counter(card.symbol for card in game.cards)
        assert len(game.cards) == 16
        assert set(counts) == set(CARD_SYMBOLS)
        assert all(n == 2 for n in counts.values())

    def test_unshuffled_order(self) -> None:
        game = _game()
        assert game.cards[0].symbol == game.cards[8].symbol
        assert game.cards[0].symbol != game.cards[1].symbol


class TestFlipping:
    def test_flip_face_up(self) -> None:
        game = _game()
        assert game.flip(0)
        assert game.cards[0].is_flipped
        assert game.face_up == (0,)

    def test_refuses_same_card_twice(self) -> None:
        game = _game()
        game.flip(0)
        assert not game.flip(0)

    def test_refuses_third_card(self) -> None:
        game = _game()
        game.flip(0)
        game.flip(1)
        assert not game.flip(2)
        assert not game.cards[2].is_flipped

    def test_refuses_invalid_id(self) -> None:
        game = _game()
        assert not game.flip(-1)
        assert not game.flip(16)

    def test_match_resolves_on_next_tick(self) -> None:
        game = _game()
        game.flip(0)
        game.flip(8)
        assert game.score == 0
        game.tick(0.1)
        assert game.cards[0].is_matched and game.cards[8].is_matched
        assert game.matches == 1
        assert game.score == 10
        assert game.face_up == ()

    def test_matched_card_cannot_flip(self) -> None:
        game = _game()
        game.flip(0)
        game.flip(8)
        game.tick(0.1)
        assert not game.flip(0)


class TestMismatch:
    def test_mismatch_flips_back_after_delay(self) -> None:
        game = _game()
        game.flip(0)
        game.flip(1)
        game.tick(0.1)  # resolves as a mismatch
        for _ in range(7):
            game.tick(0.1)
        assert game.cards[0].is_flipped and game.cards[1].is_flipped
        game.tick(0.1)
        assert not game.cards[0].is_flipped
        assert not game.cards[1].is_flipped
        assert game.face_up == ()
        assert game.score == 0

    def test_flips_blocked_while_pending(self) -> None:
        game = _game()
        game.flip(0)
        game.flip(1)
        game.tick(0.25)
        game.tick(0.25)
        assert not game.flip(2)
        game.tick(0.25)
        game.tick(0.25)
        game.tick(0.25)
        assert game.flip(2)


class TestWinning:
    def test_all_pairs_win_with_time_bonus(self) -> None:
        game = _game()
        game.second_elapsed()
        for i in range(8):
            game.flip(i)
            game.flip(i + 8)
            game.tick(0.1)
        assert game.won
        assert game.is_terminal()
        assert game.score == 8 * 10 + (TIME_LIMIT - 1)

    def test_time_out_loses(self) -> None:
        game = _game()
        for _ in range(TIME_LIMIT):
            game.second_elapsed()
        assert game.is_terminal()
        assert not game.won
        assert not game.flip(0)


class TestLayout:
    def test_card_rects(self) -> None:
        game = _game()
        first = game.card_rect(0)
        assert (first.x, first.y, first.width, first.height) == (8, 8, 90, 90)
        fifth = game.card_rect(5)
        assert (fifth.x, fifth.y) == (106, 106)

    def test_pointer_flips_card(self) -> None:
        game = _game()
        assert game.handle_input(PointerPress(50, 50))
        assert game.face_up == (0,)

    def test_pointer_in_gap_ignored(self) -> None:
        game = _game()
        assert game.card_at(4, 4) is None
        assert not game.handle_input(PointerPress(4, 4))
