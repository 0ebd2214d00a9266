"""Memory Match — flip two cards at a time and find every pair."""

from __future__ import annotations

from dataclasses import dataclass

from arcadehaven.core.geometry import Rect
from arcadehaven.core.input import InputEvent, PointerPress
from arcadehaven.core.rng import RandomSource, shuffle
from arcadehaven.game.interfaces import GameOutcome, GameVariant

CARD_SYMBOLS = ("🍒", "🍋", "🍉", "🍓", "🍇", "🍑", "🍊", "🍏")
TIME_LIMIT = 120
FLIP_BACK_DELAY = 0.8
POINTS_PER_MATCH = 10

FIELD_WIDTH = 400
FIELD_HEIGHT = 400
GRID_COLUMNS = 4
CARD_GAP = 8

_EPSILON = 1e-9


@dataclass(slots=True)
class Card:
    id: int
    symbol: str
    is_flipped: bool = False
    is_matched: bool = False


class MemoryMatchGame(GameVariant):
    """Pairs resolve on the tick after the second flip.

    A mismatched pair stays face up for :data:`FLIP_BACK_DELAY` seconds of
    running time; no further flips are accepted meanwhile.
    """

    game_id = "memorymatch"
    field_size = (FIELD_WIDTH, FIELD_HEIGHT)
    time_limit = TIME_LIMIT

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)
        self.cards: list[Card] = []
        self._face_up: list[int] = []
        self._mismatch_elapsed: float | None = None
        self._matches = 0
        self._score = 0
        self._won = False
        self._finished = False
        self.reset()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self._score

    @property
    def matches(self) -> int:
        return self._matches

    @property
    def pair_count(self) -> int:
        return len(CARD_SYMBOLS)

    @property
    def face_up(self) -> tuple[int, ...]:
        return tuple(self._face_up)

    @property
    def won(self) -> bool:
        return self._won

    # ── GameVariant ──────────────────────────────────────────────────────

    def reset(self) -> None:
        self._reset_timer()
        deck = list(CARD_SYMBOLS * 2)
        shuffle(self._rng, deck)
        self.cards = [Card(i, symbol) for i, symbol in enumerate(deck)]
        self._face_up = []
        self._mismatch_elapsed = None
        self._matches = 0
        self._score = 0
        self._won = False
        self._finished = False

    def handle_input(self, event: InputEvent) -> bool:
        if not isinstance(event, PointerPress):
            return False
        index = self.card_at(event.x, event.y)
        if index is None:
            return False
        return self.flip(index)

    def flip(self, card_id: int) -> bool:
        """Turn a card face up. Refused while a pair is pending."""
        if self._finished or len(self._face_up) >= 2:
            return False
        if not 0 <= card_id < len(self.cards):
            return False
        card = self.cards[card_id]
        if card.is_flipped or card.is_matched:
            return False
        card.is_flipped = True
        self._face_up.append(card_id)
        return True

    def tick(self, dt: float) -> None:
        if self._finished or len(self._face_up) < 2:
            return
        if self._mismatch_elapsed is None:
            self._resolve_pair()
            return
        self._mismatch_elapsed += dt
        if self._mismatch_elapsed >= FLIP_BACK_DELAY - _EPSILON:
            for index in self._face_up:
                self.cards[index].is_flipped = False
            self._face_up = []
            self._mismatch_elapsed = None

    def is_terminal(self) -> bool:
        return self._finished

    def outcome(self) -> GameOutcome:
        return GameOutcome(self._score, won=self._won)

    def on_time_expired(self) -> None:
        self._finished = True

    # ── Layout ───────────────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        return -(-len(self.cards) // GRID_COLUMNS)

    def card_rect(self, index: int) -> Rect:
        rows = max(1, self.rows)
        width = (FIELD_WIDTH - CARD_GAP * (GRID_COLUMNS + 1)) / GRID_COLUMNS
        height = (FIELD_HEIGHT - CARD_GAP * (rows + 1)) / rows
        col, row = index % GRID_COLUMNS, index // GRID_COLUMNS
        return Rect(
            CARD_GAP + col * (width + CARD_GAP),
            CARD_GAP + row * (height + CARD_GAP),
            width,
            height,
        )

    def card_at(self, x: float, y: float) -> int | None:
        for index in range(len(self.cards)):
            if self.card_rect(index).contains(x, y):
                return index
        return None

    # ── Internal ─────────────────────────────────────────────────────────

    def _resolve_pair(self) -> None:
        first, second = (self.cards[i] for i in self._face_up)
        if first.symbol != second.symbol:
            self._mismatch_elapsed = 0.0
            return
        first.is_matched = second.is_matched = True
        self._face_up = []
        self._matches += 1
        self._score = self._matches * POINTS_PER_MATCH
        if self._matches == self.pair_count:
            self._won = True
            self._finished = True
            self._score += self.time_left or 0
