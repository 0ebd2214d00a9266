"""Pluggable randomness so game sessions can be replayed deterministically."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence
from typing import Protocol, TypeVar

_T = TypeVar("_T")


class RandomSource(Protocol):
    """Anything that yields floats uniformly distributed in ``[0, 1)``."""

    def next(self) -> float: ...


class DefaultRandom:
    """Production source backed by :class:`random.Random`."""

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class SequenceRandom:
    """Replays a fixed sequence of values, cycling when exhausted.

    Handy in tests where spawn positions or shuffles must be known upfront.
    """

    __slots__ = ("_values", "_index")

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(float(v) for v in values)
        if not self._values:
            raise ValueError("SequenceRandom needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Random value out of range [0, 1): {value!r}")
        self._index = 0

    def next(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    @property
    def consumed(self) -> int:
        """How many values have been drawn so far."""
        return self._index


# ── Helpers ──────────────────────────────────────────────────────────────────


def uniform(rng: RandomSource, low: float, high: float) -> float:
    return low + (high - low) * rng.next()


def random_sign(rng: RandomSource) -> int:
    return 1 if rng.next() >= 0.5 else -1


def shuffle(rng: RandomSource, items: MutableSequence[_T]) -> None:
    """In-place Fisher–Yates shuffle driven by *rng*."""
    for i in range(len(items) - 1, 0, -1):
        j = min(int(rng.next() * (i + 1)), i)
        items[i], items[j] = items[j], items[i]
