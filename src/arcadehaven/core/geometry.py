"""Axis-aligned geometry helpers shared by every game field."""

from __future__ import annotations

from dataclasses import dataclass

from arcadehaven.core.rng import RandomSource


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned box in field coordinates (origin top-left, y grows down)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """AABB overlap test. Touching edges do not count."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def overlap_1d(a_start: float, a_end: float, b_start: float, b_end: float) -> float:
    """Length of the overlap of two closed intervals, never negative."""
    return max(0.0, min(a_end, b_end) - max(a_start, b_start))


def random_origin(rng: RandomSource, span: float, size: float) -> float:
    """Random coordinate such that ``coord + size <= span``."""
    room = span - size
    if room <= 0:
        return 0.0
    return rng.next() * room
