"""Tests for field geometry helpers."""

import pytest

from arcadehaven.core.geometry import Rect, clamp, overlap_1d, random_origin
from arcadehaven.core.rng import SequenceRandom


class TestRect:
    def test_edges(self) -> None:
        rect = Rect(10, 20, 30, 40)
        assert rect.right == 40
        assert rect.bottom == 60

    def test_overlapping_boxes_intersect(self) -> None:
        assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))
        assert Rect(5, 5, 10, 10).intersects(Rect(0, 0, 10, 10))

    def test_touching_edges_do_not_intersect(self) -> None:
        assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))
        assert not Rect(0, 0, 10, 10).intersects(Rect(0, 10, 10, 10))

    def test_disjoint_boxes(self) -> None:
        assert not Rect(0, 0, 10, 10).intersects(Rect(50, 50, 5, 5))

    def test_contains_is_inclusive(self) -> None:
        rect = Rect(0, 0, 10, 10)
        assert rect.contains(0, 0)
        assert rect.contains(10, 10)
        assert rect.contains(5, 7)
        assert not rect.contains(10.5, 5)
        assert not rect.contains(5, -0.1)


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-5, 0), (0, 0), (7, 7), (10, 10), (42, 10)],
    )
    def test_clamp(self, value: float, expected: float) -> None:
        assert clamp(value, 0, 10) == expected

    def test_overlap(self) -> None:
        assert overlap_1d(0, 100, 50, 150) == 50
        assert overlap_1d(50, 150, 0, 100) == 50
        assert overlap_1d(10, 20, 0, 100) == 10

    def test_overlap_never_negative(self) -> None:
        assert overlap_1d(0, 10, 20, 30) == 0
        assert overlap_1d(0, 10, 10, 30) == 0

    def test_random_origin_keeps_box_inside(self) -> None:
        rng = SequenceRandom([0.5, 0.0, 0.999])
        assert random_origin(rng, 600, 60) == 270
        assert random_origin(rng, 600, 60) == 0
        assert random_origin(rng, 600, 60) + 60 <= 600

    def test_random_origin_without_room(self) -> None:
        rng = SequenceRandom([0.5])
        assert random_origin(rng, 50, 60) == 0
        assert rng.consumed == 0
