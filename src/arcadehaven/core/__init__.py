"""Core primitives — geometry, input events and randomness, no Qt required.

Quick start::

    from arcadehaven.core import Rect, SequenceRandom

    player = Rect(280, 370, 40, 20)
    rock = Rect(290, 360, 30, 30)
    assert player.intersects(rock)
"""

from arcadehaven.core.geometry import Rect, clamp, overlap_1d, random_origin
from arcadehaven.core.input import InputEvent, Key, KeyPress, PointerPress
from arcadehaven.core.rng import (
    DefaultRandom,
    RandomSource,
    SequenceRandom,
    random_sign,
    shuffle,
    uniform,
)

__all__ = [
    # Geometry
    "Rect",
    "clamp",
    "overlap_1d",
    "random_origin",
    # Input
    "InputEvent",
    "Key",
    "KeyPress",
    "PointerPress",
    # Randomness
    "DefaultRandom",
    "RandomSource",
    "SequenceRandom",
    "random_sign",
    "shuffle",
    "uniform",
]
