"""Toolkit-neutral input events delivered to game variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    """Logical keys; the UI maps physical keys onto these."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ACTION = "action"


@dataclass(frozen=True, slots=True)
class KeyPress:
    key: Key


@dataclass(frozen=True, slots=True)
class PointerPress:
    """Primary-button press at field coordinates."""

    x: float
    y: float


InputEvent = KeyPress | PointerPress
