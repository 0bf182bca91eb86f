"""Collision kinds, box sides and contact records."""

from dataclasses import dataclass
from enum import IntEnum


class Collision(IntEnum):
    NONE = 0
    TOP = 1
    CENTER = 2
    BOTTOM = 3
    LEFT = 4
    RIGHT = 5


class Side(IntEnum):
    """Index of a side in a ``(left, right, top, bottom)`` vertices tuple."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3


@dataclass
class Contact:
    """A collision: its kind, how far it overlapped, and which paddle caused it."""

    kind: Collision = Collision.NONE
    penetration: float = 0.0
    id: int = 0