"""A small two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec:
    """Mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vec) -> Vec:
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor)