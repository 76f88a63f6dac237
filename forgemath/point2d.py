"""A position in 2D space, distinct from the (x, y) tuples used as vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

Vector2 = tuple[float, float]


def _vec(values: Iterable[float]) -> Vector2:
    items = tuple(float(v) for v in values)
    if len(items) != 2:
        raise ValueError(f"expected 2 components, got {len(items)}")
    return items  # type: ignore[return-value]


def _coords(other: Point2D | Sequence[float]) -> Vector2:
    if isinstance(other, Point2D):
        return (other.x, other.y)
    return _vec(other)


@dataclass
class Point2D:
    """A 2D point; subtracting two points gives the vector between them."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @classmethod
    def origin(cls) -> Point2D:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Point2D:
        return cls(1.0, 1.0)

    @classmethod
    def from_tuple(cls, values: Iterable[float]) -> Point2D:
        return cls(*_vec(values))

    def to_tuple(self) -> Vector2:
        return (self.x, self.y)

    def translate(self, offset: Iterable[float]) -> Point2D:
        """Return a new point moved by the offset vector."""
        dx, dy = _vec(offset)
        return Point2D(self.x + dx, self.y + dy)

    def translate_in_place(self, offset: Iterable[float]) -> None:
        dx, dy = _vec(offset)
        self.x += dx
        self.y += dy

    def vector_to(self, other: Point2D) -> Vector2:
        """Vector from this point to the other point."""
        return (other.x - self.x, other.y - self.y)

    def midpoint(self, other: Point2D) -> Point2D:
        return Point2D(*self.lerp(other, 0.5))

    def distance(self, other: Point2D | Sequence[float]) -> float:
        ox, oy = _coords(other)
        return math.hypot(ox - self.x, oy - self.y)

    def lerp(self, other: Point2D | Sequence[float], t: float) -> Vector2:
        """Linear interpolation towards other; t = 0 is self, t = 1 is other."""
        ox, oy = _coords(other)
        return (self.x + (ox - self.x) * t, self.y + (oy - self.y) * t)

    def magnitude(self) -> float:
        """Distance of the point from the origin."""
        return math.hypot(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __add__(self, offset):
        if isinstance(offset, Point2D) or not isinstance(offset, (tuple, list)):
            return NotImplemented
        return self.translate(offset)

    def __sub__(self, other):
        if isinstance(other, Point2D):
            return (self.x - other.x, self.y - other.y)
        if isinstance(other, (tuple, list)):
            dx, dy = _vec(other)
            return Point2D(self.x - dx, self.y - dy)
        return NotImplemented

    def __iadd__(self, offset):
        if isinstance(offset, Point2D) or not isinstance(offset, (tuple, list)):
            return NotImplemented
        self.translate_in_place(offset)
        return self

    def __isub__(self, offset):
        if isinstance(offset, Point2D) or not isinstance(offset, (tuple, list)):
            return NotImplemented
        dx, dy = _vec(offset)
        self.x -= dx
        self.y -= dy
        return self