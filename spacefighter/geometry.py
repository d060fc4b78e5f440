"""Two-dimensional vectors and integer rectangles."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

Point = Tuple[int, int]


class _VectorConstant:
    """Class attribute that hands out a fresh vector on every access."""

    def __init__(self, x: float, y: float) -> None:
        self._x = x
        self._y = y

    def __get__(self, instance: object, owner: type) -> "Vector2":
        return owner(self._x, self._y)


@dataclass
class Vector2:
    """A mutable vector with an x and a y component."""

    x: float = 0.0
    y: float = 0.0

    ZERO = _VectorConstant(0.0, 0.0)
    ONE = _VectorConstant(1.0, 1.0)
    UNIT_X = _VectorConstant(1.0, 0.0)
    UNIT_Y = _VectorConstant(0.0, 1.0)

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.length_squared())

    def set(self, x: Union[float, "Vector2"], y: float | None = None) -> None:
        """Set both components, from two numbers or from another vector."""
        if isinstance(x, Vector2):
            self.x, self.y = x.x, x.y
            return
        if y is None:
            raise TypeError("set() needs a vector or both components")
        self.x = x
        self.y = y

    def normalize(self) -> None:
        """Scale the vector to unit length; the zero vector is left alone."""
        if not self.is_zero():
            length = self.length()
            self.x /= length
            self.y /= length

    def is_zero(self) -> bool:
        """Return True if both components are zero."""
        return self.x == 0 and self.y == 0

    def dot(self, other: "Vector2") -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Return the two-dimensional cross product with another vector."""
        return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(vector1: "Vector2", vector2: "Vector2") -> float:
        """Return the distance between two vectors."""
        return math.sqrt(Vector2.distance_squared(vector1, vector2))

    @staticmethod
    def distance_squared(vector1: "Vector2", vector2: "Vector2") -> float:
        """Return the squared distance between two vectors."""
        dx = vector2.x - vector1.x
        dy = vector2.y - vector1.y
        return dx * dx + dy * dy

    @staticmethod
    def lerp(start: "Vector2", end: "Vector2", value: float) -> "Vector2":
        """Interpolate linearly; values outside [0, 1] clamp to the ends."""
        if value < 0:
            return start.copy()
        if value > 1:
            return end.copy()
        return start + (end - start) * value

    @staticmethod
    def random(normalize: bool = False) -> "Vector2":
        """Return a vector with components in [-1, 1), optionally normalized."""
        result = Vector2(_random.random() * 2 - 1, _random.random() * 2 - 1)
        if normalize:
            result.normalize()
        return result

    def left(self) -> "Vector2":
        """Return the left-hand orthogonal vector."""
        return Vector2(-self.y, self.x)

    def right(self) -> "Vector2":
        """Return the right-hand orthogonal vector."""
        return Vector2(self.y, -self.x)

    def to_point(self) -> Point:
        """Return the components truncated to integers."""
        return int(self.x), int(self.y)

    def copy(self) -> "Vector2":
        """Return an independent copy of the vector."""
        return Vector2(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        return self

    def __str__(self) -> str:
        return f"{{ {self.x:g}, {self.y:g} }}"


@dataclass
class Region:
    """A rectangle given by its upper left corner, width and height."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @classmethod
    def from_point(cls, position: Point, size: Point) -> "Region":
        """Build a region from a corner point and a (width, height) pair."""
        return cls(position[0], position[1], size[0], size[1])

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Set all four components."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> Point:
        return self.left, self.top

    @property
    def top_right(self) -> Point:
        return self.right, self.top

    @property
    def bottom_left(self) -> Point:
        return self.left, self.bottom

    @property
    def bottom_right(self) -> Point:
        return self.right, self.bottom

    @property
    def center(self) -> Vector2:
        return Vector2(self.left, self.top) + Vector2(self.width, self.height) / 2

    def translate(self, dx: Union[int, Point], dy: int | None = None) -> None:
        """Move the region by (dx, dy), or by a point given as one argument."""
        if dy is None:
            if isinstance(dx, int):
                raise TypeError("translate() needs a point or both offsets")
            dx, dy = dx
        self.x += dx
        self.y += dy