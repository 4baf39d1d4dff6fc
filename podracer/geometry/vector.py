from __future__ import annotations

from dataclasses import dataclass
import math

__all__ = ["Vector", "round_half_up"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +inf (the referee's rounding)."""
    return math.floor(value + 0.5)


def _to_abs_degrees(radians: float) -> float:
    deg = math.degrees(radians)
    if deg < 0:
        return 360.0 + deg
    return deg


@dataclass(frozen=True)
class Vector:
    """Point or displacement on the race map."""

    x: float
    y: float

    def distance(self, p: Vector) -> float:
        return math.hypot(self.x - p.x, self.y - p.y)

    def add(self, p: Vector) -> Vector:
        return Vector(self.x + p.x, self.y + p.y)

    def subtract(self, p: Vector) -> Vector:
        return Vector(self.x - p.x, self.y - p.y)

    def multiply(self, n: float) -> Vector:
        return Vector(self.x * n, self.y * n)

    def divide(self, n: float) -> Vector:
        return Vector(self.x / n, self.y / n)

    def round(self) -> Vector:
        return Vector(round_half_up(self.x), round_half_up(self.y))

    def truncate(self) -> Vector:
        """Drop the fractional part of each component, toward zero."""
        return Vector(math.trunc(self.x), math.trunc(self.y))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, v: Vector) -> float:
        return self.x * v.x + self.y * v.y

    def projected_length_on(self, v: Vector) -> float:
        """Scalar projection of this vector onto ``v``.

        Zero-length vectors on either side project to 0.
        """
        if self.length() == 0:
            return 0.0
        norm = v.length()
        if norm == 0:
            return 0.0
        return self.dot(v) / norm

    def angle(self) -> float:
        """Bearing of this vector in degrees, in [0, 360)."""
        return _to_abs_degrees(math.atan2(self.y, self.x))

    def angle_to(self, v: Vector) -> float:
        """Bearing from this point to ``v`` in degrees, in [0, 360)."""
        return _to_abs_degrees(math.atan2(v.y - self.y, v.x - self.x))

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
