"""Three-component double-precision vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass
class Vector3:
    """A mutable 3D vector.

    ``a * b`` is the dot product when ``b`` is a vector and scaling when it is
    a number; ``a ^ b`` is the cross product.  Vectors order by y, then x,
    then z.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3:
        """Scale this vector to unit length in place and return a copy of it.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        self.x /= length
        self.y /= length
        self.z /= length
        return Vector3(self.x, self.y, self.z)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, other: Union[Vector3, float]) -> Union[Vector3, float]:
        if isinstance(other, Vector3):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, s: float) -> Vector3:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector3(self.x / s, self.y / s, self.z / s)

    def __itruediv__(self, s: float) -> Vector3:
        if not isinstance(s, (int, float)):
            return NotImplemented
        self.x /= s
        self.y /= s
        self.z /= s
        return self

    def __xor__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.cross(other)

    def __lt__(self, other: Vector3) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (self.y, self.x, self.z) < (other.y, other.x, other.z)

    def __gt__(self, other: Vector3) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return other < self