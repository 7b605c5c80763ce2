"""Quaternions and unit dual quaternions for rigid-transform blending."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union

from .matrix4 import Matrix4
from .transforms import cross, dot
from .vector3 import Vector3

Number = Union[int, float]


@dataclass
class Quaternion:
    """A quaternion with imaginary part ``(x, y, z)`` and real part ``w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @property
    def xyz(self) -> Vector3:
        """The imaginary part."""
        return Vector3(self.x, self.y, self.z)

    @classmethod
    def from_matrix(cls, m: Matrix4) -> Quaternion:
        """The rotation quaternion of the upper-left 3x3 block of ``m``."""
        r = m.rows()
        t = r[0][0] + r[1][1] + r[2][2] + 1.0
        if t > 0:
            s = 0.5 / math.sqrt(t)
            return cls(
                (r[2][1] - r[1][2]) * s,
                (r[0][2] - r[2][0]) * s,
                (r[1][0] - r[0][1]) * s,
                0.25 / s,
            )
        if r[0][0] > r[1][1] and r[0][0] > r[2][2]:
            s = 2.0 * math.sqrt(1.0 + r[0][0] - r[1][1] - r[2][2])
            return cls(
                0.25 * s,
                (r[0][1] + r[1][0]) / s,
                (r[0][2] + r[2][0]) / s,
                (r[2][1] - r[1][2]) / s,
            )
        if r[1][1] > r[2][2]:
            s = 2.0 * math.sqrt(1.0 + r[1][1] - r[0][0] - r[2][2])
            return cls(
                (r[0][1] + r[1][0]) / s,
                0.25 * s,
                (r[1][2] + r[2][1]) / s,
                (r[0][2] - r[2][0]) / s,
            )
        s = 2.0 * math.sqrt(1.0 + r[2][2] - r[0][0] - r[1][1])
        return cls(
            (r[0][2] + r[2][0]) / s,
            (r[1][2] + r[2][1]) / s,
            0.25 * s,
            (r[1][0] - r[0][1]) / s,
        )

    def norm(self) -> float:
        """Euclidean length of the four components."""
        return math.sqrt(dot(self, self))

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: Union[Quaternion, Number]) -> Quaternion:
        if isinstance(other, Quaternion):
            a, b = self, other
            return Quaternion(
                a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
                a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
                a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
                a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            )
        if isinstance(other, (int, float)):
            return Quaternion(*(c * other for c in self))
        return NotImplemented

    def __rmul__(self, other: Number) -> Quaternion:
        if isinstance(other, (int, float)):
            return Quaternion(*(c * other for c in self))
        return NotImplemented

    def __truediv__(self, s: Number) -> Quaternion:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Quaternion(*(c / s for c in self))


@dataclass
class DualQuaternion:
    """A dual quaternion with primal part ``a`` and dual part ``b``."""

    a: Quaternion = field(default_factory=Quaternion)
    b: Quaternion = field(default_factory=Quaternion)

    @classmethod
    def from_matrix(cls, m: Matrix4) -> DualQuaternion:
        """The dual quaternion of a rotation-plus-translation matrix."""
        a = Quaternion.from_matrix(m)
        rows = m.rows()
        half = Quaternion(rows[0][3] / 2, rows[1][3] / 2, rows[2][3] / 2, 0.0)
        return cls(a, half * a)

    def __neg__(self) -> DualQuaternion:
        return DualQuaternion(-self.a, -self.b)

    def apply_to_point(self, pos: Sequence[float]) -> Vector3:
        """Rotate and translate a 3D point."""
        x, y, z = (float(c) for c in pos)
        p = Vector3(x, y, z)
        ra, rb = self.a.xyz, self.b.xyz
        inner = cross(ra, p) + p * self.a.w + rb
        return p + (cross(ra, inner) + rb * self.a.w - ra * self.b.w) * 2.0

    def normalize(self) -> None:
        """Make the primal part unit length and the dual part orthogonal to it."""
        length = self.a.norm()
        self.a = self.a / length
        self.b = self.b / length
        self.b = self.b - self.a * dot(self.a, self.b)

    def multiply_and_add(self, other: DualQuaternion, scale: float) -> None:
        """Add ``other * scale``, flipping ``other`` onto this hemisphere first."""
        if dot(self.a, other.a) < 0:
            other = -other
        self.a = self.a + other.a * scale
        self.b = self.b + other.b * scale

    def mult(self, scale: float) -> None:
        """Scale both parts by ``scale``."""
        self.a = self.a * scale
        self.b = self.b * scale