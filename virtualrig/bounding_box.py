"""Axis-aligned bounding boxes."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .utils import max2, max3, min2
from .vector3 import Vector3


def _vec(v: Sequence[float]) -> Vector3:
    x, y, z = v
    return Vector3(float(x), float(y), float(z))


class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    def __init__(self, minimum: Sequence[float], maximum: Sequence[float]) -> None:
        self.min = Vector3()
        self.max = Vector3()
        self.set(minimum, maximum)

    def set(self, minimum: Sequence[float], maximum: Sequence[float]) -> None:
        """Replace both corners; raises ValueError if ``minimum`` exceeds ``maximum``."""
        lo, hi = _vec(minimum), _vec(maximum)
        if not (lo.x <= hi.x and lo.y <= hi.y and lo.z <= hi.z):
            raise ValueError(f"minimum {tuple(lo)} exceeds maximum {tuple(hi)}")
        self.min = lo
        self.max = hi

    def center(self) -> Vector3:
        """The midpoint of the box."""
        return (self.max - self.min) * 0.5 + self.min

    def max_dim(self) -> float:
        """The longest side."""
        return max3(
            self.max.x - self.min.x,
            self.max.y - self.min.y,
            self.max.z - self.min.z,
        )

    def extend(self, v: Sequence[float]) -> None:
        """Grow the box to contain the point ``v``."""
        p = _vec(v)
        self.min = Vector3(min2(self.min.x, p.x), min2(self.min.y, p.y), min2(self.min.z, p.z))
        self.max = Vector3(max2(self.max.x, p.x), max2(self.max.y, p.y), max2(self.max.z, p.z))

    def extend_box(self, other: BoundingBox) -> None:
        """Grow the box to contain another box."""
        if other is None:
            raise ValueError("cannot extend by a missing box")
        self.extend(tuple(other.min))
        self.extend(tuple(other.max))

    def edges(self) -> List[Tuple[Vector3, Vector3]]:
        """The twelve edges of the box as pairs of end points."""
        lo, hi = self.min, self.max

        def p(x: float, y: float, z: float) -> Vector3:
            return Vector3(x, y, z)

        return [
            (p(lo.x, lo.y, lo.z), p(hi.x, lo.y, lo.z)),
            (p(lo.x, lo.y, lo.z), p(lo.x, hi.y, lo.z)),
            (p(hi.x, hi.y, lo.z), p(hi.x, lo.y, lo.z)),
            (p(hi.x, hi.y, lo.z), p(lo.x, hi.y, lo.z)),
            (p(lo.x, lo.y, lo.z), p(lo.x, lo.y, hi.z)),
            (p(lo.x, hi.y, lo.z), p(lo.x, hi.y, hi.z)),
            (p(hi.x, lo.y, lo.z), p(hi.x, lo.y, hi.z)),
            (p(hi.x, hi.y, lo.z), p(hi.x, hi.y, hi.z)),
            (p(lo.x, lo.y, hi.z), p(hi.x, lo.y, hi.z)),
            (p(lo.x, lo.y, hi.z), p(lo.x, hi.y, hi.z)),
            (p(hi.x, hi.y, hi.z), p(hi.x, lo.y, hi.z)),
            (p(hi.x, hi.y, hi.z), p(lo.x, hi.y, hi.z)),
        ]

    def __str__(self) -> str:
        lo, hi = self.min, self.max
        return (
            f"BOUNDING BOX: {lo.x:f} {lo.y:f} {lo.z:f}  -> "
            f"{hi.x:f} {hi.y:f} {hi.z:f}"
        )

    def __repr__(self) -> str:
        return f"BoundingBox({tuple(self.min)!r}, {tuple(self.max)!r})"