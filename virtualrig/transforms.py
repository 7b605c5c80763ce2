"""Vector and rigid-transform helpers with a shader-like interface."""

from __future__ import annotations

import math
from typing import Sequence

from .matrix4 import Matrix4
from .vector3 import Vector3


def _components(v: Sequence[float], size: int) -> list:
    values = [float(c) for c in v]
    if len(values) != size:
        raise ValueError(f"expected {size} components, got {len(values)}")
    return values


def cross(a: Sequence[float], b: Sequence[float]) -> Vector3:
    """Cross product ``a x b`` of two 3-vectors."""
    ax, ay, az = _components(a, 3)
    bx, by, bz = _components(b, 3)
    return Vector3(ax, ay, az).cross(Vector3(bx, by, bz))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors of the same length."""
    va = [float(c) for c in a]
    vb = [float(c) for c in b]
    if len(va) != len(vb):
        raise ValueError(f"cannot dot vectors of {len(va)} and {len(vb)} components")
    return sum(x * y for x, y in zip(va, vb))


def angle(a: Sequence[float], b: Sequence[float]) -> float:
    """Angle in radians between two 3-vectors; -1 when either is zero."""
    va = Vector3(*_components(a, 3))
    vb = Vector3(*_components(b, 3))
    w = va.length() * vb.length()
    if w == 0:
        return -1.0
    t = va.dot(vb) / w
    return math.acos(max(-1.0, min(1.0, t)))


def inverse_of_isometry(m: Matrix4) -> Matrix4:
    """Inverse of a rotation-plus-translation matrix, without a general inversion."""
    rows = m.rows()
    translation = [rows[i][3] for i in range(4)]
    for i, value in enumerate((0.0, 0.0, 0.0, 1.0)):
        rows[i][3] = value
    res = Matrix4(v for row in rows for v in row).transposed()

    moved = res.transform(translation)
    column = [-moved[0], -moved[1], -moved[2], 1.0]
    for i, value in enumerate(column):
        res.set(3, i, value)
    return res