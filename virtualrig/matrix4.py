"""A 4x4 single-matrix type for affine transforms of points and directions."""

from __future__ import annotations

import math
from typing import IO, Iterable, List, Optional, Sequence, Tuple, Union

Number = Union[int, float]


class SingularMatrixError(ValueError):
    """Raised when a matrix is too close to singular to be inverted."""


def det2x2(a: float, b: float, c: float, d: float) -> float:
    """Determinant of the 2x2 matrix ``[[a, b], [c, d]]``."""
    return a * d - b * c


def det3x3(
    a1: float, a2: float, a3: float,
    b1: float, b2: float, b3: float,
    c1: float, c2: float, c3: float,
) -> float:
    """Determinant of the 3x3 matrix whose columns are ``a``, ``b`` and ``c``."""
    return (
        a1 * det2x2(b2, b3, c2, c3)
        - b1 * det2x2(a2, a3, c2, c3)
        + c1 * det2x2(a2, a3, b2, b3)
    )


def det4x4(
    a1: float, a2: float, a3: float, a4: float,
    b1: float, b2: float, b3: float, b4: float,
    c1: float, c2: float, c3: float, c4: float,
    d1: float, d2: float, d3: float, d4: float,
) -> float:
    """Determinant of the 4x4 matrix whose columns are ``a``, ``b``, ``c``, ``d``."""
    return (
        a1 * det3x3(b2, b3, b4, c2, c3, c4, d2, d3, d4)
        - b1 * det3x3(a2, a3, a4, c2, c3, c4, d2, d3, d4)
        + c1 * det3x3(a2, a3, a4, b2, b3, b4, d2, d3, d4)
        - d1 * det3x3(a2, a3, a4, b2, b3, b4, c2, c3, c4)
    )


class Matrix4:
    """A mutable 4x4 matrix stored row by row.

    ``get(x, y)`` and ``set(x, y, value)`` address column ``x`` of row ``y``.
    Points are column vectors: ``m.transform(p)`` computes ``m * p``.
    """

    __slots__ = ("_rows",)

    def __init__(self, values: Optional[Iterable[Number]] = None) -> None:
        """Build from 16 values in row-major order, or a zero matrix."""
        if values is None:
            self._rows: List[List[float]] = [[0.0] * 4 for _ in range(4)]
            return
        flat = [float(v) for v in values]
        if len(flat) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(flat)}")
        self._rows = [flat[4 * y:4 * y + 4] for y in range(4)]

    # ----- construction -------------------------------------------------

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix."""
        return cls(1.0 if x == y else 0.0 for y in range(4) for x in range(4))

    @classmethod
    def translation(cls, v: Sequence[Number]) -> Matrix4:
        """Translation by the 3-vector ``v``."""
        x, y, z = _xyz(v)
        t = cls.identity()
        t._rows[0][3] = x
        t._rows[1][3] = y
        t._rows[2][3] = z
        return t

    @classmethod
    def scale(cls, v: Union[Number, Sequence[Number]]) -> Matrix4:
        """Scaling by a 3-vector, or uniformly by a single number."""
        if isinstance(v, (int, float)):
            x = y = z = float(v)
        else:
            x, y, z = _xyz(v)
        s = cls.identity()
        s._rows[0][0] = x
        s._rows[1][1] = y
        s._rows[2][2] = z
        return s

    @classmethod
    def x_rotation(cls, theta: float) -> Matrix4:
        """Rotation by ``theta`` radians about the x axis."""
        c, s = math.cos(theta), math.sin(theta)
        r = cls.identity()
        r._rows[1][1] = c
        r._rows[1][2] = -s
        r._rows[2][1] = s
        r._rows[2][2] = c
        return r

    @classmethod
    def y_rotation(cls, theta: float) -> Matrix4:
        """Rotation by ``theta`` radians about the y axis."""
        c, s = math.cos(theta), math.sin(theta)
        r = cls.identity()
        r._rows[0][0] = c
        r._rows[0][2] = s
        r._rows[2][0] = -s
        r._rows[2][2] = c
        return r

    @classmethod
    def z_rotation(cls, theta: float) -> Matrix4:
        """Rotation by ``theta`` radians about the z axis."""
        c, s = math.cos(theta), math.sin(theta)
        r = cls.identity()
        r._rows[0][0] = c
        r._rows[0][1] = -s
        r._rows[1][0] = s
        r._rows[1][1] = c
        return r

    @classmethod
    def axis_rotation(cls, v: Sequence[Number], theta: float) -> Matrix4:
        """Rotation by ``theta`` radians about the unit axis ``v``."""
        x, y, z = _xyz(v)
        c, s = math.cos(theta), math.sin(theta)
        k = 1.0 - c
        return cls([
            k * x * x + c, k * x * y - z * s, k * x * z + y * s, 0.0,
            k * x * y + z * s, k * y * y + c, k * y * z - x * s, 0.0,
            k * x * z - y * s, k * y * z + x * s, k * z * z + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    # ----- access -------------------------------------------------------

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < 4 and 0 <= y < 4):
            raise IndexError(f"matrix index ({x}, {y}) out of range")

    def get(self, x: int, y: int) -> float:
        """Element in column ``x`` of row ``y``."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, value: float) -> None:
        """Store ``value`` in column ``x`` of row ``y``."""
        self._check(x, y)
        self._rows[y][x] = float(value)

    def rows(self) -> List[List[float]]:
        """A copy of the rows."""
        return [row[:] for row in self._rows]

    def __iter__(self):
        """Iterate over the 16 values in row-major order."""
        for row in self._rows:
            yield from row

    def to_gl(self) -> List[float]:
        """The 16 values in column-major order, as OpenGL expects them."""
        return [self._rows[y][x] for x in range(4) for y in range(4)]

    # ----- algebra ------------------------------------------------------

    def transposed(self) -> Matrix4:
        """A new matrix with rows and columns swapped."""
        return Matrix4(self._rows[x][y] for y in range(4) for x in range(4))

    def inverse(self, epsilon: float = 1e-08) -> Matrix4:
        """The inverse matrix.

        Raises SingularMatrixError when the determinant's magnitude is below
        ``epsilon``.
        """
        r = self._rows
        a1, b1, c1, d1 = r[0]
        a2, b2, c2, d2 = r[1]
        a3, b3, c3, d3 = r[2]
        a4, b4, c4, d4 = r[3]

        det = det4x4(a1, a2, a3, a4, b1, b2, b3, b4, c1, c2, c3, c4, d1, d2, d3, d4)
        if abs(det) < epsilon:
            raise SingularMatrixError("singular matrix, can't invert")

        adj = [
            [
                det3x3(b2, b3, b4, c2, c3, c4, d2, d3, d4),
                -det3x3(b1, b3, b4, c1, c3, c4, d1, d3, d4),
                det3x3(b1, b2, b4, c1, c2, c4, d1, d2, d4),
                -det3x3(b1, b2, b3, c1, c2, c3, d1, d2, d3),
            ],
            [
                -det3x3(a2, a3, a4, c2, c3, c4, d2, d3, d4),
                det3x3(a1, a3, a4, c1, c3, c4, d1, d3, d4),
                -det3x3(a1, a2, a4, c1, c2, c4, d1, d2, d4),
                det3x3(a1, a2, a3, c1, c2, c3, d1, d2, d3),
            ],
            [
                det3x3(a2, a3, a4, b2, b3, b4, d2, d3, d4),
                -det3x3(a1, a3, a4, b1, b3, b4, d1, d3, d4),
                det3x3(a1, a2, a4, b1, b2, b4, d1, d2, d4),
                -det3x3(a1, a2, a3, b1, b2, b3, d1, d2, d3),
            ],
            [
                -det3x3(a2, a3, a4, b2, b3, b4, c2, c3, c4),
                det3x3(a1, a3, a4, b1, b3, b4, c1, c3, c4),
                -det3x3(a1, a2, a4, b1, b2, b4, c1, c2, c4),
                det3x3(a1, a2, a3, b1, b2, b3, c1, c2, c3),
            ],
        ]
        return Matrix4(v for row in adj for v in row) * (1.0 / det)

    def determinant(self) -> float:
        """The determinant."""
        r = self._rows
        return det4x4(*(r[y][x] for x in range(4) for y in range(4)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a + b for a, b in zip(self, other))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a - b for a, b in zip(self, other))

    def __mul__(self, other: Union[Matrix4, Number]) -> Matrix4:
        if isinstance(other, Matrix4):
            a, b = self._rows, other._rows
            return Matrix4(
                sum(a[y][i] * b[i][x] for i in range(4))
                for y in range(4)
                for x in range(4)
            )
        if isinstance(other, (int, float)):
            return Matrix4(v * other for v in self)
        return NotImplemented

    def __rmul__(self, other: Number) -> Matrix4:
        if isinstance(other, (int, float)):
            return Matrix4(v * other for v in self)
        return NotImplemented

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self * other

    # ----- transforming vectors ----------------------------------------

    def _apply(self, v4: Tuple[float, float, float, float]) -> Tuple[float, ...]:
        return tuple(sum(row[i] * v4[i] for i in range(4)) for row in self._rows)

    def transform(self, v: Sequence[Number]) -> Tuple[float, ...]:
        """Transform a point, translation included.

        A 4-vector is multiplied as given; a 3-vector gets ``w = 1``; a
        2-vector gets ``z = 1, w = 1``.  The result has as many components
        as ``v``.
        """
        values = [float(c) for c in v]
        if len(values) == 4:
            return self._apply(tuple(values))  # type: ignore[arg-type]
        if len(values) == 3:
            return self._apply((values[0], values[1], values[2], 1.0))[:3]
        if len(values) == 2:
            return self._apply((values[0], values[1], 1.0, 1.0))[:2]
        raise ValueError(f"cannot transform a vector of {len(values)} components")

    def transform_direction(self, v: Sequence[Number]) -> Tuple[float, float, float]:
        """Transform a 3D direction, ignoring any translation."""
        x, y, z = _xyz(v)
        rx, ry, rz, _ = self._apply((x, y, z, 0.0))
        return (rx, ry, rz)

    # ----- text I/O -----------------------------------------------------

    def write(self, stream: IO[str]) -> None:
        """Write the rows as text, one row per line; tiny values print as 0."""
        for row in self._rows:
            line = "".join(
                "%12.6f " % (0.0 if abs(v) < 0.00001 else v) for v in row
            )
            stream.write(line + "\n")

    @classmethod
    def read(cls, stream: IO[str]) -> Matrix4:
        """Read 16 whitespace-separated numbers in row-major order."""
        tokens: List[str] = []
        for line in stream:
            tokens.extend(line.split())
            if len(tokens) >= 16:
                break
        if len(tokens) < 16:
            raise ValueError(f"expected 16 numbers, found {len(tokens)}")
        return cls(float(t) for t in tokens[:16])

    def __repr__(self) -> str:
        return f"Matrix4({list(self)!r})"


def _xyz(v: Sequence[Number]) -> Tuple[float, float, float]:
    values = [float(c) for c in v]
    if len(values) != 3:
        raise ValueError(f"expected a 3-vector, got {len(values)} components")
    return values[0], values[1], values[2]