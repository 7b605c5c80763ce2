"""A resizable two-dimensional numeric matrix."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


class Grid:
    """A rows-by-columns matrix of numbers, indexed as ``grid[row, col]``.

    Every operation except ``product`` modifies the grid in place.
    """

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self._rows = 0
        self._columns = 0
        self._data: List[List[float]] = []
        self.resize(rows, columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Grid:
        """Build a grid from a sequence of equally long rows."""
        data = [list(r) for r in rows]
        width = len(data[0]) if data else 0
        if any(len(r) != width for r in data):
            raise ValueError("all rows must have the same length")
        grid = cls(len(data), width)
        grid._data = data
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def tolist(self) -> List[List[float]]:
        """A copy of the rows."""
        return [row[:] for row in self._data]

    def _check(self, key: Tuple[int, int]) -> Tuple[int, int]:
        row, col = key
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self._rows}x{self._columns}"
            )
        return row, col

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = self._check(key)
        return self._data[row][col]

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, col = self._check(key)
        self._data[row][col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._rows, self._columns, self._data) == (
            other._rows,
            other._columns,
            other._data,
        )

    __hash__ = None  # type: ignore[assignment]

    def resize(self, rows: int, columns: int) -> None:
        """Change the shape, keeping the overlapping values and zero-filling the rest."""
        if rows < 0 or columns < 0:
            raise ValueError("rows and columns must not be negative")
        old = self._data
        self._data = [
            [
                old[r][c] if r < len(old) and c < self._columns else 0
                for c in range(columns)
            ]
            for r in range(rows)
        ]
        self._rows = rows
        self._columns = columns

    def identity(self) -> None:
        """Set ones on the main diagonal and zeros elsewhere."""
        self.clear()
        for i in range(self.minsize()):
            self._data[i][i] = 1

    def clear(self) -> None:
        """Set every element to zero."""
        for row in self._data:
            row[:] = [0] * self._columns

    def trace(self) -> float:
        """Sum of the main diagonal."""
        return sum(self._data[i][i] for i in range(self.minsize()))

    def transpose(self) -> Grid:
        """Swap rows and columns in place and return the grid."""
        if self._rows <= 0 or self._columns <= 0:
            raise ValueError("cannot transpose an empty grid")
        self._data = [list(col) for col in zip(*self._data)]
        self._rows, self._columns = self._columns, self._rows
        return self

    def product(self, other: Grid) -> Grid:
        """The matrix product ``self * other`` as a new grid."""
        if self._columns != other._rows:
            raise ValueError(
                f"cannot multiply {self._rows}x{self._columns} "
                f"by {other._rows}x{other._columns}"
            )
        out = Grid(self._rows, other._columns)
        other_cols = list(zip(*other._data)) if other._data else []
        out._data = [
            [sum(a * b for a, b in zip(row, col)) for col in other_cols]
            for row in self._data
        ]
        if not other_cols:
            out._data = [[0] * other._columns for _ in range(self._rows)]
        return out

    def minsize(self) -> int:
        """The smaller of the row and column counts."""
        return min(self._rows, self._columns)

    def __repr__(self) -> str:
        return f"Grid({self._data!r})"