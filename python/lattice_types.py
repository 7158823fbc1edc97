"""
Shared value types for the lattice library: points, sizes and errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def wrap_i32(value: int) -> int:
    """Wrap an int into the signed 32-bit range (two's complement)."""
    return (value - I32_MIN) % 2**32 + I32_MIN


# =============================================================================
# Errors
# =============================================================================


class LatticeError(Exception):
    """Base class for errors raised by the lattice library."""


class SizeError(LatticeError, ValueError):
    """A Size was built from a component outside [0, I32_MAX]."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Invalid size ({rows}, {cols})\n"
            f"  Both rows and cols must be in 0..{I32_MAX}"
        )


class OutOfBoundsError(LatticeError, IndexError):
    """A point or backing index fell outside a Size."""

    def __init__(
        self, size: Size, point: Point | None = None, index: int | None = None
    ) -> None:
        self.size = size
        self.point = point
        self.index = index
        if point is not None:
            detail = f"Point ({point.row}, {point.col})"
            valid = f"rows 0..{size.rows - 1}, cols 0..{size.cols - 1}"
        else:
            detail = f"Index {index}"
            valid = f"indices 0..{size.cell_count - 1}"
        super().__init__(
            f"{detail} is out of bounds\n"
            f"  Size: {size.rows}x{size.cols}\n"
            f"  Valid: {valid}"
        )


# =============================================================================
# Point
# =============================================================================


@dataclass(frozen=True, order=True)
class Point:
    """
    An integer lattice coordinate.

    Rows grow downward and columns grow to the right. Ordering is
    lexicographic by row then column, which is the row-major order used for
    every traversal in this library.

    Components wrap around to the signed 32-bit range on construction, so
    arithmetic that overflows wraps rather than growing without bound.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "row", wrap_i32(self.row))
        object.__setattr__(self, "col", wrap_i32(self.col))

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.row - other.row, self.col - other.col)

    def __neg__(self) -> Point:
        return Point(-self.row, -self.col)

    def __mul__(self, factor: int) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.row * factor, self.col * factor)

    __rmul__ = __mul__


ORIGIN = Point(0, 0)


# =============================================================================
# Size
# =============================================================================


@dataclass(frozen=True)
class Size:
    """The (rows, cols) extent of a rectangular grid."""

    rows: int
    cols: int

    def __post_init__(self) -> None:
        if not (0 <= self.rows <= I32_MAX and 0 <= self.cols <= I32_MAX):
            raise SizeError(self.rows, self.cols)

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def is_empty(self) -> bool:
        return self.cell_count == 0

    def contains(self, point: Point) -> bool:
        """Return whether `point` lies in [0, rows) x [0, cols)."""
        return 0 <= point.row < self.rows and 0 <= point.col < self.cols

    def transposed(self) -> Size:
        return Size(self.cols, self.rows)

    def index_of(self, point: Point) -> int:
        """
        Convert a contained point to its row-major backing index.

        Raises:
            OutOfBoundsError: If the point is not contained in this size
        """
        if not self.contains(point):
            raise OutOfBoundsError(self, point=point)
        return point.row * self.cols + point.col

    def point_at(self, index: int) -> Point:
        """Inverse of index_of."""
        if not 0 <= index < self.cell_count:
            raise OutOfBoundsError(self, index=index)
        return Point(index // self.cols, index % self.cols)

    def points(self) -> Iterator[Point]:
        """Iterate over every contained point, row-major."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Point(row, col)

    def points_in_row(self, row: int) -> Iterator[Point]:
        for col in range(self.cols):
            yield Point(row, col)

    def points_in_column(self, col: int) -> Iterator[Point]:
        for row in range(self.rows):
            yield Point(row, col)
