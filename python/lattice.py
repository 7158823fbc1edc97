"""
Lattice geometry for board-game engines.
Directions, the dihedral symmetry group of the square, and a dense
bounds-checked table indexed by Point.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, Iterator, Sequence, TypeVar

from lattice_types import (
    ORIGIN,
    LatticeError,
    OutOfBoundsError,
    Point,
    Size,
    SizeError,
)

__all__ = [
    "ORIGIN",
    "Direction",
    "LatticeError",
    "Neighborhood",
    "OutOfBoundsError",
    "Point",
    "Rotation",
    "Size",
    "SizeError",
    "Table",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# Direction
# =============================================================================


class Direction(Enum):
    """Compass direction, declared in clockwise order starting north."""

    N = "N"  # Up (decreasing row)
    NE = "NE"
    E = "E"  # Right (increasing col)
    SE = "SE"
    S = "S"  # Down (increasing row)
    SW = "SW"
    W = "W"  # Left (decreasing col)
    NW = "NW"

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        """All eight directions in canonical (clockwise from N) order."""
        return _DIRECTIONS

    @classmethod
    def cardinals(cls) -> tuple[Direction, ...]:
        return (cls.N, cls.E, cls.S, cls.W)

    @classmethod
    def diagonals(cls) -> tuple[Direction, ...]:
        return (cls.NE, cls.SE, cls.SW, cls.NW)

    @classmethod
    def from_offset(cls, offset: Point) -> Direction:
        """
        Look up the direction whose unit offset equals `offset`.

        Raises:
            ValueError: If `offset` is not one of the eight unit steps
        """
        for direction, (d_row, d_col) in _OFFSETS.items():
            if offset.row == d_row and offset.col == d_col:
                return direction
        raise ValueError(
            f"Offset ({offset.row}, {offset.col}) is not a unit step\n"
            f"  Components must be in {{-1, 0, 1}} and not both zero"
        )

    @property
    def offset(self) -> Point:
        d_row, d_col = _OFFSETS[self]
        return Point(d_row, d_col)

    @property
    def is_cardinal(self) -> bool:
        d_row, d_col = _OFFSETS[self]
        return d_row == 0 or d_col == 0

    @property
    def is_diagonal(self) -> bool:
        return not self.is_cardinal

    def rotate(self, steps: int) -> Direction:
        """Turn by `steps` eighths of a circle; positive is clockwise."""
        index = _DIRECTIONS.index(self)
        return _DIRECTIONS[(index + steps) % len(_DIRECTIONS)]

    def opposite(self) -> Direction:
        return self.rotate(len(_DIRECTIONS) // 2)


_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.NE: (-1, 1),
    Direction.E: (0, 1),
    Direction.SE: (1, 1),
    Direction.S: (1, 0),
    Direction.SW: (1, -1),
    Direction.W: (0, -1),
    Direction.NW: (-1, -1),
}


class Neighborhood(Enum):
    """Which cells count as adjacent."""

    ORTHOGONAL = "orthogonal"  # Four cardinal neighbors
    MOORE = "moore"  # All eight neighbors

    @property
    def directions(self) -> tuple[Direction, ...]:
        if self is Neighborhood.ORTHOGONAL:
            return Direction.cardinals()
        return Direction.all()


# =============================================================================
# Rotation
# =============================================================================


class Rotation(Enum):
    """
    An element of the dihedral group of the square.

    Each value is a 2x2 matrix (yy, yx, xy, xx) acting on (row, col):

        M * (row, col) == (yy*row + yx*col, xy*row + xx*col)

    Because rows grow downward, CCW90 takes N to W as seen on screen.
    """

    CCW0 = (1, 0, 0, 1)
    CCW90 = (0, -1, 1, 0)
    CCW180 = (-1, 0, 0, -1)
    CCW270 = (0, 1, -1, 0)
    H_FLIP = (1, 0, 0, -1)  # Columns reversed
    V_FLIP = (-1, 0, 0, 1)  # Rows reversed
    TRANSPOSE = (0, 1, 1, 0)  # Mirror about the main diagonal
    ANTI_TRANSPOSE = (0, -1, -1, 0)  # Mirror about the anti-diagonal

    @classmethod
    def all(cls) -> tuple[Rotation, ...]:
        return tuple(cls)

    @classmethod
    def turns(cls) -> tuple[Rotation, ...]:
        """The four proper rotations, in counter-clockwise quarter turns."""
        return (cls.CCW0, cls.CCW90, cls.CCW180, cls.CCW270)

    @classmethod
    def ccw(cls, quarter_turns: int) -> Rotation:
        """Proper rotation by a signed number of counter-clockwise quarter turns."""
        return cls.turns()[quarter_turns % 4]

    @property
    def is_reflection(self) -> bool:
        yy, yx, xy, xx = self.value
        return yy * xx - yx * xy == -1

    @property
    def swaps_axes(self) -> bool:
        """True when rows map onto columns (and vice versa)."""
        return self.value[0] == 0

    def compose(self, other: Rotation) -> Rotation:
        """
        Matrix product self * other: apply `other` first, then `self`.

        The result is always a member of the enumeration.
        """
        a0, a1, a2, a3 = self.value
        b0, b1, b2, b3 = other.value
        return Rotation(
            (
                a0 * b0 + a1 * b2,
                a0 * b1 + a1 * b3,
                a2 * b0 + a3 * b2,
                a2 * b1 + a3 * b3,
            )
        )

    def __mul__(self, other: Rotation) -> Rotation:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self.compose(other)

    def inverse(self) -> Rotation:
        # Orthogonal matrix: the inverse is the transpose
        yy, yx, xy, xx = self.value
        return Rotation((yy, xy, yx, xx))

    def apply_to_offset(self, offset: Point) -> Point:
        """Linear map about the origin, for moves and relative offsets."""
        yy, yx, xy, xx = self.value
        return Point(yy * offset.row + yx * offset.col, xy * offset.row + xx * offset.col)

    def apply_to_direction(self, direction: Direction) -> Direction:
        return Direction.from_offset(self.apply_to_offset(direction.offset))

    def apply_to_size(self, size: Size) -> Size:
        """Rows and cols swap exactly when the rotation swaps axes."""
        return size.transposed() if self.swaps_axes else size

    def apply_to_point(self, point: Point, size: Size) -> Point:
        """
        Map a point of a grid of `size` into the rotated grid.

        The linear map is followed by the translation that brings the image
        of the whole box back to a zero-based box of apply_to_size(size), so
        corners map to corners and the mapping is a bijection between the
        two boxes.

        Raises:
            OutOfBoundsError: If `point` is not contained in `size`
        """
        if not size.contains(point):
            raise OutOfBoundsError(size, point=point)
        far = self.apply_to_offset(Point(size.rows - 1, size.cols - 1))
        shift = Point(max(0, -far.row), max(0, -far.col))
        return self.apply_to_offset(point) + shift


# =============================================================================
# Table
# =============================================================================


class Table(Generic[T]):
    """
    A dense 2-D grid of values indexed by Point.

    Cells live in one row-major list of exactly size.cell_count slots. The
    size is fixed at construction; every access is bounds-checked through
    Size.contains.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: Size, cells: Sequence[T]) -> None:
        if len(cells) != size.cell_count:
            raise ValueError(
                f"Cell count mismatch\n"
                f"  Size: {size.rows}x{size.cols} needs {size.cell_count} cells\n"
                f"  Got: {len(cells)} cells"
            )
        self._size = size
        self._cells: list[T] = list(cells)

    @classmethod
    def filled(cls, size: Size, value: T) -> Table[T]:
        return cls(size, [value] * size.cell_count)

    @classmethod
    def generate(cls, size: Size, fn: Callable[[Point], T]) -> Table[T]:
        """Build a table by calling `fn` once per point, row-major."""
        logger.debug("generate: size=%dx%d", size.rows, size.cols)
        return cls(size, [fn(point) for point in size.points()])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> Table[T]:
        """
        Build a table from nested row sequences.

        Raises:
            ValueError: If the rows do not all have the same length
        """
        cols = len(rows[0]) if rows else 0
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {cols} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
            raise ValueError(error_msg)
        return cls(Size(len(rows), cols), [value for row in rows for value in row])

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def size(self) -> Size:
        return self._size

    @property
    def rows(self) -> int:
        return self._size.rows

    @property
    def cols(self) -> int:
        return self._size.cols

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self._size.contains(point)

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def get(self, point: Point) -> T:
        """
        Return the value at `point`.

        Raises:
            OutOfBoundsError: If `point` is outside the table
        """
        return self._cells[self._size.index_of(point)]

    def set(self, point: Point, value: T) -> None:
        """
        Overwrite the value at `point`.

        Raises:
            OutOfBoundsError: If `point` is outside the table
        """
        self._cells[self._size.index_of(point)] = value

    def get_or(self, point: Point, default: U) -> T | U:
        """Return the value at `point`, or `default` when it is outside."""
        if not self._size.contains(point):
            return default
        return self._cells[self._size.index_of(point)]

    __getitem__ = get
    __setitem__ = set

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def points(self) -> Iterator[Point]:
        return self._size.points()

    def values(self) -> Iterator[T]:
        return iter(self._cells)

    def items(self) -> Iterator[tuple[Point, T]]:
        """
        Iterate (point, value) pairs in row-major order.

        Each call starts a fresh pass; iterating never mutates the table.
        """
        for index, point in enumerate(self._size.points()):
            yield point, self._cells[index]

    def row(self, row: int) -> list[T]:
        """
        Return the values of one row, left to right.

        Raises:
            OutOfBoundsError: Unless 0 <= row < rows, even when cols is 0
        """
        if not 0 <= row < self.rows:
            raise OutOfBoundsError(self._size, point=Point(row, 0))
        return [self.get(point) for point in self._size.points_in_row(row)]

    def column(self, col: int) -> list[T]:
        if not 0 <= col < self.cols:
            raise OutOfBoundsError(self._size, point=Point(0, col))
        return [self.get(point) for point in self._size.points_in_column(col)]

    def neighbors(
        self, point: Point, neighborhood: Neighborhood = Neighborhood.MOORE
    ) -> Iterator[tuple[Direction, Point]]:
        """
        Iterate in-bounds neighbors of `point` in canonical direction order.

        Raises:
            OutOfBoundsError: If `point` itself is outside the table
        """
        if not self._size.contains(point):
            raise OutOfBoundsError(self._size, point=point)
        return self._neighbors(point, neighborhood)

    def _neighbors(
        self, point: Point, neighborhood: Neighborhood
    ) -> Iterator[tuple[Direction, Point]]:
        for direction in neighborhood.directions:
            target = point + direction.offset
            if self._size.contains(target):
                yield direction, target

    # -------------------------------------------------------------------------
    # Whole-table transforms
    # -------------------------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Table[U]:
        return Table(self._size, [fn(value) for value in self._cells])

    def copy(self) -> Table[T]:
        return Table(self._size, self._cells)

    def rotated(self, rotation: Rotation) -> Table[T]:
        """
        Return a new table with every cell moved by `rotation`.

        The result has size rotation.apply_to_size(self.size) and satisfies
        result[rotation.apply_to_point(p, self.size)] == self[p] for every p.
        """
        new_size = rotation.apply_to_size(self._size)
        logger.debug(
            "rotated: %s %dx%d -> %dx%d",
            rotation.name,
            self._size.rows,
            self._size.cols,
            new_size.rows,
            new_size.cols,
        )
        cells: list[T | None] = [None] * new_size.cell_count
        for point, value in self.items():
            cells[new_size.index_of(rotation.apply_to_point(point, self._size))] = value
        return Table(new_size, cells)  # type: ignore[arg-type]

    # -------------------------------------------------------------------------
    # Value protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Table(size={self._size!r}, cells={self._cells!r})"
