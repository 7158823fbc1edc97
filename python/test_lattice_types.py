"""
Tests for the shared lattice value types: Point, Size and errors.
"""

import pytest

from lattice_types import (
    I32_MAX,
    I32_MIN,
    ORIGIN,
    LatticeError,
    OutOfBoundsError,
    Point,
    Size,
    SizeError,
    wrap_i32,
)


# =============================================================================
# Point
# =============================================================================


class TestPoint:
    """Tests for Point arithmetic and ordering."""

    def test_components(self) -> None:
        p = Point(2, 5)
        assert p.row == 2
        assert p.col == 5

    def test_add_sub_neg(self) -> None:
        assert Point(1, 2) + Point(3, -4) == Point(4, -2)
        assert Point(1, 2) - Point(3, -4) == Point(-2, 6)
        assert -Point(1, -2) == Point(-1, 2)

    def test_scale(self) -> None:
        assert Point(1, -2) * 3 == Point(3, -6)
        assert 3 * Point(1, -2) == Point(3, -6)

    def test_operations_return_new_points(self) -> None:
        p = Point(1, 1)
        q = p + Point(1, 0)
        assert p == Point(1, 1)
        assert q is not p

    def test_immutable(self) -> None:
        p = Point(0, 0)
        with pytest.raises(AttributeError):
            p.row = 3  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Point(0, 1), Point(0, 1), Point(1, 0)}) == 2

    def test_ordering_is_row_major(self) -> None:
        points = [Point(1, 0), Point(0, 2), Point(0, -1), Point(-1, 5)]
        assert sorted(points) == [Point(-1, 5), Point(0, -1), Point(0, 2), Point(1, 0)]

    def test_origin(self) -> None:
        assert ORIGIN == Point(0, 0)

    def test_add_rejects_non_point(self) -> None:
        with pytest.raises(TypeError):
            Point(0, 0) + (1, 1)  # type: ignore[operator]


class TestOverflow:
    """Point components wrap around the signed 32-bit range."""

    def test_wrap_helper(self) -> None:
        assert wrap_i32(I32_MAX + 1) == I32_MIN
        assert wrap_i32(I32_MIN - 1) == I32_MAX
        assert wrap_i32(-7) == -7

    def test_addition_wraps(self) -> None:
        assert Point(I32_MAX, 0) + Point(1, 0) == Point(I32_MIN, 0)

    def test_negating_minimum_wraps_to_itself(self) -> None:
        assert -Point(I32_MIN, 0) == Point(I32_MIN, 0)

    def test_construction_wraps(self) -> None:
        assert Point(2**32 + 3, -(2**32)) == Point(3, 0)


# =============================================================================
# Size
# =============================================================================


class TestSize:
    """Tests for Size construction and containment."""

    def test_cell_count(self) -> None:
        assert Size(3, 4).cell_count == 12
        assert Size(0, 4).cell_count == 0

    def test_empty(self) -> None:
        assert Size(0, 3).is_empty
        assert Size(3, 0).is_empty
        assert not Size(1, 1).is_empty

    @pytest.mark.parametrize("rows,cols", [(-1, 0), (0, -1), (-2, -3)])
    def test_negative_component_rejected(self, rows: int, cols: int) -> None:
        with pytest.raises(SizeError) as exc_info:
            Size(rows, cols)
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, LatticeError)

    @pytest.mark.parametrize("rows,cols", [(I32_MAX + 1, 1), (1, 2**40)])
    def test_component_above_i32_rejected(self, rows: int, cols: int) -> None:
        with pytest.raises(SizeError, match="must be in 0..2147483647"):
            Size(rows, cols)

    def test_largest_component_accepted(self) -> None:
        size = Size(I32_MAX, 1)
        last = size.point_at(size.cell_count - 1)
        assert last == Point(I32_MAX - 1, 0)
        assert size.contains(last)
        assert size.index_of(last) == size.cell_count - 1

    def test_contains_matches_bounds(self) -> None:
        size = Size(2, 3)
        for row in range(-2, 5):
            for col in range(-2, 5):
                expected = 0 <= row < 2 and 0 <= col < 3
                assert size.contains(Point(row, col)) == expected

    def test_transposed(self) -> None:
        assert Size(2, 5).transposed() == Size(5, 2)


class TestSizeIndexing:
    """Tests for conversion between points and backing indices."""

    def test_index_of(self) -> None:
        size = Size(3, 4)
        assert size.index_of(Point(0, 0)) == 0
        assert size.index_of(Point(0, 3)) == 3
        assert size.index_of(Point(1, 0)) == 4
        assert size.index_of(Point(2, 3)) == 11

    def test_point_at_inverts_index_of(self) -> None:
        size = Size(3, 4)
        for point in size.points():
            assert size.point_at(size.index_of(point)) == point

    def test_index_of_out_of_bounds(self) -> None:
        with pytest.raises(OutOfBoundsError) as exc_info:
            Size(2, 2).index_of(Point(2, 0))
        assert exc_info.value.point == Point(2, 0)
        assert exc_info.value.size == Size(2, 2)
        assert "out of bounds" in str(exc_info.value)

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_point_at_out_of_bounds(self, index: int) -> None:
        with pytest.raises(OutOfBoundsError) as exc_info:
            Size(2, 2).point_at(index)
        assert exc_info.value.index == index
        assert isinstance(exc_info.value, IndexError)


class TestSizePoints:
    """Tests for point iteration over a Size."""

    def test_points_row_major(self) -> None:
        expected = [
            Point(0, 0), Point(0, 1), Point(0, 2),
            Point(1, 0), Point(1, 1), Point(1, 2),
            Point(2, 0), Point(2, 1), Point(2, 2),
            Point(3, 0), Point(3, 1), Point(3, 2),
        ]
        assert list(Size(4, 3).points()) == expected

    def test_points_sorted(self) -> None:
        points = list(Size(3, 5).points())
        assert points == sorted(points)

    @pytest.mark.parametrize("size", [Size(0, 0), Size(0, 3), Size(3, 0)])
    def test_points_empty(self, size: Size) -> None:
        assert list(size.points()) == []

    def test_points_restartable(self) -> None:
        size = Size(2, 2)
        assert list(size.points()) == list(size.points())

    def test_points_in_row(self) -> None:
        assert list(Size(3, 2).points_in_row(1)) == [Point(1, 0), Point(1, 1)]

    def test_points_in_column(self) -> None:
        assert list(Size(3, 2).points_in_column(1)) == [
            Point(0, 1),
            Point(1, 1),
            Point(2, 1),
        ]
