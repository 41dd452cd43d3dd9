"""
Unit tests for Coord and the coordinate helpers.

Tests:
- Arithmetic and tolerance based equality
- Distances (euclidean and cylindrical)
- Rotations and planar alignment
- Periodic wrapping and replication
"""

import numpy as np
import pytest
from grafen.core.coord import (Coord, Direction, pbc_multiply_coords, rotate_coords,
                               rotate_planar_coords_to_alignment)
from grafen.core.errors import ConfigError


class TestCoordArithmetic:
    """Test operators and equality."""

    def test_addition_and_subtraction(self):
        """Test componentwise addition and subtraction."""
        a = Coord(1.0, 2.0, 3.0)
        b = Coord(0.5, 0.5, 0.5)

        assert a + b == Coord(1.5, 2.5, 3.5)
        assert a - b == Coord(0.5, 1.5, 2.5)
        assert -a == Coord(-1.0, -2.0, -3.0)

    def test_scalar_multiplication_and_division(self):
        """Test scaling by a float from either side."""
        a = Coord(1.0, -2.0, 4.0)

        assert a * 2.0 == Coord(2.0, -4.0, 8.0)
        assert 2.0 * a == Coord(2.0, -4.0, 8.0)
        assert a / 2.0 == Coord(0.5, -1.0, 2.0)

    def test_equality_within_tolerance(self):
        """Test that tiny deviations compare equal."""
        assert Coord(1.0, 1.0, 1.0) == Coord(1.0 + 1e-12, 1.0, 1.0 - 1e-12)

    def test_inequality_outside_tolerance(self):
        """Test that larger deviations do not compare equal."""
        assert Coord(1.0, 1.0, 1.0) != Coord(1.0 + 1e-6, 1.0, 1.0)

    def test_origo(self):
        """Test the origin constant."""
        assert Coord.ORIGO == Coord(0.0, 0.0, 0.0)
        assert Coord() == Coord.ORIGO

    def test_string_formatting(self):
        """Test one decimal output."""
        assert str(Coord(1.0, 2.24, -3.0)) == "(1.0, 2.2, -3.0)"

    def test_conversion_to_tuple_and_numpy(self):
        """Test conversions."""
        coord = Coord(1.0, 2.0, 3.0)

        assert coord.to_tuple() == (1.0, 2.0, 3.0)
        assert np.allclose(coord.to_numpy(), [1.0, 2.0, 3.0])


class TestCoordParsing:
    """Test parsing from strings and sequences."""

    def test_from_string(self):
        """Test whitespace separated values."""
        assert Coord.from_string("1.0  2.0\t3.5") == Coord(1.0, 2.0, 3.5)

    def test_from_string_ignores_extra_values(self):
        """Test that only the first three values are used."""
        assert Coord.from_string("1 2 3 4") == Coord(1.0, 2.0, 3.0)

    def test_from_string_with_too_few_values_raises(self):
        """Test error for missing values."""
        with pytest.raises(ConfigError):
            Coord.from_string("1.0 2.0")

    def test_from_string_with_bad_value_raises(self):
        """Test error for a non-number."""
        with pytest.raises(ConfigError):
            Coord.from_string("1.0 a 2.0")

    def test_from_sequence(self):
        """Test construction from a list."""
        assert Coord.from_sequence([1, 2, 3]) == Coord(1.0, 2.0, 3.0)

        with pytest.raises(ConfigError):
            Coord.from_sequence([1.0, 2.0])


class TestCoordDistances:
    """Test distance calculations."""

    def test_distance(self):
        """Test euclidean distance."""
        assert np.isclose(Coord(0.0, 0.0, 0.0).distance(Coord(1.0, 2.0, 2.0)), 3.0)

    def test_cylindrical_distance_along_each_axis(self):
        """Test radial and directed height decomposition."""
        origin = Coord(0.0, 0.0, 0.0)

        dr, dh = origin.distance_cylindrical(Coord(3.0, 4.0, 1.0), Direction.Z)
        assert np.isclose(dr, 5.0) and np.isclose(dh, 1.0)

        dr, dh = origin.distance_cylindrical(Coord(-2.0, 3.0, 4.0), Direction.X)
        assert np.isclose(dr, 5.0) and np.isclose(dh, -2.0)

        dr, dh = origin.distance_cylindrical(Coord(3.0, 2.0, 4.0), Direction.Y)
        assert np.isclose(dr, 5.0) and np.isclose(dh, 2.0)

    def test_cylindrical_height_is_directed_from_self(self):
        """Test that the height is other - self."""
        _, dh = Coord(0.0, 0.0, 5.0).distance_cylindrical(Coord(0.0, 0.0, 2.0), Direction.Z)
        assert np.isclose(dh, -3.0)


class TestCoordRotations:
    """Test quarter turn rotations."""

    def test_rotate_around_each_axis(self):
        """Test the +90 degree rotations."""
        coord = Coord(1.0, 2.0, 3.0)

        assert coord.rotate(Direction.X) == Coord(1.0, -3.0, 2.0)
        assert coord.rotate(Direction.Y) == Coord(3.0, 2.0, -1.0)
        assert coord.rotate(Direction.Z) == Coord(-2.0, 1.0, 3.0)

    def test_four_rotations_is_identity(self):
        """Test that a full turn returns the input."""
        coords = [Coord(1.0, 2.0, 3.0), Coord(-0.5, 0.0, 4.0)]

        for axis in Direction:
            rotated = coords
            for _ in range(4):
                rotated = rotate_coords(rotated, axis)

            assert rotated == coords

    def test_planar_alignment_from_z(self):
        """Test that planar sheets stay in the positive octant."""
        coords = [Coord(1.0, 2.0, 0.0)]

        assert rotate_planar_coords_to_alignment(coords, Direction.Z, Direction.X) == [Coord(0.0, 2.0, 1.0)]
        assert rotate_planar_coords_to_alignment(coords, Direction.Z, Direction.Y) == [Coord(1.0, 0.0, 2.0)]

    def test_planar_alignment_is_invertible(self):
        """Test that every rotation is undone by the reverse pair."""
        coords = [Coord(1.0, 2.0, 0.5), Coord(3.0, 0.25, -1.0)]

        for from_dir in Direction:
            for to_dir in Direction:
                rotated = rotate_planar_coords_to_alignment(coords, from_dir, to_dir)
                restored = rotate_planar_coords_to_alignment(rotated, to_dir, from_dir)

                assert restored == coords

    def test_planar_alignment_to_same_direction_is_copy(self):
        """Test identity rotation."""
        coords = [Coord(1.0, 2.0, 0.0)]
        rotated = rotate_planar_coords_to_alignment(coords, Direction.Y, Direction.Y)

        assert rotated == coords
        assert rotated is not coords


class TestCoordPeriodic:
    """Test periodic boundary operations."""

    def test_with_pbc_wraps_into_box(self):
        """Test wrapping from above and below."""
        box_size = Coord(2.0, 3.0, 4.0)

        assert Coord(1.0, 1.0, 1.0).with_pbc(box_size) == Coord(1.0, 1.0, 1.0)
        assert Coord(3.0, 1.0, 1.0).with_pbc(box_size) == Coord(1.0, 1.0, 1.0)
        assert Coord(1.0, 4.5, 1.0).with_pbc(box_size) == Coord(1.0, 1.5, 1.0)
        assert Coord(-1.0, 1.0, 13.0).with_pbc(box_size) == Coord(1.0, 1.0, 1.0)
        assert Coord(1.0, -1.0, 1.0).with_pbc(box_size) == Coord(1.0, 2.0, 1.0)

    def test_with_pbc_stays_below_box_size(self):
        """Test that tiny negative values do not wrap to the box edge."""
        wrapped = Coord(-1e-17, 0.0, 0.0).with_pbc(Coord(1.0, 1.0, 1.0))
        assert 0.0 <= wrapped.x < 1.0

    def test_with_pbc_ignores_zero_sized_axes(self):
        """Test that axes without a size are left unchanged."""
        coord = Coord(5.0, -3.0, 2.0)
        assert coord.with_pbc(Coord(0.0, 0.0, 0.0)) == coord

    def test_pbc_multiply(self):
        """Test componentwise integer scaling."""
        assert Coord(1.0, 2.0, 3.0).pbc_multiply(1, 2, 3) == Coord(1.0, 4.0, 9.0)

    def test_pbc_multiply_coords_order(self):
        """Test that clones are emitted with x outermost and z innermost."""
        coords = [Coord(0.0, 0.0, 0.0), Coord(0.5, 0.5, 0.5)]
        size = Coord(1.0, 2.0, 3.0)

        replicated = pbc_multiply_coords(coords, size, 2, 2, 1)

        expected = [
            Coord(0.0, 0.0, 0.0), Coord(0.5, 0.5, 0.5),
            Coord(0.0, 2.0, 0.0), Coord(0.5, 2.5, 0.5),
            Coord(1.0, 0.0, 0.0), Coord(1.5, 0.5, 0.5),
            Coord(1.0, 2.0, 0.0), Coord(1.5, 2.5, 0.5),
        ]
        assert replicated == expected

    def test_pbc_multiply_coords_identity_is_copy(self):
        """Test that a single replication returns a copy."""
        coords = [Coord(1.0, 1.0, 1.0)]
        replicated = pbc_multiply_coords(coords, Coord(2.0, 2.0, 2.0), 1, 1, 1)

        assert replicated == coords
        assert replicated is not coords

    def test_direction_string(self):
        """Test direction names."""
        assert str(Direction.X) == "X"
        assert [str(d) for d in Direction] == ["X", "Y", "Z"]
