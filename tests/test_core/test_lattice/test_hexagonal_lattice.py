"""
Unit tests for HexagonalCrystal.

Tests honeycomb properties:
- Bin rounding to multiples of 3 and 2
- Point count of 2/3 of the grid
- Bond length and periodic closure
"""

import numpy as np
import pytest
from grafen.core.errors import ConstructionError
from grafen.core.lattice import HexagonalCrystal, LatticeGenerator, create_crystal


def minimum_image_distances(xyz: np.ndarray, box: np.ndarray) -> np.ndarray:
    """Pairwise distances in the xy plane with periodic edges."""
    delta = xyz[:, np.newaxis, :2] - xyz[np.newaxis, :, :2]
    delta -= box * np.round(delta / box)
    return np.sqrt(np.sum(delta**2, axis=-1))


class TestHexagonalCrystal:
    """Test the crystal basis."""

    def test_basis_is_triangular(self):
        """Test that the basis is (a, a, 120°)."""
        crystal = HexagonalCrystal(0.142)

        assert np.isclose(crystal.a, 0.142)
        assert np.isclose(crystal.b, 0.142)
        assert np.isclose(crystal.gamma, 2 * np.pi / 3)

    @pytest.mark.parametrize("requested,resolved", [
        ((1, 1), (3, 2)),
        ((3, 2), (3, 2)),
        ((4, 3), (6, 4)),
        ((7, 5), (9, 6)),
        ((0, 0), (0, 0)),
    ])
    def test_resolve_bins(self, requested, resolved):
        """Test rounding up to multiples of 3 and 2."""
        assert HexagonalCrystal(1.0).resolve_bins(*requested) == resolved

    def test_every_third_site_is_removed(self):
        """Test the removed site pattern."""
        crystal = HexagonalCrystal(1.0)

        assert crystal.includes_site(0, 0)
        assert crystal.includes_site(1, 0)
        assert not crystal.includes_site(2, 0)
        assert not crystal.includes_site(1, 1)
        assert not crystal.includes_site(0, 2)

    def test_invalid_spacing_raises(self):
        """Test validation of the spacing."""
        with pytest.raises(ConstructionError):
            HexagonalCrystal(0.0)

    def test_create_crystal_factory(self):
        """Test construction by name."""
        assert isinstance(create_crystal('hexagonal', a=1.0), HexagonalCrystal)


class TestHexagonalLatticeGeneration:
    """Test generated honeycomb lattices."""

    @pytest.mark.parametrize("nx,ny", [(1, 1), (3, 2), (4, 3), (8, 7), (12, 10)])
    def test_point_count(self, nx, ny):
        """Test that 2/3 of the resolved grid holds points."""
        generator = LatticeGenerator(HexagonalCrystal(1.0)).with_bins(nx, ny)
        nx_resolved, ny_resolved = generator.bins

        points = generator.finalize()

        assert nx_resolved % 3 == 0 and nx_resolved >= nx
        assert ny_resolved % 2 == 0 and ny_resolved >= ny
        assert len(points) == 2 * nx_resolved * ny_resolved // 3

    def test_box_size(self):
        """Test that the box uses the resolved bins."""
        a = 0.142
        points = LatticeGenerator(HexagonalCrystal(a)).with_bins(4, 3).finalize()

        assert np.isclose(points.box_size.x, 6 * a)
        assert np.isclose(points.box_size.y, 4 * a * np.sqrt(3) / 2)
        assert points.box_size.z == 0.0

    def test_size_resolves_to_multiples(self):
        """Test that a target size gives periodic bins."""
        a = 0.142
        points = LatticeGenerator(HexagonalCrystal(a)).with_size(5.0, 4.0).finalize()

        nx = int(round(points.box_size.x / a))
        ny = int(round(points.box_size.y / (a * np.sqrt(3) / 2)))

        assert nx % 3 == 0
        assert ny % 2 == 0

    def test_points_lie_within_box(self):
        """Test that sheared rows are wrapped into the box."""
        points = LatticeGenerator(HexagonalCrystal(1.0)).with_bins(9, 6).finalize()
        xyz = points.to_array()

        assert np.all(xyz[:, 0] >= 0.0) and np.all(xyz[:, 0] < points.box_size.x)
        assert np.all(xyz[:, 1] >= 0.0) and np.all(xyz[:, 1] < points.box_size.y)

    def test_bond_length(self):
        """Test that the closest distance between points is the spacing."""
        a = 1.3
        points = LatticeGenerator(HexagonalCrystal(a)).with_bins(6, 4).finalize()
        xyz = points.to_array()

        distances = np.sqrt(np.sum((xyz[:, np.newaxis, :] - xyz[np.newaxis, :, :])**2, axis=-1))
        np.fill_diagonal(distances, np.inf)

        assert np.isclose(distances.min(), a)

    def test_every_point_has_three_neighbours_over_periodic_edges(self):
        """Test that the honeycomb closes over the periodic boundaries."""
        a = 1.0
        points = LatticeGenerator(HexagonalCrystal(a)).with_bins(6, 6).finalize()
        box = np.array([points.box_size.x, points.box_size.y])

        distances = minimum_image_distances(points.to_array(), box)
        num_neighbours = np.sum(np.isclose(distances, a), axis=1)

        assert np.all(num_neighbours == 3)
