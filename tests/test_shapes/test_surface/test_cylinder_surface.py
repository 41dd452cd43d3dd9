"""
Unit tests for cylinder surfaces.
"""

import numpy as np
import pytest
from grafen.core.coord import Coord, Direction
from grafen.core.errors import ConfigError, ConstructionError
from grafen.core.lattice import Triclinic
from grafen.shapes import CylinderCap, CylinderSurface, CylinderSurfaceConfig
from grafen.shapes.surface.cylinder import construct_cylinder_surface

SQUARE = Triclinic(a=0.1, b=0.1, gamma=90.0)


def as_array(coords):
    return np.array([c.to_tuple() for c in coords])


class TestConstructCylinderSurface:
    """Test bending a sheet into a cylinder."""

    def test_radius_follows_snapped_circumference(self):
        """Test that the final radius closes the lattice over the seam."""
        cylinder = construct_cylinder_surface(
            CylinderSurfaceConfig(lattice=SQUARE, radius=1.0, height=2.0))

        # 2π·1.0 = 6.283 snaps to 63 columns of 0.1
        assert np.isclose(cylinder.radius, 6.3 / (2.0 * np.pi))
        assert np.isclose(cylinder.height, 2.0)
        assert len(cylinder) == 63 * 20

    def test_points_lie_on_surface(self):
        """Test that all points are at the radius from the axis and within the height."""
        cylinder = construct_cylinder_surface(
            CylinderSurfaceConfig(lattice=SQUARE, radius=0.5, height=1.0))
        xyz = as_array(cylinder.coords)

        assert np.allclose(np.sqrt(xyz[:, 0]**2 + xyz[:, 1]**2), cylinder.radius)
        assert np.all((xyz[:, 2] >= 0.0) & (xyz[:, 2] < cylinder.height))

    @pytest.mark.parametrize("alignment,axis", [
        (Direction.X, 0),
        (Direction.Y, 1),
        (Direction.Z, 2),
    ])
    def test_alignment(self, alignment, axis):
        """Test that the cylinder axis follows the alignment."""
        cylinder = construct_cylinder_surface(
            CylinderSurfaceConfig(lattice=SQUARE, radius=0.5, height=1.0, alignment=alignment))
        xyz = as_array(cylinder.coords)

        radial = [i for i in range(3) if i != axis]
        dr = np.sqrt(xyz[:, radial[0]]**2 + xyz[:, radial[1]]**2)

        assert np.allclose(dr, cylinder.radius)
        assert xyz[:, axis].min() >= 0.0
        assert xyz[:, axis].max() < cylinder.height

    def test_caps(self):
        """Test that caps add flat circles to the bottom and top."""
        config = CylinderSurfaceConfig(lattice=SQUARE, radius=0.5, height=1.0)

        body = construct_cylinder_surface(config)
        bottom = construct_cylinder_surface(
            CylinderSurfaceConfig(lattice=SQUARE, radius=0.5, height=1.0, cap=CylinderCap.BOTTOM))
        both = construct_cylinder_surface(
            CylinderSurfaceConfig(lattice=SQUARE, radius=0.5, height=1.0, cap=CylinderCap.BOTH))

        num_cap = len(bottom) - len(body)
        assert num_cap > 0
        assert len(both) == len(body) + 2 * num_cap

        # Body first, then bottom, then top
        caps = as_array(both.coords[len(body):])
        assert np.allclose(caps[:num_cap, 2], 0.0)
        assert np.allclose(caps[num_cap:, 2], both.height)
        assert np.all(np.sqrt(caps[:, 0]**2 + caps[:, 1]**2) <= both.radius + 1e-9)

    def test_non_positive_size_raises(self):
        """Test validation of radius and height."""
        with pytest.raises(ConstructionError):
            construct_cylinder_surface(CylinderSurfaceConfig(lattice=SQUARE, radius=0.0, height=1.0))

        with pytest.raises(ConstructionError):
            construct_cylinder_surface(CylinderSurfaceConfig(lattice=SQUARE, radius=1.0, height=-1.0))


class TestCylinderSurface:
    """Test constructed cylinders."""

    def test_box_size(self):
        """Test the box along every alignment."""
        for alignment, expected in [
            (Direction.X, Coord(3.0, 2.0, 2.0)),
            (Direction.Y, Coord(2.0, 3.0, 2.0)),
            (Direction.Z, Coord(2.0, 2.0, 3.0)),
        ]:
            cylinder = CylinderSurface(lattice=SQUARE, radius=1.0, height=3.0, alignment=alignment)
            assert cylinder.calc_box_size() == expected

    def test_describe_short(self):
        """Test the short description."""
        assert CylinderSurface(lattice=SQUARE, radius=1.0, height=1.0,
                               name="tube").describe_short() == "tube (Cylinder)"


class TestCylinderSurfaceConfig:
    """Test configuration parsing."""

    def test_from_dict(self):
        """Test parsing of cap and alignment."""
        config = CylinderSurfaceConfig.from_dict({
            'lattice': {'type': 'hexagonal', 'a': 0.142},
            'radius': 1.0,
            'height': 2.0,
            'alignment': 'y',
            'cap': 'top',
        })

        assert config.alignment == Direction.Y
        assert config.cap == CylinderCap.TOP

    def test_round_trip(self):
        """Test to_dict followed by from_dict."""
        config = CylinderSurfaceConfig(lattice=SQUARE, radius=1.0, height=2.0,
                                       alignment=Direction.X, cap=CylinderCap.BOTH)

        assert CylinderSurfaceConfig.from_dict(config.to_dict()) == config

    def test_unknown_cap_raises(self):
        """Test error for an unknown cap."""
        with pytest.raises(ConfigError):
            CylinderSurfaceConfig.from_dict({'lattice': {'type': 'hexagonal', 'a': 0.142},
                                             'radius': 1.0, 'height': 2.0, 'cap': 'side'})
