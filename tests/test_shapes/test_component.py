"""
Unit tests for component dispatch and the shared component behaviour.
"""

import numpy as np
import pytest
from grafen.core.coord import Coord
from grafen.core.errors import ConfigError
from grafen.core.lattice import Triclinic
from grafen.core.residue import Residue
from grafen.shapes import (COMPONENT_REGISTRY, Cuboid, CuboidConfig, CuboidSurface,
                           CuboidSurfaceConfig, CylinderSurface, CylinderSurfaceConfig,
                           CylinderVolume, CylinderVolumeConfig, FillType, Sheet, SheetConfig,
                           Sphere, SphereConfig, config_from_dict, construct, create_config)

SQUARE = Triclinic(a=0.5, b=0.5, gamma=90.0)


@pytest.fixture
def water():
    return Residue.from_atoms('SOL', ('OW', 0.0, 0.0, 0.0),
                              ('HW1', 0.1, 0.0, 0.0), ('HW2', 0.0, 0.1, 0.0))


class TestConstruct:
    """Test that every configuration type builds its component type."""

    @pytest.mark.parametrize("config,component_type", [
        (SheetConfig(lattice=SQUARE, length=2.0, width=2.0), Sheet),
        (CylinderSurfaceConfig(lattice=SQUARE, radius=1.0, height=1.0), CylinderSurface),
        (CuboidSurfaceConfig(lattice=SQUARE, size=Coord(1.0, 1.0, 1.0)), CuboidSurface),
        (CuboidConfig(size=Coord(1.0, 1.0, 1.0), fill=FillType.num_coords(5)), Cuboid),
        (CylinderVolumeConfig(radius=1.0, height=1.0, fill=FillType.density(5.0)), CylinderVolume),
        (SphereConfig(radius=1.0, fill=FillType.num_coords(5)), Sphere),
    ])
    def test_dispatch(self, config, component_type):
        """Test construction by configuration type."""
        component = construct(config, rng=np.random.default_rng(0))

        assert isinstance(component, component_type)
        assert len(component) > 0

    def test_name_residue_and_origin_are_kept(self, water):
        """Test that shared fields are copied onto the component."""
        config = SphereConfig(radius=1.0, name="drop", residue=water, origin=Coord(1.0, 2.0, 3.0))
        sphere = construct(config)

        assert sphere.name == "drop"
        assert sphere.residue == water
        assert sphere.origin == Coord(1.0, 2.0, 3.0)

    def test_unknown_configuration_raises(self):
        """Test error for an object which is not a configuration."""
        with pytest.raises(ConfigError):
            construct({'type': 'sheet'})


class TestConfigFactory:
    """Test configuration creation by name."""

    def test_registry_holds_all_types(self):
        """Test the registered component types."""
        assert set(COMPONENT_REGISTRY) == {
            'sheet', 'cylinder_surface', 'cuboid_surface', 'cuboid', 'cylinder_volume', 'sphere'
        }

    def test_create_config(self):
        """Test creation by name, case insensitive."""
        config = create_config('Sphere', radius=2.0)

        assert isinstance(config, SphereConfig)
        assert config.radius == 2.0

    def test_create_unknown_config_raises(self):
        """Test error for an unknown name."""
        with pytest.raises(ConfigError):
            create_config('torus', radius=1.0)

    def test_config_from_dict(self):
        """Test parsing by the type key."""
        config = config_from_dict({'type': 'cuboid', 'size': [1, 2, 3], 'fill': {'density': 2.0}})

        assert config == CuboidConfig(size=Coord(1.0, 2.0, 3.0), fill=FillType.density(2.0))

    def test_config_from_dict_without_type_raises(self):
        """Test error for a missing type."""
        with pytest.raises(ConfigError):
            config_from_dict({'size': [1, 2, 3]})


class TestComponentAtoms:
    """Test residue broadcasting."""

    def test_iter_residues(self, water):
        """Test absolute positions: origin + coordinate + atom offset."""
        box = Cuboid(size=Coord(1.0, 1.0, 1.0), residue=water, origin=Coord(1.0, 0.0, 0.0),
                     coords=[Coord(0.5, 0.5, 0.5)])
        residues = list(box.iter_residues())

        assert len(residues) == 1
        assert residues[0].code == 'SOL'
        assert residues[0].atoms == [
            ('OW', Coord(1.5, 0.5, 0.5)),
            ('HW1', Coord(1.6, 0.5, 0.5)),
            ('HW2', Coord(1.5, 0.6, 0.5)),
        ]

    def test_iter_atoms_order(self, water):
        """Test that atoms follow residue order, then atom order."""
        box = Cuboid(size=Coord(1.0, 1.0, 1.0), residue=water,
                     coords=[Coord(0.0, 0.0, 0.0), Coord(0.5, 0.0, 0.0)])
        atoms = list(box.iter_atoms())

        assert box.num_atoms() == 6
        assert [(a.residue_index, a.atom_index, a.atom_code) for a in atoms] == [
            (0, 0, 'OW'), (0, 1, 'HW1'), (0, 2, 'HW2'),
            (1, 3, 'OW'), (1, 4, 'HW1'), (1, 5, 'HW2'),
        ]

    def test_without_residue(self):
        """Test that a component without a residue has no atoms."""
        box = Cuboid(size=Coord(1.0, 1.0, 1.0), coords=[Coord(0.0, 0.0, 0.0)])

        assert box.num_atoms() == 0
        assert list(box.iter_residues()) == []

    def test_translate_moves_origin_only(self, water):
        """Test translation."""
        box = Cuboid(size=Coord(1.0, 1.0, 1.0), residue=water, coords=[Coord(0.5, 0.5, 0.5)])
        moved = box.translate(Coord(1.0, 1.0, 1.0))

        assert moved.origin == Coord(1.0, 1.0, 1.0)
        assert moved.coords == box.coords
        assert box.origin == Coord(0.0, 0.0, 0.0)

    def test_with_coords(self):
        """Test replacing the coordinates."""
        box = Cuboid(size=Coord(1.0, 1.0, 1.0))
        assert len(box.with_coords([Coord(0.1, 0.1, 0.1)] * 3)) == 3
