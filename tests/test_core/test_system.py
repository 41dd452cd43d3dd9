"""
Unit tests for System.
"""

import pytest
from grafen.core.coord import Coord
from grafen.core.residue import Residue
from grafen.core.system import System
from grafen.shapes import Cuboid, Sphere


@pytest.fixture
def water():
    return Residue.from_atoms('SOL', ('OW', 0.0, 0.0, 0.0),
                              ('HW1', 0.1, 0.0, 0.0), ('HW2', 0.0, 0.1, 0.0))


@pytest.fixture
def argon():
    return Residue.from_atoms('AR', ('AR', 0.0, 0.0, 0.0))


class TestSystem:
    """Test the component collection."""

    def test_empty_system(self):
        """Test that an empty system has a zero box and no atoms."""
        system = System(title="empty")

        assert system.calc_box_size() == Coord(0.0, 0.0, 0.0)
        assert system.num_atoms() == 0
        assert list(system.iter_atoms()) == []

    def test_box_size_covers_all_components(self, water):
        """Test the largest extent of origin + box size per axis."""
        box = Cuboid(size=Coord(2.0, 3.0, 1.0), origin=Coord(1.0, 0.0, 0.0), residue=water)
        sphere = Sphere(radius=1.5, origin=Coord(0.0, 0.0, 4.0), residue=water)

        system = System(title="two", components=[box, sphere])

        assert system.calc_box_size() == Coord(3.0, 3.0, 7.0)

    def test_atom_indices_continue_across_components(self, water, argon):
        """Test the atom order and the running residue and atom indices."""
        first = Cuboid(size=Coord(1.0, 1.0, 1.0), residue=water,
                       coords=[Coord(0.0, 0.0, 0.0), Coord(0.5, 0.5, 0.5)])
        second = Cuboid(size=Coord(1.0, 1.0, 1.0), residue=argon,
                        coords=[Coord(0.2, 0.2, 0.2)], origin=Coord(1.0, 0.0, 0.0))

        system = System(title="water and argon", components=[first, second])
        atoms = list(system.iter_atoms())

        assert system.num_atoms() == 7
        assert len(atoms) == 7

        assert [a.residue_index for a in atoms] == [0, 0, 0, 1, 1, 1, 2]
        assert [a.atom_index for a in atoms] == list(range(7))
        assert [a.atom_code for a in atoms] == ['OW', 'HW1', 'HW2', 'OW', 'HW1', 'HW2', 'AR']
        assert atoms[4].position == Coord(0.6, 0.5, 0.5)
        assert atoms[6].residue_code == 'AR'
        assert atoms[6].position == Coord(1.2, 0.2, 0.2)

    def test_components_without_residue_have_no_atoms(self, argon):
        """Test that components without a residue are skipped."""
        bare = Cuboid(size=Coord(1.0, 1.0, 1.0), coords=[Coord(0.0, 0.0, 0.0)])
        filled = Cuboid(size=Coord(1.0, 1.0, 1.0), coords=[Coord(0.0, 0.0, 0.0)], residue=argon)

        atoms = list(System(title="", components=[bare, filled]).iter_atoms())

        assert len(atoms) == 1
        assert atoms[0].residue_index == 0

    def test_translate(self, argon):
        """Test that translation moves every component origin."""
        box = Cuboid(size=Coord(1.0, 1.0, 1.0), coords=[Coord(0.0, 0.0, 0.0)], residue=argon)
        system = System(title="moved", components=[box]).translate(Coord(1.0, 2.0, 3.0))

        assert system.components[0].origin == Coord(1.0, 2.0, 3.0)
        assert system.components[0].coords == [Coord(0.0, 0.0, 0.0)]
        assert system.title == "moved"

    def test_str_lists_components(self):
        """Test the text summary."""
        system = System(title="box", components=[Cuboid(size=Coord(1.0, 1.0, 1.0), name="water")])
        text = str(system)

        assert text.startswith("System: box")
        assert "water (Box" in text
