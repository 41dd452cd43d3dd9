"""
Abstract base class for shape components.

A component is a constructed geometric object (a sheet, a cylinder, a cuboid
or a sphere) holding an origin and a list of coordinates relative to it. Its
optional residue template is broadcast onto every coordinate to produce the
final atoms:

    absolute position = origin + coordinate + atom offset

Components are immutable. Every editing operation returns a new component.
"""

import dataclasses
from abc import ABC, abstractmethod
from typing import Iterator, List, NamedTuple, Optional, Tuple

from ..core.coord import Coord
from ..core.residue import Residue


class ResidueItem(NamedTuple):
    """A residue placed at a coordinate: its code and absolute atoms."""
    code: str
    atoms: List[Tuple[str, Coord]]


class AtomItem(NamedTuple):
    """
    A single atom of a component, as consumed by a coordinate file writer.

    Indices are zero-based and never wrapped.
    """
    residue_index: int
    residue_code: str
    atom_index: int
    atom_code: str
    position: Coord


def unwrap_name(name: Optional[str]) -> str:
    return name if name is not None else "(Unnamed)"


class AbstractComponent(ABC):
    """
    Abstract base class for all shape components.

    Concrete components are frozen dataclasses which define the fields
    `name`, `residue`, `origin` and `coords`.

    Design Philosophy
    -----------------
    Separation of concerns:
    - Config = the parameters a component is built from
    - construct_* = the fallible step which performs the geometry
    - Component = the immutable result (this class)
    """

    name: Optional[str]
    residue: Optional[Residue]
    origin: Coord
    coords: List[Coord]

    @abstractmethod
    def describe(self) -> str:
        """Long description of the component with its size and origin."""
        pass

    @abstractmethod
    def describe_short(self) -> str:
        """Name and kind of the component."""
        pass

    @abstractmethod
    def calc_box_size(self) -> Coord:
        """Size of the box which contains the component."""
        pass

    def translate(self, shift: Coord) -> 'AbstractComponent':
        """Return a copy with the origin shifted. Coordinates are untouched."""
        return dataclasses.replace(self, origin=self.origin + shift)

    def with_coords(self, coords: List[Coord]) -> 'AbstractComponent':
        return dataclasses.replace(self, coords=list(coords))

    def num_atoms(self) -> int:
        """Number of atoms after broadcasting the residue (0 without a residue)."""
        if self.residue is None:
            return 0

        return len(self.residue) * len(self.coords)

    def iter_residues(self) -> Iterator[ResidueItem]:
        """
        Iterate over the residues placed at every coordinate.

        Residues are yielded in stored coordinate order with absolute atom
        positions. Nothing is yielded for a component without a residue.
        """
        if self.residue is None:
            return

        for coord in self.coords:
            atoms = self.residue.broadcast(self.origin + coord)
            yield ResidueItem(self.residue.code, atoms)

    def iter_atoms(self) -> Iterator[AtomItem]:
        """Iterate over all atoms in residue order, then atom order."""
        atom_index = 0

        for residue_index, residue in enumerate(self.iter_residues()):
            for atom_code, position in residue.atoms:
                yield AtomItem(residue_index, residue.code, atom_index, atom_code, position)
                atom_index += 1

    def __len__(self) -> int:
        return len(self.coords)
