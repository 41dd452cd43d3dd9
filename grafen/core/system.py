"""
A system: a titled, ordered collection of constructed components.

The system is what a coordinate file writer consumes. It exposes the atoms of
all components in a single deterministic order and the box which holds them.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List

from .coord import Coord

if TYPE_CHECKING:
    from ..shapes.base import AbstractComponent, AtomItem


@dataclass(frozen=True)
class System:
    """
    Collection of components.

    Attributes
    ----------
    title : str
        Title of the system.
    components : List[AbstractComponent]
        Components in output order.
    """
    title: str
    components: List['AbstractComponent'] = field(default_factory=list)

    def calc_box_size(self) -> Coord:
        """
        Size of the box which contains all components.

        The largest extent of origin + box size along each axis.
        """
        if not self.components:
            return Coord(0.0, 0.0, 0.0)

        corners = [c.origin + c.calc_box_size() for c in self.components]

        return Coord(
            max(corner.x for corner in corners),
            max(corner.y for corner in corners),
            max(corner.z for corner in corners),
        )

    def num_atoms(self) -> int:
        return sum(component.num_atoms() for component in self.components)

    def iter_atoms(self) -> Iterator['AtomItem']:
        """
        Iterate over all atoms of all components.

        Components are visited in order. Residue and atom indices are
        zero-based and continue across components.
        """
        residue_offset = 0
        atom_offset = 0

        for component in self.components:
            num_residues = 0
            num_atoms = 0

            for item in component.iter_atoms():
                yield item._replace(
                    residue_index=item.residue_index + residue_offset,
                    atom_index=item.atom_index + atom_offset,
                )
                num_residues = item.residue_index + 1
                num_atoms += 1

            residue_offset += num_residues
            atom_offset += num_atoms

    def translate(self, shift: Coord) -> 'System':
        return System(
            title=self.title,
            components=[component.translate(shift) for component in self.components],
        )

    def __str__(self) -> str:
        lines = [f"System: {self.title}"]
        lines.extend(f"  {component.describe()}" for component in self.components)
        return '\n'.join(lines)
