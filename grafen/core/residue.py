"""
Residue templates.

A residue is a named group of atoms with positions relative to a base
coordinate. Shapes broadcast their residue template onto every generated
coordinate to produce the final atoms.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .coord import Coord
from .errors import ConfigError


@dataclass(frozen=True)
class Atom:
    """
    An atom of a residue template.

    Attributes
    ----------
    code : str
        Atom name.
    position : Coord
        Position relative to the residue base coordinate.
    """
    code: str
    position: Coord


@dataclass(frozen=True)
class Residue:
    """
    A residue template: a code and an ordered tuple of atoms.

    Examples
    --------
    >>> residue = Residue.from_atoms('SOL', ('OW', 0.0, 0.0, 0.0), ('HW1', 0.1, 0.0, 0.0))
    >>> len(residue)
    2
    """
    code: str
    atoms: Tuple[Atom, ...]

    @classmethod
    def from_atoms(cls, code: str, *atoms: Tuple[str, float, float, float]) -> 'Residue':
        """Construct from (atom_code, x, y, z) tuples."""
        return cls(
            code=code,
            atoms=tuple(Atom(name, Coord(x, y, z)) for name, x, y, z in atoms)
        )

    def __len__(self) -> int:
        return len(self.atoms)

    def broadcast(self, position: Coord) -> List[Tuple[str, Coord]]:
        """
        Place the residue at a position.

        Returns
        -------
        atoms : List[Tuple[str, Coord]]
            (atom_code, absolute position) in template order.
        """
        return [(atom.code, position + atom.position) for atom in self.atoms]

    def to_dict(self) -> Dict:
        return {
            'code': self.code,
            'atoms': [
                {'code': atom.code, 'position': list(atom.position.to_tuple())}
                for atom in self.atoms
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Residue':
        try:
            code = data['code']
            atoms = tuple(
                Atom(str(atom['code']), Coord.from_sequence(atom.get('position', (0.0, 0.0, 0.0))))
                for atom in data['atoms']
            )
        except (KeyError, TypeError) as err:
            raise ConfigError(f"Invalid residue definition: {data!r}") from err

        if not atoms:
            raise ConfigError(f"Residue '{code}' has no atoms")

        return cls(code=str(code), atoms=atoms)
