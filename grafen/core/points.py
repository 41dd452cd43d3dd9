"""
The base collection of points onto which residues are broadcast.

Beyond their creation (by a lattice or a sampler) all transformations of the
points belong here. Every operation returns a new Points value.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .coord import Coord


@dataclass(frozen=True)
class Points:
    """
    A collection of coordinates and the box that contains them.

    Attributes
    ----------
    box_size : Coord
        Box dimensions. Planar point sets have box_size.z == 0.
    coords : List[Coord]
        The points, in generation order.
    """
    box_size: Coord
    coords: List[Coord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.coords)

    def uniform_distribution(self, std_z: float,
                             rng: Optional[np.random.Generator] = None) -> 'Points':
        """
        Shift every coordinate along z by a uniform random amount.

        The shift is drawn independently per point from [-std_z, std_z].
        Positions in x and y and the box size are untouched.

        Parameters
        ----------
        std_z : float
            Half-width of the uniform distribution.
        rng : np.random.Generator, optional
            Random source. A fresh default generator is used if None.

        Returns
        -------
        points : Points
            New collection with displaced z positions.
        """
        rng = np.random.default_rng() if rng is None else rng
        shifts = rng.uniform(-std_z, std_z, size=len(self.coords))

        coords = [
            Coord(c.x, c.y, c.z + float(dz))
            for c, dz in zip(self.coords, shifts)
        ]

        return Points(box_size=self.box_size, coords=coords)

    def translate(self, shift: Coord) -> 'Points':
        return Points(box_size=self.box_size, coords=[c + shift for c in self.coords])

    def with_pbc(self) -> 'Points':
        """Wrap all coordinates into the box."""
        return Points(
            box_size=self.box_size,
            coords=[c.with_pbc(self.box_size) for c in self.coords]
        )

    def to_array(self) -> np.ndarray:
        """Coordinates as an (N, 3) array."""
        if not self.coords:
            return np.zeros((0, 3))

        return np.array([c.to_tuple() for c in self.coords], dtype=float)
