"""
Lattice point generation.

A LatticeGenerator grows a regular grid from a crystal basis. The number of
columns and rows is either derived from a target size or given directly, and
the generated box is always an exact multiple of the crystal spacing so the
lattice tiles without seams.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from .base import AbstractCrystal
from ..coord import Coord
from ..points import Points

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


class LatticeGenerator:
    """
    Builder for lattice points.

    Parameters
    ----------
    crystal : AbstractCrystal
        Basis used to step between grid sites.

    Examples
    --------
    >>> crystal = TriclinicCrystal(1.0, 0.5, np.pi / 2)
    >>> points = LatticeGenerator(crystal).with_size(2.1, 0.9).finalize()
    >>> len(points), points.box_size
    (4, Coord(x=2.0, y=1.0, z=0.0))
    """

    def __init__(self, crystal: AbstractCrystal):
        self.crystal = crystal
        self._bins: Optional[Tuple[int, int]] = None

    def with_size(self, size_x: float, size_y: float) -> 'LatticeGenerator':
        """Set the number of bins to the closest match of a target size."""
        spacing = self.crystal.get_spacing()

        nx = _round_half_up(size_x / spacing.dx)
        ny = _round_half_up(size_y / spacing.dy)
        self._bins = (max(nx, 0), max(ny, 0))

        return self

    def with_bins(self, nx: int, ny: int) -> 'LatticeGenerator':
        """Set the number of columns and rows directly."""
        self._bins = (max(int(nx), 0), max(int(ny), 0))
        return self

    @property
    def bins(self) -> Tuple[int, int]:
        """Resolved number of columns and rows (zero if no size was set)."""
        if self._bins is None:
            return 0, 0

        return self.crystal.resolve_bins(*self._bins)

    def finalize(self) -> Points:
        """
        Generate the lattice points.

        Points are emitted row by row with columns as the inner loop and
        wrapped into the box along x, which matters for bases with a
        negative row shift.

        Returns
        -------
        points : Points
            Lattice coordinates in the z = 0 plane and their box.
        """
        if self._bins is None:
            return Points(box_size=Coord(0.0, 0.0, 0.0), coords=[])

        nx, ny = self.bins
        dx, dy, dx_per_row = self.crystal.get_spacing()

        box_size = Coord(nx * dx, ny * dy, 0.0)
        coords = []

        for row in range(ny):
            for col in range(nx):
                if not self.crystal.includes_site(col, row):
                    continue

                coord = Coord(col * dx + row * dx_per_row, row * dy, 0.0)
                coords.append(coord.with_pbc(box_size))

        logger.debug(f"Generated {len(coords)} lattice points from {self.crystal} "
                     f"with {nx} x {ny} bins")

        return Points(box_size=box_size, coords=coords)


def generate_lattice(crystal: AbstractCrystal,
                     size: Optional[Tuple[float, float]] = None,
                     bins: Optional[Tuple[int, int]] = None) -> Points:
    """
    Generate lattice points from a crystal basis.

    Parameters
    ----------
    crystal : AbstractCrystal
        Crystal basis.
    size : Tuple[float, float], optional
        Target size (x, y). Rounded to the closest multiple of the spacing.
    bins : Tuple[int, int], optional
        Number of columns and rows. Takes precedence over size.

    Returns
    -------
    points : Points
        Empty with a zero box if neither size nor bins is given.
    """
    generator = LatticeGenerator(crystal)

    if bins is not None:
        generator.with_bins(*bins)
    elif size is not None:
        generator.with_size(*size)

    return generator.finalize()
