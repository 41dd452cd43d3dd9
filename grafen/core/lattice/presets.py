"""
Preset crystal bases for 2D lattices.

This module provides concrete implementations of AbstractCrystal for:
- Triclinic crystals (two vectors of arbitrary length and angle)
- Hexagonal (honeycomb) crystals
"""

import numpy as np
from typing import Tuple

from .base import AbstractCrystal
from ..errors import ConstructionError


class TriclinicCrystal(AbstractCrystal):
    """
    Triclinic crystal basis.

    Two vectors of length a and b separated by an angle gamma. Every site
    of the grid holds a point and the requested bins are used as is.

    Geometry
    --------
    Primitive vectors:
        a1 = [a, 0]
        a2 = [b·cos(γ), b·sin(γ)]

    Parameters
    ----------
    a : float
        Length of the first vector (along x).
    b : float
        Length of the second vector.
    gamma : float
        Angle between the vectors, in radians. Must lie in (0, π).

    Examples
    --------
    >>> crystal = TriclinicCrystal(1.0, 3.0, np.pi / 3)
    >>> crystal.get_spacing()
    Spacing(dx=1.0, dy=2.598..., dx_per_row=1.5...)
    """

    def __init__(self, a: float, b: float, gamma: float):
        if a <= 0 or b <= 0:
            raise ConstructionError("Crystal vector lengths must be positive")

        if not 0.0 < gamma < np.pi:
            raise ConstructionError("Crystal angle gamma must lie in (0, π) radians")

        self._a = float(a)
        self._b = float(b)
        self._gamma = float(gamma)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def gamma(self) -> float:
        return self._gamma

    def resolve_bins(self, nx: int, ny: int) -> Tuple[int, int]:
        return nx, ny

    def includes_site(self, col: int, row: int) -> bool:
        return True


class HexagonalCrystal(TriclinicCrystal):
    """
    Hexagonal (honeycomb) crystal with bond spacing a.

    The basis is a triangular one with equal vectors separated by 120°. The
    honeycomb appears by removing every third grid point: the removed point
    is the middle of a hexagonal cell and shifts by one column every row.

    Periodicity
    -----------
    For the honeycomb to close over the periodic boundaries the number of
    columns is rounded up to a multiple of 3 and the number of rows to a
    multiple of 2. The resulting lattice holds 2/3 of the grid sites.

    Parameters
    ----------
    a : float
        Bond spacing (distance between neighbouring points).
    """

    def __init__(self, a: float):
        if a <= 0:
            raise ConstructionError("Lattice constant must be positive")

        super().__init__(a, a, 2.0 * np.pi / 3.0)

    def resolve_bins(self, nx: int, ny: int) -> Tuple[int, int]:
        nx = int(np.ceil(nx / 3.0)) * 3
        ny = int(np.ceil(ny / 2.0)) * 2
        return nx, ny

    def includes_site(self, col: int, row: int) -> bool:
        return (col + row + 1) % 3 != 0

    def __repr__(self) -> str:
        return f"HexagonalCrystal(a={self.a:.3f})"


# Crystal registry for config-based construction
CRYSTAL_REGISTRY = {
    'triclinic': TriclinicCrystal,
    'hexagonal': HexagonalCrystal,
}


def create_crystal(crystal_type: str, **kwargs) -> AbstractCrystal:
    """
    Factory function to create crystals from string names.

    Parameters
    ----------
    crystal_type : str
        Type of crystal ('triclinic', 'hexagonal')
    **kwargs
        Arguments passed to the crystal constructor
        (e.g., a=1.0, b=0.5, gamma=np.pi/2)

    Returns
    -------
    crystal : AbstractCrystal
        Instantiated crystal object

    Examples
    --------
    >>> crystal = create_crystal('hexagonal', a=0.142)
    >>> isinstance(crystal, HexagonalCrystal)
    True

    Raises
    ------
    ValueError
        If crystal_type is not recognized
    """
    crystal_type = crystal_type.lower()

    if crystal_type not in CRYSTAL_REGISTRY:
        available = ', '.join(CRYSTAL_REGISTRY.keys())
        raise ValueError(f"Unknown crystal type '{crystal_type}'. "
                         f"Available types: {available}")

    return CRYSTAL_REGISTRY[crystal_type](**kwargs)
