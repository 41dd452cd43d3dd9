"""
Abstract base class for 2D crystal bases.

This module defines the interface that every crystal used to grow a lattice
must implement. Crystals are purely geometric objects - they know how to step
from one lattice site to the next, nothing about residues or shapes.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import NamedTuple, Tuple


class Spacing(NamedTuple):
    """
    Grid spacing derived from a crystal basis.

    Attributes
    ----------
    dx : float
        Space between columns (along x).
    dy : float
        Space between rows (along y).
    dx_per_row : float
        Shift along x added for every row.
    """
    dx: float
    dy: float
    dx_per_row: float


class AbstractCrystal(ABC):
    """
    Abstract base class for 2D crystal bases.

    A crystal consists of two vectors of length a and b separated by an angle
    gamma. Vector a points along x. Stepping along a moves to the next column
    of the lattice, stepping along b moves to the next row.

    Design Philosophy
    -----------------
    Separation of concerns:
    - Crystal = basis geometry and which sites of the grid are occupied (this class)
    - LatticeGenerator = sizing the grid and emitting the points
    - Shapes = bending, cutting and replicating the points

    Subclasses decide two things beyond the basis itself:
    - `resolve_bins`: how a requested number of columns and rows is adjusted
      so that the lattice is periodic
    - `includes_site`: whether a (col, row) grid site holds a point
    """

    @property
    @abstractmethod
    def a(self) -> float:
        """Length of the first basis vector (along x)."""
        pass

    @property
    @abstractmethod
    def b(self) -> float:
        """Length of the second basis vector."""
        pass

    @property
    @abstractmethod
    def gamma(self) -> float:
        """Angle between the basis vectors, in radians."""
        pass

    def get_spacing(self) -> Spacing:
        """
        Get the grid spacing of the crystal.

        Returns
        -------
        spacing : Spacing
            dx = a, dy = b·sin(gamma), dx_per_row = b·cos(gamma)
        """
        return Spacing(
            dx=self.a,
            dy=self.b * np.sin(self.gamma),
            dx_per_row=self.b * np.cos(self.gamma),
        )

    def get_primitive_vectors(self) -> np.ndarray:
        """
        Get the primitive vectors of the crystal.

        Returns
        -------
        vectors : np.ndarray, shape (2, 2)
            [a1, a2] where each row is a vector:
            a1 = [a, 0]
            a2 = [b·cos(gamma), b·sin(gamma)]
        """
        dx, dy, dx_per_row = self.get_spacing()
        return np.array([
            [dx,            0.0],
            [dx_per_row,    dy],
        ])

    def get_unit_cell_area(self) -> float:
        """
        Calculate the area of the unit cell.

        Notes
        -----
        Computed as |a1 × a2|.
        """
        a1, a2 = self.get_primitive_vectors()
        return abs(a1[0] * a2[1] - a1[1] * a2[0])

    @abstractmethod
    def resolve_bins(self, nx: int, ny: int) -> Tuple[int, int]:
        """
        Adjust a requested number of columns and rows.

        Parameters
        ----------
        nx, ny : int
            Requested number of columns and rows.

        Returns
        -------
        bins : Tuple[int, int]
            Number of columns and rows that will actually be generated.
        """
        pass

    @abstractmethod
    def includes_site(self, col: int, row: int) -> bool:
        """Whether the grid site at (col, row) holds a point."""
        pass

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return (f"{name}(a={self.a:.3f}, b={self.b:.3f}, "
                f"gamma={np.degrees(self.gamma):.1f}°)")
