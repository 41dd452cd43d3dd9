"""
Core geometry for the grafen package.

This module contains the fundamental building blocks:
- Coord: coordinates, directions and periodic operations
- Residue: atom templates broadcast onto coordinates
- Lattice: crystal bases and periodic lattice generation
- Sampling: Poisson-disc and blue-noise point distributions
- Points: planar point sets and their box
- System: an ordered collection of constructed components

These are used by the shape components in `grafen.shapes`.
"""

from .errors import GrafenError, ConstructionError, SamplingError, ConfigError

from .coord import (
    Coord,
    Direction,
    rotate_coords,
    rotate_planar_coords_to_alignment,
    pbc_multiply_coords
)

from .residue import Atom, Residue

from .points import Points

from .lattice import (
    AbstractCrystal,
    Spacing,
    TriclinicCrystal,
    HexagonalCrystal,
    CRYSTAL_REGISTRY,
    create_crystal,
    LatticeGenerator,
    generate_lattice,
    Hexagonal,
    Triclinic,
    PoissonDisc,
    LatticeType,
    generate_points,
    lattice_from_dict
)

from .sampling import (
    Distribution,
    PoissonGrid,
    poisson_disc,
    rmin_from_density,
    blue_noise
)

from .system import System

__all__ = [
    # Errors
    'GrafenError',
    'ConstructionError',
    'SamplingError',
    'ConfigError',

    # Coordinates
    'Coord',
    'Direction',
    'rotate_coords',
    'rotate_planar_coords_to_alignment',
    'pbc_multiply_coords',

    # Residues
    'Atom',
    'Residue',

    # Points
    'Points',

    # Lattice
    'AbstractCrystal',
    'Spacing',
    'TriclinicCrystal',
    'HexagonalCrystal',
    'CRYSTAL_REGISTRY',
    'create_crystal',
    'LatticeGenerator',
    'generate_lattice',
    'Hexagonal',
    'Triclinic',
    'PoissonDisc',
    'LatticeType',
    'generate_points',
    'lattice_from_dict',

    # Sampling
    'Distribution',
    'PoissonGrid',
    'poisson_disc',
    'rmin_from_density',
    'blue_noise',

    # System
    'System',
]
