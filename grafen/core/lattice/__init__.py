"""
Lattice geometry module.

This module provides the crystal bases and the generator which grows them
into periodic planar point sets, plus the lattice types used by surfaces.

Available crystals:
- TriclinicCrystal: Two vectors of arbitrary length and angle
- HexagonalCrystal: Honeycomb with every third point removed
"""

from .base import AbstractCrystal, Spacing
from .presets import (
    TriclinicCrystal,
    HexagonalCrystal,
    CRYSTAL_REGISTRY,
    create_crystal
)
from .generator import LatticeGenerator, generate_lattice
from .types import (
    Hexagonal,
    Triclinic,
    PoissonDisc,
    LatticeType,
    LATTICE_TYPES,
    generate_points,
    lattice_from_dict
)

__all__ = [
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
    'LATTICE_TYPES',
    'generate_points',
    'lattice_from_dict',
]
