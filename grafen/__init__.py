"""
grafen: Geometry for Molecular Dynamics Substrates and Volumes

A Python package which builds the synthetic point sets used to seed
molecular-dynamics systems: periodic 2D lattices, Poisson-disc distributions,
and the surfaces and volumes bent, cut and replicated from them.

Main Components
---------------
core : Coordinates, residues, lattices, samplers, point sets and systems
shapes : Surface (sheet, cylinder, cuboid) and volume (cuboid, cylinder, sphere) components
io : Loading and saving system definitions as YAML
visualization : Plotting tools
utils : Logging setup

Quick Start
-----------
>>> import numpy as np
>>> from grafen import Hexagonal, Residue, SheetConfig, construct
>>>
>>> # Graphene sheet of roughly 5 x 4 nm
>>> residue = Residue.from_atoms('GRPH', ('C', 0.0, 0.0, 0.0))
>>> config = SheetConfig(lattice=Hexagonal(a=0.142), length=5.0, width=4.0,
...                      residue=residue)
>>>
>>> sheet = construct(config, rng=np.random.default_rng(0))
>>> print(sheet.describe())

Current Version: 0.1.0
"""

__version__ = "0.1.0"

# High-level API exports
from .core import (
    # Errors
    GrafenError,
    ConstructionError,
    SamplingError,
    ConfigError,

    # Primitives
    Coord,
    Direction,
    Residue,
    Points,

    # Lattices
    Hexagonal,
    Triclinic,
    PoissonDisc,
    generate_lattice,

    # System
    System,
)

from .shapes import (
    SheetConfig,
    CylinderSurfaceConfig,
    CuboidSurfaceConfig,
    CuboidConfig,
    CylinderVolumeConfig,
    SphereConfig,
    CylinderCap,
    Sides,
    FillType,
    construct,
    create_config,
)

__all__ = [
    # Version info
    '__version__',

    # Errors
    'GrafenError',
    'ConstructionError',
    'SamplingError',
    'ConfigError',

    # Primitives
    'Coord',
    'Direction',
    'Residue',
    'Points',
    'Hexagonal',
    'Triclinic',
    'PoissonDisc',
    'generate_lattice',
    'System',

    # Components
    'SheetConfig',
    'CylinderSurfaceConfig',
    'CuboidSurfaceConfig',
    'CuboidConfig',
    'CylinderVolumeConfig',
    'SphereConfig',
    'CylinderCap',
    'Sides',
    'FillType',
    'construct',
    'create_config',
]
