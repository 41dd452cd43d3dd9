"""
Shape components.

Surfaces (sheets, cylinders, cuboid boxes) are built from lattices, volumes
(cuboids, cylinders, spheres) are filled with random coordinates. Every
component is an immutable value with an origin and coordinates relative to it.
"""

from .base import AbstractComponent, AtomItem, ResidueItem
from .surface import (
    Circle,
    Sheet,
    SheetConfig,
    CylinderCap,
    CylinderSurface,
    CylinderSurfaceConfig,
    CuboidSurface,
    CuboidSurfaceConfig,
    Sides,
)
from .volume import (
    AbstractVolume,
    FillType,
    Cuboid,
    CuboidConfig,
    CylinderVolume,
    CylinderVolumeConfig,
    Sphere,
    SphereConfig,
    prune_residues_from_volume,
)
from .component import (
    ComponentEntry,
    ComponentConfig,
    COMPONENT_REGISTRY,
    create_config,
    config_from_dict,
    construct,
)

__all__ = [
    'AbstractComponent',
    'AtomItem',
    'ResidueItem',
    'Circle',
    'Sheet',
    'SheetConfig',
    'CylinderCap',
    'CylinderSurface',
    'CylinderSurfaceConfig',
    'CuboidSurface',
    'CuboidSurfaceConfig',
    'Sides',
    'AbstractVolume',
    'FillType',
    'Cuboid',
    'CuboidConfig',
    'CylinderVolume',
    'CylinderVolumeConfig',
    'Sphere',
    'SphereConfig',
    'prune_residues_from_volume',
    'ComponentEntry',
    'ComponentConfig',
    'COMPONENT_REGISTRY',
    'create_config',
    'config_from_dict',
    'construct',
]
