"""
Volume components: boxes, cylinders and spheres filled with coordinates.
"""

from .base import (AbstractVolume, FillType, calc_density, cut_to_cylinder, cut_to_sphere,
                   prune_residues_from_volume)
from .cylinder import CylinderVolume, CylinderVolumeConfig, construct_cylinder_volume
from .sphere import Sphere, SphereConfig, construct_sphere
from .cuboid import Cuboid, CuboidConfig, construct_cuboid

__all__ = [
    'AbstractVolume',
    'FillType',
    'calc_density',
    'cut_to_cylinder',
    'cut_to_sphere',
    'prune_residues_from_volume',
    'Cuboid',
    'CuboidConfig',
    'construct_cuboid',
    'CylinderVolume',
    'CylinderVolumeConfig',
    'construct_cylinder_volume',
    'Sphere',
    'SphereConfig',
    'construct_sphere',
]
