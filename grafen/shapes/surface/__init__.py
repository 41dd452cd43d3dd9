"""
Surface components: sheets, cylinders and cuboid boxes built from lattices.
"""

from .sheet import Circle, Sheet, SheetConfig, construct_sheet, cut_circle
from .cylinder import (CylinderCap, CylinderSurface, CylinderSurfaceConfig,
                       construct_cylinder_surface)
from .cuboid import CuboidSurface, CuboidSurfaceConfig, Sides, construct_cuboid_surface

__all__ = [
    'Circle',
    'Sheet',
    'SheetConfig',
    'construct_sheet',
    'cut_circle',
    'CylinderCap',
    'CylinderSurface',
    'CylinderSurfaceConfig',
    'construct_cylinder_surface',
    'CuboidSurface',
    'CuboidSurfaceConfig',
    'Sides',
    'construct_cuboid_surface',
]
