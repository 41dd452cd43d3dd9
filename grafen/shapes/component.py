"""
The closed set of component types and construction by configuration.

Each configuration type maps to exactly one construction function, and every
construction function returns one of the six component types in
`ComponentEntry`.
"""

from typing import Callable, Dict, Optional, Type, Union

import numpy as np

from .surface import (CuboidSurface, CuboidSurfaceConfig, CylinderSurface,
                      CylinderSurfaceConfig, Sheet, SheetConfig, construct_cuboid_surface,
                      construct_cylinder_surface, construct_sheet)
from .volume import (Cuboid, CuboidConfig, CylinderVolume, CylinderVolumeConfig, Sphere,
                     SphereConfig, construct_cuboid, construct_cylinder_volume,
                     construct_sphere)
from ..core.errors import ConfigError

ComponentEntry = Union[Sheet, CylinderSurface, CuboidSurface, Cuboid, CylinderVolume, Sphere]

ComponentConfig = Union[SheetConfig, CylinderSurfaceConfig, CuboidSurfaceConfig,
                        CuboidConfig, CylinderVolumeConfig, SphereConfig]

# Configuration registry for dictionary based construction
COMPONENT_REGISTRY: Dict[str, Type] = {
    SheetConfig.kind: SheetConfig,
    CylinderSurfaceConfig.kind: CylinderSurfaceConfig,
    CuboidSurfaceConfig.kind: CuboidSurfaceConfig,
    CuboidConfig.kind: CuboidConfig,
    CylinderVolumeConfig.kind: CylinderVolumeConfig,
    SphereConfig.kind: SphereConfig,
}

_CONSTRUCTORS: Dict[Type, Callable] = {
    SheetConfig: construct_sheet,
    CylinderSurfaceConfig: construct_cylinder_surface,
    CuboidSurfaceConfig: construct_cuboid_surface,
    CuboidConfig: construct_cuboid,
    CylinderVolumeConfig: construct_cylinder_volume,
    SphereConfig: construct_sphere,
}


def create_config(kind: str, **kwargs) -> ComponentConfig:
    """
    Factory function to create component configurations from string names.

    Parameters
    ----------
    kind : str
        Type of component ('sheet', 'cylinder_surface', 'cuboid_surface',
        'cuboid', 'cylinder_volume', 'sphere')
    **kwargs
        Arguments passed to the configuration constructor

    Examples
    --------
    >>> config = create_config('sphere', radius=2.0)
    >>> isinstance(config, SphereConfig)
    True

    Raises
    ------
    ConfigError
        If kind is not recognized
    """
    kind = kind.lower()

    if kind not in COMPONENT_REGISTRY:
        available = ', '.join(COMPONENT_REGISTRY.keys())
        raise ConfigError(f"Unknown component type '{kind}'. "
                          f"Available types: {available}")

    return COMPONENT_REGISTRY[kind](**kwargs)


def config_from_dict(data: Dict) -> ComponentConfig:
    """Parse a component configuration from a dictionary with a 'type' key."""
    kind = str(data.get('type', '')).lower()

    if kind not in COMPONENT_REGISTRY:
        available = ', '.join(COMPONENT_REGISTRY.keys())
        raise ConfigError(f"Unknown component type '{kind}'. "
                          f"Available types: {available}")

    return COMPONENT_REGISTRY[kind].from_dict(data)


def construct(config: ComponentConfig,
              rng: Optional[np.random.Generator] = None) -> ComponentEntry:
    """
    Construct a component from its configuration.

    Raises
    ------
    ConfigError
        If the configuration type is unknown.
    ConstructionError
        If the configuration describes an invalid geometry.
    """
    try:
        constructor = _CONSTRUCTORS[type(config)]
    except KeyError as err:
        raise ConfigError(f"Cannot construct a component from {type(config).__name__}") from err

    return constructor(config, rng=rng)
