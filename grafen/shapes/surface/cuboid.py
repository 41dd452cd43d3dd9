"""
Cuboid surfaces: boxes with sheets on a selection of their sides.
"""

import logging
from dataclasses import dataclass, field
from enum import Flag
from typing import ClassVar, Dict, List, Optional

import numpy as np

from .sheet import SheetConfig, construct_sheet
from ..base import AbstractComponent, unwrap_name
from ..config import (base_fields_from_dict, base_fields_to_dict, parse_coord,
                      parse_optional_float, require)
from ...core.coord import Coord, Direction
from ...core.errors import ConfigError
from ...core.lattice.types import LatticeType, lattice_from_dict
from ...core.residue import Residue

logger = logging.getLogger(__name__)


class Sides(Flag):
    """Sides of a cuboid. X0 is the side at x = 0, X1 the one at x = size.x."""
    X0 = 1
    X1 = 2
    Y0 = 4
    Y1 = 8
    Z0 = 16
    Z1 = 32

    @classmethod
    def all(cls) -> 'Sides':
        return cls.X0 | cls.X1 | cls.Y0 | cls.Y1 | cls.Z0 | cls.Z1

    @classmethod
    def from_names(cls, names) -> 'Sides':
        if isinstance(names, str):
            names = [names[i:i + 2] for i in range(0, len(names), 2)]

        sides = cls(0)
        for name in names:
            try:
                sides |= cls[str(name).upper()]
            except KeyError as err:
                raise ConfigError(f"Unknown cuboid side '{name}'") from err

        return sides

    def names(self) -> List[str]:
        return [side.name for side in SIDE_ORDER if side in self]

    def __str__(self) -> str:
        return ''.join(self.names())


SIDE_ORDER = (Sides.X0, Sides.X1, Sides.Y0, Sides.Y1, Sides.Z0, Sides.Z1)


@dataclass(frozen=True)
class CuboidSurfaceConfig:
    """
    Parameters of a cuboid surface.

    Attributes
    ----------
    lattice : LatticeType
        Lattice of the side sheets.
    size : Coord
        Target size of the box. Snapped to the lattice.
    sides : Sides
        Sides covered by a sheet.
    std_z : float, optional
        Half-width of a uniform jitter added along the normal of every sheet.
    """
    lattice: LatticeType
    size: Coord
    sides: Sides = field(default_factory=Sides.all)
    std_z: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    kind: ClassVar[str] = 'cuboid_surface'

    def to_dict(self) -> Dict:
        data = base_fields_to_dict(self)
        data.update({
            'lattice': self.lattice.to_dict(),
            'size': list(self.size.to_tuple()),
            'sides': self.sides.names(),
            'std_z': self.std_z,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'CuboidSurfaceConfig':
        sides = data.get('sides')

        return cls(
            lattice=lattice_from_dict(require(data, 'lattice', cls.kind)),
            size=parse_coord(require(data, 'size', cls.kind)),
            sides=Sides.from_names(sides) if sides is not None else Sides.all(),
            std_z=parse_optional_float(data, 'std_z'),
            **base_fields_from_dict(data)
        )


@dataclass(frozen=True)
class CuboidSurface(AbstractComponent):
    """
    A constructed cuboid surface.

    The origin is located in the lower-left-bottom corner of the box.
    """
    lattice: LatticeType
    size: Coord
    coords: List[Coord] = field(default_factory=list)
    sides: Sides = field(default_factory=Sides.all)
    std_z: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    def describe(self) -> str:
        return f"{unwrap_name(self.name)} (Surface box of size {self.size})"

    def describe_short(self) -> str:
        return f"{unwrap_name(self.name)} (Surface box)"

    def calc_box_size(self) -> Coord:
        return self.size


def construct_cuboid_surface(config: CuboidSurfaceConfig,
                             rng: Optional[np.random.Generator] = None) -> CuboidSurface:
    """
    Construct a cuboid surface.

    Three sheets are constructed, one per pair of opposing sides: yz (normal
    x, length along z), xz (normal y) and xy (normal z). Their snapped sizes
    give the box size. The far sides are the near ones translated by the box
    size. Sides are added in the order X0, X1, Y0, Y1, Z0, Z1.

    Raises
    ------
    ConstructionError
        If any side of the box is non-positive.
    """
    dx_target, dy_target, dz_target = config.size.to_tuple()

    def side_sheet(normal: Direction, length: float, width: float):
        sheet_config = SheetConfig(lattice=config.lattice, length=length, width=width,
                                   normal=normal, std_z=config.std_z)
        return construct_sheet(sheet_config, rng=rng).with_pbc()

    sheet_yz = side_sheet(Direction.X, dz_target, dy_target)
    sheet_xz = side_sheet(Direction.Y, dx_target, dz_target)
    sheet_xy = side_sheet(Direction.Z, dx_target, dy_target)

    dx, dy, dz = sheet_xy.length, sheet_xy.width, sheet_yz.length

    faces = {
        Sides.X0: sheet_yz.coords,
        Sides.X1: [c + Coord(dx, 0.0, 0.0) for c in sheet_yz.coords],
        Sides.Y0: sheet_xz.coords,
        Sides.Y1: [c + Coord(0.0, dy, 0.0) for c in sheet_xz.coords],
        Sides.Z0: sheet_xy.coords,
        Sides.Z1: [c + Coord(0.0, 0.0, dz) for c in sheet_xy.coords],
    }

    coords = []
    for side in SIDE_ORDER:
        if side in config.sides:
            coords.extend(faces[side])

    logger.debug(f"Constructed cuboid surface with sides {config.sides} "
                 f"of size ({dx:.3f}, {dy:.3f}, {dz:.3f})")

    return CuboidSurface(
        lattice=config.lattice,
        size=Coord(dx, dy, dz),
        coords=coords,
        sides=config.sides,
        std_z=config.std_z,
        name=config.name,
        residue=config.residue,
        origin=config.origin,
    )
