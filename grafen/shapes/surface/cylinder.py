"""
Cylindrical surfaces: sheets bent around a circumference.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional

import numpy as np

from .sheet import SheetConfig, construct_sheet
from ..base import AbstractComponent, unwrap_name
from ..config import (base_fields_from_dict, base_fields_to_dict, parse_direction,
                      parse_float, require)
from ...core.coord import Coord, Direction, rotate_planar_coords_to_alignment
from ...core.errors import ConfigError, ConstructionError
from ...core.lattice.types import LatticeType, lattice_from_dict
from ...core.residue import Residue

logger = logging.getLogger(__name__)


class CylinderCap(Enum):
    """Cylinders can be capped in either or both ends."""
    TOP = 'Top'
    BOTTOM = 'Bottom'
    BOTH = 'Both'

    def __str__(self) -> str:
        return self.value


def _parse_cap(value) -> Optional[CylinderCap]:
    if value is None or isinstance(value, CylinderCap):
        return value

    try:
        return CylinderCap(str(value).capitalize())
    except ValueError as err:
        raise ConfigError(f"Unknown cylinder cap '{value}'. Available: Top, Bottom, Both") from err


@dataclass(frozen=True)
class CylinderSurfaceConfig:
    """
    Parameters of a cylindrical surface.

    Attributes
    ----------
    lattice : LatticeType
        Lattice of the sheet which is bent into the cylinder.
    radius, height : float
        Target radius and height. Both are adjusted to the lattice.
    alignment : Direction
        Cylinder axis.
    cap : CylinderCap, optional
        Ends to close with flat caps.
    """
    lattice: LatticeType
    radius: float
    height: float
    alignment: Direction = Direction.Z
    cap: Optional[CylinderCap] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    kind: ClassVar[str] = 'cylinder_surface'

    def to_dict(self) -> Dict:
        data = base_fields_to_dict(self)
        data.update({
            'lattice': self.lattice.to_dict(),
            'radius': self.radius,
            'height': self.height,
            'alignment': str(self.alignment),
            'cap': str(self.cap) if self.cap is not None else None,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'CylinderSurfaceConfig':
        return cls(
            lattice=lattice_from_dict(require(data, 'lattice', cls.kind)),
            radius=parse_float(data, 'radius', cls.kind),
            height=parse_float(data, 'height', cls.kind),
            alignment=parse_direction(data.get('alignment', 'Z')),
            cap=_parse_cap(data.get('cap')),
            **base_fields_from_dict(data)
        )


def _align_from_y(coords: List[Coord], alignment: Direction) -> List[Coord]:
    # Cylinders are built along y
    if alignment == Direction.Z:
        return [c.rotate(Direction.X) for c in coords]
    elif alignment == Direction.X:
        return [Coord(c.y, c.z, c.x) for c in coords]
    else:
        return list(coords)


@dataclass(frozen=True)
class CylinderSurface(AbstractComponent):
    """
    A constructed cylindrical surface.

    The origin is located in the center of the bottom of the cylinder.
    """
    lattice: LatticeType
    radius: float
    height: float
    coords: List[Coord] = field(default_factory=list)
    alignment: Direction = Direction.Z
    cap: Optional[CylinderCap] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    def describe(self) -> str:
        return (f"{unwrap_name(self.name)} (Cylinder surface of radius {self.radius:.2f} "
                f"and height {self.height:.2f} at {self.origin})")

    def describe_short(self) -> str:
        return f"{unwrap_name(self.name)} (Cylinder)"

    def calc_box_size(self) -> Coord:
        diameter = 2.0 * self.radius

        if self.alignment == Direction.X:
            return Coord(self.height, diameter, diameter)
        elif self.alignment == Direction.Y:
            return Coord(diameter, self.height, diameter)
        else:
            return Coord(diameter, diameter, self.height)


def construct_cylinder_surface(config: CylinderSurfaceConfig,
                               rng: Optional[np.random.Generator] = None) -> CylinderSurface:
    """
    Construct a cylindrical surface by bending a sheet.

    Algorithm
    ---------
    1. Construct a sheet of length 2πr and width h. The lattice snaps both.
    2. The final radius is recovered from the snapped length, r = L / 2π,
       so that the bent lattice closes exactly at the seam.
    3. Every sheet point (x0, y) maps to (r·sin θ, y, -r·cos θ) with
       θ = x0·360° / L, giving a cylinder along y.
    4. Caps are circles of radius r cut from the same sheet, rotated into
       the y = 0 plane. The top cap is shifted by the final height.
    5. The cylinder is rotated from y to the requested alignment.

    Raises
    ------
    ConstructionError
        If the radius or height is non-positive.
    """
    if config.radius <= 0 or config.height <= 0:
        raise ConstructionError("Cannot create a cylinder of non-positive radius or height")

    sheet = construct_sheet(
        SheetConfig(lattice=config.lattice,
                    length=2.0 * np.pi * config.radius,
                    width=config.height),
        rng=rng
    )

    final_radius = sheet.length / (2.0 * np.pi)
    final_height = sheet.width

    coords = []
    for coord in sheet.coords:
        angle = np.radians(coord.x * 360.0 / sheet.length)
        coords.append(Coord(
            float(final_radius * np.sin(angle)),
            coord.y,
            float(-final_radius * np.cos(angle)),
        ))

    if config.cap is not None:
        circle = sheet.to_circle(final_radius)
        bottom = rotate_planar_coords_to_alignment(circle.coords, Direction.Z, Direction.Y)
        top = [c + Coord(0.0, final_height, 0.0) for c in bottom]

        if config.cap in (CylinderCap.BOTTOM, CylinderCap.BOTH):
            coords.extend(bottom)

        if config.cap in (CylinderCap.TOP, CylinderCap.BOTH):
            coords.extend(top)

    logger.debug(f"Constructed cylinder surface of radius {final_radius:.3f} "
                 f"and height {final_height:.3f} with {len(coords)} points")

    return CylinderSurface(
        lattice=config.lattice,
        radius=final_radius,
        height=final_height,
        coords=_align_from_y(coords, config.alignment),
        alignment=config.alignment,
        cap=config.cap,
        name=config.name,
        residue=config.residue,
        origin=config.origin,
    )
