"""
Cylindrical volumes.
"""

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, List, Optional

import numpy as np

from .base import AbstractVolume, FillType, calc_density
from ..base import unwrap_name
from ..config import (base_fields_from_dict, base_fields_to_dict, parse_direction,
                      parse_float)
from ...core.coord import Coord, Direction
from ...core.errors import ConstructionError
from ...core.residue import Residue


def _along_axis(h: float, r0: float, r1: float, alignment: Direction) -> Coord:
    if alignment == Direction.X:
        return Coord(h, r0, r1)
    elif alignment == Direction.Y:
        return Coord(r0, h, r1)
    else:
        return Coord(r0, r1, h)


@dataclass(frozen=True)
class CylinderVolume(AbstractVolume):
    """
    A cylinder volume.

    The origin is located in the center of the bottom of the cylinder and
    coordinates are relative to it.
    """
    radius: float = 0.0
    height: float = 0.0
    alignment: Direction = Direction.Z
    coords: List[Coord] = field(default_factory=list)
    density: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    def describe(self) -> str:
        return (f"{unwrap_name(self.name)} (Cylinder volume of radius {self.radius:.2f} "
                f"and height {self.height:.2f} at {self.origin})")

    def describe_short(self) -> str:
        return f"{unwrap_name(self.name)} (Cylinder volume)"

    def calc_box_size(self) -> Coord:
        diameter = 2.0 * self.radius
        return _along_axis(self.height, diameter, diameter, self.alignment)

    def contains(self, coord: Coord) -> bool:
        dr, dh = self.origin.distance_cylindrical(coord, self.alignment)
        return dr <= self.radius and 0.0 <= dh <= self.height

    def volume(self) -> float:
        return np.pi * self.radius**2 * self.height

    def fill(self, fill_type: FillType,
             rng: Optional[np.random.Generator] = None) -> 'CylinderVolume':
        """
        Fill the cylinder with coordinates.

        A density fill cuts the cylinder out of a filled box slightly larger
        than it. An exact count draws radius, angle and height uniformly,
        which does not give a uniform density across the radius.
        """
        from .cuboid import Cuboid

        rng = np.random.default_rng() if rng is None else rng

        if fill_type.is_density:
            box_side = 2.1 * self.radius
            size = _along_axis(1.05 * self.height, box_side, box_side, self.alignment)

            # Place the box such that the cut cylinder ends up at this origin
            center = size / 2.0
            if self.alignment == Direction.X:
                bottom_center = Coord(0.0, center.y, center.z)
            elif self.alignment == Direction.Y:
                bottom_center = Coord(center.x, 0.0, center.z)
            else:
                bottom_center = Coord(center.x, center.y, 0.0)

            cut = (Cuboid(size=size, origin=self.origin - bottom_center)
                   .fill(fill_type, rng=rng)
                   .to_cylinder(self.radius, self.height, self.alignment))

            return replace(self, coords=cut.coords,
                           density=calc_density(len(cut.coords), self.volume()))

        num_coords = fill_type.to_num_coords(self)

        radii = rng.uniform(0.0, self.radius, size=num_coords)
        angles = rng.uniform(0.0, 2.0 * np.pi, size=num_coords)
        heights = rng.uniform(0.0, self.height, size=num_coords)

        coords = [
            _along_axis(float(h), float(r * np.cos(a)), float(r * np.sin(a)), self.alignment)
            for r, a, h in zip(radii, angles, heights)
        ]

        density = calc_density(num_coords, self.volume())

        return replace(self, coords=coords, density=density)


@dataclass(frozen=True)
class CylinderVolumeConfig:
    """Parameters of a cylinder volume with an optional fill."""
    radius: float
    height: float
    alignment: Direction = Direction.Z
    fill: Optional[FillType] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    kind: ClassVar[str] = 'cylinder_volume'

    def to_dict(self) -> Dict:
        data = base_fields_to_dict(self)
        data.update({
            'radius': self.radius,
            'height': self.height,
            'alignment': str(self.alignment),
            'fill': self.fill.to_dict() if self.fill is not None else None,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'CylinderVolumeConfig':
        fill = data.get('fill')

        return cls(
            radius=parse_float(data, 'radius', cls.kind),
            height=parse_float(data, 'height', cls.kind),
            alignment=parse_direction(data.get('alignment', 'Z')),
            fill=FillType.from_dict(fill) if fill is not None else None,
            **base_fields_from_dict(data)
        )


def construct_cylinder_volume(config: CylinderVolumeConfig,
                              rng: Optional[np.random.Generator] = None) -> CylinderVolume:
    """
    Construct a cylinder volume and fill it if a fill type is set.

    Raises
    ------
    ConstructionError
        If the radius or height is non-positive.
    """
    if config.radius <= 0 or config.height <= 0:
        raise ConstructionError("Cannot create a cylinder of non-positive radius or height")

    cylinder = CylinderVolume(
        radius=config.radius,
        height=config.height,
        alignment=config.alignment,
        name=config.name,
        residue=config.residue,
        origin=config.origin,
    )

    if config.fill is not None:
        cylinder = cylinder.fill(config.fill, rng=rng)

    return cylinder
