"""
Spherical volumes.
"""

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, List, Optional

import numpy as np

from .base import AbstractVolume, FillType, calc_density
from ..base import unwrap_name
from ..config import base_fields_from_dict, base_fields_to_dict, parse_float
from ...core.coord import Coord
from ...core.errors import ConstructionError
from ...core.residue import Residue


@dataclass(frozen=True)
class Sphere(AbstractVolume):
    """
    A sphere volume.

    The origin is located in the center of the sphere and coordinates are
    relative to it.
    """
    radius: float = 0.0
    coords: List[Coord] = field(default_factory=list)
    density: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    def describe(self) -> str:
        return (f"{unwrap_name(self.name)} (Sphere of radius {self.radius:.2f} "
                f"at {self.origin})")

    def describe_short(self) -> str:
        return f"{unwrap_name(self.name)} (Sphere)"

    def calc_box_size(self) -> Coord:
        diameter = 2.0 * self.radius
        return Coord(diameter, diameter, diameter)

    def contains(self, coord: Coord) -> bool:
        return coord.distance(self.origin) <= self.radius

    def volume(self) -> float:
        return 4.0 * np.pi * self.radius**3 / 3.0

    def fill(self, fill_type: FillType,
             rng: Optional[np.random.Generator] = None) -> 'Sphere':
        """
        Fill the sphere with coordinates.

        A density fill cuts the sphere out of a filled cube of side 2.1r.

        Notes
        -----
        An exact count draws (r, θ, φ) uniformly in their parameter ranges.
        The radius is not weighted by r², so coordinates cluster towards the
        center. Good enough to seed a system, not for statistics.
        """
        from .cuboid import Cuboid

        rng = np.random.default_rng() if rng is None else rng

        if fill_type.is_density:
            side = 2.1 * self.radius
            size = Coord(side, side, side)

            cut = (Cuboid(size=size, origin=self.origin - size / 2.0)
                   .fill(fill_type, rng=rng)
                   .to_sphere(self.radius))

            return replace(self, coords=cut.coords,
                           density=calc_density(len(cut.coords), self.volume()))

        num_coords = fill_type.to_num_coords(self)

        radii = rng.uniform(0.0, self.radius, size=num_coords)
        thetas = rng.uniform(0.0, np.pi, size=num_coords)
        phis = rng.uniform(0.0, 2.0 * np.pi, size=num_coords)

        positions = np.column_stack([
            radii * np.sin(thetas) * np.cos(phis),
            radii * np.sin(thetas) * np.sin(phis),
            radii * np.cos(thetas),
        ])

        density = calc_density(num_coords, self.volume())

        return replace(
            self,
            coords=[Coord(float(x), float(y), float(z)) for x, y, z in positions],
            density=density,
        )


@dataclass(frozen=True)
class SphereConfig:
    """Parameters of a sphere volume with an optional fill."""
    radius: float
    fill: Optional[FillType] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    kind: ClassVar[str] = 'sphere'

    def to_dict(self) -> Dict:
        data = base_fields_to_dict(self)
        data.update({
            'radius': self.radius,
            'fill': self.fill.to_dict() if self.fill is not None else None,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'SphereConfig':
        fill = data.get('fill')

        return cls(
            radius=parse_float(data, 'radius', cls.kind),
            fill=FillType.from_dict(fill) if fill is not None else None,
            **base_fields_from_dict(data)
        )


def construct_sphere(config: SphereConfig,
                     rng: Optional[np.random.Generator] = None) -> Sphere:
    """
    Construct a sphere volume and fill it if a fill type is set.

    Raises
    ------
    ConstructionError
        If the radius is non-positive.
    """
    if config.radius <= 0:
        raise ConstructionError("Cannot create a sphere of non-positive radius")

    sphere = Sphere(
        radius=config.radius,
        name=config.name,
        residue=config.residue,
        origin=config.origin,
    )

    if config.fill is not None:
        sphere = sphere.fill(config.fill, rng=rng)

    return sphere
