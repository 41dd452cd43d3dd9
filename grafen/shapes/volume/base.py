"""
Abstract base class for volume components and the helpers they share.

Volumes are closed regions of space (cuboids, cylinders, spheres) which can
be filled with randomly placed coordinates and used to cut or prune other
coordinate sets.
"""

from abc import abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar, Dict, List, Optional, Sequence, Union

import numpy as np

from ..base import AbstractComponent
from ...core.coord import Coord, Direction, pbc_multiply_coords
from ...core.errors import ConfigError, ConstructionError
from ...core.residue import Residue


def _parse_fill_value(convert, value, kind: str):
    try:
        return convert(value)
    except (TypeError, ValueError) as err:
        raise ConfigError(f"Value of fill type '{kind}' is not a number: {value!r}") from err


def calc_density(num_coords: int, volume: float) -> Optional[float]:
    """Number of coordinates per unit volume, or None for an empty volume."""
    return num_coords / volume if volume > 0.0 else None


@dataclass(frozen=True)
class FillType:
    """
    How to fill a volume: with an exact number of coordinates or to a density.

    Use the constructors `FillType.num_coords(n)` and `FillType.density(rho)`.

    Examples
    --------
    >>> FillType.density(10.0).to_num_coords_for_volume(2.0)
    20
    """
    kind: str
    value: Union[int, float]

    NUM_COORDS: ClassVar[str] = 'num_coords'
    DENSITY: ClassVar[str] = 'density'

    def __post_init__(self):
        if self.kind not in (self.NUM_COORDS, self.DENSITY):
            raise ConfigError(f"Unknown fill type '{self.kind}'")

        if self.value < 0:
            raise ConstructionError("Cannot fill a volume with a negative amount of coordinates")

    @classmethod
    def num_coords(cls, num_coords: int) -> 'FillType':
        return cls(cls.NUM_COORDS, _parse_fill_value(int, num_coords, cls.NUM_COORDS))

    @classmethod
    def density(cls, density: float) -> 'FillType':
        return cls(cls.DENSITY, _parse_fill_value(float, density, cls.DENSITY))

    @property
    def is_density(self) -> bool:
        return self.kind == self.DENSITY

    def to_num_coords_for_volume(self, volume: float) -> int:
        if self.is_density:
            return int(np.round(self.value * volume))

        return int(self.value)

    def to_num_coords(self, volume: 'AbstractVolume') -> int:
        """Number of coordinates to place in a volume."""
        return self.to_num_coords_for_volume(volume.volume())

    def to_dict(self) -> Dict:
        return {self.kind: self.value}

    @classmethod
    def from_dict(cls, data: Dict) -> 'FillType':
        if len(data) != 1:
            raise ConfigError(f"A fill type needs exactly one of 'num_coords' or 'density': {data!r}")

        (kind, value), = data.items()

        if kind == cls.NUM_COORDS:
            return cls.num_coords(value)
        elif kind == cls.DENSITY:
            return cls.density(value)

        raise ConfigError(f"Unknown fill type '{kind}'")


class AbstractVolume(AbstractComponent):
    """
    Abstract base class for volume components.

    Subclasses implement
    - `contains`: whether an absolute coordinate lies inside the volume
    - `volume`: the volume of the shape
    - `fill`: a copy filled with random coordinates
    """

    density: Optional[float]

    @abstractmethod
    def contains(self, coord: Coord) -> bool:
        pass

    @abstractmethod
    def volume(self) -> float:
        pass

    @abstractmethod
    def fill(self, fill_type: FillType,
             rng: Optional[np.random.Generator] = None) -> 'AbstractVolume':
        pass

    def pbc_multiply(self, nx: int, ny: int, nz: int) -> 'AbstractVolume':
        """Replicate the coordinates along the box size of the volume."""
        coords = pbc_multiply_coords(self.coords, self.calc_box_size(), nx, ny, nz)
        return replace(self, coords=coords)


def cut_to_cylinder(coords: Sequence[Coord], bottom_center: Coord, alignment: Direction,
                    radius: float, height: float) -> List[Coord]:
    """Keep coordinates inside a cylinder, relative to its bottom center."""
    cut = []

    for coord in coords:
        dr, dh = bottom_center.distance_cylindrical(coord, alignment)

        if dr <= radius and 0.0 <= dh <= height:
            cut.append(coord - bottom_center)

    return cut


def cut_to_sphere(coords: Sequence[Coord], center: Coord, radius: float) -> List[Coord]:
    """Keep coordinates inside a sphere, relative to its center."""
    return [c - center for c in coords if c.distance(center) <= radius]


def prune_residues_from_volume(coords: Sequence[Coord], residue: Residue,
                               volume: AbstractVolume) -> List[Coord]:
    """
    Remove residue positions which overlap with a volume.

    A position is kept only if none of the residue atoms placed at it is
    contained by the volume.
    """
    return [
        coord for coord in coords
        if not any(volume.contains(coord + atom.position) for atom in residue.atoms)
    ]
