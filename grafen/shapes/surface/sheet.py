"""
Planar sheets.

A sheet is a rectangular lattice (or Poisson-disc distribution) with its
lower-left corner at the origin. Its normal can point along any axis, in
which case the planar lattice is rotated by a pure axis permutation.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, List, Optional, Sequence

import numpy as np

from ..base import AbstractComponent, unwrap_name
from ..config import (base_fields_from_dict, base_fields_to_dict, parse_direction,
                      parse_float, parse_optional_float, require)
from ...core.coord import (Coord, Direction, pbc_multiply_coords,
                           rotate_planar_coords_to_alignment)
from ...core.errors import ConstructionError
from ...core.lattice.types import LatticeType, generate_points, lattice_from_dict
from ...core.residue import Residue

logger = logging.getLogger(__name__)

# Height of a sheet box along its normal
SHEET_MARGIN = 0.1


@dataclass(frozen=True)
class SheetConfig:
    """
    Parameters of a rectangular sheet.

    Attributes
    ----------
    lattice : LatticeType
        Lattice used to construct the surface.
    length, width : float
        Target size along the in-plane x and y axes. Snapped to the lattice.
    normal : Direction
        Normal of the sheet.
    std_z : float, optional
        Half-width of a uniform jitter added along the normal.
    """
    lattice: LatticeType
    length: float
    width: float
    normal: Direction = Direction.Z
    std_z: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    kind: ClassVar[str] = 'sheet'

    def to_dict(self) -> Dict:
        data = base_fields_to_dict(self)
        data.update({
            'lattice': self.lattice.to_dict(),
            'length': self.length,
            'width': self.width,
            'normal': str(self.normal),
            'std_z': self.std_z,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'SheetConfig':
        return cls(
            lattice=lattice_from_dict(require(data, 'lattice', cls.kind)),
            length=parse_float(data, 'length', cls.kind),
            width=parse_float(data, 'width', cls.kind),
            normal=parse_direction(data.get('normal', 'Z')),
            std_z=parse_optional_float(data, 'std_z'),
            **base_fields_from_dict(data)
        )


@dataclass(frozen=True)
class Circle:
    """A planar circle cut from a sheet. Coordinates are relative to its center."""
    radius: float
    coords: List[Coord] = field(default_factory=list)
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)


def cut_circle(coords: Sequence[Coord], center: Coord, box_size: Coord,
               radius: float) -> List[Coord]:
    """Wrap coordinates into a box and keep those within a radius of a center."""
    cut = []

    for coord in coords:
        coord = coord.with_pbc(box_size) - center
        dr, _ = coord.distance_cylindrical(Coord.ORIGO, Direction.Z)

        if dr <= radius:
            cut.append(coord)

    return cut


@dataclass(frozen=True)
class Sheet(AbstractComponent):
    """
    A constructed rectangular sheet.

    Coordinates are relative to the origin, which is located in the
    lower-left corner of the sheet.
    """
    lattice: LatticeType
    length: float
    width: float
    coords: List[Coord] = field(default_factory=list)
    normal: Direction = Direction.Z
    std_z: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    def describe(self) -> str:
        return (f"{unwrap_name(self.name)} (Rectangular sheet of size "
                f"({self.length:.2f}, {self.width:.2f}) at {self.origin})")

    def describe_short(self) -> str:
        return f"{unwrap_name(self.name)} (Sheet)"

    def calc_box_size(self) -> Coord:
        """Box size with a height of 0.1 along the normal."""
        if self.normal == Direction.X:
            return Coord(SHEET_MARGIN, self.width, self.length)
        elif self.normal == Direction.Y:
            return Coord(self.length, SHEET_MARGIN, self.width)
        else:
            return Coord(self.length, self.width, SHEET_MARGIN)

    def _planar_coords(self) -> List[Coord]:
        return rotate_planar_coords_to_alignment(self.coords, self.normal, Direction.Z)

    def _from_planar_coords(self, coords: Sequence[Coord]) -> List[Coord]:
        return rotate_planar_coords_to_alignment(coords, Direction.Z, self.normal)

    def pbc_multiply(self, nx: int, ny: int, nz: int = 1) -> 'Sheet':
        """
        Replicate the sheet along its length (nx) and width (ny).

        The sheet has no extent along its normal so nz is ignored.
        """
        planar_box = Coord(self.length, self.width, 0.0)
        coords = pbc_multiply_coords(self._planar_coords(), planar_box, nx, ny, 1)

        return replace(
            self,
            length=nx * self.length,
            width=ny * self.width,
            coords=self._from_planar_coords(coords),
        )

    def with_pbc(self) -> 'Sheet':
        """Wrap all coordinates into the sheet along its length and width."""
        planar_box = Coord(self.length, self.width, 0.0)
        coords = [c.with_pbc(planar_box) for c in self._planar_coords()]

        return replace(self, coords=self._from_planar_coords(coords))

    def to_circle(self, radius: float) -> Circle:
        """
        Cut a circle out of the sheet.

        If the sheet is smaller than the circle it is first replicated
        ceil(2r / length) and ceil(2r / width) times. The circle is cut in
        the plane of the sheet (z = 0), centered on (r, r), and its
        coordinates are relative to that center.
        """
        nx = max(int(np.ceil(2.0 * radius / self.length)), 1)
        ny = max(int(np.ceil(2.0 * radius / self.width)), 1)

        planar_box = Coord(self.length, self.width, 0.0)
        coords = pbc_multiply_coords(self._planar_coords(), planar_box, nx, ny, 1)

        if (nx, ny) != (1, 1):
            logger.debug(f"Replicated sheet ({nx}, {ny}) times to cut a circle of radius {radius:.3f}")

        center = Coord(radius, radius, 0.0)
        box_size = planar_box.pbc_multiply(nx, ny, 1)

        return Circle(
            radius=radius,
            coords=cut_circle(coords, center, box_size, radius),
            residue=self.residue,
            origin=self.origin,
        )


def construct_sheet(config: SheetConfig,
                    rng: Optional[np.random.Generator] = None) -> Sheet:
    """
    Construct a sheet from its configuration.

    The length and width of the returned sheet are snapped to the box of the
    generated lattice.

    Raises
    ------
    ConstructionError
        If the length or width is non-positive.
    """
    if config.length <= 0 or config.width <= 0:
        raise ConstructionError("Cannot create a sheet of non-positive size")

    points = generate_points(config.lattice, config.length, config.width, rng=rng)

    if config.std_z is not None:
        points = points.uniform_distribution(config.std_z, rng=rng)

    length, width = points.box_size.x, points.box_size.y

    if length <= 0 or width <= 0:
        raise ConstructionError(
            f"Sheet of size ({config.length}, {config.width}) is smaller than its lattice spacing"
        )

    coords = rotate_planar_coords_to_alignment(points.coords, Direction.Z, config.normal)

    logger.debug(f"Constructed sheet of size ({length:.3f}, {width:.3f}) "
                 f"with {len(coords)} points")

    return Sheet(
        lattice=config.lattice,
        length=length,
        width=width,
        coords=coords,
        normal=config.normal,
        std_z=config.std_z,
        name=config.name,
        residue=config.residue,
        origin=config.origin,
    )
