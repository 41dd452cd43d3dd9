"""
Axis-aligned box volumes.

Cuboids are the workhorse of the volume layer: cylinders and spheres filled
to a density are cut out of a filled cuboid, which is periodically
replicated first if it is smaller than the shape to cut.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, List, Optional

import numpy as np

from .base import AbstractVolume, FillType, calc_density, cut_to_cylinder, cut_to_sphere
from .cylinder import CylinderVolume
from .sphere import Sphere
from ..base import unwrap_name
from ..config import base_fields_from_dict, base_fields_to_dict, parse_coord, require
from ...core.coord import Coord, Direction, pbc_multiply_coords
from ...core.errors import ConstructionError
from ...core.residue import Residue

logger = logging.getLogger(__name__)


def _resolve_cells(size: Coord, num_coords: int):
    """Number of near-cubic cells per axis such that nx·ny·nz >= num_coords."""
    volume = size.x * size.y * size.z
    cell_length = np.cbrt(volume / num_coords)

    bins = [int(np.ceil(side / cell_length)) for side in size.to_tuple()]

    # Rounding can leave the product a single cell short
    while bins[0] * bins[1] * bins[2] < num_coords:
        sides = size.to_tuple()
        axis = int(np.argmax([s / n for s, n in zip(sides, bins)]))
        bins[axis] += 1

    return tuple(bins)


@dataclass(frozen=True)
class Cuboid(AbstractVolume):
    """
    An axis-aligned box.

    The origin is located in the lower-left-bottom corner and coordinates
    are relative to it.

    Attributes
    ----------
    size : Coord
        Box size.
    density : float, optional
        Density of coordinates, recorded when the box is filled.
    """
    size: Coord = field(default_factory=Coord)
    coords: List[Coord] = field(default_factory=list)
    density: Optional[float] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    def describe(self) -> str:
        return f"{unwrap_name(self.name)} (Box of size {self.size} at {self.origin})"

    def describe_short(self) -> str:
        return f"{unwrap_name(self.name)} (Box)"

    def calc_box_size(self) -> Coord:
        return self.size

    def center(self) -> Coord:
        """Center of the box, relative to its origin."""
        return self.size / 2.0

    def contains(self, coord: Coord) -> bool:
        """Whether an absolute coordinate lies inside the box, edges included."""
        lower = self.origin
        upper = self.origin + self.size

        return (lower.x <= coord.x <= upper.x
                and lower.y <= coord.y <= upper.y
                and lower.z <= coord.z <= upper.z)

    def volume(self) -> float:
        return self.size.x * self.size.y * self.size.z

    def pbc_multiply(self, nx: int, ny: int, nz: int) -> 'Cuboid':
        """Replicate the box and its coordinates."""
        return replace(
            self,
            size=self.size.pbc_multiply(nx, ny, nz),
            coords=pbc_multiply_coords(self.coords, self.size, nx, ny, nz),
        )

    def fill(self, fill_type: FillType,
             rng: Optional[np.random.Generator] = None) -> 'Cuboid':
        """
        Fill the box with coordinates.

        Algorithm
        ---------
        The box is divided into nx·ny·nz >= N near-cubic cells. N distinct
        cells are sampled without replacement and a coordinate is placed
        uniformly at random inside each. No cell is used twice and the cost
        per coordinate does not depend on how full the box is. Shapes cut
        from the box get the box density on average, without aliasing
        against the cell grid.

        Returns
        -------
        cuboid : Cuboid
            Copy with the new coordinates and the resulting density.
        """
        rng = np.random.default_rng() if rng is None else rng
        num_coords = fill_type.to_num_coords(self)

        if num_coords == 0:
            return replace(self, coords=[], density=0.0)

        if self.volume() <= 0.0:
            raise ConstructionError("Cannot fill a box of non-positive volume")

        nx, ny, nz = _resolve_cells(self.size, num_coords)
        num_cells = nx * ny * nz

        indices = rng.choice(num_cells, size=num_coords, replace=False)

        ix = indices % nx
        iy = (indices // nx) % ny
        iz = indices // (nx * ny)

        spacing = np.array(self.size.to_tuple()) / np.array([nx, ny, nz])
        offsets = rng.uniform(0.0, 1.0, size=(num_coords, 3))
        positions = spacing * (np.column_stack([ix, iy, iz]) + offsets)

        logger.debug(f"Filled box of size {self.size} with {num_coords} coordinates "
                     f"in {nx} x {ny} x {nz} cells")

        return replace(
            self,
            coords=[Coord(float(x), float(y), float(z)) for x, y, z in positions],
            density=num_coords / self.volume(),
        )

    def _cut_density(self, shape: AbstractVolume) -> Optional[float]:
        # Unfilled boxes give unfilled shapes
        if self.density is None:
            return None

        return calc_density(len(shape.coords), shape.volume())

    def _pbc_multiples_for(self, extent: Coord):
        return tuple(
            max(int(np.ceil(target / side)), 1)
            for target, side in zip(extent.to_tuple(), self.size.to_tuple())
        )

    def _extend_to(self, extent: Coord) -> 'Cuboid':
        multiples = self._pbc_multiples_for(extent)

        if multiples == (1, 1, 1):
            return self

        logger.debug(f"Replicating box {multiples} times to fit a shape of size {extent}")
        return self.pbc_multiply(*multiples)

    def to_cylinder(self, radius: float, height: float,
                    alignment: Direction = Direction.Z) -> CylinderVolume:
        """
        Cut a cylinder out of the box.

        The box is replicated if it is smaller than the cylinder. The
        cylinder is centered in the plane of the (possibly replicated) box
        and starts at its bottom along the alignment axis. Its origin is the
        absolute position of its bottom center.
        """
        diameter = 2.0 * radius

        if alignment == Direction.X:
            extent = Coord(height, diameter, diameter)
        elif alignment == Direction.Y:
            extent = Coord(diameter, height, diameter)
        else:
            extent = Coord(diameter, diameter, height)

        extended = self._extend_to(extent)
        center = extended.center()

        if alignment == Direction.X:
            bottom_center = Coord(0.0, center.y, center.z)
        elif alignment == Direction.Y:
            bottom_center = Coord(center.x, 0.0, center.z)
        else:
            bottom_center = Coord(center.x, center.y, 0.0)

        cylinder = CylinderVolume(
            radius=radius,
            height=height,
            alignment=alignment,
            coords=cut_to_cylinder(extended.coords, bottom_center, alignment, radius, height),
            name=self.name,
            residue=self.residue,
            origin=self.origin + bottom_center,
        )

        return replace(cylinder, density=self._cut_density(cylinder))

    def to_sphere(self, radius: float) -> Sphere:
        """
        Cut a sphere out of the center of the box.

        The box is replicated if it is smaller than the sphere. The origin
        of the sphere is the absolute position of its center.
        """
        diameter = 2.0 * radius

        extended = self._extend_to(Coord(diameter, diameter, diameter))
        center = extended.center()

        sphere = Sphere(
            radius=radius,
            coords=cut_to_sphere(extended.coords, center, radius),
            name=self.name,
            residue=self.residue,
            origin=self.origin + center,
        )

        return replace(sphere, density=self._cut_density(sphere))


@dataclass(frozen=True)
class CuboidConfig:
    """Parameters of a box volume with an optional fill."""
    size: Coord
    fill: Optional[FillType] = None
    name: Optional[str] = None
    residue: Optional[Residue] = None
    origin: Coord = field(default_factory=Coord)

    kind: ClassVar[str] = 'cuboid'

    def to_dict(self) -> Dict:
        data = base_fields_to_dict(self)
        data.update({
            'size': list(self.size.to_tuple()),
            'fill': self.fill.to_dict() if self.fill is not None else None,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'CuboidConfig':
        fill = data.get('fill')

        return cls(
            size=parse_coord(require(data, 'size', cls.kind)),
            fill=FillType.from_dict(fill) if fill is not None else None,
            **base_fields_from_dict(data)
        )


def construct_cuboid(config: CuboidConfig,
                     rng: Optional[np.random.Generator] = None) -> Cuboid:
    """
    Construct a box volume and fill it if a fill type is set.

    Raises
    ------
    ConstructionError
        If any side of the box is non-positive.
    """
    if min(config.size.to_tuple()) <= 0:
        raise ConstructionError("Cannot create a box with a non-positive side")

    cuboid = Cuboid(
        size=config.size,
        name=config.name,
        residue=config.residue,
        origin=config.origin,
    )

    if config.fill is not None:
        cuboid = cuboid.fill(config.fill, rng=rng)

    return cuboid
