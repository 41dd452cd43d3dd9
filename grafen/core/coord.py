"""
Elementary coordinate operations.

Coord is the value type passed around by every lattice, sampler and shape in
the package. All geometry downstream is compared with a small absolute
tolerance, so equality of coordinates is tolerance based as well.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from .errors import ConfigError


# Absolute tolerance per axis for coordinate equality
COORD_ATOL = 1e-9


class Direction(Enum):
    """
    Component direction axis.

    For cylinders this is the cylinder axis, for sheets the normal.
    """
    X = 'X'
    Y = 'Y'
    Z = 'Z'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Coord:
    """
    A three-dimensional cartesian coordinate.

    Parameters
    ----------
    x, y, z : float
        Cartesian components.

    Examples
    --------
    >>> Coord(1.0, 0.0, 1.0) + Coord(0.5, 0.5, 0.5)
    Coord(x=1.5, y=0.5, z=1.5)
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coord):
            return NotImplemented

        return (abs(self.x - other.x) < COORD_ATOL
                and abs(self.y - other.y) < COORD_ATOL
                and abs(self.z - other.z) < COORD_ATOL)

    def __add__(self, other: 'Coord') -> 'Coord':
        return Coord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Coord') -> 'Coord':
        return Coord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Coord':
        return Coord(-self.x, -self.y, -self.z)

    def __mul__(self, value: float) -> 'Coord':
        return Coord(self.x * value, self.y * value, self.z * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> 'Coord':
        return Coord(self.x / value, self.y / value, self.z / value)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f}, {self.z:.1f})"

    @classmethod
    def from_string(cls, text: str) -> 'Coord':
        """
        Parse a coordinate from three whitespace separated values.

        Raises
        ------
        ConfigError
            If three floating point values could not be parsed.
        """
        values = text.split()

        if len(values) < 3:
            raise ConfigError(f"Not enough values to parse a coordinate from '{text}'")

        try:
            x, y, z = (float(v) for v in values[:3])
        except ValueError as err:
            raise ConfigError(f"Could not parse a coordinate from '{text}': {err}") from err

        return cls(x, y, z)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> 'Coord':
        """Construct from any sequence of three numbers (list, tuple, array)."""
        if len(values) != 3:
            raise ConfigError(f"A coordinate needs exactly three values, got {len(values)}")

        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def distance(self, other: 'Coord') -> float:
        """Euclidean distance between two coordinates."""
        d = self - other
        return math.sqrt(d.x * d.x + d.y * d.y + d.z * d.z)

    def distance_cylindrical(self, other: 'Coord',
                             direction: Direction) -> Tuple[float, float]:
        """
        Cylindrical distance to another coordinate along an axis.

        Parameters
        ----------
        other : Coord
            Coordinate to measure to.
        direction : Direction
            Cylinder axis.

        Returns
        -------
        dr : float
            Distance in the plane perpendicular to the axis.
        dh : float
            Directed height difference (other - self) along the axis.

        Examples
        --------
        >>> Coord(0.0, 0.0, 0.0).distance_cylindrical(Coord(3.0, 4.0, 1.0), Direction.Z)
        (5.0, 1.0)
        """
        if direction == Direction.X:
            a, b, dh = self.y - other.y, self.z - other.z, other.x - self.x
        elif direction == Direction.Y:
            a, b, dh = self.x - other.x, self.z - other.z, other.y - self.y
        else:
            a, b, dh = self.x - other.x, self.y - other.y, other.z - self.z

        return math.sqrt(a * a + b * b), dh

    def rotate(self, axis: Direction) -> 'Coord':
        """Rotate by +90 degrees around an axis through the origin."""
        if axis == Direction.X:
            return Coord(self.x, -self.z, self.y)
        elif axis == Direction.Y:
            return Coord(self.z, self.y, -self.x)
        else:
            return Coord(-self.y, self.x, self.z)

    def with_pbc(self, box_size: 'Coord') -> 'Coord':
        """
        Return the coordinate wrapped into [0, size) of the input box.

        Box sides of 0 (or smaller) leave that component unchanged.

        Examples
        --------
        >>> Coord(0.5, 2.5, -2.5).with_pbc(Coord(1.0, 1.0, 1.0))
        Coord(x=0.5, y=0.5, z=0.5)
        """
        return Coord(_wrap(self.x, box_size.x),
                     _wrap(self.y, box_size.y),
                     _wrap(self.z, box_size.z))

    def pbc_multiply(self, nx: int, ny: int, nz: int) -> 'Coord':
        """Multiply the components by integer amounts."""
        return Coord(self.x * nx, self.y * ny, self.z * nz)


Coord.ORIGO = Coord(0.0, 0.0, 0.0)


def _wrap(value: float, size: float) -> float:
    if size <= 0.0:
        return value

    wrapped = value % size

    # Tiny negative values can round up to exactly `size`
    if wrapped >= size:
        wrapped = 0.0

    return wrapped


def rotate_coords(coords: Sequence[Coord], axis: Direction) -> List[Coord]:
    """Rotate a set of coordinates by +90 degrees around an axis."""
    return [coord.rotate(axis) for coord in coords]


def _rotate_times(coords: Sequence[Coord], axis: Direction, times: int) -> List[Coord]:
    rotated = list(coords)
    for _ in range(times):
        rotated = rotate_coords(rotated, axis)
    return rotated


# (from, to) -> (rotation axis, number of quarter turns)
_PLANAR_ROTATIONS = {
    (Direction.X, Direction.Y): (Direction.Z, 3),
    (Direction.X, Direction.Z): (Direction.Y, 1),
    (Direction.Y, Direction.X): (Direction.Z, 1),
    (Direction.Y, Direction.Z): (Direction.X, 3),
    (Direction.Z, Direction.X): (Direction.Y, 3),
    (Direction.Z, Direction.Y): (Direction.X, 1),
}


def rotate_planar_coords_to_alignment(coords: Sequence[Coord],
                                      from_dir: Direction,
                                      to_dir: Direction) -> List[Coord]:
    """
    Rotate a set of planar coordinates from one normal to another.

    Meant for sheets: a sheet in the z = 0 plane with its corner at the origin
    stays in the positive octant after rotation. Z -> X maps (x, y, 0) to
    (0, y, x), Z -> Y maps it to (x, 0, y). Every rotation is undone by the
    reverse pair.

    Parameters
    ----------
    coords : Sequence[Coord]
        Coordinates to rotate.
    from_dir, to_dir : Direction
        Current and target normal.

    Returns
    -------
    rotated : List[Coord]
        New list; the input is left untouched.
    """
    if from_dir == to_dir:
        return list(coords)

    axis, times = _PLANAR_ROTATIONS[(from_dir, to_dir)]
    return _rotate_times(coords, axis, times)


def pbc_multiply_coords(coords: Sequence[Coord], size: Coord,
                        nx: int, ny: int, nz: int) -> List[Coord]:
    """
    Periodically replicate a set of coordinates.

    Clones are emitted with i (x) outermost, then j (y), then k (z); every
    clone is the full input list in order, shifted by (i·size.x, j·size.y,
    k·size.z).
    """
    if (nx, ny, nz) == (1, 1, 1):
        return list(coords)

    replicated = []

    for i in range(nx):
        for j in range(ny):
            for k in range(nz):
                shift = size.pbc_multiply(i, j, k)
                replicated.extend(coord + shift for coord in coords)

    return replicated
