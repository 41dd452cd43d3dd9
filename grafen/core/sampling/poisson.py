"""
Poisson-disc sampling (Bridson's algorithm).

Points are placed randomly with a guaranteed minimum separation. A uniform
background grid with a cell size of rmin/√2 holds at most one point per cell,
which makes the neighbour check for every candidate O(1).

References
----------
R. Bridson, "Fast Poisson disk sampling in arbitrary dimensions",
SIGGRAPH sketches (2007).
"""

import logging
from typing import List, Optional

import numpy as np

from ..coord import Coord
from ..errors import ConstructionError, SamplingError
from ..points import Points

logger = logging.getLogger(__name__)

# Number of candidates tried around an active point before it is exhausted
NUM_CANDIDATES = 30

# Redraws of a single candidate that falls outside of the box
MAX_REDRAWS = 1000

# Neighbouring cells (in each direction) which may hold a point closer than rmin
NEIGHBOUR_CELLS = 2


def rmin_from_density(density: float) -> float:
    """
    Minimum separation which roughly yields a target point density.

    Notes
    -----
    rmin = sqrt(2 / (π·density)). The 1/π comes from the area of a disc,
    the factor 2 is empirical.
    """
    if density <= 0:
        raise ConstructionError("Density must be positive")

    return float(np.sqrt(2.0 / (np.pi * density)))


class PoissonGrid:
    """
    Background grid of a Poisson-disc distribution.

    Parameters
    ----------
    rmin : float
        Minimum separation between points.
    size_x, size_y : float
        Size of the sampled area.

    Attributes
    ----------
    spacing : float
        Cell size, rmin/√2. A cell can hold at most a single point.
    shape : Tuple[int, int]
        Number of cells along x and y.
    """

    def __init__(self, rmin: float, size_x: float, size_y: float):
        if rmin <= 0:
            raise ConstructionError("Minimum distance must be positive")

        self.rmin = rmin
        self.size = (size_x, size_y)
        self.spacing = rmin / np.sqrt(2.0)

        nx = int(np.ceil(size_x / self.spacing))
        ny = int(np.ceil(size_y / self.spacing))
        self.shape = (nx, ny)

        self.cells: List[Optional[Coord]] = [None] * (nx * ny)

    def _cell_position(self, coord: Coord):
        nx, ny = self.shape
        col = min(int(np.floor(coord.x / self.spacing)), nx - 1)
        row = min(int(np.floor(coord.y / self.spacing)), ny - 1)
        return col, row

    def _cell_index(self, coord: Coord) -> int:
        col, row = self._cell_position(coord)
        return row * self.shape[0] + col

    def collision(self, coord: Coord) -> bool:
        """Whether any stored point lies closer than rmin to the coordinate."""
        nx, ny = self.shape
        col, row = self._cell_position(coord)

        for j in range(max(0, row - NEIGHBOUR_CELLS), min(ny, row + NEIGHBOUR_CELLS + 1)):
            for i in range(max(0, col - NEIGHBOUR_CELLS), min(nx, col + NEIGHBOUR_CELLS + 1)):
                other = self.cells[j * nx + i]

                if other is not None and other.distance(coord) < self.rmin:
                    return True

        return False

    def set_coord(self, coord: Coord):
        """
        Store a point in its cell.

        Raises
        ------
        SamplingError
            If the cell already holds a point. This cannot happen for points
            which passed the collision check and signals a broken grid.
        """
        index = self._cell_index(coord)

        if self.cells[index] is not None:
            raise SamplingError(
                f"Cannot add coordinate {coord} to an already occupied grid cell ({index})"
            )

        self.cells[index] = coord

    def coords(self) -> List[Coord]:
        """Stored points in cell order."""
        return [c for c in self.cells if c is not None]


def _gen_coord_around(coord: Coord, grid: PoissonGrid,
                      rng: np.random.Generator) -> Optional[Coord]:
    max_x, max_y = grid.size

    for _ in range(MAX_REDRAWS):
        dr = rng.uniform(grid.rmin, 2.0 * grid.rmin)
        angle = rng.uniform(0.0, 2.0 * np.pi)

        x = coord.x + dr * np.cos(angle)
        y = coord.y + dr * np.sin(angle)

        if 0.0 <= x < max_x and 0.0 <= y < max_y:
            return Coord(float(x), float(y), 0.0)

    return None


def _find_candidate(coord: Coord, grid: PoissonGrid,
                    rng: np.random.Generator) -> Optional[Coord]:
    for _ in range(NUM_CANDIDATES):
        candidate = _gen_coord_around(coord, grid, rng)

        if candidate is not None and not grid.collision(candidate):
            return candidate

    return None


def poisson_disc(rmin: float, size_x: float, size_y: float,
                 rng: Optional[np.random.Generator] = None) -> Points:
    """
    Sample points with a minimum separation inside a rectangle.

    Algorithm
    ---------
    1. Seed the active list with a single random point.
    2. Pick a random active point and try up to 30 candidates at a distance
       in [rmin, 2·rmin) with a random angle. Candidates outside the box
       are redrawn.
    3. The first candidate without a neighbour closer than rmin is stored
       and becomes active. If no candidate succeeds the point is exhausted
       and removed from the active list (it stays in the output).
    4. Repeat until no active points remain.

    Parameters
    ----------
    rmin : float
        Minimum separation between any two points.
    size_x, size_y : float
        Size of the area, which is also the returned box size.
    rng : np.random.Generator, optional
        Random source. A fresh default generator is used if None.

    Returns
    -------
    points : Points
        Sampled points in grid-cell order (rows of cells, columns inner).
    """
    if size_x <= 0 or size_y <= 0:
        raise ConstructionError("Cannot sample points in an area of non-positive size")

    rng = np.random.default_rng() if rng is None else rng
    grid = PoissonGrid(rmin, size_x, size_y)

    init_coord = Coord(float(rng.uniform(0.0, size_x)), float(rng.uniform(0.0, size_y)), 0.0)
    grid.set_coord(init_coord)
    active = [init_coord]

    while active:
        index = int(rng.integers(len(active)))
        candidate = _find_candidate(active[index], grid, rng)

        if candidate is not None:
            grid.set_coord(candidate)
            active.append(candidate)
        else:
            active.pop(index)

    coords = grid.coords()
    logger.debug(f"Sampled {len(coords)} points with rmin = {rmin:.4f} "
                 f"in ({size_x:.3f}, {size_y:.3f})")

    return Points(box_size=Coord(size_x, size_y, 0.0), coords=coords)
