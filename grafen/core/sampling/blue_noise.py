"""
Blue-noise sampling of an exact number of points.

Mitchell's best-candidate algorithm: every new point is the best of a set of
random candidates, where best means the largest distance to the closest
already accepted point. Distances are toroidal so the result tiles
periodically; nearest neighbours are looked up with a periodic k-d tree.

Notes
-----
This is a greedy farthest-point heuristic, not an optimal packing, and the
number of candidates grows with every accepted point. Keep it to counts in
the low thousands.
"""

import logging
from typing import Optional, Sequence

import numpy as np
from scipy.spatial import cKDTree
from tqdm import tqdm

from ..coord import Coord
from ..errors import ConstructionError
from ..points import Points

logger = logging.getLogger(__name__)

# Number of extra candidates per already accepted point
NUM_CANDIDATES_MULTIPLIER = 1


def calc_toroidal_distance(coord: Coord, other: Coord,
                           size_x: float, size_y: float) -> float:
    """
    Squared distance in the xy plane between two coordinates with periodic edges.

    Examples
    --------
    >>> calc_toroidal_distance(Coord(0.0, 0.0), Coord(1.5, 2.5), 2.0, 3.0)
    0.5
    """
    dx = abs(coord.x - other.x)
    dy = abs(coord.y - other.y)

    if dx > size_x / 2.0:
        dx = size_x - dx

    if dy > size_y / 2.0:
        dy = size_y - dy

    return dx * dx + dy * dy


def calc_min_dist(coord: Coord, samples: Sequence[Coord],
                  size_x: float, size_y: float) -> float:
    """Smallest squared toroidal distance to a set of samples (inf if empty)."""
    return min(
        (calc_toroidal_distance(coord, other, size_x, size_y) for other in samples),
        default=np.inf,
    )


def _nearest_toroidal_distances(candidates: np.ndarray, accepted: np.ndarray,
                                size: np.ndarray) -> np.ndarray:
    """Distance from every candidate to its closest accepted point."""
    tree = cKDTree(accepted, boxsize=size)
    distances, _ = tree.query(candidates, k=1)
    return distances


def blue_noise(num_points: int, size_x: float, size_y: float,
               rng: Optional[np.random.Generator] = None,
               progress: bool = False) -> Points:
    """
    Sample an exact number of points with a maximised minimum separation.

    Parameters
    ----------
    num_points : int
        Number of points to sample.
    size_x, size_y : float
        Size of the area, which is also the returned box size.
    rng : np.random.Generator, optional
        Random source. A fresh default generator is used if None.
    progress : bool
        Show a progress bar over the accepted points.

    Returns
    -------
    points : Points
        Points in the order they were accepted.

    Notes
    -----
    Point i is the best of 1 + i candidates. Ties keep the earliest candidate.
    """
    if num_points < 0:
        raise ConstructionError("Number of points cannot be negative")

    if size_x <= 0 or size_y <= 0:
        raise ConstructionError("Cannot sample points in an area of non-positive size")

    rng = np.random.default_rng() if rng is None else rng
    box = Coord(size_x, size_y, 0.0)

    if num_points == 0:
        return Points(box_size=box, coords=[])

    size = np.array([size_x, size_y])
    accepted = np.empty((num_points, 2))
    accepted[0] = np.mod(rng.uniform(0.0, 1.0, size=2) * size, size)

    iterator = range(1, num_points)
    if progress:
        iterator = tqdm(iterator, desc="Blue noise", unit="pts")

    for i in iterator:
        num_candidates = 1 + NUM_CANDIDATES_MULTIPLIER * i
        # Periodic trees need every point in [0, size)
        candidates = np.mod(rng.uniform(0.0, 1.0, size=(num_candidates, 2)) * size, size)

        min_dist = _nearest_toroidal_distances(candidates, accepted[:i], size)
        accepted[i] = candidates[np.argmax(min_dist)]

    logger.debug(f"Sampled {num_points} blue noise points in ({size_x:.3f}, {size_y:.3f})")

    coords = [Coord(float(x), float(y), 0.0) for x, y in accepted]
    return Points(box_size=box, coords=coords)
