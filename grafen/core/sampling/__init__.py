"""
Random point samplers.

- poisson_disc: density driven, with a hard minimum separation
- blue_noise: exact number of points with a maximised minimum separation
"""

from typing import Optional

import numpy as np

from .poisson import PoissonGrid, poisson_disc, rmin_from_density
from .blue_noise import blue_noise, calc_toroidal_distance, calc_min_dist
from ..points import Points


class Distribution:
    """Namespace for the samplers of planar point distributions."""

    @staticmethod
    def poisson(rmin: float, size_x: float, size_y: float,
                rng: Optional[np.random.Generator] = None) -> Points:
        return poisson_disc(rmin, size_x, size_y, rng=rng)

    @staticmethod
    def blue_noise(num_points: int, size_x: float, size_y: float,
                   rng: Optional[np.random.Generator] = None,
                   progress: bool = False) -> Points:
        return blue_noise(num_points, size_x, size_y, rng=rng, progress=progress)


__all__ = [
    'Distribution',
    'PoissonGrid',
    'poisson_disc',
    'rmin_from_density',
    'blue_noise',
    'calc_toroidal_distance',
    'calc_min_dist',
]
