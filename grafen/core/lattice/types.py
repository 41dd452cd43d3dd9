"""
Lattice types used to construct surfaces.

A lattice type fully determines how a bounded planar point set is produced:
a regular crystal (hexagonal or triclinic) or a Poisson-disc distribution.
"""

from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Optional, Union

import numpy as np

from .generator import LatticeGenerator
from .presets import HexagonalCrystal, TriclinicCrystal
from ..errors import ConfigError
from ..points import Points
from ..sampling import poisson_disc, rmin_from_density


@dataclass(frozen=True)
class Hexagonal:
    """Hexagonal (honeycomb) lattice with bond spacing a."""
    a: float

    kind: ClassVar[str] = 'hexagonal'

    def generate_points(self, length: float, width: float,
                        rng: Optional[np.random.Generator] = None) -> Points:
        return (LatticeGenerator(HexagonalCrystal(self.a))
                .with_size(length, width)
                .finalize())

    def to_dict(self) -> Dict:
        return {'type': self.kind, **asdict(self)}


@dataclass(frozen=True)
class Triclinic:
    """Triclinic lattice with vector lengths a, b and angle gamma in degrees."""
    a: float
    b: float
    gamma: float

    kind: ClassVar[str] = 'triclinic'

    def generate_points(self, length: float, width: float,
                        rng: Optional[np.random.Generator] = None) -> Points:
        crystal = TriclinicCrystal(self.a, self.b, np.radians(self.gamma))
        return LatticeGenerator(crystal).with_size(length, width).finalize()

    def to_dict(self) -> Dict:
        return {'type': self.kind, **asdict(self)}


@dataclass(frozen=True)
class PoissonDisc:
    """Poisson-disc distribution with a target number of points per area."""
    density: float

    kind: ClassVar[str] = 'poisson_disc'

    def generate_points(self, length: float, width: float,
                        rng: Optional[np.random.Generator] = None) -> Points:
        rmin = rmin_from_density(self.density)
        return poisson_disc(rmin, length, width, rng=rng)

    def to_dict(self) -> Dict:
        return {'type': self.kind, **asdict(self)}


LatticeType = Union[Hexagonal, Triclinic, PoissonDisc]

LATTICE_TYPES = {
    Hexagonal.kind: Hexagonal,
    Triclinic.kind: Triclinic,
    PoissonDisc.kind: PoissonDisc,
}


def generate_points(lattice: LatticeType, length: float, width: float,
                    rng: Optional[np.random.Generator] = None) -> Points:
    """
    Produce the planar points of a lattice type for a target size.

    Regular lattices snap the box to the closest multiple of their spacing.
    Poisson-disc distributions use the requested size as the box.
    """
    return lattice.generate_points(length, width, rng=rng)


def lattice_from_dict(data: Dict) -> LatticeType:
    """
    Construct a lattice type from a dictionary.

    Examples
    --------
    >>> lattice_from_dict({'type': 'triclinic', 'a': 1.0, 'b': 0.5, 'gamma': 90.0})
    Triclinic(a=1.0, b=0.5, gamma=90.0)

    Raises
    ------
    ConfigError
        If the type is unknown or parameters are missing.
    """
    params = dict(data)
    kind = str(params.pop('type', '')).lower()

    if kind not in LATTICE_TYPES:
        available = ', '.join(LATTICE_TYPES.keys())
        raise ConfigError(f"Unknown lattice type '{kind}'. Available types: {available}")

    try:
        return LATTICE_TYPES[kind](**{k: float(v) for k, v in params.items()})
    except (TypeError, ValueError) as err:
        raise ConfigError(f"Invalid parameters for lattice type '{kind}': {err}") from err
