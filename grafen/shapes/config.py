"""
Helpers shared by the component configuration types.

Every configuration is a frozen dataclass which serialises to a plain
dictionary with `to_dict()` and back with `from_dict()`. The fields common to
all components (name, residue, origin) are handled here.
"""

from typing import Any, Dict, Optional

from ..core.coord import Coord, Direction
from ..core.errors import ConfigError
from ..core.residue import Residue


def require(data: Dict, key: str, kind: str) -> Any:
    """Get a required value from a configuration dictionary."""
    try:
        return data[key]
    except KeyError as err:
        raise ConfigError(f"Missing required key '{key}' for component type '{kind}'") from err


def parse_float(data: Dict, key: str, kind: str) -> float:
    value = require(data, key, kind)

    try:
        return float(value)
    except (TypeError, ValueError) as err:
        raise ConfigError(f"Value of '{key}' for component type '{kind}' "
                          f"is not a number: {value!r}") from err


def parse_optional_float(data: Dict, key: str) -> Optional[float]:
    value = data.get(key)

    if value is None:
        return None

    try:
        return float(value)
    except (TypeError, ValueError) as err:
        raise ConfigError(f"Value of '{key}' is not a number: {value!r}") from err


def parse_direction(value: Any) -> Direction:
    if isinstance(value, Direction):
        return value

    try:
        return Direction(str(value).upper())
    except ValueError as err:
        raise ConfigError(f"Unknown direction '{value}'. Available: X, Y, Z") from err


def parse_coord(value: Any) -> Coord:
    """Parse a coordinate from a sequence of three numbers or a string."""
    if isinstance(value, Coord):
        return value

    if isinstance(value, str):
        return Coord.from_string(value)

    try:
        return Coord.from_sequence(value)
    except (TypeError, ValueError) as err:
        raise ConfigError(f"Could not parse a coordinate from {value!r}") from err


def base_fields_from_dict(data: Dict) -> Dict:
    """Parse name, residue and origin of a component configuration."""
    residue = data.get('residue')
    origin = data.get('origin')

    return {
        'name': data.get('name'),
        'residue': Residue.from_dict(residue) if residue is not None else None,
        'origin': parse_coord(origin) if origin is not None else Coord.ORIGO,
    }


def base_fields_to_dict(config) -> Dict:
    return {
        'type': config.kind,
        'name': config.name,
        'residue': config.residue.to_dict() if config.residue is not None else None,
        'origin': list(config.origin.to_tuple()),
    }
