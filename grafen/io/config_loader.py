"""
Load and save system definitions as YAML.

A system file holds a title and a list of component configurations, each
identified by its 'type':

    title: Graphene on silica
    components:
      - type: sheet
        name: graphene
        lattice: {type: hexagonal, a: 0.142}
        length: 5.0
        width: 4.0
        residue:
          code: GRPH
          atoms:
            - {code: C, position: [0.0, 0.0, 0.0]}
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import yaml

from ..core.errors import ConfigError
from ..core.system import System
from ..shapes.component import ComponentConfig, config_from_dict, construct

logger = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> Dict:
    """
    Read a system definition from a YAML file.

    Raises
    ------
    ConfigError
        If the file is not valid YAML or does not hold a mapping.
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as err:
            raise ConfigError(f"Could not parse YAML from '{path}': {err}") from err

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file '{path}' does not hold a mapping")

    return data


def parse_components(data: Dict) -> List[ComponentConfig]:
    """Parse the component configurations of a system definition."""
    components = data.get('components') or []

    if not isinstance(components, list):
        raise ConfigError("'components' must be a list of component definitions")

    configs = []
    for i, component in enumerate(components):
        if not isinstance(component, dict):
            raise ConfigError(f"Component {i} is not a mapping: {component!r}")

        configs.append(config_from_dict(component))

    return configs


def build_system(source: Union[str, Path, Dict],
                 rng: Optional[np.random.Generator] = None) -> System:
    """
    Construct a system from a YAML file or an already loaded definition.

    Parameters
    ----------
    source : str, Path or dict
        Path to a YAML file, or its parsed content.
    rng : np.random.Generator, optional
        Random source shared by all components.

    Returns
    -------
    system : System
        Constructed components in definition order.
    """
    data = source if isinstance(source, dict) else load_config(source)

    rng = np.random.default_rng() if rng is None else rng
    configs = parse_components(data)

    components = [construct(config, rng=rng) for config in configs]

    system = System(title=str(data.get('title', '')), components=components)
    logger.info(f"Built system '{system.title}' with {len(components)} components "
                f"and {system.num_atoms()} atoms")

    return system


def save_config(path: Union[str, Path], title: str,
                configs: Sequence[ComponentConfig]) -> None:
    """Write a system definition to a YAML file."""
    data = {
        'title': title,
        'components': [config.to_dict() for config in configs],
    }

    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f, sort_keys=False)

    logger.debug(f"Saved {len(configs)} component configurations to {path}")
