"""
Input/output: system definitions in YAML.
"""

from .config_loader import build_system, load_config, parse_components, save_config

__all__ = [
    'build_system',
    'load_config',
    'parse_components',
    'save_config',
]
