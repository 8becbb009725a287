"""Configuration defaults and YAML overrides for fixture generation."""

import copy
from pathlib import Path
from typing import Optional, Union

import yaml


DEFAULT_CONFIG = {
    'fixtures': {
        'output_dir': 'fixtures',
        'extension': 'snappy',
        'manifest': 'manifest.json',
    }
}


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[Union[str, Path]] = None) -> dict:
    """
    Loads configuration, overlaying a YAML file on the defaults.

    Args:
        path: Optional path to a YAML config file

    Returns:
        Merged configuration dictionary (a fresh copy on every call)

    Raises:
        FileNotFoundError: If ``path`` is given but does not exist
        ValueError: If the file does not contain a mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    with open(path) as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(loaded).__name__}")

    return _merge(config, loaded)
