"""Utilities for configuration and size metrics."""

from .config import DEFAULT_CONFIG, load_config
from .metrics import compression_factor, format_factor

__all__ = [
    "DEFAULT_CONFIG",
    "load_config",
    "compression_factor",
    "format_factor",
]
