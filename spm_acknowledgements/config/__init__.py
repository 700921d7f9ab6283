"""Configuration handling for spm-acknowledgements."""
from __future__ import annotations

from spm_acknowledgements.config.loader import (
    build_generator_config,
    find_config_file,
    load_config,
    load_config_file,
    resolve_checkouts_path,
)

__all__ = [
    "build_generator_config",
    "find_config_file",
    "load_config",
    "load_config_file",
    "resolve_checkouts_path",
]
