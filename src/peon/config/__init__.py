"""
Configuration package for peon-ping.

- app.py: PeonConfig, CategoryToggles, LoggingSettings and the loaders
  for both the typed config and the unknown-field-preserving config map.
"""

from peon.config.app import (
    KNOWN_CATEGORIES,
    CategoryToggles,
    LoggingSettings,
    PeonConfig,
    load_config,
    load_config_file,
    load_config_map,
    read_config,
    save_config_map,
)

__all__ = [
    "KNOWN_CATEGORIES",
    "CategoryToggles",
    "LoggingSettings",
    "PeonConfig",
    "load_config",
    "load_config_file",
    "load_config_map",
    "read_config",
    "save_config_map",
]
