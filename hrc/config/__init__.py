"""Level configuration building and validation."""

from hrc.config.builder import (
    LevelConfigError,
    LevelSpec,
    anchor_pattern,
    build_level_config,
    build_level_configs,
    load_level_specs,
    validate_level_specs,
)

__all__ = [
    "LevelConfigError",
    "LevelSpec",
    "anchor_pattern",
    "build_level_config",
    "build_level_configs",
    "load_level_specs",
    "validate_level_specs",
]
