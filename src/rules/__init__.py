"""Configuration loading for doclinks."""

from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    DocLinksConfig,
    EcosystemConfig,
    load_config,
    resolve_metadata_path,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocLinksConfig",
    "EcosystemConfig",
    "load_config",
    "resolve_metadata_path",
]
