"""Application configuration helpers."""

from __future__ import annotations

from .env import int_env_var, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError, MissingInputFileError
from .http_resilience import ResilienceConfig
from .paths import PathsConfig, ReferenceListConfig, get_paths_config
from .zotero import ZOTERO_MAX_LIMIT, ZoteroConfig, get_zotero_config

__all__ = [
    "ZOTERO_MAX_LIMIT",
    "ConfigurationError",
    "MissingConfigurationError",
    "MissingInputFileError",
    "PathsConfig",
    "ReferenceListConfig",
    "ResilienceConfig",
    "ZoteroConfig",
    "get_paths_config",
    "get_zotero_config",
    "int_env_var",
    "optional_env_var",
    "require_env_vars",
]
