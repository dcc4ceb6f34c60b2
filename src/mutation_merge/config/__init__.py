"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging, parse_log_level
from .merge import LOG_LEVEL_ENV, SCHEMA_PATH_ENV, MergeConfig, get_merge_config

__all__ = [
    "LOG_LEVEL_ENV",
    "SCHEMA_PATH_ENV",
    "ConfigurationError",
    "MergeConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_merge_config",
    "optional_env_var",
    "parse_log_level",
    "require_env_vars",
]
