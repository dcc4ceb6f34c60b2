"""Settings for loading schemas and running merges."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var, require_env_vars
from .logging import DEFAULT_LOG_LEVEL, parse_log_level

SCHEMA_PATH_ENV: Final[str] = "MUTATION_MERGE_SCHEMA"
LOG_LEVEL_ENV: Final[str] = "MUTATION_MERGE_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class MergeConfig:
    schema_path: Path | None = None
    log_level: int = DEFAULT_LOG_LEVEL

    def require_schema_path(self) -> Path:
        if self.schema_path is not None:
            return self.schema_path
        return Path(require_env_vars((SCHEMA_PATH_ENV,))[SCHEMA_PATH_ENV]).expanduser()


def get_merge_config(*, schema_path: Path | None = None) -> MergeConfig:
    """Read settings from the environment; ``schema_path`` overrides the env var."""

    env_schema = optional_env_var(SCHEMA_PATH_ENV)
    effective_schema = schema_path or (Path(env_schema).expanduser() if env_schema else None)
    env_level = optional_env_var(LOG_LEVEL_ENV)
    log_level = parse_log_level(env_level) if env_level else DEFAULT_LOG_LEVEL
    return MergeConfig(schema_path=effective_schema, log_level=log_level)
