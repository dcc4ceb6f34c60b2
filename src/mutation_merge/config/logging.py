"""Log setup for the merge CLI.

Merged documents go to stdout, so log records always go to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

from .errors import ConfigurationError

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def parse_log_level(value: str) -> int:
    """Map a level name such as ``"debug"`` to its number."""

    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def configure_logging(*, level: int | str = DEFAULT_LOG_LEVEL, force: bool = False) -> None:
    """Initialise the root logger once, writing to stderr.

    ``level`` is a number or a level name; unknown names raise
    ``ConfigurationError``. Pass ``force=True`` to replace handlers installed
    earlier, e.g. when a configuration error forces a fallback setup.
    """

    if isinstance(level, str):
        level = parse_log_level(level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
