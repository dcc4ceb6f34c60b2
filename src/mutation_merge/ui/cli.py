# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from mutation_merge.app import DEFAULT_MUTATION_NAME, merge_mutation_files
from mutation_merge.config import ConfigurationError, configure_logging, get_merge_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge mutation documents that call the same root mutation field"
    )
    parser.add_argument(
        "documents",
        nargs="+",
        type=Path,
        help="Files holding one mutation document each",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        default=None,
        help="Schema file: SDL, or introspection JSON when ending in .json "
        "(defaults to $MUTATION_MERGE_SCHEMA)",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=DEFAULT_MUTATION_NAME,
        help="Mutation name the documents are registered under (default: %(default)s)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = get_merge_config(schema_path=parsed_args.schema)
        configure_logging(level=config.log_level)
        config.require_schema_path()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    try:
        merged = merge_mutation_files(parsed_args.documents, config, mutation_name=parsed_args.name)
    except Exception:
        log.exception("Fatal error during merge")
        sys.exit(1)

    print(merged)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
