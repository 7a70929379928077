#!/usr/bin/env python3
"""
Command-line interface for productive-readme.
"""

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from . import __version__
from .app import ExitCode, run
from .config import load_configuration
from .errors import ConfigError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="productive-readme",
        description="Write a time-of-day commit activity chart into a GitHub README. "
                    "Configured through environment variables (GH_TOKEN, README_OWNER, "
                    "README_REPO, README_PATH, TIMEZONE)."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_log_level(name: str) -> int:
    """Map a level name such as "debug" or a number such as "10" to a logging level."""
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown LOG_LEVEL: {name!r}")
    return level


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    create_parser().parse_args(argv)
    load_dotenv()
    logger = logging.getLogger(__name__)

    try:
        level = resolve_log_level(os.environ.get("LOG_LEVEL", "INFO"))
    except ConfigError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return int(ExitCode.CONFIG)
    setup_logging(level)

    try:
        config = load_configuration()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return int(ExitCode.CONFIG)

    try:
        return int(run(config))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
