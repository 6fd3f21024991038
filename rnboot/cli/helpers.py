"""Shared CLI helper utilities.

This module provides common utilities used by the CLI entry point:
- err_console: Shared Rich Console for usage errors
- configure_logging: Root logger setup from settings and flags

Usage:
    from rnboot.cli.helpers import configure_logging, err_console
"""

import logging

from rich.console import Console

from rnboot.core.models import LogLevel

PROG_NAME = "rnboot"

# Usage errors go to stderr
err_console = Console(stderr=True)


def configure_logging(level: str, log_level: LogLevel = LogLevel.DEFAULT) -> None:
    """Configure the root logger.

    Args:
        level: Level name from settings (e.g. "WARNING")
        log_level: --debug/--verbose lower the level to DEBUG
    """
    if log_level.inherits_output:
        level = "DEBUG"
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
