"""
Shared utilities for CLI commands.
"""

import logging
import sys
from typing import NoReturn

import click

from deviceid.manager import DeviceIDManager


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for CLI.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def get_manager(ctx: click.Context) -> DeviceIDManager:
    """Build a manager from the config stored on the click context."""
    return DeviceIDManager(ctx.obj["config"])


def fail(message: str, error: Exception) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    click.echo(f"{message}: {error}", err=True)
    sys.exit(1)
