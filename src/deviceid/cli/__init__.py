"""
Device ID CLI entry point.
"""

import sys

import click

from deviceid.config import load_config

from .commands import check, generate, path, save, verify
from .utils import setup_logging


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML or JSON configuration file",
)
@click.option("--storage-dir", help="Directory holding the device ID file")
@click.option("--file-name", help="Name of the device ID file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    storage_dir: str | None,
    file_name: str | None,
    verbose: bool,
) -> None:
    """Manage the persistent identifier for this machine."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(
            config,
            cli_overrides={"storage_dir": storage_dir, "id_file_name": file_name},
        )
    except ValueError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)


cli.add_command(verify)
cli.add_command(generate)
cli.add_command(save)
cli.add_command(path)
cli.add_command(check)
