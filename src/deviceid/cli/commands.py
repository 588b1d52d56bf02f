"""
Device ID commands.
"""

import sys

import click

from deviceid.digest import is_valid_sha256
from deviceid.errors import DeviceIDError

from .utils import fail, get_manager


@click.command()
@click.pass_context
def verify(ctx: click.Context) -> None:
    """Print the stored device ID, creating it if missing or corrupt."""
    try:
        device_id = get_manager(ctx).verify_device_id()
    except DeviceIDError as e:
        fail("Failed to verify device ID", e)
    click.echo(device_id)


@click.command()
@click.pass_context
def generate(ctx: click.Context) -> None:
    """Print a freshly generated device ID without saving it."""
    try:
        device_id = get_manager(ctx).generate_device_id()
    except DeviceIDError as e:
        fail("Failed to generate device ID", e)
    click.echo(device_id)


@click.command()
@click.argument("device_id")
@click.pass_context
def save(ctx: click.Context, device_id: str) -> None:
    """Store DEVICE_ID as this machine's device ID."""
    manager = get_manager(ctx)
    try:
        manager.save_device_id(device_id)
        device_id_path = manager.get_device_id_path()
    except DeviceIDError as e:
        fail("Failed to save device ID", e)
    click.echo(f"Saved device ID to {device_id_path}")


@click.command()
@click.pass_context
def path(ctx: click.Context) -> None:
    """Print where the device ID file is stored."""
    try:
        device_id_path = get_manager(ctx).get_device_id_path()
    except DeviceIDError as e:
        fail("Failed to resolve device ID path", e)
    click.echo(str(device_id_path))


@click.command()
@click.argument("value")
def check(value: str) -> None:
    """Exit 0 if VALUE is a well-formed device ID, 1 otherwise."""
    if is_valid_sha256(value):
        click.echo("valid")
        return
    click.echo("invalid", err=True)
    sys.exit(1)
