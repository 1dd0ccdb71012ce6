"""Config command implementations."""

import click

from .. import ui
from ..exceptions import ValidationError
from ..settings import ConfigManager
from ..utils import handle_errors
from . import display
from .actions import GetConfigAction, SetConfigAction, ShowConfigAction, UnsetConfigAction


def _context(**values) -> dict:
    try:
        config = ConfigManager()
        if "key" in values:
            config.get(values["key"])
    except ValueError as e:
        raise ValidationError(str(e)) from e
    return {"config": config, **values}


@click.group(name="config")
def config_command():
    """Manage CLI configuration (~/.squid/config.ini)."""


@config_command.command(name="get")
@click.argument("key")
@handle_errors
def config_get_command(key: str):
    """Print the value of KEY (section.key)."""
    result = GetConfigAction().execute(_context(key=key))
    if not result.ok:
        raise ValidationError(result.error)
    ui.print(result.data["value"], markup=False)


@config_command.command(name="set")
@click.argument("key")
@click.argument("value")
@handle_errors
def config_set_command(key: str, value: str):
    """Set KEY (section.key) to VALUE."""
    result = SetConfigAction().execute(_context(key=key, value=value))
    if not result.ok:
        raise ValidationError(result.error)
    ui.success(f"{key} updated")


@config_command.command(name="unset")
@click.argument("key")
@handle_errors
def config_unset_command(key: str):
    """Remove KEY (section.key)."""
    result = UnsetConfigAction().execute(_context(key=key))
    if not result.ok:
        raise ValidationError(result.error)
    ui.success(f"{key} removed")


@config_command.command(name="show")
@handle_errors
def config_show_command():
    """Show the entire configuration."""
    result = ShowConfigAction().execute(_context())
    ui.dim(str(result.data["config_path"]))
    ui.print(display.format_config(result.data["config_data"]), markup=False)


@config_command.command(name="path")
@handle_errors
def config_path_command():
    """Print the config file location."""
    ui.print(str(ConfigManager().get_config_path()), markup=False)
