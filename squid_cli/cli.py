"""Squid CLI entry point."""

import click

from . import __version__
from .config import config_command
from .logs.command import logs_command
from .preflight.command import preflight_command
from .watch.command import watch_command


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="squid")
@click.pass_context
def cli(ctx: click.Context):
    """Squid deployment CLI."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(watch_command)
cli.add_command(logs_command)
cli.add_command(preflight_command)
cli.add_command(config_command)


def main():
    cli()


if __name__ == "__main__":
    main()
