"""Logs command implementation."""

import click

from ..core import DeployContext, DeployOptions, Reporter, run_pipeline
from ..core.actions import StreamLogs
from ..settings import ConfigManager
from ..utils import handle_errors
from ..watch import validation
from ..watch.command import build_client


@click.command("logs")
@click.argument("target")
@click.option("--org", "-o", "org_code", required=True, help="Organization code owning the squid")
@handle_errors
def logs_command(target: str, org_code: str):
    """Stream logs of a running squid.

    \b
    TARGET: <name>@<version> of the squid.

    \b
    Examples:
      squid logs my-squid@v1 --org acme
    """
    squid_name, version_name = validation.validate(target)

    opts = DeployOptions(org_code=org_code, squid_name=squid_name, version_name=version_name)
    ctx = DeployContext(build_client(ConfigManager()), opts, Reporter())
    run_pipeline(ctx, [StreamLogs()])
