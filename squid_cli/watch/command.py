"""Watch command implementation."""

import signal
from typing import Optional

import click

from squid.sdk import Config, Squid
from .. import ui
from ..core import (
    DeployContext,
    DeployOptions,
    MissingPolicy,
    PollOutcome,
    Reporter,
    Timer,
    run_pipeline,
)
from ..core.actions import WatchPipeline
from ..settings import ConfigManager
from ..utils import handle_errors
from . import validation


def build_client(settings: ConfigManager) -> Squid:
    """SDK client configured from the CLI settings."""
    return Squid(Config(api_key=settings.api_key, base_url=settings.api_url))


def sigterm_handler(timer: Timer):
    """SIGTERM handler for a watch run.

    Between ticks it cancels the timer so the run ends as CANCELLED.
    Anywhere else (fetching, streaming logs) it interrupts like Ctrl-C.
    """
    def handle(signum, frame):
        waiting = timer.waiting
        timer.cancel()
        if not waiting:
            raise KeyboardInterrupt

    return handle


@click.command("watch")
@click.argument("target")
@click.option("--org", "-o", "org_code", required=True, help="Organization code owning the squid")
@click.option("--url", "deployment_url", help="URL to show once the squid is live")
@click.option("--verbose/--quiet", default=True, help="Print pipeline logs when it fails or goes live")
@click.option("--interval", type=float, default=None, help="Seconds between status checks (default 3)")
@click.option("--fail-if-missing", is_flag=True, help="Exit with an error if the pipeline disappears")
@handle_errors
def watch_command(
    target: str,
    org_code: str,
    deployment_url: Optional[str],
    verbose: bool,
    interval: Optional[float],
    fail_if_missing: bool,
):
    """Follow a squid deployment until it is live, then stream its logs.

    \b
    TARGET: <name>@<version> of the squid being deployed.

    \b
    Examples:
      squid watch my-squid@v1 --org acme
      squid watch my-squid@v1 --org acme --quiet
      squid watch my-squid@v1 --org acme --fail-if-missing
    """
    squid_name, version_name = validation.validate(target, interval)

    settings = ConfigManager()
    opts = DeployOptions(
        org_code=org_code,
        squid_name=squid_name,
        version_name=version_name,
        deployment_url=deployment_url or settings.deployment_url(org_code, squid_name, version_name),
        verbose=verbose,
        interval=interval or settings.poll_interval,
        on_missing=MissingPolicy.FAIL if fail_if_missing else MissingPolicy.IGNORE,
    )

    timer = Timer()
    ctx = DeployContext(build_client(settings), opts, Reporter(), timer=timer)

    previous_handler = signal.signal(signal.SIGTERM, sigterm_handler(timer))
    try:
        run_pipeline(ctx, [WatchPipeline()])
    finally:
        signal.signal(signal.SIGTERM, previous_handler)

    if ctx.outcome is PollOutcome.CANCELLED:
        ui.warning("Stopped watching the deploy pipeline")
