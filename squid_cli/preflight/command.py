"""Preflight command implementation."""

from typing import Optional, Tuple

import click

from ..core import DeployContext, DeployOptions, PreflightSummary, Reporter, run_preflight_phase
from ..core.actions import ResolveEnvs, ResolveGitSource
from ..utils import handle_errors


@click.command("preflight")
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--env", "-e", "env_flags", multiple=True, help="Environment variable KEY=VALUE (repeatable)")
@click.option("--env-file", type=click.Path(dir_okay=False), help="Env file merged after --env flags")
@handle_errors
def preflight_command(path: str, env_flags: Tuple[str, ...], env_file: Optional[str]):
    """Check that a repository is ready to be deployed.

    \b
    Verifies the git checkout is clean and pushed, resolves the source
    reference and merges environment variables.

    \b
    Examples:
      squid preflight
      squid preflight ./my-squid -e RPC_URL=https://rpc.example --env-file .env
    """
    opts = DeployOptions(repo_path=path, env_flags=list(env_flags), env_file=env_file)
    reporter = Reporter()
    ctx = DeployContext(None, opts, reporter)
    summary = PreflightSummary()

    reporter.preflight_block(summary.build_preflight(ctx))
    if not run_preflight_phase(ctx, [ResolveGitSource(), ResolveEnvs()]):
        return

    title, items = summary.build_completion(ctx)
    reporter.summary_block(title, items)
