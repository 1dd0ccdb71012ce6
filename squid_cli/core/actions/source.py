"""Deploy source actions."""

from typing import Optional

from ..context import DeployContext
from ..env import parse_envs
from ..git import GitSource
from .base import BaseAction


class ResolveGitSource(BaseAction):
    """Validate the local checkout and record its source reference."""

    def __init__(self, git: Optional[GitSource] = None):
        self.git = git

    def execute(self, ctx: DeployContext) -> Optional[bool]:
        git = self.git or GitSource(ctx.opts.repo_path)
        # Remote selection may prompt, so resolve it outside the spinner
        remote = git.resolve_remote()
        with ctx.reporter.step("Checking git remote"):
            ctx.source_url = git.build_remote_url(remote)
        return True


class ResolveEnvs(BaseAction):
    """Merge ``--env`` flags and the env file."""

    def should_run(self, ctx: DeployContext) -> bool:
        return bool(ctx.opts.env_flags) or ctx.opts.env_file is not None

    def execute(self, ctx: DeployContext) -> Optional[bool]:
        ctx.envs = parse_envs(ctx.opts.env_flags, ctx.opts.env_file)
        return True
