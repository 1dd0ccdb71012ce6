"""Summary builders for command output formatting."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from .context import DeployContext


class SummaryBuilder(ABC):
    """Base class for building command-specific summaries.

    This keeps the Reporter generic and reusable while allowing
    each command to define its own pre-flight and completion displays.
    """

    @abstractmethod
    def build_preflight(self, ctx: DeployContext) -> List[Tuple[str, str]]:
        """Build pre-flight information display as (label, value) tuples."""

    @abstractmethod
    def build_completion(self, ctx: DeployContext) -> Tuple[str, List[Tuple[str, str]]]:
        """Build completion summary display as (title, items)."""


class PreflightSummary(SummaryBuilder):
    """Inputs and results of the deploy preflight checks."""

    def build_preflight(self, ctx: DeployContext) -> List[Tuple[str, str]]:
        opts = ctx.opts
        items = [("→", "Checking deploy source"), ("Repository", opts.repo_path)]
        if opts.env_flags:
            items.append(("Env flags", str(len(opts.env_flags))))
        if opts.env_file:
            items.append(("Env file", opts.env_file))
        return items

    def build_completion(self, ctx: DeployContext) -> Tuple[str, List[Tuple[str, str]]]:
        items = [("Source", ctx.source_url or "-")]
        if ctx.envs:
            items.append(("Env", ", ".join(sorted(ctx.envs))))
        return "✓ Ready to deploy", items
