"""Core infrastructure: pipeline polling and action-based command execution."""

from .context import DeployContext
from .options import DeployOptions
from .pipeline import run_pipeline, run_preflight_phase
from .poller import MissingPolicy, PipelinePoller, PollContext, PollOutcome
from .reporter import NullReporter, Reporter
from .summary import PreflightSummary, SummaryBuilder
from .timer import Timer

__all__ = [
    "DeployContext",
    "DeployOptions",
    "run_pipeline",
    "run_preflight_phase",
    "MissingPolicy",
    "PipelinePoller",
    "PollContext",
    "PollOutcome",
    "Reporter",
    "NullReporter",
    "PreflightSummary",
    "SummaryBuilder",
    "Timer",
]
