"""Actions for the deploy command pipelines."""

from .base import BaseAction
from .source import ResolveEnvs, ResolveGitSource
from .watch import StreamLogs, WatchPipeline

__all__ = [
    "BaseAction",
    "ResolveGitSource",
    "ResolveEnvs",
    "WatchPipeline",
    "StreamLogs",
]
