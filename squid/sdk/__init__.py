"""Public SDK exports."""

from .client import Squid
from .config import Config
from .exceptions import (
    SquidAuthError,
    SquidError,
    SquidNotFoundError,
    SquidRateLimitError,
    SquidServerError,
)
from .models import (
    DeployPipeline,
    DeployPipelineStatus,
    PipelineStatus,
    UnknownStatus,
    parse_status,
)

__all__ = [
    "Squid",
    "Config",
    "DeployPipeline",
    "DeployPipelineStatus",
    "PipelineStatus",
    "UnknownStatus",
    "parse_status",
    "SquidError",
    "SquidAuthError",
    "SquidRateLimitError",
    "SquidServerError",
    "SquidNotFoundError",
]
