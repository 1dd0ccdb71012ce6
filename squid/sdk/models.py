"""Data models returned by the deployment API."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class DeployPipelineStatus(str, Enum):
    """Statuses a deploy pipeline moves through, in expected order."""

    CREATED = "CREATED"
    IMAGE_BUILDING = "IMAGE_BUILDING"
    IMAGE_PUSHING = "IMAGE_PUSHING"
    DEPLOYING = "DEPLOYING"
    OK = "OK"


@dataclass(frozen=True)
class UnknownStatus:
    """A status value the client does not recognize."""

    value: str

    def __str__(self) -> str:
        return self.value


PipelineStatus = Union[DeployPipelineStatus, UnknownStatus]


def parse_status(raw: Optional[str]) -> PipelineStatus:
    """Map a raw API status string to a known status or ``UnknownStatus``."""
    try:
        return DeployPipelineStatus(raw)
    except ValueError:
        return UnknownStatus(value=str(raw))


@dataclass(frozen=True)
class DeployPipeline:
    """Point-in-time snapshot of a deploy pipeline."""

    id: str
    status: PipelineStatus
    is_error_occurred: bool = False
    logs: Tuple[str, ...] = ()
    comment: Optional[str] = None
