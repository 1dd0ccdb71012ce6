"""Status classification for deploy pipeline snapshots.

Each snapshot maps to exactly one tick outcome, and each status transition
maps to at most one spinner label.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from squid.sdk import DeployPipeline, DeployPipelineStatus, PipelineStatus, UnknownStatus

SUPPORT_CONTACT = "t.me/HydraDevs"

STATUS_LABELS = {
    DeployPipelineStatus.CREATED: "◷ Preparing your squid",
    DeployPipelineStatus.IMAGE_BUILDING: "◷ Building your squid",
    DeployPipelineStatus.IMAGE_PUSHING: "◷ Publishing your squid",
    DeployPipelineStatus.DEPLOYING: "◷ Deploying your squid",
    DeployPipelineStatus.OK: "Streaming logs from the squid",
}

BUILD_ERROR = "❌ An error occurred while building the squid"
PUBLISH_ERROR = "❌ An error occurred while publishing the squid"
DEPLOY_ERROR = "❌ An error occurred while deploying the squid"

STAGE_ERRORS = {
    DeployPipelineStatus.CREATED: BUILD_ERROR,
    DeployPipelineStatus.IMAGE_BUILDING: BUILD_ERROR,
    DeployPipelineStatus.IMAGE_PUSHING: PUBLISH_ERROR,
    DeployPipelineStatus.DEPLOYING: DEPLOY_ERROR,
}

UNEXPECTED_ERROR = (
    "❌ An unexpected error occurred. "
    "Please report to Discord https://discord.gg/KRvRcBdhEE or SquidDevs https://t.me/HydraDevs"
)


class TickOutcome(Enum):
    CONTINUE = "continue"
    FAIL = "fail"
    SUCCEED = "succeed"


@dataclass(frozen=True)
class Classification:
    """What a single snapshot means for the polling loop."""

    outcome: TickOutcome
    message: Optional[str] = None
    dump_debug: bool = False


def classify(pipeline: DeployPipeline) -> Classification:
    """Decide whether to keep polling, fail, or hand off to log streaming."""
    status = pipeline.status

    if isinstance(status, UnknownStatus):
        return Classification(TickOutcome.FAIL, UNEXPECTED_ERROR, dump_debug=True)

    if status is DeployPipelineStatus.OK:
        return Classification(TickOutcome.SUCCEED, dump_debug=True)

    if pipeline.is_error_occurred:
        return Classification(TickOutcome.FAIL, STAGE_ERRORS[status], dump_debug=True)

    return Classification(TickOutcome.CONTINUE)


def announce(status: PipelineStatus, transitioned: bool) -> Optional[str]:
    """Spinner label to start for ``status``, or None when nothing changes."""
    if not transitioned or isinstance(status, UnknownStatus):
        return None
    return STATUS_LABELS[status]


def build_debug_dump(squid_name: str, version_name: str, pipeline: DeployPipeline) -> str:
    """Diagnostic text for a pipeline: banner, identifiers, logs, comment.

    Empty log lines and a missing comment are dropped.
    """
    parts: Iterable[Optional[str]] = [
        "------",
        f"Please report to {SUPPORT_CONTACT}",
        f"Squid: {squid_name}",
        f"Version: {version_name}",
        f"Deploy: {pipeline.id}",
        *pipeline.logs,
        pipeline.comment,
    ]
    return "\n".join(part for part in parts if part)
