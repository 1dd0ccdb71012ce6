"""Options dataclasses for command configuration."""

from dataclasses import dataclass, field
from typing import List, Optional

from .poller import DEFAULT_INTERVAL, MissingPolicy


@dataclass
class DeployOptions:
    """Configuration options for the deploy-related commands."""

    # Target
    org_code: Optional[str] = None
    squid_name: Optional[str] = None
    version_name: Optional[str] = None
    deployment_url: Optional[str] = None

    # Polling behavior
    verbose: bool = True
    interval: float = DEFAULT_INTERVAL
    on_missing: MissingPolicy = MissingPolicy.IGNORE

    # Preflight inputs
    repo_path: str = "."
    env_flags: List[str] = field(default_factory=list)
    env_file: Optional[str] = None
