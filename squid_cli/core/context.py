"""Context object for managing state through the pipeline."""

from typing import Dict, Optional, Union

from squid.sdk import Squid
from .options import DeployOptions
from .poller import PollOutcome
from .reporter import NullReporter, Reporter
from .timer import Timer


class DeployContext:
    """Shared context for deploy command pipelines.

    This context is passed through all actions and accumulates state
    as the pipeline progresses.
    """

    def __init__(
        self,
        client: Optional[Squid],
        opts: DeployOptions,
        reporter: Union[Reporter, NullReporter],
        timer: Optional[Timer] = None,
    ):
        self.client = client
        self.opts = opts
        self.reporter = reporter
        self.timer = timer or Timer()

        # State accumulated during pipeline execution
        self.source_url: Optional[str] = None
        self.envs: Dict[str, str] = {}
        self.outcome: Optional[PollOutcome] = None
