"""Deploy pipeline polling loop and its handoff to log streaming."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import requests

from squid.sdk import DeployPipeline, PipelineStatus, Squid, SquidError
from ..exceptions import PipelineFatalError, PipelineNotFoundError
from ..utils import is_debug
from .classify import TickOutcome, announce, build_debug_dump, classify
from .display import DisplayState
from .reporter import NullReporter, Reporter
from .timer import Timer

DEFAULT_INTERVAL = 3.0
TRANSITION_SYMBOL = "✔️"
FAILURE_SYMBOL = "✖"


class PollOutcome(Enum):
    """How a poll run ended when it did not fail."""

    STREAMED = "streamed"
    MISSING = "missing"
    CANCELLED = "cancelled"


class MissingPolicy(Enum):
    """What to do when the API stops reporting the pipeline."""

    IGNORE = "ignore"
    FAIL = "fail"


@dataclass(frozen=True)
class PollContext:
    """Caller-supplied parameters of one poll run."""

    org_code: str
    squid_name: str
    version_name: str
    deployment_url: str
    verbose: bool = True


@dataclass
class PollSession:
    """Mutable state of one poll run; discarded when ``run`` returns."""

    context: PollContext
    last_status: Optional[PipelineStatus] = None
    debug_printed: bool = False
    display: DisplayState = field(default_factory=DisplayState)
    ticks: int = 0


class PipelinePoller:
    """Polls a deploy pipeline until it fails, disappears, or goes live.

    Ticks run strictly one after another: fetch a snapshot, classify it,
    then either stop or sleep ``interval`` seconds. Reaching ``OK`` hands
    over to log streaming, which is the last thing a run does.
    """

    def __init__(
        self,
        client: Squid,
        reporter: Union[Reporter, NullReporter, None] = None,
        timer: Optional[Timer] = None,
        interval: float = DEFAULT_INTERVAL,
        on_missing: MissingPolicy = MissingPolicy.IGNORE,
    ):
        self.client = client
        self.reporter = reporter or NullReporter()
        self.timer = timer or Timer()
        self.interval = interval
        self.on_missing = on_missing

    def run(self, context: PollContext) -> PollOutcome:
        """Watch the pipeline described by ``context``.

        Returns:
            STREAMED once logs were streamed to the end, MISSING when the
            pipeline vanished (and the policy tolerates it), CANCELLED when
            the timer was cancelled between ticks.

        Raises:
            PipelineFatalError: On a failed stage, an unrecognized status, a
                fetch that kept failing, or (with ``MissingPolicy.FAIL``) a
                vanished pipeline.
        """
        session = PollSession(context=context)
        symbol = FAILURE_SYMBOL
        try:
            while True:
                outcome = self._tick(session)
                if outcome is not None:
                    symbol = TRANSITION_SYMBOL
                    return outcome
                if not self.timer.sleep(self.interval):
                    return PollOutcome.CANCELLED
        finally:
            # Every exit path, KeyboardInterrupt included, closes the spinner
            self._stop_spinner(session, symbol)

    def _tick(self, session: PollSession) -> Optional[PollOutcome]:
        """Process one snapshot. None means keep polling."""
        ctx = session.context
        session.debug_printed = False

        pipeline = self._fetch(ctx)
        session.ticks += 1
        if pipeline is None:
            return self._missing(ctx)

        if is_debug():
            self.reporter.dim(f"[DEBUG] tick={session.ticks} status={pipeline.status.value}")

        transitioned = self._observe(session, pipeline.status)
        result = classify(pipeline)

        if result.outcome is TickOutcome.SUCCEED:
            return self._stream(session, pipeline, transitioned, result.dump_debug)

        self._announce(session, pipeline.status, transitioned)

        if result.outcome is TickOutcome.FAIL:
            if result.dump_debug:
                self._print_debug(session, pipeline)
            debug = build_debug_dump(ctx.squid_name, ctx.version_name, pipeline) if ctx.verbose else None
            raise PipelineFatalError(result.message, debug=debug)

        return None

    def _fetch(self, ctx: PollContext) -> Optional[DeployPipeline]:
        try:
            return self.client.get_deploy_pipeline(ctx.squid_name, ctx.version_name)
        except (SquidError, requests.RequestException) as e:
            raise PipelineFatalError(f"❌ Unable to fetch the deploy pipeline: {e}") from e

    def _missing(self, ctx: PollContext) -> PollOutcome:
        if self.on_missing is MissingPolicy.FAIL:
            raise PipelineNotFoundError(
                f"❌ Deploy pipeline for {ctx.squid_name}@{ctx.version_name} was not found"
            )
        return PollOutcome.MISSING

    def _observe(self, session: PollSession, status: PipelineStatus) -> bool:
        """Record ``status``; on change, close the previous spinner."""
        if status == session.last_status:
            return False
        session.last_status = status
        self._stop_spinner(session, TRANSITION_SYMBOL)
        return True

    def _announce(self, session: PollSession, status: PipelineStatus, transitioned: bool) -> None:
        label = announce(status, transitioned)
        if label is None:
            return
        session.display = session.display.start(label)
        self.reporter.action_start(label)

    def _stop_spinner(self, session: PollSession, symbol: str) -> None:
        if not session.display.active:
            return
        session.display = session.display.stop()
        self.reporter.action_stop(symbol)

    def _print_debug(self, session: PollSession, pipeline: DeployPipeline) -> None:
        ctx = session.context
        if not ctx.verbose or session.debug_printed:
            return
        self.reporter.dim(build_debug_dump(ctx.squid_name, ctx.version_name, pipeline))
        session.debug_printed = True

    def _stream(
        self, session: PollSession, pipeline: DeployPipeline, transitioned: bool, dump_debug: bool
    ) -> PollOutcome:
        """Terminal transition: announce the URL and follow the logs."""
        ctx = session.context
        if dump_debug:
            self._print_debug(session, pipeline)
        self.reporter.log(f"Squid is running up. Your squid will be shortly available at {ctx.deployment_url}")
        self._announce(session, pipeline.status, transitioned)

        try:
            self.client.stream_squid_logs(
                ctx.org_code,
                ctx.squid_name,
                ctx.version_name,
                on_line=self.reporter.log,
            )
        except (SquidError, requests.RequestException) as e:
            raise PipelineFatalError(f"❌ Log streaming was interrupted: {e}") from e

        return PollOutcome.STREAMED
