"""Deploy pipeline watching actions."""

from typing import Optional

from ..context import DeployContext
from ..poller import PipelinePoller, PollContext
from .base import BaseAction


class WatchPipeline(BaseAction):
    """Poll the deploy pipeline and stream logs once it is live."""

    def execute(self, ctx: DeployContext) -> Optional[bool]:
        opts = ctx.opts
        poller = PipelinePoller(
            ctx.client,
            reporter=ctx.reporter,
            timer=ctx.timer,
            interval=opts.interval,
            on_missing=opts.on_missing,
        )
        ctx.outcome = poller.run(
            PollContext(
                org_code=opts.org_code,
                squid_name=opts.squid_name,
                version_name=opts.version_name,
                deployment_url=opts.deployment_url,
                verbose=opts.verbose,
            )
        )
        return True


class StreamLogs(BaseAction):
    """Follow the squid's logs without waiting on a pipeline."""

    def execute(self, ctx: DeployContext) -> Optional[bool]:
        opts = ctx.opts
        ctx.client.stream_squid_logs(
            opts.org_code,
            opts.squid_name,
            opts.version_name,
            on_line=ctx.reporter.log,
        )
        return True
