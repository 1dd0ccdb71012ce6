"""Squid SDK - thin client for the deployment API."""

from typing import Any, Callable, Dict, Optional

import requests
from dotenv import load_dotenv

from .config import Config
from .exceptions import (
    SquidAuthError,
    SquidError,
    SquidNotFoundError,
    SquidRateLimitError,
    SquidServerError,
)
from .models import DeployPipeline, parse_status
from .utils import join_url, with_retry

load_dotenv()


class Squid:
    """Client for deploy pipelines and squid logs."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config.load()
        self.headers = {"Authorization": f"token {self.config.api_key}"} if self.config.api_key else {}

    @with_retry()
    def _request(
        self,
        method: str,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        **kwargs,
    ) -> requests.Response:
        """Make API request with error handling."""
        url = join_url(self.config.base_url, endpoint)
        kwargs.setdefault("timeout", self.config.timeout)
        resp = requests.request(method, url, headers=headers or self.headers, **kwargs)

        if resp.ok:
            return resp

        # Map errors
        if resp.status_code == 401:
            raise SquidAuthError("Invalid API key")
        if resp.status_code == 404:
            raise SquidNotFoundError(f"Resource not found: {resp.text}")
        if resp.status_code == 429:
            raise SquidRateLimitError("Rate limit exceeded")
        if 500 <= resp.status_code < 600:
            raise SquidServerError(f"Server error: {resp.status_code}")
        raise SquidError(f"API error {resp.status_code}: {resp.text}")

    def _dict_to_deploy_pipeline(self, pipeline_dict: Dict[str, Any]) -> DeployPipeline:
        """Convert pipeline dict to DeployPipeline object."""
        return DeployPipeline(
            id=str(pipeline_dict.get("id", "")),
            status=parse_status(pipeline_dict.get("status")),
            is_error_occurred=bool(pipeline_dict.get("isErrorOccurred", False)),
            logs=tuple(pipeline_dict.get("logs") or ()),
            comment=pipeline_dict.get("comment"),
        )

    def get_deploy_pipeline(self, squid_name: str, version_name: str) -> Optional[DeployPipeline]:
        """Fetch the latest deploy pipeline of a squid version.

        Args:
            squid_name: Squid name.
            version_name: Version name.

        Returns:
            The pipeline snapshot, or ``None`` when the API does not know it.
        """
        try:
            resp = self._request("GET", f"/squids/{squid_name}/versions/{version_name}/deploy-pipeline")
        except SquidNotFoundError:
            return None

        if not resp.content:
            return None
        data = resp.json()
        if not data:
            return None
        return self._dict_to_deploy_pipeline(data)

    def stream_squid_logs(
        self,
        org_code: str,
        squid_name: str,
        version_name: str,
        on_line: Callable[[str], None],
    ) -> None:
        """Follow the squid's logs until the server closes the stream.

        Args:
            org_code: Organization code owning the squid.
            squid_name: Squid name.
            version_name: Version name.
            on_line: Called once per received log line, in order.
        """
        endpoint = f"/orgs/{org_code}/squids/{squid_name}/versions/{version_name}/logs/follow"
        # No read timeout: the stream stays open as long as the squid runs
        with self._request("GET", endpoint, stream=True, timeout=(self.config.timeout, None)) as resp:
            # Log lines are UTF-8 unless the server names another charset
            if "charset=" not in resp.headers.get("Content-Type", "").lower():
                resp.encoding = "utf-8"
            for line in resp.iter_lines(decode_unicode=True):
                if line:
                    on_line(line)
