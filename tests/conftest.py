"""Pytest configuration and shared fixtures."""
import os
import tempfile
from typing import Callable, List, Optional, Sequence, Tuple

import pytest
from click.testing import CliRunner

from squid.sdk import DeployPipeline, parse_status


class RecordingReporter:
    """Reporter that records every call as an (event, text) tuple."""

    def __init__(self, events: Optional[list] = None):
        self.events = events if events is not None else []

    def action_start(self, text: str) -> None:
        self.events.append(("start", text))

    def action_stop(self, symbol: str = "✔️") -> None:
        self.events.append(("stop", symbol))

    def log(self, message: str) -> None:
        self.events.append(("log", message))

    def dim(self, message: str) -> None:
        self.events.append(("dim", message))

    def of(self, kind: str) -> List[str]:
        return [text for event, text in self.events if event == kind]


class FakeTimer:
    """Timer that never sleeps; optionally reports cancellation after N waits."""

    def __init__(self, cancel_after: Optional[int] = None):
        self.sleeps: List[float] = []
        self.cancel_after = cancel_after

    def sleep(self, seconds: float) -> bool:
        self.sleeps.append(seconds)
        return self.cancel_after is None or len(self.sleeps) < self.cancel_after

    def cancel(self) -> None:
        self.cancel_after = 0


class ScriptedSquid:
    """Deployment API double serving a fixed list of snapshots."""

    def __init__(self, snapshots: Sequence, log_lines: Sequence[str] = (), events: Optional[list] = None):
        self.snapshots = list(snapshots)
        self.log_lines = list(log_lines)
        self.events = events if events is not None else []
        self.fetches = 0
        self.stream_calls: List[Tuple[str, str, str]] = []

    def get_deploy_pipeline(self, squid_name: str, version_name: str):
        if self.fetches >= len(self.snapshots):
            raise AssertionError("polled after the script ended")
        snapshot = self.snapshots[self.fetches]
        self.fetches += 1
        self.events.append(("fetch", self.fetches))
        if isinstance(snapshot, Exception):
            raise snapshot
        return snapshot

    def stream_squid_logs(self, org_code, squid_name, version_name, on_line: Callable[[str], None]) -> None:
        self.stream_calls.append((org_code, squid_name, version_name))
        for line in self.log_lines:
            on_line(line)


def make_pipeline(status: str, error: bool = False, logs=("build step 1",), comment=None, id="deploy-42"):
    """Build a DeployPipeline snapshot from a raw status string."""
    return DeployPipeline(
        id=id,
        status=parse_status(status),
        is_error_occurred=error,
        logs=tuple(logs),
        comment=comment,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config(monkeypatch):
    """Create temporary config directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = os.path.join(temp_dir, ".squid")
        os.makedirs(config_dir, exist_ok=True)
        monkeypatch.setenv("HOME", temp_dir)
        monkeypatch.delenv("SQUID_API_URL", raising=False)
        monkeypatch.delenv("SQUID_API_KEY", raising=False)
        monkeypatch.delenv("SQUID_POLL_INTERVAL", raising=False)
        yield config_dir


@pytest.fixture(autouse=True)
def no_debug(monkeypatch):
    """Keep SQUID_DEBUG from leaking into tests."""
    monkeypatch.delenv("SQUID_DEBUG", raising=False)


@pytest.fixture
def events() -> list:
    """Shared, ordered event log for the API double and the reporter."""
    return []


@pytest.fixture
def reporter(events) -> RecordingReporter:
    return RecordingReporter(events)


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def make_timer() -> Callable[..., FakeTimer]:
    return FakeTimer


@pytest.fixture
def scripted_squid(events) -> Callable[..., ScriptedSquid]:
    """Factory for an API double sharing the event log."""
    def factory(snapshots, log_lines=()):
        return ScriptedSquid(snapshots, log_lines=log_lines, events=events)
    return factory


@pytest.fixture
def pipeline() -> Callable[..., DeployPipeline]:
    return make_pipeline
