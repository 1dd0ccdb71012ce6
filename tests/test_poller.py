"""Tests for the deploy pipeline poller."""
from unittest.mock import MagicMock

import pytest
import requests

from squid.sdk import SquidServerError
from squid_cli.core.classify import (
    BUILD_ERROR,
    DEPLOY_ERROR,
    PUBLISH_ERROR,
    UNEXPECTED_ERROR,
)
from squid_cli.core.poller import MissingPolicy, PipelinePoller, PollContext, PollOutcome
from squid_cli.exceptions import PipelineFatalError, PipelineNotFoundError

URL = "https://acme.squids.live/my-squid/v/v1/graphql"


def make_context(verbose: bool = True) -> PollContext:
    return PollContext(
        org_code="acme",
        squid_name="my-squid",
        version_name="v1",
        deployment_url=URL,
        verbose=verbose,
    )


def make_poller(client, reporter, timer, **kwargs) -> PipelinePoller:
    return PipelinePoller(client, reporter=reporter, timer=timer, interval=3.0, **kwargs)


def test_forward_progression_announces_each_status_once(scripted_squid, reporter, timer, pipeline):
    """
    Test the happy path through every status.
    Expected: one spinner per status, logs streamed once, STREAMED outcome.
    """
    # Arrange
    client = scripted_squid(
        [pipeline(s) for s in ("CREATED", "IMAGE_BUILDING", "IMAGE_PUSHING", "DEPLOYING", "OK")],
        log_lines=["squid started", "processing block 1"],
    )
    poller = make_poller(client, reporter, timer)

    # Act
    outcome = poller.run(make_context())

    # Assert
    assert outcome is PollOutcome.STREAMED
    assert reporter.of("start") == [
        "◷ Preparing your squid",
        "◷ Building your squid",
        "◷ Publishing your squid",
        "◷ Deploying your squid",
        "Streaming logs from the squid",
    ]
    assert client.stream_calls == [("acme", "my-squid", "v1")]
    assert reporter.of("log")[-2:] == ["squid started", "processing block 1"]
    assert timer.sleeps == [3.0] * 4


def test_unchanged_status_does_not_restart_spinner(scripted_squid, reporter, timer, pipeline, events):
    """
    Test CREATED, CREATED, IMAGE_BUILDING, OK.
    Expected: spinners start on ticks 1 and 3, nothing on tick 2, streaming on tick 4.
    """
    # Arrange
    client = scripted_squid(
        [pipeline("CREATED"), pipeline("CREATED"), pipeline("IMAGE_BUILDING"), pipeline("OK", logs=())],
        log_lines=["line"],
    )
    poller = make_poller(client, reporter, timer)

    # Act
    poller.run(make_context())

    # Assert
    starts_by_tick = {}
    tick = 0
    for event, value in events:
        if event == "fetch":
            tick = value
        elif event == "start":
            starts_by_tick.setdefault(tick, []).append(value)
    assert starts_by_tick == {
        1: ["◷ Preparing your squid"],
        3: ["◷ Building your squid"],
        4: ["Streaming logs from the squid"],
    }
    assert client.fetches == 4


def test_transition_stops_previous_spinner(scripted_squid, reporter, timer, pipeline, events):
    """
    Test that a status change stops the running spinner before starting the next.
    Expected: stop event precedes the second start.
    """
    # Arrange
    client = scripted_squid([pipeline("CREATED"), pipeline("IMAGE_BUILDING"), pipeline("OK")])
    poller = make_poller(client, reporter, timer)

    # Act
    poller.run(make_context(verbose=False))

    # Assert
    spinner_events = [e for e in events if e[0] in ("start", "stop")]
    assert spinner_events == [
        ("start", "◷ Preparing your squid"),
        ("stop", "✔️"),
        ("start", "◷ Building your squid"),
        ("stop", "✔️"),
        ("start", "Streaming logs from the squid"),
        ("stop", "✔️"),
    ]


@pytest.mark.parametrize(
    "status, message",
    [
        ("CREATED", BUILD_ERROR),
        ("IMAGE_BUILDING", BUILD_ERROR),
        ("IMAGE_PUSHING", PUBLISH_ERROR),
        ("DEPLOYING", DEPLOY_ERROR),
    ],
)
def test_error_flag_fails_with_stage_message(scripted_squid, reporter, timer, pipeline, status, message):
    """
    Test error flag on each non-OK status.
    Expected: PipelineFatalError with the stage message, no further polling.
    """
    # Arrange
    client = scripted_squid([pipeline(status, error=True), pipeline("OK")])
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(PipelineFatalError) as exc_info:
        poller.run(make_context())

    # Assert
    assert exc_info.value.message == message
    assert client.fetches == 1
    assert client.stream_calls == []
    assert timer.sleeps == []


def test_error_after_progress_stops_polling(scripted_squid, reporter, timer, pipeline):
    """
    Test failure during publishing after a clean build.
    Expected: fatal error on tick 3, spinner closed with failure symbol.
    """
    # Arrange
    client = scripted_squid([
        pipeline("CREATED"),
        pipeline("IMAGE_BUILDING"),
        pipeline("IMAGE_PUSHING", error=True),
        pipeline("DEPLOYING"),
    ])
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(PipelineFatalError, match="publishing"):
        poller.run(make_context())

    # Assert
    assert client.fetches == 3
    assert reporter.of("stop")[-1] == "✖"


def test_unknown_status_is_fatal(scripted_squid, reporter, timer, pipeline):
    """
    Test an unrecognized status value.
    Expected: generic fatal error with support contact, no further polling.
    """
    # Arrange
    client = scripted_squid([pipeline("CREATED"), pipeline("ROLLING_BACK"), pipeline("OK")])
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(PipelineFatalError) as exc_info:
        poller.run(make_context())

    # Assert
    assert exc_info.value.message == UNEXPECTED_ERROR
    assert "discord.gg" in exc_info.value.message
    assert client.fetches == 2
    assert reporter.of("start") == ["◷ Preparing your squid"]


def test_debug_dump_printed_once_on_failure(scripted_squid, reporter, timer, pipeline):
    """
    Test debug output on a failing tick in verbose mode.
    Expected: exactly one dump containing identifiers and logs; error carries it too.
    """
    # Arrange
    client = scripted_squid([
        pipeline("IMAGE_BUILDING", error=True, logs=("step 1", "", None, "npm ERR!"), comment="OOM"),
    ])
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(PipelineFatalError) as exc_info:
        poller.run(make_context(verbose=True))

    # Assert
    dumps = reporter.of("dim")
    assert len(dumps) == 1
    dump = dumps[0]
    assert "Squid: my-squid" in dump
    assert "Version: v1" in dump
    assert "Deploy: deploy-42" in dump
    assert dump.endswith("step 1\nnpm ERR!\nOOM")
    assert "\n\n" not in dump
    assert exc_info.value.debug == dump


def test_debug_dump_on_success_is_informational(scripted_squid, reporter, timer, pipeline, events):
    """
    Test debug output when the pipeline goes live.
    Expected: dump printed before the URL notice, no error raised.
    """
    # Arrange
    client = scripted_squid([pipeline("OK", logs=("deployed",))])
    poller = make_poller(client, reporter, timer)

    # Act
    outcome = poller.run(make_context())

    # Assert
    assert outcome is PollOutcome.STREAMED
    kinds = [e[0] for e in events if e[0] in ("dim", "log")]
    assert kinds[:2] == ["dim", "log"]
    assert URL in reporter.of("log")[0]


@pytest.mark.parametrize(
    "snapshots",
    [
        [("OK", False)],
        [("DEPLOYING", True)],
        [("SOMETHING_NEW", False)],
    ],
)
def test_quiet_mode_never_dumps(scripted_squid, reporter, timer, pipeline, snapshots):
    """
    Test verbose=False on every terminal path.
    Expected: no dim output and no debug text on the error.
    """
    # Arrange
    client = scripted_squid([pipeline(status, error=error) for status, error in snapshots])
    poller = make_poller(client, reporter, timer)

    # Act
    try:
        poller.run(make_context(verbose=False))
    except PipelineFatalError as e:
        assert e.debug is None

    # Assert
    assert reporter.of("dim") == []


def test_missing_pipeline_ends_quietly(scripted_squid, reporter, timer, pipeline):
    """
    Test the pipeline disappearing mid-watch with the default policy.
    Expected: MISSING outcome, no error, no streaming.
    """
    # Arrange
    client = scripted_squid([pipeline("CREATED"), None])
    poller = make_poller(client, reporter, timer)

    # Act
    outcome = poller.run(make_context())

    # Assert
    assert outcome is PollOutcome.MISSING
    assert client.stream_calls == []


def test_missing_pipeline_can_fail(scripted_squid, reporter, timer):
    """
    Test MissingPolicy.FAIL.
    Expected: PipelineNotFoundError naming the squid version.
    """
    # Arrange
    client = scripted_squid([None])
    poller = make_poller(client, reporter, timer, on_missing=MissingPolicy.FAIL)

    # Act & Assert
    with pytest.raises(PipelineNotFoundError, match="my-squid@v1"):
        poller.run(make_context())


@pytest.mark.parametrize("error", [SquidServerError("Server error: 502"), requests.ConnectionError("reset")])
def test_fetch_failure_is_fatal(scripted_squid, reporter, timer, pipeline, error):
    """
    Test a fetch that still fails after SDK retries.
    Expected: PipelineFatalError wrapping the cause, polling stops.
    """
    # Arrange
    client = scripted_squid([pipeline("CREATED"), error, pipeline("OK")])
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(PipelineFatalError, match="Unable to fetch") as exc_info:
        poller.run(make_context())

    # Assert
    assert exc_info.value.__cause__ is error
    assert client.fetches == 2


def test_cancelled_timer_stops_loop(scripted_squid, reporter, pipeline, make_timer):
    """
    Test cancellation while waiting between ticks.
    Expected: CANCELLED outcome after the first wait, no second fetch.
    """
    # Arrange
    client = scripted_squid([pipeline("CREATED"), pipeline("OK")])
    poller = make_poller(client, reporter, make_timer(cancel_after=1))

    # Act
    outcome = poller.run(make_context())

    # Assert
    assert outcome is PollOutcome.CANCELLED
    assert client.fetches == 1
    assert reporter.of("stop") == ["✖"]


def test_stream_failure_is_fatal(reporter, timer, pipeline):
    """
    Test the log stream breaking.
    Expected: PipelineFatalError after a single stream attempt.
    """
    # Arrange
    client = MagicMock()
    client.get_deploy_pipeline.return_value = pipeline("OK")
    client.stream_squid_logs.side_effect = requests.exceptions.ChunkedEncodingError("connection closed")
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(PipelineFatalError, match="Log streaming was interrupted"):
        poller.run(make_context())

    # Assert
    assert client.stream_squid_logs.call_count == 1
    assert client.get_deploy_pipeline.call_count == 1


def test_interrupt_while_polling_closes_spinner(reporter, timer, pipeline):
    """
    Test Ctrl-C while fetching the next snapshot.
    Expected: KeyboardInterrupt propagates and the spinner is closed as failed.
    """
    # Arrange
    client = MagicMock()
    client.get_deploy_pipeline.side_effect = [pipeline("CREATED"), KeyboardInterrupt()]
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(KeyboardInterrupt):
        poller.run(make_context())

    # Assert
    assert reporter.of("start") == ["◷ Preparing your squid"]
    assert reporter.of("stop") == ["✖"]


def test_interrupt_while_streaming_closes_spinner(reporter, timer, pipeline):
    """
    Test Ctrl-C during log streaming.
    Expected: KeyboardInterrupt propagates and the streaming spinner is closed as failed.
    """
    # Arrange
    client = MagicMock()
    client.get_deploy_pipeline.return_value = pipeline("OK")
    client.stream_squid_logs.side_effect = KeyboardInterrupt()
    poller = make_poller(client, reporter, timer)

    # Act
    with pytest.raises(KeyboardInterrupt):
        poller.run(make_context(verbose=False))

    # Assert
    assert reporter.of("start") == ["Streaming logs from the squid"]
    assert reporter.of("stop") == ["✖"]


@pytest.mark.parametrize("status", ["CREATED", "ROLLING_BACK"])
def test_debug_line_shows_raw_status(scripted_squid, reporter, timer, pipeline, monkeypatch, status):
    """
    Test the SQUID_DEBUG tick line.
    Expected: the raw status value, for known and unknown statuses alike.
    """
    # Arrange
    monkeypatch.setenv("SQUID_DEBUG", "1")
    client = scripted_squid([pipeline(status), pipeline("OK")])
    poller = make_poller(client, reporter, timer)

    # Act
    try:
        poller.run(make_context(verbose=False))
    except PipelineFatalError:
        pass

    # Assert
    assert reporter.of("dim")[0] == f"[DEBUG] tick=1 status={status}"
