from __future__ import annotations

from typing import Iterator

import pytest

from line_engine.runtime import telemetry
from line_engine.runtime.telemetry import LogProfile


@pytest.fixture(autouse=True)
def reset_telemetry() -> Iterator[None]:
    yield
    telemetry.configure()


def test_profile_defaults_keep_console_quiet() -> None:
    profile = LogProfile.from_env({})

    assert profile.console is False
    assert profile.min_level == "WARNING"
    assert profile.log_file is None


def test_profile_reads_prefixed_environment() -> None:
    profile = LogProfile.from_env(
        {
            "LINE_ENGINE_LOG_LEVEL": "debug",
            "LINE_ENGINE_CONSOLE": "yes",
            "LINE_ENGINE_NO_COLOR": "1",
            "LINE_ENGINE_LOG_BUFFERED": "on",
            "LINE_ENGINE_LOG_BUFFER_SIZE": "512",
        }
    )

    assert profile.min_level == "debug"
    assert profile.console is True
    assert profile.colored is False
    assert profile.buffered is True
    assert profile.buffer_size == 512


def test_disable_console_wins_over_console() -> None:
    profile = LogProfile.from_env(
        {"LINE_ENGINE_CONSOLE": "1", "LINE_ENGINE_DISABLE_CONSOLE": "1"}
    )

    assert profile.console is False


def test_preset_log_file_follows_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINE_ENGINE_LOG_FILE", "custom.log")

    assert telemetry.preset_profile("production").log_file == "custom.log"
    assert telemetry.preset_profile("development").log_file is None


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="chatty")


def test_configure_accepts_one_source_only() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="development", profile=LogProfile())


def test_configure_resets_logger_cache() -> None:
    before = telemetry.get_logger("line_engine.tests")
    assert telemetry.get_logger("line_engine.tests") is before

    telemetry.configure(profile=LogProfile(min_level="ERROR"))

    assert telemetry.get_logger("line_engine.tests") is not before


def test_events_and_spans_run_without_error() -> None:
    telemetry.record_event("tests.ping", data={"value": 1})

    with telemetry.span("tests::block", component=True, metadata={"k": 1}) as handle:
        handle.add_metadata("extra", [1, 2])

    assert handle.metadata == {"k": "1", "extra": "[1, 2]"}


def test_span_reraises_failures() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("tests::fails", component="tests"):
            raise RuntimeError("boom")
