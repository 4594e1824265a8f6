from __future__ import annotations

import logging

import pytest

from activity_sessions.internal.events import RunEventLog
from activity_sessions.utils.logging import (
    debug_event,
    get_logger,
    resolve_log_level,
    setup_logging,
)


def test_resolve_log_level_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("SESSIONS_LOG_LEVEL", "debug")
    assert resolve_log_level() == "DEBUG"
    monkeypatch.delenv("SESSIONS_LOG_LEVEL")
    assert resolve_log_level("WARNING") == "WARNING"


def test_debug_event_formats_fields(caplog) -> None:
    logger = get_logger("activity_sessions.test")
    with caplog.at_level(logging.DEBUG, logger="activity_sessions.test"):
        debug_event(logger, "sessions_computed", users=2, gap=300.0, skipped=None)

    assert "event=sessions_computed users=2 gap=300.0000" in caplog.text
    assert "skipped" not in caplog.text


def test_run_event_log_tail() -> None:
    log = RunEventLog()
    log.record("run.started", source="stub")
    log.record("run.completed")

    assert [event.topic for event in log.tail(1)] == ["run.completed"]
    assert log.tail(0) == []
    assert log.tail(10)[0].payload == {"source": "stub"}


@pytest.mark.parametrize("level", ["LOUD", "verbose"])
def test_setup_logging_rejects_unknown_levels(level: str) -> None:
    with pytest.raises(ValueError):
        setup_logging(level)
