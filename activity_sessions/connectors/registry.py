from __future__ import annotations

from pathlib import Path

from activity_sessions.config import AppConfig
from activity_sessions.connectors.base import ActivitySource, SessionSink
from activity_sessions.connectors.file_drop import FileActivitySource, FileSessionSink
from activity_sessions.connectors.http import HttpActivitySource, HttpSessionSink


def _require_base_url(config: AppConfig) -> None:
    if not config.api.base_url:
        raise ValueError("api.base_url is not configured (set it or SESSIONS_API_URL)")


def build_source(config: AppConfig) -> ActivitySource:
    if config.io.input_path:
        return FileActivitySource(path=Path(config.io.input_path).expanduser())
    _require_base_url(config)
    return HttpActivitySource(
        url=config.api.activities_url,
        api_key=config.api.resolve_api_key(),
        timeout_seconds=config.api.timeout_seconds,
    )


def build_sink(config: AppConfig) -> SessionSink:
    if config.io.output_path:
        return FileSessionSink(path=Path(config.io.output_path).expanduser())
    _require_base_url(config)
    return HttpSessionSink(
        url=config.api.sessions_url,
        api_key=config.api.resolve_api_key(),
        timeout_seconds=config.api.timeout_seconds,
    )
