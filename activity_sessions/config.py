from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from activity_sessions.constants import (
    DEFAULT_ACTIVITIES_ENDPOINT,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_SESSION_GAP_SECONDS,
    DEFAULT_SESSIONS_ENDPOINT,
    ENV_API_KEY,
    ENV_API_URL,
)
from activity_sessions.utils.logging import resolve_log_level


@dataclass(slots=True)
class ApiConfig:
    base_url: str = ""
    activities_endpoint: str = DEFAULT_ACTIVITIES_ENDPOINT
    sessions_endpoint: str = DEFAULT_SESSIONS_ENDPOINT
    api_key_env: str = ENV_API_KEY
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @property
    def activities_url(self) -> str:
        return self.base_url.rstrip("/") + self.activities_endpoint

    @property
    def sessions_url(self) -> str:
        return self.base_url.rstrip("/") + self.sessions_endpoint

    def resolve_api_key(self) -> str:
        return os.environ.get(self.api_key_env, "").strip()


@dataclass(slots=True)
class SessionConfig:
    gap_seconds: float = DEFAULT_SESSION_GAP_SECONDS
    reject_reversed: bool = False


@dataclass(slots=True)
class LoggingConfig:
    level: str = field(default_factory=resolve_log_level)


@dataclass(slots=True)
class IOConfig:
    input_path: str = ""
    output_path: str = ""


@dataclass(slots=True)
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    sessions: SessionConfig = field(default_factory=SessionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    io: IOConfig = field(default_factory=IOConfig)

    @staticmethod
    def default() -> AppConfig:
        return _apply_env(AppConfig())


def _apply_env(cfg: AppConfig) -> AppConfig:
    load_dotenv()
    base_url = os.environ.get(ENV_API_URL, "").strip()
    if base_url:
        cfg.api.base_url = base_url
    return cfg


def _gap_seconds(raw: Any) -> float:
    value = float(raw)
    if value < 0:
        raise ValueError(f"sessions.gap_seconds must be non-negative, got {raw}")
    return value


def load_config(path: str | Path | None) -> AppConfig:
    if path is None:
        return AppConfig.default()

    config_path = Path(path)
    if not config_path.exists():
        return AppConfig.default()

    with config_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    api_raw = raw.get("api", {}) or {}
    sessions_raw = raw.get("sessions", {}) or {}
    logging_raw = raw.get("logging", {}) or {}
    io_raw = raw.get("io", {}) or {}

    cfg = AppConfig(
        api=ApiConfig(
            base_url=str(api_raw.get("base_url", "")),
            activities_endpoint=str(
                api_raw.get("activities_endpoint", DEFAULT_ACTIVITIES_ENDPOINT)
            ),
            sessions_endpoint=str(api_raw.get("sessions_endpoint", DEFAULT_SESSIONS_ENDPOINT)),
            api_key_env=str(api_raw.get("api_key_env", ENV_API_KEY)),
            timeout_seconds=float(api_raw.get("timeout_seconds", DEFAULT_HTTP_TIMEOUT_SECONDS)),
        ),
        sessions=SessionConfig(
            gap_seconds=_gap_seconds(sessions_raw.get("gap_seconds", DEFAULT_SESSION_GAP_SECONDS)),
            reject_reversed=bool(sessions_raw.get("reject_reversed", False)),
        ),
        logging=LoggingConfig(level=str(logging_raw.get("level") or resolve_log_level())),
        io=IOConfig(
            input_path=str(io_raw.get("input_path", "") or ""),
            output_path=str(io_raw.get("output_path", "") or ""),
        ),
    )
    return _apply_env(cfg)


def dump_default_config(path: str | Path) -> None:
    cfg = AppConfig()
    payload: dict[str, Any] = {
        "api": {
            "base_url": cfg.api.base_url,
            "activities_endpoint": cfg.api.activities_endpoint,
            "sessions_endpoint": cfg.api.sessions_endpoint,
            "api_key_env": cfg.api.api_key_env,
            "timeout_seconds": cfg.api.timeout_seconds,
        },
        "sessions": {
            "gap_seconds": cfg.sessions.gap_seconds,
            "reject_reversed": cfg.sessions.reject_reversed,
        },
        "logging": {"level": cfg.logging.level},
        "io": {
            "input_path": cfg.io.input_path,
            "output_path": cfg.io.output_path,
        },
    }
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(payload, fh, sort_keys=False)
