"""Logging setup for the sessions runner."""

from __future__ import annotations

import logging
import os
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from activity_sessions.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL


def resolve_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    raw = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    return raw or default


def setup_logging(level: str | None = None) -> None:
    name = (level or resolve_log_level()).strip().upper()
    target = logging.getLevelName(name)
    if not isinstance(target, int):
        raise ValueError(f"Unknown log level: {level}")

    # stdout is reserved for summaries, including --json-summary.
    handler = RichHandler(
        console=Console(stderr=True),
        level=target,
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(level=target, format="%(message)s", handlers=[handler], force=True)
    logging.getLogger("activity_sessions").setLevel(target)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def debug_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    """Log ``event=<name> key=value ...`` at DEBUG, skipping ``None`` fields."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    parts = [f"event={event}"]
    for key, value in fields.items():
        if value is None:
            continue
        rendered = f"{value:.4f}" if isinstance(value, float) else str(value)
        parts.append(f"{key}={rendered}")
    logger.debug(" ".join(parts))
