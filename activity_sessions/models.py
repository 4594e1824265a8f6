from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

ActivityId = str | int
# JSON object keys are strings, so user ids are normalized to str on parse.
UserId = str


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_ts(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with a ``Z`` suffix."""
    ts = value.astimezone(UTC)
    if not ts.microsecond:
        timespec = "seconds"
    elif ts.microsecond % 1000:
        timespec = "microseconds"
    else:
        timespec = "milliseconds"
    return ts.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def seconds_between(first: datetime, second: datetime) -> float:
    return abs((second - first).total_seconds())


def _wire_number(value: float) -> int | float:
    if float(value).is_integer():
        return int(value)
    return value


@dataclass(frozen=True, slots=True)
class Activity:
    id: ActivityId
    user_id: UserId
    first_seen_at: datetime
    answered_at: datetime

    @property
    def elapsed_seconds(self) -> float:
        return seconds_between(self.first_seen_at, self.answered_at)

    @property
    def is_reversed(self) -> bool:
        return self.answered_at < self.first_seen_at


@dataclass(frozen=True, slots=True)
class Session:
    started_at: datetime
    ended_at: datetime
    activity_ids: tuple[ActivityId, ...] = field(default_factory=tuple)
    duration_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "started_at": format_ts(self.started_at),
            "ended_at": format_ts(self.ended_at),
            "activity_ids": list(self.activity_ids),
            "duration_seconds": _wire_number(self.duration_seconds),
        }


SessionsByUser = dict[UserId, list[Session]]
