"""Run event log backing ``--events-limit``."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from activity_sessions.models import utc_now


@dataclass(slots=True)
class RunEvent:
    topic: str
    ts: datetime
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class RunEventLog:
    events: list[RunEvent] = field(default_factory=list)

    def record(self, topic: str, **payload: Any) -> RunEvent:
        event = RunEvent(topic=topic, ts=utc_now(), payload=payload)
        self.events.append(event)
        return event

    def tail(self, limit: int) -> list[RunEvent]:
        if limit <= 0:
            return []
        return self.events[-limit:]
