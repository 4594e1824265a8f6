from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from activity_sessions.models import SessionsByUser


@dataclass(slots=True)
class RunFailure:
    """Why a run stopped before delivering sessions."""

    category: str
    message: str
    stage: str
    status: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class RunSummary:
    started_at: datetime
    ended_at: datetime
    source: str
    sink: str
    status: str
    activities_seen: int = 0
    users_seen: int = 0
    sessions_built: int = 0
    reversed_activities: int = 0
    submitted: bool = False
    dry_run: bool = False

    @property
    def duration_seconds(self) -> float:
        return max(0.0, (self.ended_at - self.started_at).total_seconds())

    def to_dict(self) -> dict[str, Any]:
        return {
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat(),
            "duration_seconds": self.duration_seconds,
            "source": self.source,
            "sink": self.sink,
            "status": self.status,
            "dry_run": self.dry_run,
            "submitted": self.submitted,
            "totals": {
                "activities": self.activities_seen,
                "users": self.users_seen,
                "sessions": self.sessions_built,
                "reversed_activities": self.reversed_activities,
            },
        }


@dataclass(slots=True)
class RunResult:
    """Outcome of one fetch -> compute -> submit run.

    ``sessions`` and ``payload`` are only set when every session was computed; a failed run
    never exposes a partial mapping.
    """

    summary: RunSummary
    sessions: SessionsByUser | None = None
    payload: dict[str, Any] | None = None
    failure: RunFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "summary": self.summary.to_dict(),
            "failure": self.failure.to_dict() if self.failure else None,
        }
