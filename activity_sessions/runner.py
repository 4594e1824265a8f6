"""One-shot run: fetch activities, compute sessions, submit the payload."""

from __future__ import annotations

from activity_sessions.api_objects import RunFailure, RunResult, RunSummary
from activity_sessions.connectors.base import ActivitySource, SessionSink
from activity_sessions.constants import (
    DEFAULT_SESSION_GAP_SECONDS,
    STATUS_DRY_RUN,
    STATUS_FAILED,
    STATUS_OK,
)
from activity_sessions.errors import ApiError, SessionsError
from activity_sessions.internal.events import RunEvent, RunEventLog
from activity_sessions.models import utc_now
from activity_sessions.pipeline.aggregate import build_sessions_by_user, to_payload
from activity_sessions.pipeline.group import group_by_user
from activity_sessions.pipeline.normalize import check_reversed, normalize_activities
from activity_sessions.utils.logging import debug_event, get_logger


class SessionRunner:
    def __init__(
        self,
        source: ActivitySource,
        sink: SessionSink | None = None,
        *,
        gap_seconds: float = DEFAULT_SESSION_GAP_SECONDS,
        reject_reversed: bool = False,
        event_log: RunEventLog | None = None,
    ):
        if gap_seconds < 0:
            raise ValueError(f"gap_seconds must be non-negative, got {gap_seconds}")
        self.source = source
        self.sink = sink
        self.gap_seconds = gap_seconds
        self.reject_reversed = reject_reversed
        self.event_log = event_log or RunEventLog()
        self.logger = get_logger("activity_sessions.runner")

    def run(self, dry_run: bool = False) -> RunResult:
        dry_run = dry_run or self.sink is None
        summary = RunSummary(
            started_at=utc_now(),
            ended_at=utc_now(),
            source=self.source.source_name,
            sink=self.sink.sink_name if self.sink is not None else "-",
            status=STATUS_DRY_RUN if dry_run else STATUS_OK,
            dry_run=dry_run,
        )
        self.event_log.record(
            "run.started", source=summary.source, sink=summary.sink, dry_run=dry_run
        )
        self.logger.info("Starting sessions run (source=%s, sink=%s)", summary.source, summary.sink)

        stage = "fetch"
        try:
            self.event_log.record("source.fetch.started", source=summary.source)
            records = self.source.fetch()
            summary.activities_seen = len(records)
            self.event_log.record(
                "source.fetch.completed", source=summary.source, count=len(records)
            )

            stage = "compute"
            activities = normalize_activities(records)
            summary.reversed_activities = check_reversed(
                activities, reject=self.reject_reversed
            )
            groups = group_by_user(activities)
            sessions_by_user = build_sessions_by_user(groups, self.gap_seconds)
            payload = to_payload(sessions_by_user)
            summary.users_seen = len(sessions_by_user)
            summary.sessions_built = sum(len(items) for items in sessions_by_user.values())
            self.event_log.record(
                "pipeline.completed",
                users=summary.users_seen,
                sessions=summary.sessions_built,
            )
            debug_event(
                self.logger,
                "sessions_computed",
                activities=summary.activities_seen,
                users=summary.users_seen,
                sessions=summary.sessions_built,
                gap_seconds=float(self.gap_seconds),
            )

            if not dry_run:
                stage = "submit"
                self.event_log.record("sink.submit.started", sink=summary.sink)
                self.sink.submit(payload)
                summary.submitted = True
                self.event_log.record("sink.submit.completed", sink=summary.sink)
        except SessionsError as exc:
            return self._fail(summary, stage, exc)

        summary.ended_at = utc_now()
        self.event_log.record("run.completed", summary=summary.to_dict())
        self.logger.info(
            "Sessions run finished: activities=%s users=%s sessions=%s submitted=%s",
            summary.activities_seen,
            summary.users_seen,
            summary.sessions_built,
            summary.submitted,
        )
        return RunResult(summary=summary, sessions=sessions_by_user, payload=payload)

    def _fail(self, summary: RunSummary, stage: str, exc: SessionsError) -> RunResult:
        failure = RunFailure(
            category=exc.category,
            message=str(exc),
            stage=stage,
            status=exc.status if isinstance(exc, ApiError) else None,
        )
        summary.status = STATUS_FAILED
        summary.ended_at = utc_now()
        self.event_log.record("run.failed", **failure.to_dict())
        self.logger.error("Sessions run failed at %s: [%s] %s", stage, exc.category, exc)
        return RunResult(summary=summary, failure=failure)

    def recent_events(self, limit: int = 100) -> list[RunEvent]:
        return self.event_log.tail(limit)
