"""Terminal summaries for sessions runs."""

from __future__ import annotations

import json
import os

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from activity_sessions.api_objects import RunResult
from activity_sessions.constants import STATUS_DRY_RUN, STATUS_FAILED, STATUS_OK
from activity_sessions.internal.events import RunEvent
from activity_sessions.models import SessionsByUser, format_ts

BANNER = "activity-sessions :: gap-based user sessionization"


def _status_style(status: str) -> str:
    if status == STATUS_FAILED:
        return "bold red"
    if status == STATUS_OK:
        return "bold green"
    if status == STATUS_DRY_RUN:
        return "yellow"
    return "dim"


def print_banner(console: Console | None = None) -> None:
    if os.getenv("SESSIONS_NO_BANNER", "").strip().lower() in {"1", "true", "yes"}:
        return
    (console or Console()).print(f"[bold cyan]{BANNER}[/bold cyan]")


def print_run_summary(result: RunResult, console: Console | None = None) -> None:
    console = console or Console()
    summary = result.summary
    style = _status_style(summary.status)
    header = (
        f"status=[{style}]{summary.status}[/{style}] | "
        f"source={summary.source} | sink={summary.sink} | "
        f"activities={summary.activities_seen} | users={summary.users_seen} | "
        f"sessions={summary.sessions_built} | submitted={summary.submitted} | "
        f"duration={summary.duration_seconds:.2f}s"
    )
    console.print(Panel(header, title="Sessions Run", border_style="cyan"))

    if result.failure is not None:
        failure = result.failure
        table = Table(show_header=True, header_style="bold red")
        table.add_column("Stage")
        table.add_column("Category")
        table.add_column("Status", justify="right")
        table.add_column("Message", overflow="fold")
        table.add_row(
            failure.stage,
            failure.category,
            str(failure.status) if failure.status is not None else "-",
            failure.message,
        )
        console.print(table)


def print_run_summary_json(result: RunResult) -> None:
    print(json.dumps(result.to_dict(), ensure_ascii=True))


def print_sessions(sessions_by_user: SessionsByUser, console: Console | None = None) -> None:
    console = console or Console()
    table = Table(title="User Sessions", show_header=True, header_style="bold cyan")
    table.add_column("User", style="bold")
    table.add_column("Started")
    table.add_column("Ended")
    table.add_column("Activities", overflow="fold")
    table.add_column("Duration (s)", justify="right")

    for user_id, sessions in sessions_by_user.items():
        for session in sessions:
            table.add_row(
                str(user_id),
                format_ts(session.started_at),
                format_ts(session.ended_at),
                ", ".join(str(item) for item in session.activity_ids),
                f"{session.duration_seconds:g}",
            )
    console.print(table)


def print_run_events(events: list[RunEvent], console: Console | None = None) -> None:
    if not events:
        return

    console = console or Console()
    table = Table(title="Recent Run Events", show_header=True, header_style="bold cyan")
    table.add_column("Time")
    table.add_column("Topic")
    table.add_column("Payload", overflow="fold")
    for event in events:
        table.add_row(
            event.ts.isoformat(timespec="seconds"),
            event.topic,
            json.dumps(event.payload, ensure_ascii=True, sort_keys=True, default=str),
        )
    console.print(table)
