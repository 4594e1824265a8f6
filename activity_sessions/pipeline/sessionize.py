"""Gap-based session segmentation over one user's ordered activities.

A session stays open while the next activity starts within ``gap_seconds``
of the current activity's completion. The last activity always closes the
open session.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from activity_sessions.constants import DEFAULT_SESSION_GAP_SECONDS
from activity_sessions.models import Activity, ActivityId, Session, seconds_between


def segment_user_activities(
    activities: Sequence[Activity],
    gap_seconds: float = DEFAULT_SESSION_GAP_SECONDS,
) -> list[Session]:
    """Split a user's activities (sorted by ``first_seen_at``) into sessions.

    Args:
        activities: One user's activities, ascending by start.
        gap_seconds: Largest gap that keeps two activities in one session.

    Returns:
        Chronological sessions. Empty if *activities* is empty.
    """
    sessions: list[Session] = []
    open_ids: list[ActivityId] = []
    open_duration = 0.0
    open_started_at: datetime | None = None
    last_index = len(activities) - 1

    for index, activity in enumerate(activities):
        if not open_ids:
            open_started_at = activity.first_seen_at
        open_ids.append(activity.id)
        open_duration += activity.elapsed_seconds

        if index < last_index:
            boundary = activities[index + 1].first_seen_at
        else:
            boundary = activity.answered_at

        if index == last_index or seconds_between(activity.answered_at, boundary) > gap_seconds:
            sessions.append(
                Session(
                    started_at=open_started_at,
                    ended_at=activity.answered_at,
                    activity_ids=tuple(open_ids),
                    duration_seconds=open_duration,
                )
            )
            open_ids = []
            open_duration = 0.0

    return sessions
