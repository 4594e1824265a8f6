from __future__ import annotations

from collections.abc import Iterable

from activity_sessions.models import Activity, UserId


def group_by_user(activities: Iterable[Activity]) -> dict[UserId, list[Activity]]:
    """Partition activities per user, keeping their relative order.

    Users appear in the order of their first activity.
    """
    grouped: dict[UserId, list[Activity]] = {}
    for activity in activities:
        grouped.setdefault(activity.user_id, []).append(activity)
    return grouped
