from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from activity_sessions.constants import DEFAULT_SESSION_GAP_SECONDS, PAYLOAD_KEY_USER_SESSIONS
from activity_sessions.models import Activity, SessionsByUser, UserId
from activity_sessions.pipeline.group import group_by_user
from activity_sessions.pipeline.normalize import check_reversed, normalize_activities
from activity_sessions.pipeline.sessionize import segment_user_activities


def build_sessions_by_user(
    groups: Mapping[UserId, Sequence[Activity]],
    gap_seconds: float = DEFAULT_SESSION_GAP_SECONDS,
) -> SessionsByUser:
    return {
        user_id: segment_user_activities(activities, gap_seconds)
        for user_id, activities in groups.items()
    }


def compute_sessions(
    records: Iterable[Mapping[str, Any]],
    gap_seconds: float = DEFAULT_SESSION_GAP_SECONDS,
    *,
    reject_reversed: bool = False,
) -> SessionsByUser:
    """Turn raw activity records into sessions keyed by user id.

    Raises :class:`~activity_sessions.errors.DataError` on the first malformed
    record; nothing is returned for a partially valid batch.
    """
    if gap_seconds < 0:
        raise ValueError(f"gap_seconds must be non-negative, got {gap_seconds}")
    activities = normalize_activities(records)
    check_reversed(activities, reject=reject_reversed)
    return build_sessions_by_user(group_by_user(activities), gap_seconds)


def to_payload(sessions_by_user: SessionsByUser) -> dict[str, Any]:
    return {
        PAYLOAD_KEY_USER_SESSIONS: {
            user_id: [session.to_dict() for session in sessions]
            for user_id, sessions in sessions_by_user.items()
        }
    }
