"""Parse raw activity records into typed, chronologically ordered activities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from activity_sessions.errors import DataError
from activity_sessions.models import Activity, ActivityId
from activity_sessions.utils.logging import get_logger

REQUIRED_FIELDS = ("id", "user_id", "first_seen_at", "answered_at")

logger = get_logger(__name__)


def parse_timestamp(value: Any, *, field: str, index: int | None = None) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise DataError(
            f"{field} must be an ISO-8601 string (record {index})",
            field=field,
            index=index,
            value=value,
        )
    normalized = value.strip().replace("Z", "+00:00")
    try:
        ts = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise DataError(
            f"Unparseable {field} {value!r} (record {index})",
            field=field,
            index=index,
            value=value,
        ) from exc
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def _parse_id(value: Any, *, field: str, index: int | None) -> ActivityId:
    # bool is an int subclass.
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise DataError(
            f"{field} must be a string or integer (record {index})",
            field=field,
            index=index,
            value=value,
        )
    return value


def parse_activity(raw: Mapping[str, Any], index: int | None = None) -> Activity:
    if not isinstance(raw, Mapping):
        raise DataError(f"Activity record {index} is not an object", index=index, value=raw)

    for name in REQUIRED_FIELDS:
        if name not in raw or raw[name] is None:
            raise DataError(f"Activity record {index} is missing {name}", field=name, index=index)

    return Activity(
        id=_parse_id(raw["id"], field="id", index=index),
        user_id=str(_parse_id(raw["user_id"], field="user_id", index=index)),
        first_seen_at=parse_timestamp(raw["first_seen_at"], field="first_seen_at", index=index),
        answered_at=parse_timestamp(raw["answered_at"], field="answered_at", index=index),
    )


def parse_activities(records: Iterable[Mapping[str, Any]]) -> list[Activity]:
    return [parse_activity(raw, index) for index, raw in enumerate(records)]


def sort_ascending_by_start(activities: Sequence[Activity]) -> list[Activity]:
    """Return a new list ordered by ``first_seen_at``; ties keep input order."""
    return sorted(activities, key=lambda item: item.first_seen_at)


def check_reversed(activities: Sequence[Activity], *, reject: bool = False) -> int:
    """Report activities whose completion precedes their start.

    Their durations still count as an absolute difference. With ``reject`` the
    first such activity raises :class:`DataError` instead of a warning.
    """
    reversed_count = 0
    for activity in activities:
        if not activity.is_reversed:
            continue
        if reject:
            raise DataError(
                f"Activity {activity.id!r} answered_at precedes first_seen_at",
                field="answered_at",
                value=activity.id,
            )
        reversed_count += 1
        logger.warning(
            "Activity %r of user %r has answered_at before first_seen_at",
            activity.id,
            activity.user_id,
        )
    return reversed_count


def normalize_activities(records: Iterable[Mapping[str, Any]]) -> list[Activity]:
    return sort_ascending_by_start(parse_activities(records))
