from __future__ import annotations

from typing import Any

import pytest


def make_record(
    activity_id: Any,
    user_id: Any,
    first_seen_at: str,
    answered_at: str,
) -> dict[str, Any]:
    return {
        "id": activity_id,
        "user_id": user_id,
        "first_seen_at": first_seen_at,
        "answered_at": answered_at,
    }


@pytest.fixture
def merge_records() -> list[dict[str, Any]]:
    return [
        make_record(1, "u1", "2023-01-01T00:00:00Z", "2023-01-01T00:00:10Z"),
        make_record(2, "u1", "2023-01-01T00:00:20Z", "2023-01-01T00:00:30Z"),
    ]


@pytest.fixture
def mixed_records() -> list[dict[str, Any]]:
    # Deliberately shuffled; u1 has two sessions, u2 one.
    return [
        make_record("c", "u1", "2023-01-01T00:10:00Z", "2023-01-01T00:10:05Z"),
        make_record("x", "u2", "2023-01-01T00:01:00Z", "2023-01-01T00:02:00Z"),
        make_record("a", "u1", "2023-01-01T00:00:00Z", "2023-01-01T00:00:10Z"),
        make_record("b", "u1", "2023-01-01T00:04:00Z", "2023-01-01T00:04:30Z"),
        make_record("y", "u2", "2023-01-01T00:06:00Z", "2023-01-01T00:06:30Z"),
    ]
