from __future__ import annotations

from datetime import UTC, datetime, timedelta

from activity_sessions.models import Activity
from activity_sessions.pipeline.normalize import normalize_activities
from activity_sessions.pipeline.sessionize import segment_user_activities
from conftest import make_record

T0 = datetime(2023, 1, 1, tzinfo=UTC)


def _at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


def _activity(activity_id: int, start: float, end: float) -> Activity:
    return Activity(id=activity_id, user_id="u1", first_seen_at=_at(start), answered_at=_at(end))


def test_close_activities_merge_into_one_session(merge_records) -> None:
    sessions = segment_user_activities(normalize_activities(merge_records))

    assert len(sessions) == 1
    only = sessions[0]
    assert only.started_at == _at(0)
    assert only.ended_at == _at(30)
    assert only.activity_ids == (1, 2)
    assert only.duration_seconds == 20


def test_gap_above_threshold_splits(merge_records) -> None:
    merge_records[1]["first_seen_at"] = "2023-01-01T00:10:00Z"
    merge_records[1]["answered_at"] = "2023-01-01T00:10:10Z"

    sessions = segment_user_activities(normalize_activities(merge_records))

    assert [s.activity_ids for s in sessions] == [(1,), (2,)]
    assert sessions[0].ended_at == _at(10)
    assert sessions[1].started_at == _at(600)
    assert [s.duration_seconds for s in sessions] == [10, 10]


def test_single_activity_session_matches_its_span() -> None:
    raw = [make_record(7, "u1", "2023-01-01T00:00:05Z", "2023-01-01T00:01:05Z")]

    sessions = segment_user_activities(normalize_activities(raw))

    assert len(sessions) == 1
    assert sessions[0].started_at == _at(5)
    assert sessions[0].ended_at == _at(65)
    assert sessions[0].activity_ids == (7,)
    assert sessions[0].duration_seconds == 60


def test_empty_user_yields_no_sessions() -> None:
    assert segment_user_activities([]) == []


def test_gap_equal_to_threshold_does_not_split() -> None:
    sessions = segment_user_activities([_activity(1, 0, 10), _activity(2, 310, 320)])
    assert [s.activity_ids for s in sessions] == [(1, 2)]


def test_gap_just_over_threshold_splits() -> None:
    sessions = segment_user_activities([_activity(1, 0, 10), _activity(2, 311, 320)])
    assert [s.activity_ids for s in sessions] == [(1,), (2,)]


def test_zero_gap_and_overlap_never_split() -> None:
    sessions = segment_user_activities(
        [_activity(1, 0, 10), _activity(2, 10, 20), _activity(3, 15, 40)]
    )
    assert len(sessions) == 1
    assert sessions[0].duration_seconds == 10 + 10 + 25
    assert sessions[0].ended_at == _at(40)


def test_custom_threshold() -> None:
    items = [_activity(1, 0, 10), _activity(2, 70, 80), _activity(3, 100, 110)]

    assert len(segment_user_activities(items, gap_seconds=30)) == 2
    assert len(segment_user_activities(items, gap_seconds=60)) == 1
    assert len(segment_user_activities(items, gap_seconds=0)) == 3


def test_session_starts_at_first_member_after_a_split() -> None:
    items = [
        _activity(1, 0, 10),
        _activity(2, 1000, 1010),
        _activity(3, 1100, 1120),
        _activity(4, 5000, 5001),
    ]

    sessions = segment_user_activities(items)

    assert [s.activity_ids for s in sessions] == [(1,), (2, 3), (4,)]
    assert sessions[1].started_at == _at(1000)
    assert sessions[1].ended_at == _at(1120)
    assert sessions[1].duration_seconds == 30


def test_reversed_activity_counts_absolute_duration() -> None:
    sessions = segment_user_activities([_activity(1, 50, 20)])
    assert sessions[0].duration_seconds == 30
    assert sessions[0].started_at == _at(50)
    assert sessions[0].ended_at == _at(20)


def test_segmentation_keeps_no_state_between_calls() -> None:
    items = [_activity(1, 0, 10), _activity(2, 20, 30)]
    first = segment_user_activities(items)
    second = segment_user_activities(items)
    assert first == second
    assert first is not second
