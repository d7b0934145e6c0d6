from datetime import datetime, timedelta, timezone

import pytest

from godo.task import Task, TaskStatus, parse_status


@pytest.mark.parametrize("name", ["todo", "in-progress", "done", "paused"])
def test_parse_status_accepts_known_values(name):
    assert parse_status(name).value == name


def test_parse_status_rejects_unknown():
    with pytest.raises(ValueError, match="invalid task status: bogus"):
        parse_status("bogus")


def test_status_string_is_its_value():
    status = parse_status("in-progress")
    assert status is TaskStatus.IN_PROGRESS
    assert str(status) == "in-progress"


def test_round_trip_full_task():
    created = datetime(2025, 3, 4, 5, 6, 7, 890123, tzinfo=timezone.utc)
    started = created + timedelta(minutes=3)
    task = Task(
        id=7,
        title="write report",
        description="quarterly",
        status=TaskStatus.IN_PROGRESS,
        created_at=created,
        started_at=started,
        total_time=timedelta(minutes=12, seconds=5),
        parent_id=2,
        subtask_ids=[8, 9],
    )
    assert Task.from_dict(task.to_dict()) == task


def test_empty_optional_fields_are_omitted():
    task = Task(id=1, title="plain")
    data = task.to_dict()
    assert "description" not in data
    assert "started_at" not in data
    assert "parent_id" not in data
    assert "subtask_ids" not in data
    assert data["status"] == "todo"


def test_total_time_is_stored_in_nanoseconds():
    task = Task(id=1, title="t", total_time=timedelta(seconds=1))
    assert task.to_dict()["total_time"] == 1_000_000_000
    assert Task.from_dict(task.to_dict()).total_time == timedelta(seconds=1)


def test_parses_nanosecond_utc_timestamp():
    task = Task.from_dict(
        {
            "id": 3,
            "title": "x",
            "status": "done",
            "created_at": "2025-05-01T12:34:56.123456789Z",
            "total_time": 0,
        }
    )
    assert task.created_at.microsecond == 123456
    assert task.created_at.utcoffset() == timedelta(0)
    assert task.status is TaskStatus.DONE


def test_parses_offset_timestamp():
    task = Task.from_dict(
        {
            "id": 3,
            "title": "x",
            "status": "todo",
            "created_at": "2025-05-01T12:34:56+02:00",
            "started_at": "2025-05-01T13:00:00+02:00",
        }
    )
    assert task.started_at - task.created_at == timedelta(minutes=25, seconds=4)


def test_invalid_timestamp_rejected():
    with pytest.raises(ValueError):
        Task.from_dict({"id": 1, "title": "x", "status": "todo", "created_at": "yesterday"})


def test_unknown_status_rejected():
    with pytest.raises(ValueError):
        Task.from_dict({"id": 1, "title": "x", "status": "blocked"})