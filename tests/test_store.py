import json
from datetime import datetime, timedelta, timezone

import pytest

from godo.store import StoreError, TaskNotFoundError, TaskStore
from godo.task import TaskStatus


@pytest.fixture
def store(tmp_path):
    return TaskStore(tmp_path / "tasks.json")


def test_missing_file_means_no_tasks(store):
    assert store.get_tasks() == []


def test_empty_file_means_no_tasks(store):
    store.path.write_bytes(b"")
    assert store.get_tasks() == []


def test_add_assigns_increasing_ids(store):
    first = store.add_task("one", "")
    second = store.add_task("two", "details")
    assert second.id == first.id + 1
    tasks = store.get_tasks()
    assert [t.title for t in tasks] == ["one", "two"]
    assert tasks[1].description == "details"
    assert all(t.status is TaskStatus.TODO for t in tasks)


def test_first_id_is_one(store):
    assert store.add_task("first", "").id == 1


def test_ids_not_reused_after_delete(store):
    store.add_task("a", "")
    b = store.add_task("b", "")
    store.delete_task(b.id)
    c = store.add_task("c", "")
    assert c.id > b.id


def test_delete_removes_only_that_task(store):
    a = store.add_task("a", "")
    b = store.add_task("b", "")
    store.delete_task(a.id)
    assert [t.id for t in store.get_tasks()] == [b.id]


def test_delete_unknown_raises(store):
    store.add_task("a", "")
    with pytest.raises(TaskNotFoundError):
        store.delete_task(99)


def test_update_fields_persist(store):
    task = store.add_task("old", "")
    started = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    store.update_task(
        task.id,
        title="new",
        description="desc",
        status=TaskStatus.IN_PROGRESS,
        started_at=started,
    )
    reloaded = store.get_tasks()[0]
    assert reloaded.title == "new"
    assert reloaded.description == "desc"
    assert reloaded.status is TaskStatus.IN_PROGRESS
    assert reloaded.started_at == started


def test_update_clears_started_and_sets_total(store):
    task = store.add_task("t", "")
    store.update_task(task.id, started_at=datetime.now(timezone.utc))
    store.update_task(
        task.id, status=TaskStatus.PAUSED, started_at=None, total_time=timedelta(minutes=4)
    )
    reloaded = store.get_tasks()[0]
    assert reloaded.started_at is None
    assert reloaded.total_time == timedelta(minutes=4)
    assert reloaded.status is TaskStatus.PAUSED


def test_update_accepts_status_string(store):
    task = store.add_task("t", "")
    store.update_task(task.id, status="done")
    assert store.get_tasks()[0].status is TaskStatus.DONE


def test_update_unknown_task_raises(store):
    with pytest.raises(TaskNotFoundError, match="task with ID 5 not found"):
        store.update_task(5, title="x")


def test_update_unknown_field_raises(store):
    task = store.add_task("t", "")
    with pytest.raises(TypeError):
        store.update_task(task.id, priority=1)


def test_invalid_json_raises(store):
    store.path.write_text("{not json")
    with pytest.raises(StoreError, match="could not parse tasks file"):
        store.get_tasks()


def test_reads_existing_file_layout(store):
    store.path.write_text(
        json.dumps(
            {
                "tasks": [
                    {
                        "id": 4,
                        "title": "a",
                        "status": "paused",
                        "created_at": "2025-05-01T12:34:56.123456789+02:00",
                        "total_time": 90000000000,
                    }
                ],
                "next_id": 5,
                "active_task_id": 4,
            }
        )
    )
    task = store.get_tasks()[0]
    assert task.total_time == timedelta(seconds=90)
    assert task.status is TaskStatus.PAUSED
    assert store.add_task("b", "").id == 5
    saved = json.loads(store.path.read_text())
    assert saved["active_task_id"] == 4
    assert saved["next_id"] == 6


def test_null_tasks_and_zero_next_id(store):
    store.path.write_text('{"tasks": null, "next_id": 0}')
    assert store.get_tasks() == []
    assert store.add_task("x", "").id == 1


def test_saved_file_uses_stored_keys(store):
    store.add_task("title only", "")
    saved = json.loads(store.path.read_text())
    entry = saved["tasks"][0]
    assert entry["title"] == "title only"
    assert entry["status"] == "todo"
    assert "description" not in entry