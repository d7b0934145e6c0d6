"""JSON file storage for tasks."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Union

from .task import Task, TaskStatus


class StoreError(Exception):
    """Raised when the task file cannot be read or written."""


class TaskNotFoundError(StoreError, LookupError):
    """Raised when no task has the requested ID."""


def default_storage_path() -> Path:
    """Return ``~/.godo/tasks.json``, creating the directory if needed."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise StoreError(f"failed to get user home directory: {exc}") from exc
    config_dir = home / ".godo"
    try:
        config_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreError(f"failed to create config directory: {exc}") from exc
    return config_dir / "tasks.json"


@dataclass
class _Snapshot:
    tasks: list = field(default_factory=list)
    next_id: int = 1
    active_task_id: Optional[int] = None


_UPDATABLE = frozenset({"title", "description", "status", "started_at", "total_time"})


class TaskStore:
    """Tasks persisted in a single JSON file."""

    def __init__(self, path: Union[str, "os.PathLike[str]", None] = None) -> None:
        self.path = Path(path) if path is not None else default_storage_path()

    def _load(self) -> _Snapshot:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return _Snapshot()
        except OSError as exc:
            raise StoreError(f"could not read tasks file {self.path}: {exc}") from exc
        if not raw:
            return _Snapshot()
        try:
            data = json.loads(raw)
            if data is None:
                return _Snapshot()
            tasks = [Task.from_dict(item) for item in data.get("tasks") or []]
            next_id = int(data.get("next_id") or 1)
            active = data.get("active_task_id")
        except (ValueError, TypeError, AttributeError) as exc:
            raise StoreError(f"could not parse tasks file {self.path}: {exc}") from exc
        return _Snapshot(tasks, next_id, active)

    def _save(self, snapshot: _Snapshot) -> None:
        payload = {
            "tasks": [task.to_dict() for task in snapshot.tasks],
            "next_id": snapshot.next_id,
        }
        if snapshot.active_task_id is not None:
            payload["active_task_id"] = snapshot.active_task_id
        encoded = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o640)
            with os.fdopen(fd, "wb") as handle:
                handle.write(encoded)
        except OSError as exc:
            raise StoreError(f"could not write tasks file {self.path}: {exc}") from exc

    def get_tasks(self) -> list:
        """Return all stored tasks in insertion order."""
        return self._load().tasks

    def add_task(self, title: str, description: str = "") -> Task:
        """Create a new todo task and return it."""
        snapshot = self._load()
        task = Task(
            id=snapshot.next_id,
            title=title,
            description=description,
            status=TaskStatus.TODO,
            created_at=datetime.now().astimezone(),
        )
        snapshot.tasks.append(task)
        snapshot.next_id += 1
        self._save(snapshot)
        return task

    def delete_task(self, task_id: int) -> None:
        """Remove the task with ``task_id``."""
        snapshot = self._load()
        for index, task in enumerate(snapshot.tasks):
            if task.id == task_id:
                del snapshot.tasks[index]
                self._save(snapshot)
                return
        raise TaskNotFoundError("Something went wrong deleting the task")

    def update_task(self, task_id: int, **kwargs) -> Task:
        """Change fields of the task with ``task_id`` and return it.

        Accepted fields: title, description, status, started_at (None
        clears it) and total_time.
        """
        unknown = set(kwargs) - _UPDATABLE
        if unknown:
            raise TypeError(f"unknown task fields: {', '.join(sorted(unknown))}")
        snapshot = self._load()
        task = next((t for t in snapshot.tasks if t.id == task_id), None)
        if task is None:
            raise TaskNotFoundError(f"task with ID {task_id} not found")
        if "title" in kwargs:
            task.title = str(kwargs["title"])
        if "description" in kwargs:
            task.description = str(kwargs["description"])
        if "status" in kwargs:
            task.status = TaskStatus(kwargs["status"])
        if "started_at" in kwargs:
            started = kwargs["started_at"]
            if started is not None and not isinstance(started, datetime):
                raise TypeError("started_at must be a datetime or None")
            task.started_at = started
        if "total_time" in kwargs:
            total = kwargs["total_time"]
            if not isinstance(total, timedelta):
                raise TypeError("total_time must be a timedelta")
            task.total_time = total
        self._save(snapshot)
        return task