"""Task model and status values."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Lifecycle state of a task."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    PAUSED = "paused"

    def __str__(self) -> str:
        return self.value


def parse_status(status: str) -> TaskStatus:
    """Return the TaskStatus named by ``status`` or raise ValueError."""
    try:
        return TaskStatus(status)
    except ValueError:
        raise ValueError(f"invalid task status: {status}") from None


_TIME_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<zone>Z|z|[+-]\d{2}:\d{2})?$"
)

_NANOS_PER_MICRO = 1000


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, including nanosecond fractions."""
    match = _TIME_RE.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    normalized = match["base"]
    if match["frac"]:
        normalized += "." + match["frac"][:6].ljust(6, "0")
    zone = match["zone"]
    if zone in ("Z", "z"):
        normalized += "+00:00"
    elif zone:
        normalized += zone
    return datetime.fromisoformat(normalized)


def _format_time(moment: datetime) -> str:
    return moment.isoformat()


def _to_nanos(delta: timedelta) -> int:
    return (delta // timedelta(microseconds=1)) * _NANOS_PER_MICRO


def _from_nanos(nanos: int) -> timedelta:
    return timedelta(microseconds=int(nanos) // _NANOS_PER_MICRO)


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Task:
    """A single todo item with optional time tracking."""

    id: int
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime = field(default_factory=_now)
    started_at: datetime | None = None
    total_time: timedelta = field(default_factory=timedelta)
    parent_id: int | None = None
    subtask_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping stored on disk."""
        data: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description:
            data["description"] = self.description
        data["status"] = TaskStatus(self.status).value
        data["created_at"] = _format_time(self.created_at)
        if self.started_at is not None:
            data["started_at"] = _format_time(self.started_at)
        data["total_time"] = _to_nanos(self.total_time)
        if self.parent_id is not None:
            data["parent_id"] = self.parent_id
        if self.subtask_ids:
            data["subtask_ids"] = list(self.subtask_ids)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Build a task from its stored mapping."""
        created = data.get("created_at")
        started = data.get("started_at")
        return cls(
            id=int(data.get("id", 0)),
            title=data.get("title", ""),
            description=data.get("description") or "",
            status=TaskStatus(data.get("status", TaskStatus.TODO.value)),
            created_at=_parse_time(created) if created else _now(),
            started_at=_parse_time(started) if started else None,
            total_time=_from_nanos(data.get("total_time") or 0),
            parent_id=data.get("parent_id"),
            subtask_ids=list(data.get("subtask_ids") or []),
        )