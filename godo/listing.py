"""Rendering of the task list."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

import click

from .task import Task, TaskStatus

_SECTIONS = (
    (TaskStatus.IN_PROGRESS, "🔄", "blue"),
    (TaskStatus.TODO, "⭕", "white"),
    (TaskStatus.PAUSED, "⏸️", "yellow"),
    (TaskStatus.DONE, "✅", "green"),
)


def format_duration(delta: timedelta) -> str:
    """Format a duration rounded to seconds as ``Xh Ym``, ``Xm Ys`` or ``Xs``."""
    micros = delta // timedelta(microseconds=1)
    sign = -1 if micros < 0 else 1
    seconds = (abs(micros) + 500_000) // 1_000_000
    hours = sign * (seconds // 3600)
    minutes = sign * (seconds % 3600 // 60)
    secs = sign * (seconds % 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def _time_info(task: Task, now: datetime) -> str:
    if task.status is TaskStatus.IN_PROGRESS and task.started_at is not None:
        return click.style(f" ⏱ {format_duration(now - task.started_at)}", fg="cyan")
    if task.total_time > timedelta(0):
        return click.style(f" ⌛ {format_duration(task.total_time)}", fg="bright_black")
    return ""


def render_tasks(tasks: Iterable[Task], now: datetime | None = None) -> str:
    """Return the coloured task list, grouped by status."""
    tasks = list(tasks)
    if now is None:
        now = datetime.now().astimezone()
    lines = ["📋 " + click.style("Your Tasks", fg="blue")]
    if not tasks:
        lines.append("📭 " + click.style("No tasks found!", fg="yellow"))
        return "\n".join(lines) + "\n"

    for status, emoji, colour in _SECTIONS:
        group = [task for task in tasks if task.status is status]
        if not group:
            continue
        lines.append("")
        lines.append(f"{emoji} {click.style(status.value, fg=colour, bold=True)}")
        for task in group:
            title = click.style(task.title, fg="bright_white")
            lines.append(f"  #{task.id} {title}{_time_info(task, now)}")
            if task.description:
                lines.append("     " + click.style(task.description, fg="bright_black"))
    lines.append("")
    return "\n".join(lines) + "\n"