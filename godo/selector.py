"""Choosing a task by ID or interactively."""

from __future__ import annotations

import re
from collections.abc import Sequence

import click

from .store import StoreError, TaskStore
from .task import Task


class SelectionError(Exception):
    """Raised when no task could be chosen."""


_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_id(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise SelectionError("invalid task ID")
    return int(text)


def select_task(tasks: Sequence[Task]) -> Task | None:
    """Ask the user to pick one of ``tasks``; None when there are none."""
    if not tasks:
        return None
    click.echo("Select Task")
    for number, task in enumerate(tasks, start=1):
        click.echo(f"  {number}) {task.title} ({task.status.value})")
    try:
        choice = click.prompt("Task number", type=click.IntRange(1, len(tasks)))
    except click.Abort as exc:
        raise SelectionError("selection aborted") from exc
    selected = tasks[choice - 1]
    click.echo(f"✅ {selected.title}")
    return selected


def get_task(store: TaskStore, args: Sequence[str]) -> Task:
    """Return the task named by ``args[0]``, or prompt when no args are given."""
    try:
        tasks = store.get_tasks()
    except StoreError as exc:
        raise SelectionError(f"error getting tasks: {exc}") from exc
    if not tasks:
        raise SelectionError("no tasks available")

    if not args:
        try:
            selected = select_task(tasks)
        except SelectionError as exc:
            raise SelectionError(f"error selecting task: {exc}") from exc
        if selected is None:
            raise SelectionError("no task selected")
        return selected

    task_id = _parse_id(args[0])
    for task in tasks:
        if task.id == task_id:
            return task
    raise SelectionError(f"task with ID {task_id} not found")