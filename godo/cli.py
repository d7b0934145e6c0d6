"""Command-line interface for the todo list."""

from __future__ import annotations

import json
import os
import shutil
import subprocess
import sys
import tempfile
from collections.abc import Sequence
from datetime import datetime, timedelta

import click

from .listing import render_tasks
from .selector import SelectionError, get_task
from .store import StoreError, TaskStore
from .task import Task, TaskStatus, parse_status

_ROOT_HELP = """godo is a command-line todo list manager that helps you track and organize tasks.

\b
Features:
- Add, complete, and remove todo items
- List all outstanding tasks
- Mark tasks as done
- Organize tasks by priority
- Save tasks persistently
- Simple command-line interface

Use 'godo help' to see available commands."""


def _now_for(reference: datetime | None) -> datetime:
    if reference is not None and reference.tzinfo is None:
        return datetime.now()
    return datetime.now().astimezone()


def _elapsed_since(started: datetime) -> timedelta:
    return _now_for(started) - started


def _duration_string(delta: timedelta) -> str:
    """Render a duration rounded to whole seconds, e.g. ``1h2m3s``."""
    micros = delta // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    seconds = (abs(micros) + 500_000) // 1_000_000
    if seconds == 0:
        return "0s"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def _parse_int(text: str) -> int | None:
    stripped = text[1:] if text[:1] in "+-" else text
    if not stripped.isascii() or not stripped.isdigit():
        return None
    return int(text)


def run_editor(
    title: str, description: str, editor: str | None = None
) -> tuple[str, str]:
    """Open ``editor`` on a JSON file holding the task text and return the edited pair.

    The editor defaults to ``$EDITOR``, or ``vi`` when that is unset.
    """
    if not editor:
        editor = os.environ.get("EDITOR") or "vi"
    editor_path = shutil.which(editor)
    if editor_path is None:
        raise FileNotFoundError(f"editor {editor!r} not found")

    with tempfile.NamedTemporaryFile(
        "w", prefix="task-", suffix=".json", delete=False, encoding="utf-8"
    ) as handle:
        json.dump({"title": title, "description": description}, handle, indent=2)
        handle.write("\n")
        temp_path = handle.name
    try:
        subprocess.run([editor_path, temp_path], check=False)
        with open(temp_path, encoding="utf-8") as edited:
            content = edited.read()
    finally:
        try:
            os.remove(temp_path)
        except OSError:
            pass

    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("edited task must be a JSON object")
    new_title = data.get("title") or ""
    new_description = data.get("description") or ""
    if not isinstance(new_title, str) or not isinstance(new_description, str):
        raise ValueError("title and description must be strings")
    return new_title, new_description


def _pick(store: TaskStore, args: Sequence[str]) -> Task | None:
    try:
        return get_task(store, args)
    except SelectionError as exc:
        click.echo(f"Error: {exc}")
        return None


@click.group(help=_ROOT_HELP, short_help="A todo list management CLI tool")
@click.pass_context
def cli(ctx: click.Context) -> None:
    try:
        ctx.obj = TaskStore()
    except StoreError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("add", short_help="Add a new task")
@click.argument("args", nargs=-1, required=True)
@click.pass_obj
def add_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Add a new task to the task list by passing it as a string argument."""
    title = args[0]
    description = args[1] if len(args) > 1 else ""
    try:
        task = store.add_task(title, description)
    except StoreError as exc:
        click.echo(f"Error adding task: {exc}")
        return
    click.echo(f"Task #{task.id} added")


@cli.command("del", short_help="Delete a Task")
@click.argument("args", nargs=-1, required=True)
@click.pass_obj
def del_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Delete a Task."""
    task_id = _parse_int(args[0])
    if task_id is None:
        click.echo("Invalid ID")
        return
    try:
        store.delete_task(task_id)
    except StoreError as exc:
        click.echo(f"Error: {exc}")


@cli.command("edit", short_help="Edit a task in your preferred editor")
@click.argument("args", nargs=-1)
@click.pass_obj
def edit_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Opens your configured editor (default: vi) to edit the task title and description."""
    task = _pick(store, args)
    if task is None:
        return
    try:
        title, description = run_editor(task.title, task.description)
    except FileNotFoundError as exc:
        click.echo(f"Error finding editor: {exc}")
        return
    except ValueError as exc:
        click.echo(f"Error parsing updated task: {exc}")
        return
    except OSError as exc:
        click.echo(f"Error running editor: {exc}")
        return
    try:
        store.update_task(task.id, title=title, description=description)
    except StoreError as exc:
        click.echo(f"Error updating task: {exc}")
        return
    click.echo("Task updated successfully")


@cli.command("list", short_help="Lists all current tasks in a nice and clear way")
@click.pass_obj
def list_command(store: TaskStore) -> None:
    """Lists all current tasks in a nice and clear way."""
    try:
        tasks = store.get_tasks()
    except StoreError as exc:
        click.echo(f"❌ {click.style('ERROR:', fg='red')} Error listing tasks: {exc}")
        return
    click.echo(render_tasks(tasks), nl=False)


@cli.command("pause", short_help="Pause the current task")
@click.argument("args", nargs=-1)
@click.pass_obj
def pause_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Pause the currently running task and save the elapsed time."""
    task = _pick(store, args)
    if task is None:
        return
    if task.status is not TaskStatus.IN_PROGRESS:
        click.echo("Task is not in progress")
        return
    total = task.total_time
    if task.started_at is not None:
        total += _elapsed_since(task.started_at)
    try:
        store.update_task(
            task.id, status=TaskStatus.PAUSED, total_time=total, started_at=None
        )
    except StoreError as exc:
        click.echo(f"Error updating task: {exc}")
        return
    click.echo(f"Task paused. Total time: {_duration_string(total)}")


@cli.command("resume", short_help="Resume a paused task")
@click.argument("args", nargs=-1)
@click.pass_obj
def resume_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Resume a previously paused task by setting it back to in-progress."""
    task = _pick(store, args)
    if task is None:
        return
    if task.status is not TaskStatus.PAUSED:
        click.echo("Task must be paused to resume")
        return
    try:
        store.update_task(
            task.id,
            status=TaskStatus.IN_PROGRESS,
            started_at=datetime.now().astimezone(),
        )
    except StoreError as exc:
        click.echo(f"Error: {exc}")
        return
    click.echo("Task resumed")


@cli.command("set", short_help="Set status of task")
@click.argument("args", nargs=-1)
@click.pass_obj
def set_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Update the status of a task.

    \b
    Valid options are:
      - "todo"
      - "in-progress"
      - "done"
      - "paused"
    """
    if len(args) < 2:
        raise click.UsageError(f"requires at least 2 arg(s), only received {len(args)}")
    task_id = _parse_int(args[0])
    if task_id is None:
        click.echo("Invalid ID")
        return
    try:
        status = parse_status(args[1])
    except ValueError as exc:
        click.echo(str(exc))
        return
    try:
        store.update_task(task_id, status=status)
    except StoreError as exc:
        click.echo(f"Error: {exc}")


@cli.command("start", short_help="Start a task")
@click.argument("args", nargs=-1)
@click.pass_obj
def start_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Start a task."""
    task = _pick(store, args)
    if task is None:
        return
    if task.status is TaskStatus.IN_PROGRESS:
        click.echo("Task is already in progress")
        return
    try:
        store.update_task(
            task.id,
            status=TaskStatus.IN_PROGRESS,
            started_at=datetime.now().astimezone(),
        )
    except StoreError as exc:
        click.echo(f"Error: {exc}")
        return
    click.echo("Task started")


@cli.command("stop", short_help="Stop working on a task")
@click.argument("args", nargs=-1)
@click.pass_obj
def stop_command(store: TaskStore, args: tuple[str, ...]) -> None:
    """Sets a task's status to done and calculates the total time spent."""
    task = _pick(store, args)
    if task is None:
        return
    if task.status is not TaskStatus.IN_PROGRESS:
        click.echo("Task is not in progress")
        return
    total = task.total_time
    if task.started_at is not None:
        total += _elapsed_since(task.started_at)
    try:
        store.update_task(
            task.id, status=TaskStatus.DONE, total_time=total, started_at=None
        )
    except StoreError as exc:
        click.echo(f"Error: {exc}")
        return
    click.echo(f"Task stopped. Total time: {_duration_string(total)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; with no arguments the task list is shown."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        args = ["list"]
    try:
        result = cli.main(args=args, prog_name="godo", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())