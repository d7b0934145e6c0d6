# godo

`godo` is a command-line todo list manager. You can add tasks, move them
between states, and keep track of how long you spend on each one.

Tasks are stored as JSON in `~/.godo/tasks.json`. The `~/.godo` directory is
created the first time the tool runs.

## Installation

```
pip install .
```

## Usage

Running `godo` with no command shows the task list. `godo --help` lists the
commands, and `godo <command> --help` describes one of them.

```
godo                          # same as "godo list"
godo add "Write report" "Quarterly numbers for the team"
godo list
godo start 1                  # begin working on task 1 and start its timer
godo pause 1                  # stop the timer and keep the elapsed time
godo resume 1                 # start the timer again on a paused task
godo stop 1                   # mark the task done and record the total time
godo set 1 todo               # set the status directly
godo edit 1                   # edit title and description in $EDITOR
godo del 1                    # delete task 1
```

`add` takes a title and an optional description. It prints the ID of the new
task, for example `Task #3 added`.

If you leave out the task ID, `start`, `pause`, `resume`, `stop` and `edit`
print a numbered list of tasks and ask for the number of the one to use.

### Statuses

A task is always in one of these states:

- `todo`
- `in-progress`
- `paused`
- `done`

The timer commands check the current state first:

- `start` refuses a task that is already `in-progress`.
- `pause` and `stop` only accept an `in-progress` task. They add the time
  since it was started to the task's total and print the new total, for
  example `Task paused. Total time: 1h2m3s`.
- `resume` only accepts a `paused` task.

`set` changes the status and nothing else. It does not start or stop the
timer.

`godo list` groups tasks by status in the order shown below. Tasks in
progress show how long they have been running since they were last started.
Other tasks show the total time recorded for them, if any.

```
📋 Your Tasks

🔄 in-progress
  #1 Write report ⏱ 12m 5s
     Quarterly numbers for the team

⭕ todo
  #2 Review pull request
```

### Editing

`godo edit` writes the task's title and description to a temporary JSON file.
It then opens that file in the editor named by the `EDITOR` environment
variable, or `vi` if `EDITOR` is not set. When the editor exits, the file is
read back and the task is updated.

## Using it from Python

The storage and the model can be used directly:

```python
from godo.store import TaskStore
from godo.task import TaskStatus
from godo.listing import render_tasks

store = TaskStore("tasks.json")       # defaults to ~/.godo/tasks.json
task = store.add_task("Write report", "Quarterly numbers")
store.update_task(task.id, status=TaskStatus.DONE)
print(render_tasks(store.get_tasks()), end="")
store.delete_task(task.id)
```

`update_task` accepts the keywords `title`, `description`, `status`,
`started_at` and `total_time`.

When no task has the given ID, `update_task` and `delete_task` raise
`TaskNotFoundError`. A file that cannot be read, parsed or written raises
`StoreError`.

## What it does not do

- Tasks have no priority and cannot be sorted.
- Tasks have `parent_id` and `subtask_ids` fields, which are kept in the
  file. No command sets or shows them.
- There is no `help` subcommand. Use `--help` instead.

## Development

```
pip install -e ".[test]"
pytest
```