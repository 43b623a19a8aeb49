"""Task commands for the taskmaster CLI."""

from typing import Literal

from cyclopts import App

from taskmaster import operations
from taskmaster.models import TaskTitle

task_app = App(name="task", help="Manage tasks")


@task_app.command
def add(title: str) -> None:
    """Add a task."""
    from taskmaster.cli import run_operation

    run_operation(lambda store: operations.add_task(store, TaskTitle(title)))


@task_app.command
def edit(task_id: int, title: str | None = None) -> None:
    """Edit a task and refresh it in every assigned employee."""
    from taskmaster.cli import run_operation

    def build(store):
        changes = operations.TaskChanges(title=TaskTitle(title) if title is not None else None)
        return operations.edit_task(store, task_id, changes)

    run_operation(build)


@task_app.command
def mark(task_id: int) -> None:
    """Mark a task as done."""
    from taskmaster.cli import run_operation

    run_operation(lambda store: operations.mark_task(store, task_id))


@task_app.command
def unmark(task_id: int) -> None:
    """Mark a task as not done."""
    from taskmaster.cli import run_operation

    run_operation(lambda store: operations.unmark_task(store, task_id))


@task_app.command
def delete(task_id: int) -> None:
    """Delete a task and unassign it from its employees."""
    from taskmaster.cli import run_operation

    run_operation(lambda store: operations.delete_task(store, task_id))


@task_app.command(name="list")
def list_tasks(status: Literal["all", "done", "pending"] = "all") -> None:
    """List tasks, optionally only done or only pending ones."""
    from taskmaster.cli import print_tasks, run_operation

    completed = {"all": None, "done": True, "pending": False}[status]
    store = run_operation(lambda store: operations.list_tasks(store, completed), save=False)
    print_tasks(store.get_filtered_task_list())
