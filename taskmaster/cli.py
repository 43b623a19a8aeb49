"""CLI for the task tracker."""

import sys
from collections.abc import Callable
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from taskmaster import messages, operations
from taskmaster.config import get_config
from taskmaster.config_commands import config_app
from taskmaster.employee_commands import employee_app
from taskmaster.exceptions import CommandError, StorageError
from taskmaster.models import Employee, Task
from taskmaster.operations import CommandResult
from taskmaster.storage import load_store, save_store
from taskmaster.store import Store
from taskmaster.task_commands import task_app

logger = structlog.get_logger()

app = App(
    help="TaskMaster - track employees and the tasks assigned to them",
)

app.command(employee_app)
app.command(task_app)
app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def run_operation(operation: Callable[[Store], CommandResult], save: bool = True) -> Store:
    """Load the store, run one operation against it and save it back.

    A rejected command or invalid field value is printed and exits with
    status 1 without touching the data file.
    """
    path = get_config().data_file()
    try:
        store = load_store(path)
        result = operation(store)
        if save:
            save_store(store, path)
    except (CommandError, StorageError, ValueError) as e:
        logger.debug("Command failed", error=str(e))
        print(f"Error: {e}")
        sys.exit(1)

    print(result.feedback)
    return store


def print_employees(employees: list[Employee]) -> None:
    for employee in employees:
        print(f"{employee.employee_id}. {messages.format_employee(employee)}")


def print_tasks(tasks: list[Task]) -> None:
    for task in tasks:
        marker = "○" if task.is_done else "●"
        print(f"{marker} {task.task_id}. {messages.format_task(task)}")


@app.command
def assign(task_id: int, employee_id: int) -> None:
    """Assign a task to an employee."""
    run_operation(lambda store: operations.assign_task(store, task_id, employee_id))


@app.command
def unassign(task_id: int, employee_id: int) -> None:
    """Remove a task from an employee."""
    run_operation(lambda store: operations.unassign_task(store, task_id, employee_id))


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


def entrypoint() -> None:
    app.meta()


if __name__ == "__main__":
    entrypoint()
