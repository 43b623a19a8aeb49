"""YAML snapshot storage for the store."""

from pathlib import Path
from typing import Any

import structlog
import yaml

from taskmaster.exceptions import DuplicateEntityError, StorageError
from taskmaster.models import Address, Email, Employee, Name, Phone, Tag, Task, TaskTitle
from taskmaster.store import Store

logger = structlog.get_logger()


def _employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        "id": employee.employee_id,
        "name": employee.name.value,
        "phone": employee.phone.value,
        "email": employee.email.value,
        "address": employee.address.value,
        "tags": sorted(tag.name for tag in employee.tags),
        "tasks": employee.tasks.ids(),
    }


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.task_id,
        "title": task.title.value,
        "done": task.is_done,
        "employees": task.employees.ids(),
    }


def _employee_from_dict(data: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(data["id"]),
        name=Name(str(data["name"])),
        phone=Phone(str(data["phone"])),
        email=Email(str(data["email"])),
        address=Address(str(data["address"])),
        tags=frozenset(Tag(str(name)) for name in data.get("tags") or []),
    )


def _task_from_dict(data: dict[str, Any]) -> Task:
    return Task(task_id=int(data["id"]), title=TaskTitle(str(data["title"])), is_done=bool(data.get("done", False)))


def dump_store(store: Store) -> dict[str, Any]:
    """Convert a store to plain data. Links are written as ID lists on both sides."""
    return {
        "next_employee_id": store.peek_next_employee_id(),
        "next_task_id": store.peek_next_task_id(),
        "employees": [_employee_to_dict(employee) for employee in store.get_employee_list()],
        "tasks": [_task_to_dict(task) for task in store.get_task_list()],
    }


def _counter(data: dict[str, Any], key: str) -> int:
    value = int(data.get(key, 1))
    if value < 1:
        raise ValueError(f"{key} should be a positive integer, got {value}")
    return value


def build_store(data: dict[str, Any]) -> Store:
    """Build a store from plain data produced by ``dump_store``.

    Entities are added without links first, then every link listed on both
    sides is re-created on both entities. A link listed on only one side is
    dropped.
    """
    employee_links: set[tuple[int, int]] = set()
    task_links: set[tuple[int, int]] = set()

    try:
        store = Store(
            next_employee_id=_counter(data, "next_employee_id"),
            next_task_id=_counter(data, "next_task_id"),
        )
        for raw in data.get("employees") or []:
            store.add_employee(_employee_from_dict(raw))
            employee_links.update((int(task_id), int(raw["id"])) for task_id in raw.get("tasks") or [])
        for raw in data.get("tasks") or []:
            store.add_task(_task_from_dict(raw))
            task_links.update((int(raw["id"]), int(employee_id)) for employee_id in raw.get("employees") or [])
    except (DuplicateEntityError, KeyError, TypeError, ValueError) as e:
        raise StorageError(f"Invalid snapshot data: {e}") from e

    for task_id, employee_id in sorted(employee_links ^ task_links):
        logger.warning("Dropping one-sided link", task_id=task_id, employee_id=employee_id)

    for task_id, employee_id in sorted(employee_links & task_links):
        task = store.find_task(task_id)
        employee = store.find_employee(employee_id)
        store.set_employee(employee, employee.assign_task(task))
        store.set_task(task, task.assign_employee(employee))

    logger.debug(
        "Store built",
        employees=len(store.get_employee_list()),
        tasks=len(store.get_task_list()),
        links=len(employee_links & task_links),
    )
    return store


def load_store(path: Path) -> Store:
    """Load a store from a YAML file. A missing file gives an empty store."""
    path = Path(path)
    if not path.exists():
        logger.debug("Data file does not exist, starting with empty store", path=str(path))
        return Store()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load data file", path=str(path), error=str(e))
        raise StorageError(f"Failed to load data from {path}: {e}") from e

    if not isinstance(data, dict):
        raise StorageError(f"Failed to load data from {path}: expected a mapping")

    return build_store(data)


def save_store(store: Store, path: Path) -> None:
    """Write a store to a YAML file, creating parent directories as needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(dump_store(store), f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to save data file", path=str(path), error=str(e))
        raise StorageError(f"Failed to save data to {path}: {e}") from e
    logger.debug("Data file saved", path=str(path))
