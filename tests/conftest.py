"""Shared fixtures for tests."""

import pytest

from taskmaster.cli import configure_logging
from taskmaster.store import Store

from .helpers import make_employee, make_task


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep structlog output out of captured stdout."""
    configure_logging("critical")


@pytest.fixture
def store() -> Store:
    """Store with one employee (Alex, ID 1) and one task (Design, ID 1)."""
    store = Store()
    store.add_employee(make_employee(1, "Alex"))
    store.add_task(make_task(1, "Design"))
    return store


@pytest.fixture
def populated_store() -> Store:
    """Store with employees 1-3 and tasks 1-7, no links."""
    store = Store()
    for employee_id, name in [(1, "Alex Yeoh"), (2, "Bernice Yu"), (3, "Charlotte Oliveiro")]:
        store.add_employee(make_employee(employee_id, name, phone=f"9{employee_id}000000"))
    for task_id in range(1, 8):
        store.add_task(make_task(task_id, f"Task {task_id}"))
    return store
