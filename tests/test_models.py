"""Tests for data models."""

import dataclasses

import pytest

from taskmaster.models import (
    Address,
    AssignedEmployees,
    AssignedTasks,
    Email,
    Name,
    Phone,
    Tag,
    TaskTitle,
)

from .helpers import make_employee, make_task


def test_employee_creation() -> None:
    """Test employee creation with defaults."""
    employee = make_employee(1, "Alex")
    assert employee.employee_id == 1
    assert str(employee.name) == "Alex"
    assert employee.tags == frozenset()
    assert len(employee.tasks) == 0


def test_task_creation() -> None:
    """Test task creation with defaults."""
    task = make_task(1, "Design")
    assert task.task_id == 1
    assert str(task.title) == "Design"
    assert task.is_done is False
    assert len(task.employees) == 0


@pytest.mark.parametrize("bad_id", [0, -1, True, "1"])
def test_ids_must_be_positive_integers(bad_id) -> None:
    """Test that non-positive or non-integer IDs are rejected."""
    with pytest.raises(ValueError):
        make_task(bad_id)
    with pytest.raises(ValueError):
        make_employee(bad_id)


@pytest.mark.parametrize(
    "factory, value",
    [
        (Name, ""),
        (Name, " Alex"),
        (Name, "Alex*"),
        (Phone, "12"),
        (Phone, "91a2345"),
        (Email, "alex"),
        (Email, "alex@example.c"),
        (Email, "-alex@example.com"),
        (Address, ""),
        (Address, " Blk 30"),
        (Tag, "senior staff"),
        (TaskTitle, "   "),
    ],
)
def test_value_objects_reject_invalid_input(factory, value: str) -> None:
    """Test value object validation."""
    with pytest.raises(ValueError):
        factory(value)


def test_value_objects_accept_valid_input() -> None:
    """Test value objects accept typical input."""
    assert str(Name("Alex Yeoh 2")) == "Alex Yeoh 2"
    assert str(Phone("999")) == "999"
    assert str(Email("alex.yeoh+work@mail.example.com")) == "alex.yeoh+work@mail.example.com"
    assert str(Tag("manager")) == "[manager]"


def test_index_assign_overwrites_existing_key() -> None:
    """Test that re-assigning an ID replaces the snapshot instead of adding a second entry."""
    index = AssignedTasks()
    index.assign(make_task(5, "Old title"))
    index.assign(make_task(5, "New title"))
    assert len(index) == 1
    assert str(index.get(5).title) == "New title"


def test_index_unassign_absent_is_noop() -> None:
    """Test unassigning an absent ID does nothing."""
    index = AssignedEmployees()
    index.assign(make_employee(2))
    index.unassign(3)
    assert index.ids() == [2]


def test_index_ordered_list_is_sorted_by_id() -> None:
    """Test ordered list is sorted by ID regardless of insertion order."""
    index = AssignedTasks()
    for task_id in (7, 2, 5):
        index.assign(make_task(task_id, f"Task {task_id}"))
    assert [task.task_id for task in index.as_ordered_list()] == [2, 5, 7]
    assert list(index) == [2, 5, 7]
    assert index.contains(5)
    assert 3 not in index
    assert index.get(3) is None


def test_index_copy_is_independent() -> None:
    """Test that a copied index does not share storage with the original."""
    index = AssignedTasks()
    index.assign(make_task(1))
    copy = index.copy()
    copy.unassign(1)
    assert index.contains(1)
    assert not copy.contains(1)


def test_assign_task_returns_new_employee() -> None:
    """Test that assigning leaves the receiver and the argument untouched."""
    employee = make_employee(1)
    task = make_task(1)

    updated = employee.assign_task(task)

    assert updated is not employee
    assert updated.tasks.contains(1)
    assert not employee.tasks.contains(1)
    assert len(task.employees) == 0
    assert updated.tasks.get(1) is task


def test_assign_employee_returns_new_task() -> None:
    """Test the task side of assignment."""
    employee = make_employee(2)
    task = make_task(1)

    updated = task.assign_employee(employee)

    assert updated.employees.ids() == [2]
    assert task.employees.ids() == []
    assert len(employee.tasks) == 0


def test_unassign_returns_new_entities() -> None:
    """Test unassigning on both entity kinds."""
    employee = make_employee(1).assign_task(make_task(3))
    task = make_task(3).assign_employee(make_employee(1))

    assert employee.unassign_task(3).tasks.ids() == []
    assert employee.tasks.ids() == [3]
    assert task.unassign_employee(1).employees.ids() == []
    assert task.employees.ids() == [1]


def test_with_fields_keeps_identity_and_links() -> None:
    """Test that editing descriptive fields keeps ID and assignments."""
    employee = make_employee(1).assign_task(make_task(5)).assign_task(make_task(7, "Review"))

    edited = employee.with_fields(phone=Phone("999"))

    assert edited.employee_id == 1
    assert str(edited.phone) == "999"
    assert edited.tasks.ids() == [5, 7]
    assert edited.tasks is not employee.tasks
    assert str(employee.phone) == "87438807"


def test_entities_are_frozen() -> None:
    """Test entities cannot be mutated in place."""
    employee = make_employee(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        employee.name = Name("Someone Else")


def test_same_employee_uses_name_phone_and_email() -> None:
    """Test the duplicate detection rule for employees."""
    alex = make_employee(1, "Alex")
    assert alex.is_same_employee(make_employee(2, "Alex"))
    assert not alex.is_same_employee(make_employee(2, "Alex", phone="999"))
    assert not alex.is_same_employee(make_employee(2, "Alex", email="other@example.com"))
    assert not alex.is_same_employee(None)


def test_same_task_uses_title() -> None:
    """Test the duplicate detection rule for tasks."""
    assert make_task(1, "Design").is_same_task(make_task(2, "Design", is_done=True))
    assert not make_task(1, "Design").is_same_task(make_task(1, "Review"))


def test_equality_ignores_assignments() -> None:
    """Test that entity equality compares fields, not assignment indices."""
    plain = make_employee(1)
    linked = plain.assign_task(make_task(1))
    assert plain == linked
    assert hash(plain) == hash(linked)
