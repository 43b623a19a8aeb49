"""Data models for the task tracker."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Generic, Iterator, TypeVar

EmployeeId = int
TaskId = int


def _check_id(value: int, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{kind} ID should be a positive integer, got {value!r}")


@dataclass(frozen=True)
class Name:
    """Employee name."""

    MESSAGE_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    VALIDATION_REGEX = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Employee phone number."""

    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    VALIDATION_REGEX = re.compile(r"\d{3,}")

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Employee email address in the form local-part@domain."""

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain. The local-part should only contain "
        "alphanumeric characters and +_.- and must not start or end with a special character. "
        "The domain is made of labels separated by periods, ending with a label at least 2 characters long."
    )
    VALIDATION_REGEX = re.compile(
        r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
        r"@"
        r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)*"
        r"[A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]"
    )

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """Employee address."""

    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(value) and not value[0].isspace()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """Free-form alphanumeric tag attached to an employee."""

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(r"[A-Za-z0-9]+")

    name: str

    def __post_init__(self) -> None:
        if not self.VALIDATION_REGEX.fullmatch(self.name):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class TaskTitle:
    """Task title."""

    MESSAGE_CONSTRAINTS = "Task titles can take any values, and it should not be blank"

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip() or self.value[0].isspace():
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


T = TypeVar("T")


class _AssignmentIndex(ABC, Generic[T]):
    """ID-keyed mapping from one entity kind to snapshots of the other.

    Assigning an ID that is already present overwrites the stored snapshot,
    so re-assignment is idempotent. The index never touches the opposite
    collection; keeping both sides in step is the job of the operations module.
    """

    def __init__(self, entries: dict[int, T] | None = None) -> None:
        self._entries: dict[int, T] = dict(entries or {})

    @abstractmethod
    def _key(self, entity: T) -> int:
        """Return the ID the entity is stored under."""
        pass

    def assign(self, entity: T) -> None:
        self._entries[self._key(entity)] = entity

    def unassign(self, entity_id: int) -> None:
        self._entries.pop(entity_id, None)

    def contains(self, entity_id: int) -> bool:
        return entity_id in self._entries

    def get(self, entity_id: int) -> T | None:
        return self._entries.get(entity_id)

    def ids(self) -> list[int]:
        return sorted(self._entries)

    def as_ordered_list(self) -> list[T]:
        return [self._entries[key] for key in sorted(self._entries)]

    def copy(self):
        return type(self)(self._entries)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        # Snapshots are compared by ID only; comparing them by value would walk the snapshot graph.
        if not isinstance(other, _AssignmentIndex) or type(other) is not type(self):
            return NotImplemented
        return self.ids() == other.ids()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ids={self.ids()})"


class AssignedTasks(_AssignmentIndex["Task"]):
    """Tasks known to an employee, keyed by task ID."""

    def _key(self, entity: Task) -> int:
        return entity.task_id


class AssignedEmployees(_AssignmentIndex["Employee"]):
    """Employees known to a task, keyed by employee ID."""

    def _key(self, entity: Employee) -> int:
        return entity.employee_id


@dataclass(frozen=True)
class Employee:
    """An employee and the tasks assigned to them.

    Employees are value snapshots: every change goes through a method that
    returns a new ``Employee`` and leaves this one untouched.
    """

    employee_id: EmployeeId
    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = frozenset()
    tasks: AssignedTasks = field(default_factory=AssignedTasks, compare=False, repr=False)

    def __post_init__(self) -> None:
        _check_id(self.employee_id, "Employee")
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_employee(self, other: Employee | None) -> bool:
        """Return True if both employees share name, phone and email."""
        if other is self:
            return True
        return (
            other is not None
            and other.name == self.name
            and other.phone == self.phone
            and other.email == self.email
        )

    def assign_task(self, task: Task) -> Employee:
        tasks = self.tasks.copy()
        tasks.assign(task)
        return replace(self, tasks=tasks)

    def unassign_task(self, task_id: TaskId) -> Employee:
        tasks = self.tasks.copy()
        tasks.unassign(task_id)
        return replace(self, tasks=tasks)

    def with_fields(self, **changes) -> Employee:
        """Return a copy with descriptive fields replaced and links kept."""
        return replace(self, tasks=self.tasks.copy(), **changes)


@dataclass(frozen=True)
class Task:
    """A task and the employees assigned to it."""

    task_id: TaskId
    title: TaskTitle
    is_done: bool = False
    employees: AssignedEmployees = field(default_factory=AssignedEmployees, compare=False, repr=False)

    def __post_init__(self) -> None:
        _check_id(self.task_id, "Task")

    def is_same_task(self, other: Task | None) -> bool:
        if other is self:
            return True
        return other is not None and other.title == self.title

    def assign_employee(self, employee: Employee) -> Task:
        employees = self.employees.copy()
        employees.assign(employee)
        return replace(self, employees=employees)

    def unassign_employee(self, employee_id: EmployeeId) -> Task:
        employees = self.employees.copy()
        employees.unassign(employee_id)
        return replace(self, employees=employees)

    def with_fields(self, **changes) -> Task:
        return replace(self, employees=self.employees.copy(), **changes)
