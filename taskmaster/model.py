"""Model interface consumed by the consistency operations."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from taskmaster.models import Employee, EmployeeId, Task, TaskId

EmployeePredicate = Callable[[Employee], bool]
TaskPredicate = Callable[[Task], bool]


def PREDICATE_SHOW_ALL_EMPLOYEES(employee: Employee) -> bool:
    return True


def PREDICATE_SHOW_ALL_TASKS(task: Task) -> bool:
    return True


def PREDICATE_SHOW_COMPLETED_TASKS(task: Task) -> bool:
    return task.is_done


def PREDICATE_SHOW_INCOMPLETE_TASKS(task: Task) -> bool:
    return not task.is_done


class NameContainsKeywordsPredicate:
    """Matches employees whose name contains any of the keywords as a whole word, ignoring case."""

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = [keyword.lower() for keyword in keywords]

    def __call__(self, employee: Employee) -> bool:
        words = str(employee.name).lower().split()
        return any(keyword in words for keyword in self.keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameContainsKeywordsPredicate):
            return NotImplemented
        return self.keywords == other.keywords

    def __repr__(self) -> str:
        return f"NameContainsKeywordsPredicate(keywords={self.keywords})"


class Model(ABC):
    """Abstract base class for the two-collection store."""

    @abstractmethod
    def has_employee(self, employee: Employee) -> bool:
        """Return True if an employee identical to ``employee`` exists."""
        pass

    @abstractmethod
    def add_employee(self, employee: Employee) -> None:
        """Add an employee. The employee must not already exist."""
        pass

    @abstractmethod
    def set_employee(self, target: Employee, edited: Employee) -> None:
        """Replace ``target`` with ``edited``."""
        pass

    @abstractmethod
    def remove_employee(self, employee: Employee) -> None:
        """Remove an employee."""
        pass

    @abstractmethod
    def find_employee(self, employee_id: EmployeeId) -> Employee | None:
        """Resolve an employee ID against the unfiltered collection."""
        pass

    @abstractmethod
    def next_employee_id(self) -> EmployeeId:
        """Allocate the next employee ID."""
        pass

    @abstractmethod
    def get_employee_list(self) -> list[Employee]:
        """Return every employee, ignoring the filter."""
        pass

    @abstractmethod
    def get_filtered_employee_list(self) -> list[Employee]:
        """Return the employees matching the current filter."""
        pass

    @abstractmethod
    def update_filtered_employee_list(self, predicate: EmployeePredicate) -> None:
        """Change the employee filter."""
        pass

    @abstractmethod
    def has_task(self, task: Task) -> bool:
        """Return True if a task identical to ``task`` exists."""
        pass

    @abstractmethod
    def add_task(self, task: Task) -> None:
        """Add a task. The task must not already exist."""
        pass

    @abstractmethod
    def set_task(self, target: Task, edited: Task) -> None:
        """Replace ``target`` with ``edited``."""
        pass

    @abstractmethod
    def remove_task(self, task: Task) -> None:
        """Remove a task."""
        pass

    @abstractmethod
    def find_task(self, task_id: TaskId) -> Task | None:
        """Resolve a task ID against the unfiltered collection."""
        pass

    @abstractmethod
    def next_task_id(self) -> TaskId:
        """Allocate the next task ID."""
        pass

    @abstractmethod
    def get_task_list(self) -> list[Task]:
        """Return every task, ignoring the filter."""
        pass

    @abstractmethod
    def get_filtered_task_list(self) -> list[Task]:
        """Return the tasks matching the current filter."""
        pass

    @abstractmethod
    def update_filtered_task_list(self, predicate: TaskPredicate) -> None:
        """Change the task filter."""
        pass
