"""In-memory implementation of the model."""

import structlog

from taskmaster.exceptions import DuplicateEntityError, EntityNotFoundError
from taskmaster.model import (
    PREDICATE_SHOW_ALL_EMPLOYEES,
    PREDICATE_SHOW_ALL_TASKS,
    EmployeePredicate,
    Model,
    TaskPredicate,
)
from taskmaster.models import Employee, EmployeeId, Task, TaskId

logger = structlog.get_logger()


class Store(Model):
    """Two ordered, duplicate-free collections with filtered views.

    Entities are replaced by value: ``set_employee`` and ``set_task`` swap the
    stored snapshot at the same position. IDs come from counters that only
    grow, so an ID is never handed out twice even after a deletion.
    """

    def __init__(self, next_employee_id: int = 1, next_task_id: int = 1) -> None:
        self._employees: list[Employee] = []
        self._tasks: list[Task] = []
        self._employee_filter: EmployeePredicate = PREDICATE_SHOW_ALL_EMPLOYEES
        self._task_filter: TaskPredicate = PREDICATE_SHOW_ALL_TASKS
        self._next_employee_id = next_employee_id
        self._next_task_id = next_task_id
        logger.debug("Store initialized", next_employee_id=next_employee_id, next_task_id=next_task_id)

    # Employees

    def has_employee(self, employee: Employee) -> bool:
        return any(existing.is_same_employee(employee) for existing in self._employees)

    def add_employee(self, employee: Employee) -> None:
        if self.has_employee(employee) or self.find_employee(employee.employee_id) is not None:
            raise DuplicateEntityError(f"Employee already exists: {employee.employee_id}")
        self._employees.append(employee)
        self._next_employee_id = max(self._next_employee_id, employee.employee_id + 1)
        logger.debug("Employee added to store", employee_id=employee.employee_id)

    def set_employee(self, target: Employee, edited: Employee) -> None:
        index = self._employee_index(target.employee_id)
        for position, existing in enumerate(self._employees):
            if position == index:
                continue
            if existing.employee_id == edited.employee_id or existing.is_same_employee(edited):
                raise DuplicateEntityError(f"Employee already exists: {edited.employee_id}")
        self._employees[index] = edited
        logger.debug("Employee replaced in store", employee_id=edited.employee_id)

    def remove_employee(self, employee: Employee) -> None:
        index = self._employee_index(employee.employee_id)
        del self._employees[index]
        logger.debug("Employee removed from store", employee_id=employee.employee_id)

    def find_employee(self, employee_id: EmployeeId) -> Employee | None:
        for employee in self._employees:
            if employee.employee_id == employee_id:
                return employee
        return None

    def next_employee_id(self) -> EmployeeId:
        employee_id = self._next_employee_id
        self._next_employee_id += 1
        return employee_id

    def peek_next_employee_id(self) -> EmployeeId:
        return self._next_employee_id

    def get_employee_list(self) -> list[Employee]:
        return list(self._employees)

    def get_filtered_employee_list(self) -> list[Employee]:
        return [employee for employee in self._employees if self._employee_filter(employee)]

    def update_filtered_employee_list(self, predicate: EmployeePredicate) -> None:
        self._employee_filter = predicate

    def _employee_index(self, employee_id: EmployeeId) -> int:
        for index, employee in enumerate(self._employees):
            if employee.employee_id == employee_id:
                return index
        raise EntityNotFoundError(f"Employee not found: {employee_id}")

    # Tasks

    def has_task(self, task: Task) -> bool:
        return any(existing.is_same_task(task) for existing in self._tasks)

    def add_task(self, task: Task) -> None:
        if self.has_task(task) or self.find_task(task.task_id) is not None:
            raise DuplicateEntityError(f"Task already exists: {task.task_id}")
        self._tasks.append(task)
        self._next_task_id = max(self._next_task_id, task.task_id + 1)
        logger.debug("Task added to store", task_id=task.task_id)

    def set_task(self, target: Task, edited: Task) -> None:
        index = self._task_index(target.task_id)
        for position, existing in enumerate(self._tasks):
            if position == index:
                continue
            if existing.task_id == edited.task_id or existing.is_same_task(edited):
                raise DuplicateEntityError(f"Task already exists: {edited.task_id}")
        self._tasks[index] = edited
        logger.debug("Task replaced in store", task_id=edited.task_id)

    def remove_task(self, task: Task) -> None:
        index = self._task_index(task.task_id)
        del self._tasks[index]
        logger.debug("Task removed from store", task_id=task.task_id)

    def find_task(self, task_id: TaskId) -> Task | None:
        for task in self._tasks:
            if task.task_id == task_id:
                return task
        return None

    def next_task_id(self) -> TaskId:
        task_id = self._next_task_id
        self._next_task_id += 1
        return task_id

    def peek_next_task_id(self) -> TaskId:
        return self._next_task_id

    def get_task_list(self) -> list[Task]:
        return list(self._tasks)

    def get_filtered_task_list(self) -> list[Task]:
        return [task for task in self._tasks if self._task_filter(task)]

    def update_filtered_task_list(self, predicate: TaskPredicate) -> None:
        self._task_filter = predicate

    def _task_index(self, task_id: TaskId) -> int:
        for index, task in enumerate(self._tasks):
            if task.task_id == task_id:
                return index
        raise EntityNotFoundError(f"Task not found: {task_id}")
