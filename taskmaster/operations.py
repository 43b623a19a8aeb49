"""Consistency operations over the employee and task collections.

Every operation takes the model explicitly and either returns a
``CommandResult`` or raises a ``CommandError``. A raised error means nothing
was written: each operation computes all new entity versions first and
commits them only once every check has passed.

Entities are value snapshots, so changing one side of a link leaves the
other side pointing at the old version. Operations that replace an entity
therefore also replace the back-reference held by every linked counterpart.
"""

from dataclasses import dataclass, fields

import structlog

from taskmaster import messages
from taskmaster.exceptions import (
    DuplicateEmployee,
    DuplicateTask,
    InvalidEmployeeId,
    InvalidTaskId,
    NoFieldsEdited,
)
from taskmaster.model import (
    PREDICATE_SHOW_ALL_EMPLOYEES,
    PREDICATE_SHOW_ALL_TASKS,
    PREDICATE_SHOW_COMPLETED_TASKS,
    PREDICATE_SHOW_INCOMPLETE_TASKS,
    Model,
    NameContainsKeywordsPredicate,
)
from taskmaster.models import (
    Address,
    Email,
    Employee,
    EmployeeId,
    Name,
    Phone,
    Tag,
    Task,
    TaskId,
    TaskTitle,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful operation."""

    feedback: str


@dataclass(frozen=True)
class EmployeeChanges:
    """Fields to change on an employee. ``None`` leaves a field as it is."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass(frozen=True)
class TaskChanges:
    """Fields to change on a task. ``None`` leaves a field as it is."""

    title: TaskTitle | None = None
    is_done: bool | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


def _resolve_pair(model: Model, task_id: TaskId, employee_id: EmployeeId) -> tuple[Task, Employee]:
    # Task ID is checked first, so it wins when both IDs are invalid.
    task = model.find_task(task_id)
    if task is None:
        logger.warning("Task ID did not resolve", task_id=task_id)
        raise InvalidTaskId()
    employee = model.find_employee(employee_id)
    if employee is None:
        logger.warning("Employee ID did not resolve", employee_id=employee_id)
        raise InvalidEmployeeId()
    return task, employee


def _resolve_employee(model: Model, employee_id: EmployeeId) -> Employee:
    employee = model.find_employee(employee_id)
    if employee is None:
        logger.warning("Employee ID did not resolve", employee_id=employee_id)
        raise InvalidEmployeeId()
    return employee


def _resolve_task(model: Model, task_id: TaskId) -> Task:
    task = model.find_task(task_id)
    if task is None:
        logger.warning("Task ID did not resolve", task_id=task_id)
        raise InvalidTaskId()
    return task


def _linked_tasks(model: Model, employee: Employee) -> list[Task]:
    linked = []
    for task_id in employee.tasks.ids():
        task = model.find_task(task_id)
        if task is None:
            logger.warning("Linked task missing from store", employee_id=employee.employee_id, task_id=task_id)
            continue
        linked.append(task)
    return linked


def _linked_employees(model: Model, task: Task) -> list[Employee]:
    linked = []
    for employee_id in task.employees.ids():
        employee = model.find_employee(employee_id)
        if employee is None:
            logger.warning("Linked employee missing from store", task_id=task.task_id, employee_id=employee_id)
            continue
        linked.append(employee)
    return linked


def assign_task(model: Model, task_id: TaskId, employee_id: EmployeeId) -> CommandResult:
    """Link a task and an employee on both sides.

    Assigning a pair that is already linked refreshes both snapshots and
    succeeds without creating a second entry.
    """
    task, employee = _resolve_pair(model, task_id, employee_id)

    updated_employee = employee.assign_task(task)
    updated_task = task.assign_employee(employee)

    model.set_employee(employee, updated_employee)
    model.set_task(task, updated_task)
    logger.info("Task assigned", task_id=task_id, employee_id=employee_id)
    return CommandResult(messages.MESSAGE_ASSIGN_TASK_SUCCESS)


def unassign_task(model: Model, task_id: TaskId, employee_id: EmployeeId) -> CommandResult:
    """Remove the link between a task and an employee on both sides.

    Unassigning a pair that is not linked succeeds and changes nothing.
    """
    task, employee = _resolve_pair(model, task_id, employee_id)

    updated_employee = employee.unassign_task(task_id)
    updated_task = task.unassign_employee(employee_id)

    model.set_employee(employee, updated_employee)
    model.set_task(task, updated_task)
    logger.info("Task unassigned", task_id=task_id, employee_id=employee_id)
    return CommandResult(messages.MESSAGE_UNASSIGN_TASK_SUCCESS)


def add_employee(
    model: Model,
    name: Name,
    phone: Phone,
    email: Email,
    address: Address,
    tags: frozenset[Tag] = frozenset(),
) -> CommandResult:
    """Add a new employee with no assigned tasks."""
    # Built with a placeholder ID so a rejected duplicate does not consume one.
    candidate = Employee(1, name, phone, email, address, tags)
    if model.has_employee(candidate):
        logger.warning("Duplicate employee rejected", name=str(name))
        raise DuplicateEmployee()

    employee = Employee(model.next_employee_id(), name, phone, email, address, tags)
    model.add_employee(employee)
    logger.info("Employee added", employee_id=employee.employee_id)
    return CommandResult(messages.MESSAGE_ADD_EMPLOYEE_SUCCESS.format(messages.format_employee(employee)))


def edit_employee(model: Model, employee_id: EmployeeId, changes: EmployeeChanges) -> CommandResult:
    """Edit an employee's descriptive fields and refresh every linked task."""
    employee = _resolve_employee(model, employee_id)
    if not changes.is_any_field_edited():
        raise NoFieldsEdited()

    edited = employee.with_fields(**changes.as_dict())
    clash = any(
        other.employee_id != employee_id and other.is_same_employee(edited) for other in model.get_employee_list()
    )
    if clash:
        logger.warning("Edit would duplicate another employee", employee_id=employee_id)
        raise DuplicateEmployee()

    refreshed = [(task, task.assign_employee(edited)) for task in _linked_tasks(model, edited)]

    model.set_employee(employee, edited)
    for task, updated_task in refreshed:
        model.set_task(task, updated_task)
    model.update_filtered_employee_list(PREDICATE_SHOW_ALL_EMPLOYEES)

    logger.info("Employee edited", employee_id=employee_id, tasks_refreshed=len(refreshed))
    return CommandResult(messages.MESSAGE_EDIT_EMPLOYEE_SUCCESS.format(messages.format_employee(edited)))


def delete_employee(model: Model, employee_id: EmployeeId) -> CommandResult:
    """Delete an employee and purge its ID from every linked task."""
    employee = _resolve_employee(model, employee_id)

    purged = [(task, task.unassign_employee(employee_id)) for task in _linked_tasks(model, employee)]

    model.remove_employee(employee)
    for task, updated_task in purged:
        model.set_task(task, updated_task)

    logger.info("Employee deleted", employee_id=employee_id, tasks_purged=len(purged))
    return CommandResult(messages.MESSAGE_DELETE_EMPLOYEE_SUCCESS.format(messages.format_employee(employee)))


def add_task(model: Model, title: TaskTitle, is_done: bool = False) -> CommandResult:
    """Add a new task with no assigned employees."""
    candidate = Task(1, title, is_done)
    if model.has_task(candidate):
        logger.warning("Duplicate task rejected", title=str(title))
        raise DuplicateTask()

    task = Task(model.next_task_id(), title, is_done)
    model.add_task(task)
    logger.info("Task added", task_id=task.task_id)
    return CommandResult(messages.MESSAGE_ADD_TASK_SUCCESS.format(messages.format_task(task)))


def _replace_task(model: Model, task: Task, edited: Task) -> int:
    clash = any(other.task_id != task.task_id and other.is_same_task(edited) for other in model.get_task_list())
    if clash:
        logger.warning("Edit would duplicate another task", task_id=task.task_id)
        raise DuplicateTask()

    refreshed = [(employee, employee.assign_task(edited)) for employee in _linked_employees(model, edited)]

    model.set_task(task, edited)
    for employee, updated_employee in refreshed:
        model.set_employee(employee, updated_employee)
    model.update_filtered_task_list(PREDICATE_SHOW_ALL_TASKS)
    return len(refreshed)


def edit_task(model: Model, task_id: TaskId, changes: TaskChanges) -> CommandResult:
    """Edit a task's fields and refresh every linked employee."""
    task = _resolve_task(model, task_id)
    if not changes.is_any_field_edited():
        raise NoFieldsEdited()

    edited = task.with_fields(**changes.as_dict())
    count = _replace_task(model, task, edited)
    logger.info("Task edited", task_id=task_id, employees_refreshed=count)
    return CommandResult(messages.MESSAGE_EDIT_TASK_SUCCESS.format(messages.format_task(edited)))


def mark_task(model: Model, task_id: TaskId) -> CommandResult:
    """Mark a task as done."""
    task = _resolve_task(model, task_id)
    edited = task.with_fields(is_done=True)
    _replace_task(model, task, edited)
    logger.info("Task marked", task_id=task_id)
    return CommandResult(messages.MESSAGE_MARK_TASK_SUCCESS.format(messages.format_task(edited)))


def unmark_task(model: Model, task_id: TaskId) -> CommandResult:
    """Mark a task as not done."""
    task = _resolve_task(model, task_id)
    edited = task.with_fields(is_done=False)
    _replace_task(model, task, edited)
    logger.info("Task unmarked", task_id=task_id)
    return CommandResult(messages.MESSAGE_UNMARK_TASK_SUCCESS.format(messages.format_task(edited)))


def delete_task(model: Model, task_id: TaskId) -> CommandResult:
    """Delete a task and purge its ID from every linked employee."""
    task = _resolve_task(model, task_id)

    purged = [(employee, employee.unassign_task(task_id)) for employee in _linked_employees(model, task)]

    model.remove_task(task)
    for employee, updated_employee in purged:
        model.set_employee(employee, updated_employee)

    logger.info("Task deleted", task_id=task_id, employees_purged=len(purged))
    return CommandResult(messages.MESSAGE_DELETE_TASK_SUCCESS.format(messages.format_task(task)))


def list_employees(model: Model) -> CommandResult:
    model.update_filtered_employee_list(PREDICATE_SHOW_ALL_EMPLOYEES)
    return CommandResult(messages.MESSAGE_EMPLOYEES_LISTED.format(len(model.get_filtered_employee_list())))


def find_employees(model: Model, keywords: list[str]) -> CommandResult:
    """Filter employees to those whose name contains any keyword."""
    model.update_filtered_employee_list(NameContainsKeywordsPredicate(keywords))
    return CommandResult(messages.MESSAGE_EMPLOYEES_LISTED.format(len(model.get_filtered_employee_list())))


def list_tasks(model: Model, completed: bool | None = None) -> CommandResult:
    """Filter tasks by completion status; ``None`` shows every task."""
    if completed is None:
        predicate = PREDICATE_SHOW_ALL_TASKS
    elif completed:
        predicate = PREDICATE_SHOW_COMPLETED_TASKS
    else:
        predicate = PREDICATE_SHOW_INCOMPLETE_TASKS
    model.update_filtered_task_list(predicate)
    return CommandResult(messages.MESSAGE_TASKS_LISTED.format(len(model.get_filtered_task_list())))

