"""Builders and assertions shared by the tests."""

from taskmaster.models import Address, Email, Employee, Name, Phone, Tag, Task, TaskTitle
from taskmaster.store import Store


def make_employee(employee_id: int, name: str = "Alex Yeoh", phone: str = "87438807", **kwargs) -> Employee:
    """Build an employee with sensible defaults for the descriptive fields."""
    slug = name.lower().replace(" ", "")
    return Employee(
        employee_id=employee_id,
        name=Name(name),
        phone=Phone(phone),
        email=Email(kwargs.pop("email", f"{slug}@example.com")),
        address=Address(kwargs.pop("address", "Blk 30 Geylang Street 29, #06-40")),
        tags=frozenset(Tag(tag) for tag in kwargs.pop("tags", [])),
        **kwargs,
    )


def make_task(task_id: int, title: str = "Design", is_done: bool = False) -> Task:
    return Task(task_id=task_id, title=TaskTitle(title), is_done=is_done)


def assert_consistent(store: Store) -> None:
    """Assert every link in the store is present on both sides and refers to live entities."""
    employees = {e.employee_id: e for e in store.get_employee_list()}
    tasks = {t.task_id: t for t in store.get_task_list()}
    for employee in employees.values():
        for task_id in employee.tasks.ids():
            assert task_id in tasks, f"employee {employee.employee_id} links missing task {task_id}"
            assert employee.employee_id in tasks[task_id].employees
    for task in tasks.values():
        for employee_id in task.employees.ids():
            assert employee_id in employees, f"task {task.task_id} links missing employee {employee_id}"
            assert task.task_id in employees[employee_id].tasks
