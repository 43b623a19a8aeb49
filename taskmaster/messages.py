"""User-facing messages and entity formatting."""

MESSAGE_INVALID_TASK_ID = "The task ID provided is invalid"
MESSAGE_INVALID_EMPLOYEE_ID = "The employee ID provided is invalid"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_DUPLICATE_EMPLOYEE = "This employee already exists in TaskMaster."
MESSAGE_DUPLICATE_TASK = "This task already exists in TaskMaster."

MESSAGE_ASSIGN_TASK_SUCCESS = "Assign task success"
MESSAGE_UNASSIGN_TASK_SUCCESS = "Unassign task success"
MESSAGE_ADD_EMPLOYEE_SUCCESS = "New employee added: {}"
MESSAGE_EDIT_EMPLOYEE_SUCCESS = "Edited Employee: {}"
MESSAGE_DELETE_EMPLOYEE_SUCCESS = "Deleted Employee: {}"
MESSAGE_ADD_TASK_SUCCESS = "New task added: {}"
MESSAGE_EDIT_TASK_SUCCESS = "Edited Task: {}"
MESSAGE_DELETE_TASK_SUCCESS = "Deleted Task: {}"
MESSAGE_MARK_TASK_SUCCESS = "Marked Task as done: {}"
MESSAGE_UNMARK_TASK_SUCCESS = "Marked Task as not done: {}"
MESSAGE_EMPLOYEES_LISTED = "{} employee(s) listed!"
MESSAGE_TASKS_LISTED = "{} task(s) listed!"


def format_employee(employee) -> str:
    """Format an employee for display."""
    parts = [
        f"{employee.name}",
        f"; Phone: {employee.phone}",
        f"; Email: {employee.email}",
        f"; Address: {employee.address}",
    ]
    if employee.tags:
        parts.append("; Tags: " + "".join(str(tag) for tag in sorted(employee.tags, key=lambda t: t.name)))
    if len(employee.tasks):
        parts.append("; Tasks: " + ", ".join(str(task_id) for task_id in employee.tasks.ids()))
    return "".join(parts)


def format_task(task) -> str:
    """Format a task for display."""
    status = "done" if task.is_done else "not done"
    text = f"{task.title} ({status})"
    if len(task.employees):
        names = ", ".join(f"{e.employee_id}:{e.name}" for e in task.employees.as_ordered_list())
        text += f"; Employees: {names}"
    return text
