"""Exceptions raised by the task tracker."""

from taskmaster import messages


class TaskMasterError(Exception):
    """Base class for task tracker errors."""

    pass


class CommandError(TaskMasterError):
    """Raised when a command is rejected. The store is left unmodified."""

    default_message = "Command failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTaskId(CommandError):
    """Raised when a task ID does not resolve in the task collection."""

    default_message = messages.MESSAGE_INVALID_TASK_ID


class InvalidEmployeeId(CommandError):
    """Raised when an employee ID does not resolve in the employee collection."""

    default_message = messages.MESSAGE_INVALID_EMPLOYEE_ID


class NoFieldsEdited(CommandError):
    """Raised when an edit is requested without any field changes."""

    default_message = messages.MESSAGE_NOT_EDITED


class DuplicateEmployee(CommandError):
    """Raised when an employee would collide with a different existing employee."""

    default_message = messages.MESSAGE_DUPLICATE_EMPLOYEE


class DuplicateTask(CommandError):
    """Raised when a task would collide with a different existing task."""

    default_message = messages.MESSAGE_DUPLICATE_TASK


class DuplicateEntityError(TaskMasterError):
    """Raised by the store when an insertion or replacement would create a duplicate."""

    pass


class EntityNotFoundError(TaskMasterError):
    """Raised by the store when the entity to replace or remove is absent."""

    pass


class StorageError(TaskMasterError):
    """Raised when the snapshot file cannot be read or written."""

    pass
