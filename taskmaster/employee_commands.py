"""Employee commands for the taskmaster CLI."""

from cyclopts import App

from taskmaster import operations
from taskmaster.models import Address, Email, Name, Phone, Tag

employee_app = App(name="employee", help="Manage employees")


def _parse_tags(tags: str) -> frozenset[Tag]:
    return frozenset(Tag(name.strip()) for name in tags.split(",") if name.strip())


@employee_app.command
def add(name: str, phone: str, email: str, address: str, tags: str = "") -> None:
    """Add an employee.

    Args:
        name: Full name
        phone: Phone number, digits only
        email: Email address
        address: Postal address
        tags: Comma-separated tags
    """
    from taskmaster.cli import run_operation

    run_operation(
        lambda store: operations.add_employee(
            store, Name(name), Phone(phone), Email(email), Address(address), _parse_tags(tags)
        )
    )


@employee_app.command
def edit(
    employee_id: int,
    name: str | None = None,
    phone: str | None = None,
    email: str | None = None,
    address: str | None = None,
    tags: str | None = None,
) -> None:
    """Edit an employee. Only the given fields change; --tags "" clears tags."""
    from taskmaster.cli import run_operation

    def build(store):
        changes = operations.EmployeeChanges(
            name=Name(name) if name is not None else None,
            phone=Phone(phone) if phone is not None else None,
            email=Email(email) if email is not None else None,
            address=Address(address) if address is not None else None,
            tags=_parse_tags(tags) if tags is not None else None,
        )
        return operations.edit_employee(store, employee_id, changes)

    run_operation(build)


@employee_app.command
def delete(employee_id: int) -> None:
    """Delete an employee and unassign it from its tasks."""
    from taskmaster.cli import run_operation

    run_operation(lambda store: operations.delete_employee(store, employee_id))


@employee_app.command(name="list")
def list_employees() -> None:
    """List all employees."""
    from taskmaster.cli import print_employees, run_operation

    store = run_operation(operations.list_employees, save=False)
    print_employees(store.get_filtered_employee_list())


@employee_app.command
def find(*keywords: str) -> None:
    """List employees whose name contains any of the keywords."""
    from taskmaster.cli import print_employees, run_operation

    store = run_operation(lambda store: operations.find_employees(store, list(keywords)), save=False)
    print_employees(store.get_filtered_employee_list())
