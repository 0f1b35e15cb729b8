"""
Company Backend — Employee Service
===================================

What:  List, create, update and delete rows of the Employee table.
How:   Same shape as DepartmentService over five columns: one statement
       per method through `execute()`, mutations committed before returning.

The list operation renders DateOfJoining as `YYYY-MM-DD` whatever the
store hands back: PostgreSQL and MySQL drivers return `date`, some SQLite
setups return `datetime` or plain strings.
"""

import logging
from datetime import date, datetime
from typing import Any, List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from company_backend.models.employee import Employee
from company_backend.schemas.employee import EmployeeCreate, EmployeeDto, EmployeeUpdate
from company_backend.services.statements import commit, execute

logger = logging.getLogger(__name__)


def format_join_date(value: Any) -> str:
    """
    Render a join date as an ISO calendar date.

    >>> format_join_date(date(2024, 1, 15))
    '2024-01-15'
    >>> format_join_date("2024-01-15 00:00:00")
    '2024-01-15'
    >>> format_join_date(None)
    ''

    A string that does not start with an ISO date is logged and returned
    unchanged, so one malformed row does not fail the whole listing.
    """
    if value is None:
        return ""
    # datetime subclasses date, so it is checked first
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    if not text:
        return ""
    try:
        return date.fromisoformat(text[:10]).isoformat()
    except ValueError:
        logger.warning("Unparseable DateOfJoining value %r returned as-is", text)
        return text


class EmployeeService:
    """Stateless; one instance is shared by all requests."""

    async def list_employees(self, db: AsyncSession) -> List[EmployeeDto]:
        result = await execute(
            db,
            select(
                Employee.employee_id,
                Employee.employee_name,
                Employee.department,
                Employee.date_of_joining,
                Employee.photo_file_name,
            ),
            "employee.list",
        )
        return [
            EmployeeDto(
                employee_id=int(employee_id),
                employee_name=_as_text(employee_name),
                department=_as_text(department),
                date_of_joining=format_join_date(date_of_joining),
                photo_file_name=_as_text(photo_file_name),
            )
            for employee_id, employee_name, department, date_of_joining, photo_file_name
            in result.all()
        ]

    async def create_employee(self, db: AsyncSession, payload: EmployeeCreate) -> None:
        await execute(
            db,
            insert(Employee).values(_column_values(payload)),
            "employee.create",
        )
        await commit(db, "employee.create")
        logger.info("Employee added: %s", payload.employee_name)

    async def update_employee(self, db: AsyncSession, payload: EmployeeUpdate) -> None:
        """Overwrite all four data columns of the row matching EmployeeId."""
        result = await execute(
            db,
            update(Employee)
            .where(Employee.employee_id == payload.employee_id)
            .values(_column_values(payload))
            .execution_options(synchronize_session=False),
            "employee.update",
            employee_id=payload.employee_id,
        )
        await commit(db, "employee.update", employee_id=payload.employee_id)
        logger.info(
            "Employee %s updated (%s row(s) matched)",
            payload.employee_id,
            result.rowcount,
        )

    async def delete_employee(self, db: AsyncSession, employee_id: int) -> None:
        result = await execute(
            db,
            delete(Employee)
            .where(Employee.employee_id == employee_id)
            .execution_options(synchronize_session=False),
            "employee.delete",
            employee_id=employee_id,
        )
        await commit(db, "employee.delete", employee_id=employee_id)
        logger.info("Employee %s deleted (%s row(s) matched)", employee_id, result.rowcount)


def _column_values(payload: EmployeeCreate | EmployeeUpdate) -> dict:
    return {
        Employee.employee_name: payload.employee_name,
        Employee.department: payload.department,
        Employee.date_of_joining: payload.date_of_joining,
        Employee.photo_file_name: payload.photo_file_name,
    }


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


employee_service = EmployeeService()
