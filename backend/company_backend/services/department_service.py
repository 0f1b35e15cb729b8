"""
Company Backend — Department Service
=====================================

What:  List, create, update and delete rows of the Department table.
How:   Each method issues exactly one statement through `execute()` and
       returns either transfer records or nothing. Mutations commit before
       returning; the session and its release belong to get_db_session.

Statements:
    list    SELECT DepartmentId, DepartmentName FROM Department
    create  INSERT INTO Department (DepartmentName) VALUES (:name)
    update  UPDATE Department SET DepartmentName = :name WHERE DepartmentId = :id
    delete  DELETE FROM Department WHERE DepartmentId = :id

Update and delete do not check that the row exists; zero affected rows is
a success.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from company_backend.models.department import Department
from company_backend.schemas.department import (
    DepartmentCreate,
    DepartmentDto,
    DepartmentUpdate,
)
from company_backend.services.statements import commit, execute

logger = logging.getLogger(__name__)


class DepartmentService:
    """Stateless; one instance is shared by all requests."""

    async def list_departments(self, db: AsyncSession) -> List[DepartmentDto]:
        """
        Return every department in store-native order.

        No pagination, filtering or sorting is applied.
        """
        result = await execute(
            db,
            select(Department.department_id, Department.department_name),
            "department.list",
        )
        return [
            DepartmentDto(
                department_id=int(department_id),
                department_name=_as_text(department_name),
            )
            for department_id, department_name in result.all()
        ]

    async def create_department(self, db: AsyncSession, payload: DepartmentCreate) -> None:
        """Insert a new row; the store assigns the identifier, which is not returned."""
        await execute(
            db,
            insert(Department).values({Department.department_name: payload.department_name}),
            "department.create",
        )
        await commit(db, "department.create")
        logger.info("Department added: %s", payload.department_name)

    async def update_department(self, db: AsyncSession, payload: DepartmentUpdate) -> None:
        result = await execute(
            db,
            update(Department)
            .where(Department.department_id == payload.department_id)
            .values({Department.department_name: payload.department_name})
            .execution_options(synchronize_session=False),
            "department.update",
            department_id=payload.department_id,
        )
        await commit(db, "department.update", department_id=payload.department_id)
        logger.info(
            "Department %s updated (%s row(s) matched)",
            payload.department_id,
            result.rowcount,
        )

    async def delete_department(self, db: AsyncSession, department_id: int) -> None:
        result = await execute(
            db,
            delete(Department)
            .where(Department.department_id == department_id)
            .execution_options(synchronize_session=False),
            "department.delete",
            department_id=department_id,
        )
        await commit(db, "department.delete", department_id=department_id)
        logger.info(
            "Department %s deleted (%s row(s) matched)",
            department_id,
            result.rowcount,
        )


def _as_text(value: Optional[object]) -> str:
    # NULL columns render as empty strings
    return "" if value is None else str(value)


department_service = DepartmentService()
