"""
Company Backend — Department SQLAlchemy Model
==============================================

What:  ORM mapping of the `Department` table.
Who:   DepartmentService builds its statements against this mapping;
       Alembic reads it for schema management.

Column names keep the store's PascalCase spelling (`DepartmentId`,
`DepartmentName`) while the Python attributes are snake_case.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from company_backend.database import Base


class Department(Base):
    """
    A department row.

    Lifecycle:
        insert → select-all → update-by-id → delete-by-id.
        No uniqueness constraint on the name; duplicates are legal.
    """

    __tablename__ = "Department"

    # Assigned by the store on insert; clients never send it on create
    department_id: Mapped[int] = mapped_column(
        "DepartmentId",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    department_name: Mapped[str | None] = mapped_column(
        "DepartmentName",
        String(500),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Department(id={self.department_id}, name='{self.department_name}')>"
