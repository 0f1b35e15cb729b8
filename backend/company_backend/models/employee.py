"""
Company Backend — Employee SQLAlchemy Model
============================================

What:  ORM mapping of the `Employee` table.
Who:   EmployeeService builds its statements against this mapping;
       Alembic reads it for schema management.

`Department` is a free-form label, not a foreign key to the Department
table. `PhotoFileName` names a file inside the photos directory served at
/Photos; the row does not own the file and deleting the row leaves it alone.
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from company_backend.database import Base


class Employee(Base):
    """An employee row. Same lifecycle as Department."""

    __tablename__ = "Employee"

    employee_id: Mapped[int] = mapped_column(
        "EmployeeId",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    employee_name: Mapped[str | None] = mapped_column("EmployeeName", String(500), nullable=True)

    department: Mapped[str | None] = mapped_column("Department", String(500), nullable=True)

    date_of_joining: Mapped[date | None] = mapped_column("DateOfJoining", Date, nullable=True)

    photo_file_name: Mapped[str | None] = mapped_column("PhotoFileName", String(500), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Employee(id={self.employee_id}, name='{self.employee_name}', "
            f"department='{self.department}')>"
        )
