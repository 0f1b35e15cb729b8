"""Create Department and Employee tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the two tables served by /api/department and /api/employee.
How:   Integer autoincrement keys assigned by the store; all data columns
       nullable. Employee.Department is a plain label with no foreign key.

Rollback: downgrade() drops both tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Department",
        sa.Column("DepartmentId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("DepartmentName", sa.String(500), nullable=True),
        sa.PrimaryKeyConstraint("DepartmentId"),
    )

    op.create_table(
        "Employee",
        sa.Column("EmployeeId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("EmployeeName", sa.String(500), nullable=True),
        sa.Column(
            "Department",
            sa.String(500),
            nullable=True,
            comment="Department label; not a foreign key",
        ),
        sa.Column("DateOfJoining", sa.Date(), nullable=True),
        sa.Column(
            "PhotoFileName",
            sa.String(500),
            nullable=True,
            comment="File name under the photos directory served at /Photos",
        ),
        sa.PrimaryKeyConstraint("EmployeeId"),
    )


def downgrade() -> None:
    op.drop_table("Employee")
    op.drop_table("Department")
