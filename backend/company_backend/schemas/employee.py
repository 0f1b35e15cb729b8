"""
Company Backend — Employee Request/Response Schemas
====================================================

What:  Pydantic models for the /api/employee contract.

JSON property names (PascalCase via alias generator):
    EmployeeId, EmployeeName, Department, DateOfJoining, PhotoFileName

`EmployeeDto` carries every field as a string, the way the list endpoint has
always rendered them: missing values become "" and DateOfJoining is a
`YYYY-MM-DD` calendar date.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class EmployeeSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class EmployeeDto(EmployeeSchema):
    """One element of the GET /api/employee response array."""
    employee_id: int
    employee_name: str
    department: str = Field(description="Free-form department label")
    date_of_joining: str = Field(description="Join date as YYYY-MM-DD, or empty")
    photo_file_name: str = Field(description="File name under /Photos")


class EmployeeCreate(EmployeeSchema):
    """Body of POST /api/employee. All four data fields are written as given."""
    employee_id: Optional[int] = Field(default=None, description="Ignored on create")
    employee_name: Optional[str] = None
    department: Optional[str] = None
    date_of_joining: Optional[date] = Field(default=None, description="ISO date, e.g. 2024-01-15")
    photo_file_name: Optional[str] = None


class EmployeeUpdate(EmployeeSchema):
    """Body of PUT /api/employee. Every data field is overwritten, including nulls."""
    employee_id: int
    employee_name: Optional[str] = None
    department: Optional[str] = None
    date_of_joining: Optional[date] = None
    photo_file_name: Optional[str] = None
