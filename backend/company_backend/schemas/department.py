"""
Company Backend — Department Request/Response Schemas
======================================================

What:  Pydantic models for the /api/department contract.
How:   Python attributes are snake_case; the JSON property names are the
       PascalCase names clients already use (`DepartmentId`,
       `DepartmentName`), produced by the `to_pascal` alias generator.
       Both spellings are accepted on input.

Schemas are separate from the SQLAlchemy model: `DepartmentDto` is the
transfer record returned by the list endpoint, the payload models are what
POST and PUT accept.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class DepartmentSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class DepartmentDto(DepartmentSchema):
    """One element of the GET /api/department response array."""
    department_id: int = Field(description="Store-assigned identifier")
    department_name: str = Field(description="Department name")


class DepartmentCreate(DepartmentSchema):
    """
    Body of POST /api/department.

    The name is not validated; an identifier sent by the client is ignored
    because the store assigns it.
    """
    department_id: Optional[int] = Field(default=None, description="Ignored on create")
    department_name: Optional[str] = Field(default=None, description="Department name")


class DepartmentUpdate(DepartmentSchema):
    """Body of PUT /api/department. The identifier selects the row to rename."""
    department_id: int = Field(description="Identifier of the row to update")
    department_name: Optional[str] = Field(default=None, description="New department name")
