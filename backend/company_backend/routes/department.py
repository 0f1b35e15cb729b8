"""
Company Backend — Department Route Handlers
============================================

What:  GET/POST/PUT/DELETE on /api/department.
How:   Each handler takes its input from the body or path, calls
       DepartmentService once and answers with JSON (list) or a plain-text
       confirmation (mutations).

Confirmations:
    POST   → "Added Successfully"
    PUT    → "Updated Successfully"
    DELETE → "Deleted Successfully"
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from company_backend.database import get_db_session
from company_backend.schemas.department import (
    DepartmentCreate,
    DepartmentDto,
    DepartmentUpdate,
)
from company_backend.services.department_service import department_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/department", tags=["Department"])


@router.get(
    "",
    response_model=List[DepartmentDto],
    summary="List all departments",
)
async def list_departments(
    db: AsyncSession = Depends(get_db_session),
) -> List[DepartmentDto]:
    return await department_service.list_departments(db)


@router.post(
    "",
    response_class=PlainTextResponse,
    summary="Add a department",
    description="Inserts a department. The new identifier is assigned by the store and not returned.",
)
async def create_department(
    payload: DepartmentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await department_service.create_department(db, payload)
    return "Added Successfully"


@router.put(
    "",
    response_class=PlainTextResponse,
    summary="Rename a department",
    description="Updates the name of the department with the given DepartmentId. Unknown ids are ignored.",
)
async def update_department(
    payload: DepartmentUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await department_service.update_department(db, payload)
    return "Updated Successfully"


@router.delete(
    "/{department_id}",
    response_class=PlainTextResponse,
    summary="Delete a department",
)
async def delete_department(
    department_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await department_service.delete_department(db, department_id)
    return "Deleted Successfully"
