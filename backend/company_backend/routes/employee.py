"""
Company Backend — Employee Route Handlers
==========================================

What:  GET/POST/PUT/DELETE on /api/employee plus photo upload.
How:   Same shape as the department routes over the five-field payload.

Photo flow:
    1. Client uploads the image to POST /api/employee/savefile
    2. The stored file name comes back as a JSON string
    3. Client sends it as PhotoFileName in POST/PUT /api/employee
    4. The image is served at GET /Photos/<PhotoFileName> (static mount)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from company_backend.database import get_db_session
from company_backend.schemas.common import ErrorResponse
from company_backend.schemas.employee import EmployeeCreate, EmployeeDto, EmployeeUpdate
from company_backend.services.employee_service import employee_service
from company_backend.services.photo_service import photo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employee", tags=["Employee"])


@router.get(
    "",
    response_model=List[EmployeeDto],
    summary="List all employees",
    description="DateOfJoining is rendered as YYYY-MM-DD.",
)
async def list_employees(
    db: AsyncSession = Depends(get_db_session),
) -> List[EmployeeDto]:
    return await employee_service.list_employees(db)


@router.post("", response_class=PlainTextResponse, summary="Add an employee")
async def create_employee(
    payload: EmployeeCreate,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await employee_service.create_employee(db, payload)
    return "Added Successfully"


@router.put(
    "",
    response_class=PlainTextResponse,
    summary="Update an employee",
    description="Overwrites every field of the employee with the given EmployeeId. Unknown ids are ignored.",
)
async def update_employee(
    payload: EmployeeUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await employee_service.update_employee(db, payload)
    return "Updated Successfully"


@router.delete("/{employee_id}", response_class=PlainTextResponse, summary="Delete an employee")
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await employee_service.delete_employee(db, employee_id)
    return "Deleted Successfully"


@router.post(
    "/savefile",
    response_model=str,
    responses={
        200: {"description": "Stored file name"},
        400: {"description": "Invalid file name, type or size", "model": ErrorResponse},
    },
    summary="Upload an employee photo",
)
async def save_photo(
    file: UploadFile = File(..., description="Image file (PNG, JPG, JPEG or GIF)"),
) -> str:
    content = await file.read()
    logger.info(
        "Received photo upload: filename=%s, size=%d bytes",
        file.filename or "unknown",
        len(content),
    )
    try:
        return await photo_service.save_photo(file.filename, content)
    finally:
        await file.close()
