"""
Company Backend — Statement Execution Helper
=============================================

What:  Runs one SQL statement on the request's session, commits writes, and
       converts driver failures into DatabaseError.
Who:   DepartmentService and EmployeeService; every CRUD operation goes
       through `execute()` exactly once, and
       every mutation then calls `commit()`.

Failures are logged with the operation name and re-raised. There is no
retry: the request fails and the session dependency rolls back.
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from company_backend.exceptions import DatabaseError

logger = logging.getLogger(__name__)


async def execute(db: AsyncSession, statement: Any, operation: str, **context: Any):
    """
    Execute `statement` and return the SQLAlchemy result.

    Args:
        db:        Session injected by get_db_session
        statement: A select/insert/update/delete construct
        operation: Short label used in logs, e.g. "department.update"
        context:   Extra values logged on failure (never sent to clients)

    Raises:
        DatabaseError wrapping the driver exception.
    """
    try:
        return await db.execute(statement)
    except SQLAlchemyError as e:
        logger.error("Statement failed in %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__, **context},
        ) from e


async def commit(db: AsyncSession, operation: str, **context: Any) -> None:
    """
    Commit the request's transaction before the handler returns its confirmation.

    The client only sees "... Successfully" once the write is durable; a
    commit-time failure raises DatabaseError like a failed statement.
    """
    try:
        await db.commit()
    except SQLAlchemyError as e:
        logger.error("Commit failed in %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__, **context},
        ) from e
