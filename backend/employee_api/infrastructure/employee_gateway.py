"""Employee Gateway - SQLAlchemy implementation of the EmployeeGateway protocol.

Invariants:
    - Each mutating call commits its own transaction
    - find_by_id always reloads the row (raw and bulk statements bypass the identity map)
    - find_all orders by primary key

Design Decisions:
    - Works on a caller-provided AsyncSession: the request scope owns the session
    - execute_raw_update takes statement text built by core/field_updates.py;
      it never builds SQL itself
"""

import logging
from typing import Any

from sqlalchemy import delete, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.domain_types import EmployeeId
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class SqlEmployeeGateway:
    """Employee persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, employee: Employee) -> EmployeeId:
        self.db.add(employee)
        await self.db.commit()
        await self.db.refresh(employee)
        return EmployeeId(employee.id)

    async def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        return await self.db.get(
            Employee, employee_id, populate_existing=True,
        )

    async def find_all(self) -> list[Employee]:
        result = await self.db.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def delete_by_id(self, employee_id: EmployeeId) -> None:
        await self.db.execute(
            delete(Employee)
            .where(Employee.id == employee_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()

    async def execute_raw_update(
        self, statement: str, params: dict[str, Any],
    ) -> int:
        result = await self.db.execute(text(statement), params)
        await self.db.commit()
        logger.debug(
            f"Raw update affected {result.rowcount} row(s)",
            extra={"affected_rows": result.rowcount},
        )
        return result.rowcount

    async def update_by_id(
        self, employee_id: EmployeeId, values: dict[str, Any],
    ) -> int:
        result = await self.db.execute(
            update(Employee)
            .where(Employee.id == employee_id)
            .values(**values)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return result.rowcount
