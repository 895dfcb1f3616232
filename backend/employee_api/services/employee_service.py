"""Employee Service - CRUD orchestration and the dynamic single-field update.

Invariants:
    - create returns CREATE_CONFIRMATION after exactly one gateway insert
    - get_by_id and the post-update re-fetch return None on miss, never raise
    - update_field rejects unknown fields and bad ages before any gateway call
    - delete checks existence first; a missing id raises RecordNotFoundError
      and issues no delete
    - Logging is a side channel: it never changes results or control flow

Design Decisions:
    - Update goes through execute_raw_update with statement text from
      core/field_updates.py (allow-listed column, bound value and id)
    - Check-then-delete is not atomic against concurrent deletes
      (single-writer assumption)
"""

import logging
from typing import Any

from employee_api.core.domain_types import EmployeeId
from employee_api.core.errors import (
    ErrorContext, InvalidArgumentError, RecordNotFoundError,
)
from employee_api.core.field_updates import (
    build_field_update, render_update_statement,
)
from employee_api.core.repository_protocols import EmployeeGateway
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)

CREATE_CONFIRMATION = "Data inserted successfully"


class EmployeeService:
    """Record service for Employee."""

    def __init__(self, gateway: EmployeeGateway):
        self.gateway = gateway

    async def create(self, employee: Employee) -> str:
        """Persist a new record; the store assigns its id."""
        employee_id = await self.gateway.insert(employee)
        logger.info(
            "Employee record inserted successfully",
            extra={"employee_id": employee_id},
        )
        return CREATE_CONFIRMATION

    async def get_by_id(self, employee_id: EmployeeId) -> Employee | None:
        employee = await self.gateway.find_by_id(employee_id)
        logger.info(
            f"Retrieved employee record with ID {employee_id}",
            extra={"employee_id": employee_id},
        )
        return employee

    async def get_all(self) -> list[Employee]:
        employees = await self.gateway.find_all()
        logger.info(f"Retrieved {len(employees)} employee records")
        return employees

    async def update_field(
        self, employee_id: EmployeeId, field_name: str, new_value: str,
    ) -> Employee | None:
        """Set one field on one record, then return the record as stored.

        Raises InvalidArgumentError for an unknown field name or a non-integer
        age; in both cases the gateway is never touched.
        """
        try:
            update = build_field_update(field_name, new_value)
        except InvalidArgumentError:
            logger.warning(
                f"Rejected update of {field_name!r} on employee {employee_id}",
                extra={"employee_id": employee_id, "field": field_name},
            )
            raise

        affected = await self.gateway.execute_raw_update(
            render_update_statement(update),
            {"value": update.value, "id": employee_id},
        )
        logger.info(
            f"Employee record with ID {employee_id} is updated in database",
            extra={
                "employee_id": employee_id,
                "field": update.field.value,
                "affected_rows": affected,
            },
        )
        return await self.gateway.find_by_id(employee_id)

    async def replace(
        self, employee_id: EmployeeId, values: dict[str, Any],
    ) -> Employee | None:
        """Overwrite every mutable field of an existing record."""
        values = {k: v for k, v in values.items() if k != "id"}
        affected = await self.gateway.update_by_id(employee_id, values)
        logger.info(
            f"Employee record with ID {employee_id} replaced",
            extra={"employee_id": employee_id, "affected_rows": affected},
        )
        return await self.gateway.find_by_id(employee_id)

    async def delete(self, employee_id: EmployeeId) -> None:
        existing = await self.gateway.find_by_id(employee_id)
        if existing is None:
            logger.warning(
                f"Cannot perform DELETE operation - ID {employee_id} "
                "is not found in the database",
                extra={"employee_id": employee_id},
            )
            raise RecordNotFoundError(
                "Employee", str(employee_id),
                ErrorContext(employee_id=employee_id),
            )
        await self.gateway.delete_by_id(employee_id)
        logger.info(
            f"Employee record with ID {employee_id} is deleted from the database",
            extra={"employee_id": employee_id},
        )
