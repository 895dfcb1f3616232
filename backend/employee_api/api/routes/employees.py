"""Employee Routes - HTTP surface for employee CRUD.

Invariants:
    - Bodies and query parameters validated by FastAPI/Pydantic before the service runs
    - Absent records map to 404; create/delete answer with fixed plain-text messages
    - InvalidArgumentError propagates to the global handler (400)

Design Decisions:
    - EmployeeService built per request from the request's AsyncSession
      (gateway injected through the constructor, no module-level state)
    - Delete maps RecordNotFoundError to plain text to keep the text contract
      of the delete endpoint
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.domain_types import EmployeeId
from employee_api.core.errors import RecordNotFoundError
from employee_api.infrastructure.database import get_db
from employee_api.infrastructure.employee_gateway import SqlEmployeeGateway
from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeResponse
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/employees", tags=["employees"])

DELETED_MESSAGE = "Record Deleted"
NOT_FOUND_MESSAGE = "Record Not Found"


def get_employee_service(
    db: AsyncSession = Depends(get_db),
) -> EmployeeService:
    """FastAPI dependency wiring the service to this request's session."""
    return EmployeeService(SqlEmployeeGateway(db))


def _found_or_404(
    employee: Employee | None, employee_id: int,
) -> EmployeeResponse:
    if employee is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=RecordNotFoundError(
                "Employee", str(employee_id),
            ).to_response(),
        )
    return EmployeeResponse.model_validate(employee)


@router.post("/add", response_class=PlainTextResponse)
async def add_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a record; the id is assigned by the store."""
    return await service.create(Employee(**body.model_dump()))


@router.get("/getall", response_model=list[EmployeeResponse])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    employees = await service.get_all()
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get("/get/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_by_id(EmployeeId(employee_id))
    return _found_or_404(employee, employee_id)


@router.put("/update", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int = Query(alias="id"),
    column: str = Query(),
    data_to_edit: str = Query(alias="dataToEdit"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Update a single field; `column` names the field, `dataToEdit` its new value."""
    employee = await service.update_field(
        EmployeeId(employee_id), column, data_to_edit,
    )
    return _found_or_404(employee, employee_id)


@router.put("/replace/{employee_id}", response_model=EmployeeResponse)
async def replace_employee(
    employee_id: int,
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Overwrite every field of an existing record."""
    employee = await service.replace(EmployeeId(employee_id), body.model_dump())
    return _found_or_404(employee, employee_id)


@router.delete("/delete/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        await service.delete(EmployeeId(employee_id))
    except RecordNotFoundError:
        return PlainTextResponse(
            NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND,
        )
    return DELETED_MESSAGE
