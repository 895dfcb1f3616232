"""Employee Schemas - Pydantic models for the employee record on the wire.

Invariants:
    - EmployeeCreate never carries an id (an incoming id is ignored)
    - EmployeeResponse always carries the store-assigned id
    - No content validation beyond the column range: empty names and any
      age within AGE_MIN..AGE_MAX are accepted as-is

Design Decisions:
    - alias_generator=to_camel + populate_by_name: camelCase on the wire,
      snake_case attributes matching the ORM columns
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from employee_api.core.domain_types import AGE_MAX, AGE_MIN


class EmployeeCreate(BaseModel):
    """Employee payload for create and full replace."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = None
    last_name: str | None = None
    age: int = Field(0, ge=AGE_MIN, le=AGE_MAX)
    position: str | None = None


class EmployeeResponse(BaseModel):
    """Employee record as returned by the API."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    first_name: str | None = None
    last_name: str | None = None
    age: int
    position: str | None = None
