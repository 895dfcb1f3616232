"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Any, Protocol

from employee_api.core.domain_types import EmployeeId


class EmployeeLike(Protocol):
    """Structural contract for employee records passed across the gateway.

    Avoids coupling the gateway contract to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int
    first_name: str | None
    last_name: str | None
    age: int
    position: str | None


class EmployeeGateway(Protocol):
    """Contract for employee persistence - implemented by shell.

    Every mutating call commits its own transaction.
    """
    async def insert(self, employee: EmployeeLike) -> EmployeeId: ...
    async def find_by_id(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def find_all(self) -> list[EmployeeLike]: ...
    async def delete_by_id(self, employee_id: EmployeeId) -> None: ...
    async def execute_raw_update(
        self, statement: str, params: dict[str, Any],
    ) -> int: ...
    async def update_by_id(
        self, employee_id: EmployeeId, values: dict[str, Any],
    ) -> int: ...
