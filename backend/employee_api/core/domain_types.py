"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps the store-assigned integer key - never reassigned
    - EmployeeField is the closed set of updatable fields (id is not one of them)
    - EMPLOYEE_TABLE is the single source for the table name
    - AGE_MIN..AGE_MAX bounds every stored age, on create, replace and update

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum values are the public (camelCase) field names used by the API
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Persistence Names ───────────────────────────────────────────

EMPLOYEE_TABLE = "employee"


# ─── Value Bounds ────────────────────────────────────────────────

AGE_MIN = -(2 ** 31)   # signed 32-bit, matches the INTEGER column
AGE_MAX = 2 ** 31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class EmployeeField(str, Enum):
    """Updatable employee fields, keyed by their public API name."""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    AGE = "age"
    POSITION = "position"

    @property
    def column(self) -> str:
        """Column name in the employee table."""
        return _COLUMNS[self]


_COLUMNS: dict[EmployeeField, str] = {
    EmployeeField.FIRST_NAME: "first_name",
    EmployeeField.LAST_NAME: "last_name",
    EmployeeField.AGE: "age",
    EmployeeField.POSITION: "position",
}
