"""Employee ORM - persists one employee record per row.

Invariants:
    - id is an autoincrement integer primary key, assigned by the store, never updated
    - Text columns are nullable and unvalidated
    - age defaults to 0 when omitted

Design Decisions:
    - snake_case column names; the camelCase public names live in EmployeeField
    - Table name comes from EMPLOYEE_TABLE so raw update statements stay in sync
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.core.domain_types import EMPLOYEE_TABLE
from employee_api.db.base import Base


class Employee(Base):
    """Employee record."""
    __tablename__ = EMPLOYEE_TABLE

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"Employee(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, age={self.age!r}, "
            f"position={self.position!r})"
        )
