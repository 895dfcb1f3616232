"""Field Updates - resolves a caller-chosen field name into a typed, safe column update.

Invariants:
    - Only EmployeeField members ever reach statement text; any other name raises
      InvalidArgumentError before IO happens
    - age values are base-10 signed 32-bit integers: optional sign, then decimal
      digits only (any Unicode decimal digit, no whitespace or underscores)
    - Text fields are bound verbatim, no trimming or coercion
    - Values and ids are always bound parameters, never interpolated

Design Decisions:
    - Closed field set mapped to parser functions over free-form column names
      (the public `column` parameter still accepts any string)
    - Name matching is case-insensitive and accepts snake_case column names,
      so "AGE", "firstname" and "first_name" all resolve
"""

from dataclasses import dataclass
from typing import Callable

from employee_api.core.domain_types import (
    AGE_MAX, AGE_MIN, EMPLOYEE_TABLE, EmployeeField,
)
from employee_api.core.errors import ErrorContext, InvalidArgumentError

_SIGNS = ("+", "-")


@dataclass(frozen=True)
class FieldUpdate:
    """A resolved single-column update, ready to bind."""
    field: EmployeeField
    value: int | str

    @property
    def column(self) -> str:
        return self.field.column


def parse_age(raw: str) -> int:
    """Parse an age value; raises InvalidArgumentError carrying the raw string."""
    digits = raw[1:] if raw.startswith(_SIGNS) else raw
    if digits.isdecimal():
        value = int(raw)
        if AGE_MIN <= value <= AGE_MAX:
            return value
    raise InvalidArgumentError(
        f"Invalid age value: {raw}", "dataToEdit", raw,
        ErrorContext(field_name=EmployeeField.AGE.value),
    )


def _as_text(raw: str) -> str:
    return raw


_PARSERS: dict[EmployeeField, Callable[[str], int | str]] = {
    EmployeeField.FIRST_NAME: _as_text,
    EmployeeField.LAST_NAME: _as_text,
    EmployeeField.AGE: parse_age,
    EmployeeField.POSITION: _as_text,
}

_LOOKUP: dict[str, EmployeeField] = {
    name.lower(): f for f in EmployeeField for name in (f.value, f.column)
}


def resolve_field(name: str) -> EmployeeField:
    """Map a caller-supplied field name onto the known field set."""
    resolved = _LOOKUP.get(name.strip().lower())
    if resolved is None:
        raise InvalidArgumentError(
            f"Unknown employee field: {name}", "column", name,
            ErrorContext(field_name=name),
        )
    return resolved


def build_field_update(field_name: str, raw_value: str) -> FieldUpdate:
    """Resolve the field and parse the value with that field's parser."""
    field = resolve_field(field_name)
    return FieldUpdate(field=field, value=_PARSERS[field](raw_value))


def render_update_statement(update: FieldUpdate) -> str:
    """Statement text for a single-column update bound on :value and :id."""
    return f"UPDATE {EMPLOYEE_TABLE} SET {update.column} = :value WHERE id = :id"
