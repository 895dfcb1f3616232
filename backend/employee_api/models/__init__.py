"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Employee is the only entity; it has no relationships

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from employee_api.models.employee import Employee  # noqa: F401
