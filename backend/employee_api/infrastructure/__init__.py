"""Infrastructure Layer - database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Gateway implementations live here, contracts live in core/repository_protocols.py
"""
