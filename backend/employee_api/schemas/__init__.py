"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Public field names are camelCase; snake_case is accepted on input

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
