"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes only (de)serialize and map results to status codes

Design Decisions:
    - Thin routes delegate to EmployeeService
"""
