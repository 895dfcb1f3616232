"""Database Infrastructure - SQLAlchemy Base shared by models and the session manager.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for the default embedded store, asyncpg for PostgreSQL deployments
"""
