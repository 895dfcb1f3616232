"""Service test fixtures - async DB, gateway mocks and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes hit the test DB

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - mock_gateway is an AsyncMock: service tests count gateway calls without a DB
"""

import pytest
from unittest.mock import AsyncMock
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from employee_api.db.base import Base
from employee_api.infrastructure.database import get_db, DatabaseSessionManager
from employee_api.models.employee import Employee
import employee_api.infrastructure.database as db_module
from employee_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Readiness probe reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_employee(test_db):
    """Insert one employee directly into the test DB."""
    employee = Employee(
        first_name="Kavitha", last_name="Anooj", age=30,
        position="TechnologyAnalyst",
    )
    test_db.add(employee)
    await test_db.commit()
    await test_db.refresh(employee)
    return employee


@pytest.fixture
def mock_gateway():
    """AsyncMock standing in for EmployeeGateway."""
    gateway = AsyncMock()
    gateway.insert = AsyncMock(return_value=1)
    gateway.find_by_id = AsyncMock(return_value=None)
    gateway.find_all = AsyncMock(return_value=[])
    gateway.delete_by_id = AsyncMock(return_value=None)
    gateway.execute_raw_update = AsyncMock(return_value=1)
    gateway.update_by_id = AsyncMock(return_value=1)
    return gateway


@pytest.fixture
async def session_manager():
    """Real DatabaseSessionManager on an empty in-memory database (no tables)."""
    original_manager = db_module.db_manager
    manager = db_module.init_db("sqlite+aiosqlite:///:memory:")
    yield manager
    await manager.close()
    db_module.db_manager = original_manager


@pytest.fixture
async def managed_client(session_manager):
    """Test client whose requests go through the real get_db and session manager.

    raise_app_exceptions=False lets the catch-all handler's 500 reach the test.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
