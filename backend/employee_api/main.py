"""Employee Records API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Tables created from ORM metadata on startup (no migration tooling)

Run with::

    uvicorn employee_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.routes import employees, health
from employee_api.config import get_settings
from employee_api.infrastructure.database import init_db
from employee_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_tables_on_startup:
        await manager.create_tables()
    logger.info("Employee API started")
    yield
    logger.info("Employee API shutting down")
    await manager.close()


app = FastAPI(
    title="Employee Records API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
