"""
FastAPI application factory and entry point.

This module creates and configures the FastAPI application:
  1. Lifespan manager: logging setup, DB table creation, engine cleanup
  2. CORS middleware: allows frontend origins to make cross-origin requests
  3. Exception handlers: maps domain errors to HTTP responses
  4. Router registration: mounts the accounts endpoints

Running locally:
    uvicorn account_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from account_api.config import settings
from account_api.database import engine, Base, ensure_sqlite_directory
from account_api.exceptions import register_exception_handlers
from account_api.logging_config import setup_logging
from account_api.routers import accounts


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
      Configures logging and creates the database tables if they don't
      exist. In production the schema is owned by migrations; create_all
      is a no-op against an existing schema.

    Shutdown:
      Disposes of the database engine, closing all connections cleanly.
    """
    # --- Startup ---
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    ensure_sqlite_directory()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield
    # --- Shutdown ---
    await engine.dispose()
    logger.info("%s stopped", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Banking REST API for account retrieval",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(accounts.router, prefix="/accounts", tags=["Accounts"])


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for deployment probes.

    Returns a simple JSON response indicating the service is running.
    """
    return {"status": "ok", "version": settings.APP_VERSION}
