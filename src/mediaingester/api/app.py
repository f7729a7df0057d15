"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from mediaingester.api.routes import admin, health
from mediaingester.core.config import AppSettings
from mediaingester.core.logger_setup import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings; the job-state store is created on first use."""
    settings = AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.job_store = None
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Media Ingester Admin",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(admin.router, prefix="/admin")
    return app
