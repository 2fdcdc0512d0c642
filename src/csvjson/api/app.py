"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from csvjson.api.errors import register_error_handlers
from csvjson.api.limits import FORM_OVERHEAD_BYTES, UploadLimitMiddleware
from csvjson.api.routes import convert, health, upload
from csvjson.core.config import AppSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: AppSettings = app.state.settings
    logger.info(
        "csvjson ready on %s (upload limit %d bytes)",
        settings.server.address,
        settings.server.max_upload_bytes,
    )
    yield
    logger.info("csvjson shutting down")


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = AppSettings()
    app = FastAPI(
        title="CSV to JSON Converter",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    register_error_handlers(app)
    app.add_middleware(
        UploadLimitMiddleware,
        max_body_bytes=settings.server.max_upload_bytes + FORM_OVERHEAD_BYTES,
    )
    app.include_router(upload.router)
    app.include_router(convert.router)
    app.include_router(health.router)
    return app
