"""FastAPI application factory for the warehouse control service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger

from warehouse_control import __version__
from warehouse_control.auth.tokens import TokenService
from warehouse_control.config import Settings, get_settings
from warehouse_control.db import create_engine, create_session_factory
from warehouse_control.logging import configure_logging
from warehouse_control.routes import api_router
from warehouse_control.routes.errors import validation_exception_handler
from warehouse_control.services import InventoryService, InventoryServicePort
from warehouse_control.store import InventoryStore, SQLInventoryStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InventoryStore] = None,
    service: Optional[InventoryServicePort] = None,
) -> FastAPI:
    """Build the application.

    Components are wired explicitly: pass ``store`` or ``service`` to replace
    the PostgreSQL-backed defaults, e.g. in tests.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    engine = None
    if service is None:
        if store is None:
            engine = create_engine(settings.database)
            store = SQLInventoryStore(create_session_factory(engine))
        service = InventoryService(store, timeout=settings.request_timeout_seconds)

    security = settings.security
    token_service = TokenService(
        security.secret,
        algorithm=security.jwt_algorithm,
        expire_hours=security.token_expire_hours,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting {} {} ({})", settings.app_name, __version__, settings.environment)
        yield
        if engine is not None:
            await engine.dispose()
        logger.info("Stopped {}", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_service = token_service
    app.state.inventory_service = service

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router)

    @app.get("/health", tags=["monitoring"], summary="Return service health status")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app
