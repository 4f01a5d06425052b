"""FastAPI application with lifespan, page gate and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from hrcore.api.errors import register_error_handlers
from hrcore.api.gate import policy_gate
from hrcore.api.routes import access, health, reports
from hrcore.core.config import AppSettings
from hrcore.core.logging import setup_logging
from hrcore.core.protocols import IAuthenticator, IRecordSource
from hrcore.persistence import create_persistence
from hrcore.policy import create_policy
from hrcore.reports import create_aggregator


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    authenticator: Optional[IAuthenticator] = None,
    record_source: Optional[IRecordSource] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Static tables are built once in the lifespan; a ``ConfigError`` there
    aborts startup.
    """
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(settings)
        catalog, engine = create_policy()
        default_auth, default_source = create_persistence()

        app.state.settings = settings
        app.state.catalog = catalog
        app.state.policy_engine = engine
        app.state.aggregator = create_aggregator(settings.reports)
        app.state.authenticator = authenticator if authenticator is not None else default_auth
        app.state.record_source = record_source if record_source is not None else default_source
        yield

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.middleware("http")(policy_gate)
    app.include_router(health.router)
    app.include_router(access.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")
    return app
