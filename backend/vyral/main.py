"""Vyral API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map VyralError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, ledger store and module catalog created on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Ledger store lives on app.state: one writer per process, no module global
    - create_app() factory so tests build an isolated app per fixture
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vyral.api.error_handlers import register_error_handlers
from vyral.api.routes import health, ledger, modules, notes
from vyral.config import get_settings
from vyral.infrastructure.database import init_db
from vyral.infrastructure.observability import setup_logging
from vyral.services.ledger_store import LedgerStore
from vyral.services.module_catalog import build_module_catalog

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
    if settings.database_auto_create:
        await manager.create_tables()
    app.state.ledger_store = LedgerStore(starting_xp=settings.starting_xp)
    app.state.module_catalog = build_module_catalog(settings)
    logger.info("Vyral API started")
    yield
    logger.info("Vyral API shutting down")
    await manager.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Vyral Ledger API", version="1.0.0", lifespan=lifespan)

    # CORS from settings, not hardcoded
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(ledger.router)
    app.include_router(notes.router)
    app.include_router(modules.router)

    register_error_handlers(app)
    return app


app = create_app()
