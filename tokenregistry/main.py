"""Token Registry API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Registry restored from the database on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - persistence_enabled=False runs a purely in-memory registry (no database)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tokenregistry.api.error_handlers import register_error_handlers
from tokenregistry.api.routes import health, owners, registry_info, tokens
from tokenregistry.config import get_settings
from tokenregistry.infrastructure.database import init_db
from tokenregistry.infrastructure.observability import setup_logging
from tokenregistry.services.registry_service import RegistryService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = None
    if settings.persistence_enabled:
        db = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_url.startswith("sqlite"):
            await db.create_schema()
    app.state.registry_service = await RegistryService.restore(settings, db)
    logger.info("Token registry API started")
    yield
    logger.info("Token registry API shutting down")
    if db is not None:
        await db.dispose()


app = FastAPI(
    title="Token Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tokens.router)
app.include_router(owners.router)
app.include_router(registry_info.router)

register_error_handlers(app)
