"""SkyRoute API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SkyRouteError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Path map loaded on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - A path map that fails to load does not stop startup: readiness reports it
      and each query answers with the graph supply error envelope
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skyroute.api.error_handlers import register_error_handlers
from skyroute.api.routes import health, path_find
from skyroute.config import get_settings
from skyroute.core.errors import SkyRouteError
from skyroute.infrastructure.graph_provider import get_graph_provider
from skyroute.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        await get_graph_provider().get_paths()
    except SkyRouteError as e:
        logger.error(
            f"Path map not loaded at startup: {e.message}",
            extra={"error_code": e.code},
        )
    logger.info("SkyRoute API started")
    yield
    logger.info("SkyRoute API shutting down")


app = FastAPI(
    title="SkyRoute API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(path_find.router)

register_error_handlers(app)
