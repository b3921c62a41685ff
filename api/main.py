"""Book Catalog API — FastAPI entry point.

Registers middleware, routers, and lifecycle hooks. The catalog router is
mounted under /api/books.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import RequestContextMiddleware
from core.database import close_db, init_db
from core.logging_config import setup_logging
from core.settings import get_settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

settings = get_settings()


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    setup_logging(settings.log_level, settings.log_file)
    await init_db()
    logger.info("%s API started", settings.app_name)
    yield
    await close_db()
    logger.info("%s API shutting down", settings.app_name)


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title=settings.app_name,
    description="Catalog service for book records: CRUD plus author, genre, title and year lookups",
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request id + access log
app.add_middleware(RequestContextMiddleware)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

from verticals.catalog.router import router as catalog_router  # noqa: E402
from verticals.catalog.operations import catalog_operations  # noqa: E402

app.include_router(catalog_router, prefix="/api/books", tags=["Books"])


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": settings.version}


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "operations": [op.name for op in catalog_operations.list_operations()],
    }
