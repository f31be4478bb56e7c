"""
analog API - FastAPI Application

Serves the event-watch targets stored in analog_db and bootstraps the
database on startup.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from analog import __version__
from analog.config import get_settings
from analog.core.logging import configure_logging
from analog.database.connections import get_mongo_client, close_connections
from analog.routers import health, watch_targets
from analog.services.bootstrap_service import BootstrapService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Bootstrap analog_db (registry, collections, indexes, seed)

    Shutdown:
    - Close the MongoDB connection
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting up analog API...")

    if settings.bootstrap_on_startup:
        try:
            client = await get_mongo_client()
            await BootstrapService(client, settings).bootstrap()
        except Exception as e:
            logger.warning(f"Database bootstrap failed: {e}")

    yield

    logger.info("Shutting down analog API...")
    await close_connections()


app = FastAPI(
    title="analog API",
    description="""
## Event-watch target store

Each watch target pairs a chain endpoint with a contract address and an
event signature hash. Targets live in `analog_db.contracts`; the
`analog_db.events` collection is created empty as the sink for watched events.

The seed target is inserted on startup and can be checked at
`GET /bootstrap/status`.
    """,
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router)
app.include_router(watch_targets.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "analog API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
