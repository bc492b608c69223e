"""
Cars Source API - FastAPI Application

Backend over the scraped car listings database.
"""
import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.database.connections import MongoConnectionProvider
from app.database.registry import warmup_source_indexes
from app.middleware.security import SecurityHeadersMiddleware
from app.routers import health

logger = logging.getLogger(__name__)

APP_NAME = "Cars Source API"
APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Create the MongoDB connection provider
    - Start source index warmup in the background

    Shutdown:
    - Stop a still running warmup
    - Close the MongoDB client
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    provider = MongoConnectionProvider(settings)
    app.state.mongo = provider

    warmup_task = None
    if settings.source_index_warmup:
        warmup_task = asyncio.create_task(warmup_source_indexes(provider))

    logger.info("Backend listening on http://localhost:%s", settings.port)

    yield

    if warmup_task is not None and not warmup_task.done():
        warmup_task.cancel()
        try:
            await warmup_task
        except asyncio.CancelledError:
            pass
    await provider.close()
    logger.info("Database connections closed")


app = FastAPI(
    title=APP_NAME,
    description="""
## Cars Source API

Backend for car listings scraped from Haraj, YallaMotor and Syarah.

### Health
`GET /health` pings MongoDB and always answers 200, reporting
`ok`/`up` or `degraded`/`down` in the body.
    """,
    version=APP_VERSION,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

register_exception_handlers(app)

app.include_router(health.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "docs": "/docs",
        "health": "/health",
    }


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
