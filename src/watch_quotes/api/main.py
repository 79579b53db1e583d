"""FastAPI application for the watch quote extraction service."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from watch_quotes import __version__
from watch_quotes.logging import configure_logging

from .config import get_settings
from .routes.health import router as health_router
from .routes.parse import router as parse_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging at startup; the service holds no other resources."""
    settings = get_settings()
    configure_logging(json_output=settings.LOG_JSON)

    logger.info("lifespan.ready", service=settings.SERVICE_NAME, version=__version__)
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="watch-quote-extractor",
    description="Extracts watch quotations from exported chat transcripts",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(parse_router)
