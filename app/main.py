"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routes import apartments, auth, health
from app.core.config import settings
from app.core.database import Base, engine
from app.core.logging import setup_logging

# Import models for Base.metadata.create_all - order matters for foreign keys
from app.models import (
    apartment,  # noqa: F401
    user,  # noqa: F401
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    # Startup: Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    logger.info("%s shutting down", settings.PROJECT_NAME)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Apartment listings API",
    lifespan=lifespan,
)

register_error_handlers(app)

# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(auth.router, prefix="/api")
app.include_router(apartments.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
