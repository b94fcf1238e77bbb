import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.db.database import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Context manager for FastAPI startup and shutdown logic."""
    logger.info("Application startup sequence initiated...")

    logger.info("Database initialization sequence...")
    await database.connect()
    app.state.database = database

    logger.info("Application startup complete.")
    try:
        yield
    finally:
        logger.info("Application shutdown sequence initiated...")
        await database.disconnect()
        logger.info("Application shutdown complete.")
