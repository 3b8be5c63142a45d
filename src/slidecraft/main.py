"""
Main FastAPI application entry point
"""

import logging

from fastapi import FastAPI

from . import __version__
from .api.slides_api import router as slides_router
from .core.config import ai_config, app_config
from .database.database import init_db
from .utils.logger import setup_logging

setup_logging(app_config.log_level, app_config.log_file)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SlideCraft API",
    description="AI-assisted presentation outline and slide layout generation",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup"""
    try:
        logger.info("Initializing database...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "SlideCraft API",
        "version": __version__,
        "ai_provider": ai_config.default_ai_provider,
        "ai_provider_configured": ai_config.is_provider_available(),
    }


app.include_router(slides_router, prefix="/api", tags=["Slides"])
