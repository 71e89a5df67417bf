"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app.core.config import settings
from app.api.v1.router import api_router
from app.db.init_db import init_db
from app.services.state_store import StateStore

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the application; *engine* defaults to the configured database."""
    if engine is None:
        from app.db.session import engine as default_engine
        engine = default_engine

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        init_db(engine)
        store = StateStore(engine)
        store.load()
        application.state.store = store
        logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
        yield

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Machine-training planner: schedules, routines and progression.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    # Include API router
    application.include_router(api_router, prefix="/api/v1")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": "LiftPlan API",
            "version": settings.VERSION,
            "status": "healthy"
        }

    @application.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "liftplan-api",
            "version": settings.VERSION
        }

    @application.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
        }

    return application


app = create_app()
