"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gymlog.api.v1.router import api_router
from gymlog.core.config import settings
from gymlog.core.exceptions import GymLogError, StorageError
from gymlog.core.logging import configure_logging
from gymlog.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Workout session log with muscle-group recency dashboard and training heatmap.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"])


@app.exception_handler(GymLogError)
async def gymlog_error_handler(request: Request, exc: GymLogError):
    """Translate domain errors into ``{"detail": ...}`` responses."""
    if isinstance(exc, StorageError):
        # Already logged with traceback by the repository
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal storage failure"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - service info."""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "ok"}
