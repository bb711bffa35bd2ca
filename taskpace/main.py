"""
TASKPACE API - Main Application

Calendar projection, pace analytics and overdue notifications over task
snapshots supplied by the persistence layer.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskpace.config import settings
from taskpace.database import database
from taskpace.dependencies import resolve_timezone
from taskpace.tasks import tasks_router
from taskpace.tasks.repository import TaskRepository
from taskpace.calendar import calendar_router
from taskpace.analysis import analysis_router
from taskpace.notifications import notifications_router
from taskpace.notifications.repository import MongoNotificationRepository
from taskpace.notifications.scheduler import OverdueScanScheduler

import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: fail fast on an unknown timezone
    tz = resolve_timezone(settings.TIMEZONE)
    logger.info(f"Using timezone {settings.TIMEZONE}")

    # Startup: Connect to MongoDB
    await database.connect()
    await database.ensure_indexes()
    db = database.get_database()

    # Startup: Start overdue scan scheduler
    scheduler = OverdueScanScheduler(
        task_repo=TaskRepository(db),
        notification_repo=MongoNotificationRepository(db),
        tz=tz,
    )
    await scheduler.start()

    yield

    # Shutdown: Stop scheduler
    await scheduler.stop()
    # Shutdown: Disconnect from MongoDB
    await database.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task calendar, pace analytics and overdue notifications",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["X-User-Id", "Content-Type"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


app.include_router(tasks_router)
app.include_router(calendar_router)
app.include_router(analysis_router)
app.include_router(notifications_router)
