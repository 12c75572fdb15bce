"""Exercise Tracker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": message}
    - CORS configured from settings (not hardcoded)
    - TrackerState created on startup via the lifespan context manager

Design Decisions:
    - Static files mounted AFTER API routes so /api/* and / take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, landing, users
from app.config import get_settings
from app.infrastructure.observability import setup_logging
from app.infrastructure.state_store import init_tracker_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_tracker_state(app)
    logger.info(f"Exercise tracker listening on port {settings.port}")
    yield
    logger.info("Exercise tracker shutting down")


settings = get_settings()
app = FastAPI(
    title="Exercise Tracker API", version=settings.version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(landing.router)

if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

register_error_handlers(app)
