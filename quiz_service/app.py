"""
Quiz Service - Main FastAPI Application.

Serves genres, questions, choices and answers of the quiz content, and
account sign-up/sign-in, backed by Supabase.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import get_settings
from .dependencies import init_container, set_container
from .error_handlers import register_error_handlers
from .logging_config import get_logger, setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .metrics_middleware import PrometheusMiddleware
from .routers import answers, auth, choices, genres, health, questions

settings = get_settings()

# Setup logging
setup_logging(log_level=settings.LOG_LEVEL, service_name="quiz-service")
logger = get_logger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Wires the services on startup and drops them on shutdown.
    """
    # Startup
    logger.info("Starting Quiz Service...")
    logger.info(f"Service: {settings.APP_NAME}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Log level: {settings.LOG_LEVEL}")

    init_container(settings)
    logger.info("Service container initialized")

    yield

    # Shutdown
    logger.info("Shutting down Quiz Service...")
    set_container(None)


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Quiz content API backed by Supabase",
    version="1.0.0",
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add Prometheus metrics middleware
app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)

register_error_handlers(app)


# Metrics endpoint
@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


# Include routers
app.include_router(health.router)
app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(genres.router, prefix=API_PREFIX)
app.include_router(questions.router, prefix=API_PREFIX)
app.include_router(answers.router, prefix=API_PREFIX)
app.include_router(choices.router, prefix=API_PREFIX)

# Frontend build, mounted last so API routes take precedence
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    logger.info(f"Serving static files from {settings.STATIC_DIR}")
