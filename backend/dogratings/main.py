"""Dog Ratings — validated people, dogs and ratings over HTTP.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dogratings.config import get_settings
from dogratings.api.router import api_router
from dogratings.exceptions import RecordNotFoundError, RecordNotUniqueError
from dogratings.services.store import InMemoryStore
from dogratings.validators import UsGeography


def configure_logging(debug: bool, log_level: str) -> None:
    """Configure structlog once for the process."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


configure_logging(get_settings().DEBUG, get_settings().LOG_LEVEL)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    app.state.store = InMemoryStore()
    app.state.geography = UsGeography()

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_shutting_down", records=app.state.store.counts())
    app.state.store.clear()
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="Dog Ratings",
    description=(
        "People, their dogs, and the ratings judges give them. "
        "Every record is validated before it is stored."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(RecordNotFoundError)
async def not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(
        status_code=404,
        content={"error": "not_found", "message": exc.message},
    )


@app.exception_handler(RecordNotUniqueError)
async def not_unique_handler(request: Request, exc: RecordNotUniqueError):
    """Unique index rejected an insert that passed validation."""
    logger.warning("record_not_unique", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=409,
        content={"error": "conflict", "message": exc.message},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle bad input, including unknown attributes."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "Dog Ratings",
        "version": "1.0.0",
        "description": "Validated people, dogs and ratings",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
