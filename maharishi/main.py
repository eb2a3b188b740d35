"""
FastAPI application entry point for the Maharishi agri assistant backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from maharishi.config import settings
from maharishi.routes.auth import router as auth_router
from maharishi.routes.chat import router as chat_router
from maharishi.routes.health import router as health_router
from maharishi.routes.marketplace import router as marketplace_router
from maharishi.routes.recommendations import router as recommendations_router
from maharishi.routes.weather import router as weather_router
from maharishi.services.chat_service import chat_sessions
from maharishi.utils.logging import configure_logging

configure_logging()

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (comma separated)
    - Any other environment: Allows all origins for local dev of the web UI

    Returns:
        List of allowed origin URLs, or ["*"] outside production.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the web client."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.ai_enabled:
        logger.warning("Gemini API key not found. AI features will be disabled.")
    yield
    # Chat sessions live only as long as the process
    chat_sessions.close_all()


# Create FastAPI app
app = FastAPI(
    title="Maharishi Agri Assistant API",
    description="Backend for the Maharishi farmer assistant: crop advice, Agri Q&A chat, marketplace and weather",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


def _jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the raw exception objects pydantic attaches in ctx."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    This helps diagnose 422 errors from the web client.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": _jsonable_errors(exc),
        }
    )


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(marketplace_router)
app.include_router(weather_router)
app.include_router(recommendations_router)
app.include_router(chat_router)

logger.info("FastAPI app initialized successfully")
