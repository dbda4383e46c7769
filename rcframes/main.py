"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rcframes.api.router import router as api_router
from rcframes.core.config import settings
from rcframes.core.errors import FrameError, error_response, frame_error_response
from rcframes.core.logging import setup_logging
from rcframes.core.request_logging import RequestLoggingMiddleware
from rcframes.services.privacy import load_privacy_policy

import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    setup_logging(debug=settings.debug)
    load_privacy_policy(settings.privacy_policy_path)
    logger.info(f"Forwarding metrics requests to {settings.revenuecat_base_url}")
    yield
    # Shutdown


app = FastAPI(
    title=settings.app_name,
    description="RevenueCat metrics as display frames for LaMetric-style clients",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_middleware(
    RequestLoggingMiddleware,
    exclude_paths=["/privacy", "/privacy-policy"],
)


@app.exception_handler(FrameError)
async def handle_frame_error(request: Request, exc: FrameError) -> JSONResponse:
    """Render pipeline errors as the error envelope."""
    return frame_error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework errors (404, 405) as the error envelope."""
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response("Invalid request parameters", 400)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Render failures outside the route body (dependencies) as a 500 envelope."""
    logger.error(f"Unhandled error: {exc}", exc_info=exc)
    return error_response(str(exc) or "Unexpected error occurred", 500)


app.include_router(api_router)
