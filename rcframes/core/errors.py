"""Error taxonomy and the uniform error envelope.

Every failure is raised as a ``FrameError`` subclass and rendered by
``error_response`` into the same ``{"frames": [...], "error": ...}`` shape the
display client expects on success, so the device can show the message.
"""

import logging

from fastapi.responses import JSONResponse

from rcframes.models.frames import ErrorResponse, TextFrame

logger = logging.getLogger(__name__)

ERROR_ICON = "i18445"
JSON_MEDIA_TYPE = "application/json; charset=utf-8"


class FrameError(Exception):
    """Base error carrying the HTTP status and user-facing message."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthError(FrameError):
    """Missing or malformed bearer token."""

    status_code = 401


class ValidationError(FrameError):
    """Missing required request parameter."""

    status_code = 400


class UpstreamError(FrameError):
    """RevenueCat answered with a non-2xx status or could not be reached."""

    status_code = 502


class DataError(FrameError):
    """Upstream answered but had no usable numeric data."""

    status_code = 502


class InternalError(FrameError):
    """Anything else."""

    status_code = 500


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the error envelope response."""
    body = ErrorResponse(
        frames=[TextFrame(text=f"Error: {message}", icon=ERROR_ICON)],
        error=message,
    )
    return JSONResponse(
        content=body.to_json_dict(),
        status_code=status_code,
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": "no-store"},
    )


def frame_error_response(exc: FrameError) -> JSONResponse:
    """Render a ``FrameError`` as the error envelope."""
    if exc.status_code >= 500:
        logger.warning(f"Request failed ({exc.status_code}): {exc.message}")
    return error_response(exc.message, exc.status_code)
