"""Metrics endpoint: every path that is not the privacy policy."""

import logging

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from rcframes.core.config import Settings, get_settings
from rcframes.core.errors import JSON_MEDIA_TYPE, FrameError, InternalError
from rcframes.models.frames import FramesResponse
from rcframes.services.frames import FramePipeline, FrameQuery, RevenueCatClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["frames"])


def get_revenuecat_client(settings: Settings = Depends(get_settings)) -> RevenueCatClient:
    """RevenueCat client for one request."""
    return RevenueCatClient(timeout=settings.upstream_timeout_seconds)


def get_frame_pipeline(
    settings: Settings = Depends(get_settings),
    client: RevenueCatClient = Depends(get_revenuecat_client),
) -> FramePipeline:
    return FramePipeline(settings, client)


@router.get("/{path:path}")
async def get_frames(
    request: Request,
    path: str,
    authorization: str | None = Header(default=None),
    pipeline: FramePipeline = Depends(get_frame_pipeline),
) -> JSONResponse:
    """Fetch a RevenueCat metric and return it as display frames.

    Named query parameters use their first value when repeated. Parameters
    prefixed with ``rc.`` are forwarded to RevenueCat with the prefix
    stripped.
    """
    query = FrameQuery.from_query_items(request.query_params.multi_items())

    try:
        frames = await pipeline.build_frames(query, authorization)
    except FrameError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error building frames: {e}", exc_info=True)
        raise InternalError(str(e) or "Unexpected error occurred") from e

    return JSONResponse(
        content=FramesResponse(frames=frames).to_json_dict(),
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": "public, max-age=30"},
    )
