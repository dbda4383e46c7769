"""API router aggregating all endpoints."""

from fastapi import APIRouter

from .frames import router as frames_router
from .privacy import router as privacy_router

router = APIRouter()

# The metrics route matches every path, so it must come last
router.include_router(privacy_router)
router.include_router(frames_router)
