"""Privacy policy endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from rcframes.core.config import Settings, get_settings
from rcframes.core.errors import JSON_MEDIA_TYPE
from rcframes.models.frames import PrivacyPolicy
from rcframes.services.privacy import load_privacy_policy

router = APIRouter(tags=["privacy"])


def get_privacy_policy(settings: Settings = Depends(get_settings)) -> PrivacyPolicy:
    """Policy document, loaded once at startup."""
    return load_privacy_policy(settings.privacy_policy_path)


@router.get("/privacy")
@router.get("/privacy-policy")
async def privacy_policy(
    policy: PrivacyPolicy = Depends(get_privacy_policy),
) -> JSONResponse:
    """Serve the static privacy policy. No authentication."""
    return JSONResponse(
        content=policy.to_json_dict(),
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": "public, max-age=86400"},
    )
