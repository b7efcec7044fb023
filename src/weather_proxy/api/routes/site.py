"""Site shell routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from weather_proxy.config import Settings, get_settings
from weather_proxy.models.site import SiteHead, default_site_head

router = APIRouter()


@router.get("", response_model=SiteHead, response_model_exclude_none=True)
async def get_site_head(settings: Settings = Depends(get_settings)) -> SiteHead:
    """Get document head metadata for the front end."""
    return default_site_head(settings)
