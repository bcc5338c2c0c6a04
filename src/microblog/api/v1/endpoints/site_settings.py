"""Site settings endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from microblog.api.v1.dependencies import AdminWriteDep, SettingsResolverDep
from microblog.core.errors import ValidationError
from microblog.schemas.common import MessageResponse
from microblog.schemas.site_settings import SiteSettingsResponse, SiteSettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SiteSettingsResponse)
async def get_site_settings(resolver: SettingsResolverDep) -> SiteSettingsResponse:
    """Return the site name, tagline and visibility flag."""
    return SiteSettingsResponse(**resolver.get_settings())


@router.post("", response_model=MessageResponse, dependencies=[AdminWriteDep])
async def update_site_settings(
    payload: SiteSettingsUpdate,
    resolver: SettingsResolverDep,
) -> MessageResponse:
    """Update site settings; omitted optional fields keep their value."""
    try:
        resolver.update_settings(**payload.model_dump(exclude_unset=True))
    except ValidationError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=err.message,
        ) from err
    return MessageResponse(message="Site settings updated successfully")
