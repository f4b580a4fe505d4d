"""Site configuration endpoints."""

from fastapi import APIRouter

from ..dependencies import AdminSession, JsonBody, SiteSettings
from ..models.responses import SiteConfig, SiteConfigUpdateResponse

router = APIRouter()


@router.get(
    "",
    response_model=SiteConfig,
    response_model_exclude_none=True,
    summary="Get site configuration",
    description="Stored configuration, or the defaults if none was ever saved.",
)
async def get_site_config(service: SiteSettings):
    return await service.get_config()


@router.put(
    "",
    response_model=SiteConfigUpdateResponse,
    summary="Update site configuration",
    description=(
        "Admin only. Merges the fields sent into the stored configuration. "
        "A missing or non-object body changes nothing but updatedAt. "
        "customHTML is published unescaped on every page."
    ),
)
async def update_site_config(service: SiteSettings, admin: AdminSession, body: JsonBody):
    applied = await service.update_config(body)
    return SiteConfigUpdateResponse(data=applied)
