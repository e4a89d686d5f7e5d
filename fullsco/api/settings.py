"""SEO settings and the site-wide settings row."""

from fastapi import APIRouter, Depends, Query

from fullsco.api.crud import mount_crud
from fullsco.api.deps import require_admin, service_dependency
from fullsco.schemas.common import Envelope, ok
from fullsco.schemas.settings import SeoSettingResponse, SiteSettingResponse, SiteSettingUpdate
from fullsco.services.settings import SeoSettingsService, SiteSettingsService

# --- SEO ---

seo_router = APIRouter()
get_seo = service_dependency(SeoSettingsService)


@seo_router.get("/path", response_model=Envelope[SeoSettingResponse])
async def get_seo_by_path(
    path: str = Query(..., min_length=1, examples=["/about"]),
    service: SeoSettingsService = Depends(get_seo),
):
    return ok(SeoSettingResponse.model_validate(await service.get_by_path(path)))


mount_crud(seo_router, SeoSettingsService, response_model=SeoSettingResponse)

# --- Site settings ---

site_router = APIRouter()
get_site_settings = service_dependency(SiteSettingsService)


@site_router.get("/", response_model=Envelope[SiteSettingResponse])
async def get_site_settings_row(service: SiteSettingsService = Depends(get_site_settings)):
    return ok(SiteSettingResponse.model_validate(await service.get()))


@site_router.api_route(
    "/",
    methods=["PUT", "PATCH"],
    response_model=Envelope[SiteSettingResponse],
    dependencies=[Depends(require_admin)],
)
async def update_site_settings(
    data: SiteSettingUpdate,
    service: SiteSettingsService = Depends(get_site_settings),
):
    current = await service.upsert(data)
    return ok(SiteSettingResponse.model_validate(current), "Site settings saved")
