import logging
from typing import Any

from pydantic import BaseModel

from fullsco.db.models import SeoSetting, SiteSetting
from fullsco.errors import NotFoundError
from fullsco.repositories.settings import SeoSettingsRepository, SiteSettingsRepository
from fullsco.schemas.settings import (
    SeoSettingCreate,
    SeoSettingUpdate,
    SiteSettingCreate,
    SiteSettingUpdate,
)
from fullsco.services.base import CrudService

logger = logging.getLogger(__name__)


class SeoSettingsService(CrudService[SeoSetting]):
    entity_name = "SEO setting"
    repository_class = SeoSettingsRepository
    create_schema = SeoSettingCreate
    update_schema = SeoSettingUpdate
    unique_fields = ("page_path",)

    async def get_by_path(self, page_path: str) -> SeoSetting:
        seo = await self.repository.find_one_by(page_path=page_path)
        if seo is None:
            raise NotFoundError(self.entity_name, page_path, field="page_path")
        return seo


class SiteSettingsService(CrudService[SiteSetting]):
    """The single site-wide settings row."""

    entity_name = "Site settings"
    repository_class = SiteSettingsRepository
    create_schema = SiteSettingCreate
    update_schema = SiteSettingUpdate

    repository: SiteSettingsRepository

    async def get(self) -> SiteSetting:
        current = await self.repository.get_current()
        if current is None:
            raise NotFoundError(self.entity_name, "current", field="row")
        return current

    async def upsert(self, data: BaseModel | dict[str, Any]) -> SiteSetting:
        """Patch the settings row, creating it first when the table is empty."""
        current = await self.repository.get_current()
        if current is None:
            if isinstance(data, BaseModel):
                data = data.model_dump(exclude_unset=True)
            logger.info("No site settings yet, creating the row")
            return await self.create(data)
        return await self.update(current.id, data)
