from sqlalchemy import select

from fullsco.db.models import SeoSetting, SiteSetting
from fullsco.repositories.base import Repository


class SeoSettingsRepository(Repository[SeoSetting]):
    model = SeoSetting


class SiteSettingsRepository(Repository[SiteSetting]):
    model = SiteSetting

    async def get_current(self) -> SiteSetting | None:
        """The settings row. The table is expected to hold exactly one."""
        result = await self.session.execute(select(SiteSetting).order_by(SiteSetting.id).limit(1))
        return result.scalar_one_or_none()
