import logging
from typing import Any

from fullsco.db.models import Partner, Statistic, Subscriber
from fullsco.errors import NotFoundError, ValidationFailedError
from fullsco.repositories.home import PartnersRepository, StatisticsRepository, SubscribersRepository
from fullsco.schemas.home import (
    PartnerCreate,
    PartnerUpdate,
    StatisticCreate,
    StatisticUpdate,
    SubscriberCreate,
    SubscriberUpdate,
)
from fullsco.services.base import CrudService

logger = logging.getLogger(__name__)


class StatisticsService(CrudService[Statistic]):
    entity_name = "Statistic"
    repository_class = StatisticsRepository
    create_schema = StatisticCreate
    update_schema = StatisticUpdate

    repository: StatisticsRepository

    async def prepare_create(self, payload: dict[str, Any]) -> dict[str, Any]:
        if payload.get("order") is None:
            payload["order"] = await self.repository.max_order() + 1
        return payload

    async def prepare_update(self, obj: Statistic, patch: dict[str, Any]) -> dict[str, Any]:
        if "order" in patch and patch["order"] is None:
            del patch["order"]
        return patch

    async def reorder(self, ids: list[int]) -> list[Statistic]:
        """Give the statistics in ``ids`` the display order 1..N, in one transaction."""
        if not ids:
            raise ValidationFailedError(
                "Invalid reorder request",
                errors=[{"field": "ids", "message": "At least one id is required", "type": "empty"}],
            )
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValidationFailedError(
                "Invalid reorder request",
                errors=[{"field": "ids", "message": f"Duplicate ids: {duplicates}", "type": "duplicate"}],
            )

        missing = sorted(set(ids) - await self.repository.find_ids(ids))
        if missing:
            raise NotFoundError(self.entity_name, missing[0])

        async with self.transaction():
            for position, statistic_id in enumerate(ids, start=1):
                await self.repository.set_order(statistic_id, position)

        logger.info(f"Reordered {len(ids)} statistics")
        return await self.list()


class PartnersService(CrudService[Partner]):
    entity_name = "Partner"
    repository_class = PartnersRepository
    create_schema = PartnerCreate
    update_schema = PartnerUpdate


class SubscribersService(CrudService[Subscriber]):
    entity_name = "Subscriber"
    repository_class = SubscribersRepository
    create_schema = SubscriberCreate
    update_schema = SubscriberUpdate
    unique_fields = ("email",)

    async def prepare_create(self, payload: dict[str, Any]) -> dict[str, Any]:
        payload["email"] = payload["email"].lower()
        return payload

    async def prepare_update(self, obj: Subscriber, patch: dict[str, Any]) -> dict[str, Any]:
        if patch.get("email"):
            patch["email"] = patch["email"].lower()
        return patch
