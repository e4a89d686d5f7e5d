"""Home page blocks: statistics, partners and newsletter subscribers."""

from fastapi import APIRouter, Depends

from fullsco.api.crud import mount_crud
from fullsco.api.deps import require_admin, service_dependency
from fullsco.schemas.common import Envelope, ok
from fullsco.schemas.home import (
    PartnerResponse,
    ReorderRequest,
    StatisticResponse,
    SubscriberResponse,
)
from fullsco.services.home import PartnersService, StatisticsService, SubscribersService


def active_filter(is_active: bool | None = None) -> dict:
    return {"is_active": is_active}


statistics_router = APIRouter()
get_statistics = service_dependency(StatisticsService)


@statistics_router.post(
    "/reorder",
    response_model=Envelope[list[StatisticResponse]],
    dependencies=[Depends(require_admin)],
)
async def reorder_statistics(data: ReorderRequest, service: StatisticsService = Depends(get_statistics)):
    records = await service.reorder(data.ids)
    return ok([StatisticResponse.model_validate(s) for s in records], "Statistics reordered")


mount_crud(
    statistics_router,
    StatisticsService,
    response_model=StatisticResponse,
    list_filters=active_filter,
)

partners_router = mount_crud(
    APIRouter(), PartnersService, response_model=PartnerResponse, list_filters=active_filter
)

# Anyone may subscribe; listing and removal are admin-only
subscribers_router = mount_crud(
    APIRouter(),
    SubscribersService,
    response_model=SubscriberResponse,
    operations=("list", "get", "create", "delete"),
    read_guard=require_admin,
    create_guard=None,
)
