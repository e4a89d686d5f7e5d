"""Menu, menu item and public menu structure routes.

Menus are managed by admins; only the slug, location and structure
lookups the site renders from are public.
"""

from fastapi import APIRouter, Depends, Query

from fullsco.api.crud import mount_crud
from fullsco.api.deps import require_admin, service_dependency
from fullsco.db.models import MenuLocation
from fullsco.errors import NotFoundError
from fullsco.repositories.navigation import ANY_PARENT
from fullsco.schemas.common import Envelope, ok
from fullsco.schemas.navigation import MenuItemResponse, MenuResponse, MenuStructureResponse
from fullsco.services.navigation import MenuItemsService, MenusService

get_menus = service_dependency(MenusService)

# --- Menus ---

menus_router = APIRouter()


def menu_filters(location: MenuLocation | None = None, is_active: bool | None = None) -> dict:
    return {"location": location, "is_active": is_active}


@menus_router.get("/slug/{slug}", response_model=Envelope[MenuResponse])
async def get_menu_by_slug(slug: str, service: MenusService = Depends(get_menus)):
    menu = await service.get_by_slug(slug)
    if menu is None:
        raise NotFoundError(service.entity_name, slug, field="slug")
    return ok(MenuResponse.model_validate(menu))


@menus_router.get("/location/{location}", response_model=Envelope[MenuResponse])
async def get_menu_by_location(location: MenuLocation, service: MenusService = Depends(get_menus)):
    menu = await service.get_by_location(location)
    return ok(MenuResponse.model_validate(menu))


@menus_router.get(
    "/{menu_id}/items",
    response_model=Envelope[list[MenuItemResponse]],
    dependencies=[Depends(require_admin)],
)
async def list_menu_items(
    menu_id: int,
    parent_id: int | None = Query(None, description="Only children of this item"),
    root_only: bool = Query(False, description="Only top-level items"),
    service: MenusService = Depends(get_menus),
):
    if root_only:
        items = await service.list_items(menu_id, None)
    else:
        items = await service.list_items(menu_id, ANY_PARENT if parent_id is None else parent_id)
    return ok([MenuItemResponse.model_validate(i) for i in items])


@menus_router.get(
    "/{menu_id}/structure",
    response_model=Envelope[MenuStructureResponse],
    dependencies=[Depends(require_admin)],
)
async def get_menu_tree(menu_id: int, service: MenusService = Depends(get_menus)):
    return ok(await service.get_structure(menu_id))


mount_crud(
    menus_router,
    MenusService,
    response_model=MenuResponse,
    list_filters=menu_filters,
    read_guard=require_admin,
)

# --- Menu items ---

menu_items_router = mount_crud(
    APIRouter(),
    MenuItemsService,
    response_model=MenuItemResponse,
    operations=("get", "create", "update", "delete"),
    read_guard=require_admin,
)

# --- Public structure ---

menu_structure_router = APIRouter()


@menu_structure_router.get("/{location}", response_model=Envelope[MenuStructureResponse])
async def get_menu_structure(location: MenuLocation, service: MenusService = Depends(get_menus)):
    return ok(await service.get_menu_structure(location))
