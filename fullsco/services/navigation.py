"""Menus, menu items and the nested navigation structure served to the site."""

import logging
from typing import Any

from fullsco.db.models import (
    Category,
    Country,
    Level,
    Menu,
    MenuItem,
    MenuLocation,
    Page,
    Post,
    Scholarship,
)
from fullsco.errors import NotFoundError, ValidationFailedError
from fullsco.repositories.navigation import ANY_PARENT, MenuItemsRepository, MenusRepository
from fullsco.schemas.navigation import (
    MenuCreate,
    MenuItemCreate,
    MenuItemNode,
    MenuItemUpdate,
    MenuResponse,
    MenuStructureResponse,
    MenuUpdate,
)
from fullsco.services.base import CrudService
from fullsco.services.menu_tree import MenuTree, build_menu_tree, descendant_ids

logger = logging.getLogger(__name__)


def tree_to_nodes(tree: MenuTree) -> list[MenuItemNode]:
    """Convert a built tree into response nodes, keeping display order."""
    built: dict[int, MenuItemNode] = {}
    roots: list[MenuItemNode] = []
    for node, depth in tree.walk():
        out = MenuItemNode.model_validate(node.item)
        built[node.item.id] = out
        if depth == 0:
            roots.append(out)
        else:
            built[node.item.parent_id].children.append(out)
    return roots


class MenusService(CrudService[Menu]):
    entity_name = "Menu"
    repository_class = MenusRepository
    create_schema = MenuCreate
    update_schema = MenuUpdate
    unique_fields = ("slug",)

    repository: MenusRepository

    def __init__(self, session):
        super().__init__(session)
        self.items = MenuItemsRepository(session)

    async def before_delete(self, menu: Menu) -> None:
        removed = await self.items.delete_for_menu(menu.id)
        if removed:
            logger.info(f"Removed {removed} item(s) with menu #{menu.id}")

    async def get_by_location(self, location: MenuLocation) -> Menu:
        menu = await self.repository.find_by_location(location)
        if menu is None:
            raise NotFoundError(self.entity_name, location.value, field="location")
        return menu

    async def list_items(self, menu_id: int, parent_id=ANY_PARENT) -> list[MenuItem]:
        """Items of one menu; ``parent_id=None`` returns only top-level items."""
        await self.require(menu_id)
        return await self.items.find_for_menu(menu_id, parent_id)

    async def get_structure(self, menu_id: int) -> MenuStructureResponse:
        menu = await self.require(menu_id)
        return await self._structure(menu)

    async def get_menu_structure(self, location: MenuLocation) -> MenuStructureResponse:
        """The nested tree of the first active menu at ``location``."""
        menu = await self.get_by_location(location)
        return await self._structure(menu)

    async def _structure(self, menu: Menu) -> MenuStructureResponse:
        items = await self.items.find_for_menu(menu.id)
        tree = build_menu_tree(items)
        if tree.detached:
            logger.warning(
                f"Menu #{menu.id} has {len(tree.detached)} unreachable item(s): {tree.detached_ids}"
            )
        return MenuStructureResponse(
            menu=MenuResponse.model_validate(menu),
            items=tree_to_nodes(tree),
            detached_ids=tree.detached_ids,
        )


class MenuItemsService(CrudService[MenuItem]):
    entity_name = "Menu item"
    repository_class = MenuItemsRepository
    create_schema = MenuItemCreate
    update_schema = MenuItemUpdate
    references = {
        "menu_id": Menu,
        "page_id": Page,
        "category_id": Category,
        "level_id": Level,
        "country_id": Country,
        "scholarship_id": Scholarship,
        "post_id": Post,
    }

    repository: MenuItemsRepository

    async def prepare_create(self, payload: dict[str, Any]) -> dict[str, Any]:
        if payload.get("parent_id") is not None:
            await self._check_parent(payload["menu_id"], payload["parent_id"])
        return payload

    async def prepare_update(self, item: MenuItem, patch: dict[str, Any]) -> dict[str, Any]:
        parent_id = patch.get("parent_id")
        if parent_id is None or parent_id == item.parent_id:
            return patch

        if parent_id == item.id:
            raise self._invalid_parent("An item cannot be its own parent")
        siblings = await self.repository.find_for_menu(item.menu_id)
        if parent_id in descendant_ids(siblings, item.id):
            raise self._invalid_parent("An item cannot be moved under its own descendant")
        await self._check_parent(item.menu_id, parent_id)
        return patch

    async def delete(self, id: int) -> bool:
        """Delete the item together with every item nested below it."""
        item = await self.require(id)
        siblings = await self.repository.find_for_menu(item.menu_id)
        ids = [id, *sorted(descendant_ids(siblings, id))]

        async with self.transaction(record_id=id):
            await self.repository.delete_many(ids)

        logger.info(f"Deleted {self.entity_name} #{id} and {len(ids) - 1} nested item(s)")
        return True

    async def _check_parent(self, menu_id: int, parent_id: int) -> None:
        parent = await self.repository.find_by_id(parent_id)
        if parent is None:
            raise self._invalid_parent(f"Parent item {parent_id} does not exist")
        if parent.menu_id != menu_id:
            raise self._invalid_parent(f"Parent item {parent_id} belongs to another menu")

    def _invalid_parent(self, message: str) -> ValidationFailedError:
        return ValidationFailedError(
            f"Invalid {self.entity_name} data",
            errors=[{"field": "parent_id", "message": message, "type": "parent"}],
        )
