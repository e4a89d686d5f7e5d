from sqlalchemy import delete, select, update

from fullsco.db.models import Menu, MenuItem, MenuLocation
from fullsco.repositories.base import Repository

# Marks "no parent filter" apart from parent_id=None (root items only)
ANY_PARENT = object()


class MenusRepository(Repository[Menu]):
    model = Menu

    async def find_by_location(self, location: MenuLocation) -> Menu | None:
        """First active menu at ``location`` (lowest id wins)."""
        result = await self.session.execute(
            select(Menu)
            .where(Menu.location == location, Menu.is_active.is_(True))
            .order_by(Menu.id)
            .limit(1)
        )
        return result.scalar_one_or_none()


class MenuItemsRepository(Repository[MenuItem]):
    model = MenuItem
    order_by = (MenuItem.order, MenuItem.id)

    async def find_for_menu(self, menu_id: int, parent_id=ANY_PARENT) -> list[MenuItem]:
        query = select(MenuItem).where(MenuItem.menu_id == menu_id)
        if parent_id is None:
            query = query.where(MenuItem.parent_id.is_(None))
        elif parent_id is not ANY_PARENT:
            query = query.where(MenuItem.parent_id == parent_id)
        result = await self.session.execute(query.order_by(*self._ordering()))
        return list(result.scalars().all())

    async def delete_many(self, ids: list[int]) -> int:
        if not ids:
            return 0
        # Detach first: the rows may reference each other through parent_id
        await self.session.execute(
            update(MenuItem).where(MenuItem.id.in_(ids)).values(parent_id=None)
        )
        result = await self.session.execute(delete(MenuItem).where(MenuItem.id.in_(ids)))
        return result.rowcount

    async def delete_for_menu(self, menu_id: int) -> int:
        items = await self.find_for_menu(menu_id)
        return await self.delete_many([item.id for item in items])
