"""Menus, menu items and the nested menu structure."""

from datetime import datetime

from pydantic import BaseModel

from fullsco.db.models import MenuItemType, MenuLocation
from fullsco.schemas.common import Name, Slug


class MenuCreate(BaseModel):
    name: Name
    slug: Slug
    description: str | None = None
    location: MenuLocation
    is_active: bool = True


class MenuUpdate(BaseModel):
    name: Name | None = None
    slug: Slug | None = None
    description: str | None = None
    location: MenuLocation | None = None
    is_active: bool | None = None


class MenuResponse(BaseModel):
    id: int
    name: str
    slug: str
    description: str | None
    location: MenuLocation
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MenuItemCreate(BaseModel):
    menu_id: int
    parent_id: int | None = None
    title: Name
    type: MenuItemType
    url: str | None = None
    target_blank: bool = False
    page_id: int | None = None
    category_id: int | None = None
    level_id: int | None = None
    country_id: int | None = None
    scholarship_id: int | None = None
    post_id: int | None = None
    order: int = 0


class MenuItemUpdate(BaseModel):
    parent_id: int | None = None
    title: Name | None = None
    type: MenuItemType | None = None
    url: str | None = None
    target_blank: bool | None = None
    page_id: int | None = None
    category_id: int | None = None
    level_id: int | None = None
    country_id: int | None = None
    scholarship_id: int | None = None
    post_id: int | None = None
    order: int | None = None


class MenuItemResponse(BaseModel):
    id: int
    menu_id: int
    parent_id: int | None
    title: str
    type: MenuItemType
    url: str | None
    target_blank: bool
    page_id: int | None
    category_id: int | None
    level_id: int | None
    country_id: int | None
    scholarship_id: int | None
    post_id: int | None
    order: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MenuItemNode(MenuItemResponse):
    children: list["MenuItemNode"] = []


MenuItemNode.model_rebuild()


class MenuStructureResponse(BaseModel):
    menu: MenuResponse
    items: list[MenuItemNode]
    # Items left out of the tree (dangling parent or parent cycle)
    detached_ids: list[int] = []
