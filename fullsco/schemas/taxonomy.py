"""Categories, levels, countries and tags: name + slug records."""

from datetime import datetime

from pydantic import BaseModel

from fullsco.schemas.common import Name, Slug


class CategoryCreate(BaseModel):
    name: Name
    slug: Slug
    description: str | None = None


class CategoryUpdate(BaseModel):
    name: Name | None = None
    slug: Slug | None = None
    description: str | None = None


class CategoryResponse(BaseModel):
    id: int
    name: str
    slug: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class LevelCreate(BaseModel):
    name: Name
    slug: Slug


class LevelUpdate(BaseModel):
    name: Name | None = None
    slug: Slug | None = None


class LevelResponse(BaseModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CountryCreate(LevelCreate):
    pass


class CountryUpdate(LevelUpdate):
    pass


class CountryResponse(LevelResponse):
    pass


class TagCreate(LevelCreate):
    pass


class TagUpdate(LevelUpdate):
    pass


class TagResponse(LevelResponse):
    pass
