from fullsco.db.models import Category, Country, Level, Tag
from fullsco.repositories.taxonomy import (
    CategoriesRepository,
    CountriesRepository,
    LevelsRepository,
    TagsRepository,
)
from fullsco.schemas.taxonomy import (
    CategoryCreate,
    CategoryUpdate,
    CountryCreate,
    CountryUpdate,
    LevelCreate,
    LevelUpdate,
    TagCreate,
    TagUpdate,
)
from fullsco.services.base import CrudService


class CategoriesService(CrudService[Category]):
    entity_name = "Category"
    repository_class = CategoriesRepository
    create_schema = CategoryCreate
    update_schema = CategoryUpdate
    unique_fields = ("slug",)


class LevelsService(CrudService[Level]):
    entity_name = "Level"
    repository_class = LevelsRepository
    create_schema = LevelCreate
    update_schema = LevelUpdate
    unique_fields = ("slug",)


class CountriesService(CrudService[Country]):
    entity_name = "Country"
    repository_class = CountriesRepository
    create_schema = CountryCreate
    update_schema = CountryUpdate
    unique_fields = ("slug",)


class TagsService(CrudService[Tag]):
    entity_name = "Tag"
    repository_class = TagsRepository
    create_schema = TagCreate
    update_schema = TagUpdate
    unique_fields = ("slug",)
