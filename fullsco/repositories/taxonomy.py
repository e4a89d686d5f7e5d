from fullsco.db.models import Category, Country, Level, Tag
from fullsco.repositories.base import Repository


class CategoriesRepository(Repository[Category]):
    model = Category


class LevelsRepository(Repository[Level]):
    model = Level


class CountriesRepository(Repository[Country]):
    model = Country


class TagsRepository(Repository[Tag]):
    model = Tag
