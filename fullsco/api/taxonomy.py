"""Category, level, country and tag routes: public reads, admin writes."""

from fastapi import APIRouter

from fullsco.api.crud import mount_crud
from fullsco.schemas.taxonomy import CategoryResponse, CountryResponse, LevelResponse, TagResponse
from fullsco.services.taxonomy import CategoriesService, CountriesService, LevelsService, TagsService

categories_router = mount_crud(
    APIRouter(), CategoriesService, response_model=CategoryResponse, slugged=True
)
levels_router = mount_crud(APIRouter(), LevelsService, response_model=LevelResponse, slugged=True)
countries_router = mount_crud(
    APIRouter(), CountriesService, response_model=CountryResponse, slugged=True
)
tags_router = mount_crud(APIRouter(), TagsService, response_model=TagResponse, slugged=True)
