"""Scholarship, post, success story and page routes."""

from fastapi import APIRouter, Depends, Query

from fullsco.api.crud import mount_crud
from fullsco.api.deps import require_admin, service_dependency
from fullsco.db.models import PostStatus
from fullsco.schemas.common import Envelope, ok
from fullsco.schemas.content import (
    PageResponse,
    PostResponse,
    PostTagResponse,
    ScholarshipResponse,
    SuccessStoryResponse,
)
from fullsco.schemas.taxonomy import TagResponse
from fullsco.services.content import (
    PagesService,
    PostsService,
    ScholarshipsService,
    SuccessStoriesService,
)

# --- Scholarships ---

scholarships_router = APIRouter()
get_scholarships = service_dependency(ScholarshipsService)


def scholarship_filters(
    category_id: int | None = None,
    level_id: int | None = None,
    country_id: int | None = None,
    is_featured: bool | None = None,
    is_published: bool | None = None,
    is_fully_funded: bool | None = None,
) -> dict:
    return {
        "category_id": category_id,
        "level_id": level_id,
        "country_id": country_id,
        "is_featured": is_featured,
        "is_published": is_published,
        "is_fully_funded": is_fully_funded,
    }


@scholarships_router.get("/featured", response_model=Envelope[list[ScholarshipResponse]])
async def featured_scholarships(
    limit: int | None = Query(None, ge=1, le=100),
    service: ScholarshipsService = Depends(get_scholarships),
):
    records = await service.featured(limit)
    return ok([ScholarshipResponse.model_validate(s) for s in records])


mount_crud(
    scholarships_router,
    ScholarshipsService,
    response_model=ScholarshipResponse,
    slugged=True,
    list_filters=scholarship_filters,
)

# --- Posts ---

posts_router = APIRouter()
get_posts = service_dependency(PostsService)


def post_filters(
    status: PostStatus | None = None,
    is_featured: bool | None = None,
    author_id: int | None = None,
    tag: str | None = Query(None, description="Tag slug"),
) -> dict:
    return {"status": status, "is_featured": is_featured, "author_id": author_id, "tag": tag}


@posts_router.get("/featured", response_model=Envelope[list[PostResponse]])
async def featured_posts(
    limit: int | None = Query(None, ge=1, le=100),
    service: PostsService = Depends(get_posts),
):
    records = await service.featured(limit)
    return ok([PostResponse.model_validate(p) for p in records])


@posts_router.get("/tag/{tag_slug}", response_model=Envelope[list[PostResponse]])
async def posts_by_tag(
    tag_slug: str,
    limit: int | None = Query(None, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: PostsService = Depends(get_posts),
):
    records = await service.list(limit=limit, offset=offset, tag=tag_slug)
    return ok([PostResponse.model_validate(p) for p in records])


@posts_router.post("/{id}/view", response_model=Envelope[PostResponse])
async def record_post_view(id: int, service: PostsService = Depends(get_posts)):
    post = await service.increment_views(id)
    return ok(PostResponse.model_validate(post))


@posts_router.get("/{id}/tags", response_model=Envelope[list[TagResponse]])
async def get_post_tags(id: int, service: PostsService = Depends(get_posts)):
    tags = await service.get_tags(id)
    return ok([TagResponse.model_validate(t) for t in tags])


@posts_router.post(
    "/{id}/tags/{tag_id}",
    response_model=Envelope[PostTagResponse],
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def add_post_tag(id: int, tag_id: int, service: PostsService = Depends(get_posts)):
    link = await service.add_tag(id, tag_id)
    return ok(PostTagResponse.model_validate(link), "Tag added to post")


@posts_router.delete(
    "/{id}/tags/{tag_id}",
    response_model=Envelope[dict],
    dependencies=[Depends(require_admin)],
)
async def remove_post_tag(id: int, tag_id: int, service: PostsService = Depends(get_posts)):
    await service.remove_tag(id, tag_id)
    return ok({"post_id": id, "tag_id": tag_id}, "Tag removed from post")


mount_crud(
    posts_router,
    PostsService,
    response_model=PostResponse,
    slugged=True,
    list_filters=post_filters,
)

# --- Success stories and pages ---


def published_filter(is_published: bool | None = None) -> dict:
    return {"is_published": is_published}


success_stories_router = mount_crud(
    APIRouter(),
    SuccessStoriesService,
    response_model=SuccessStoryResponse,
    slugged=True,
    list_filters=published_filter,
)

pages_router = mount_crud(
    APIRouter(),
    PagesService,
    response_model=PageResponse,
    slugged=True,
    list_filters=published_filter,
)
