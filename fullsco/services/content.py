"""Services for scholarships, posts, success stories and static pages."""

import logging

from fullsco.db.models import (
    Category,
    Country,
    Level,
    Page,
    Post,
    PostStatus,
    PostTag,
    Scholarship,
    SuccessStory,
    Tag,
    User,
)
from fullsco.errors import NotFoundError
from fullsco.repositories.content import (
    PagesRepository,
    PostsRepository,
    ScholarshipsRepository,
    SuccessStoriesRepository,
)
from fullsco.schemas.content import (
    PageCreate,
    PageUpdate,
    PostCreate,
    PostUpdate,
    ScholarshipCreate,
    ScholarshipUpdate,
    SuccessStoryCreate,
    SuccessStoryUpdate,
)
from fullsco.services.base import CrudService

logger = logging.getLogger(__name__)


class ScholarshipsService(CrudService[Scholarship]):
    entity_name = "Scholarship"
    repository_class = ScholarshipsRepository
    create_schema = ScholarshipCreate
    update_schema = ScholarshipUpdate
    unique_fields = ("slug",)
    slug_source = "title"
    references = {"category_id": Category, "level_id": Level, "country_id": Country}

    async def featured(self, limit: int | None = None) -> list[Scholarship]:
        return await self.repository.find_all(limit=limit, is_featured=True, is_published=True)


class SuccessStoriesService(CrudService[SuccessStory]):
    entity_name = "Success story"
    repository_class = SuccessStoriesRepository
    create_schema = SuccessStoryCreate
    update_schema = SuccessStoryUpdate
    unique_fields = ("slug",)
    slug_source = "title"


class PagesService(CrudService[Page]):
    entity_name = "Page"
    repository_class = PagesRepository
    create_schema = PageCreate
    update_schema = PageUpdate
    unique_fields = ("slug",)


class PostsService(CrudService[Post]):
    entity_name = "Post"
    repository_class = PostsRepository
    create_schema = PostCreate
    update_schema = PostUpdate
    unique_fields = ("slug",)
    slug_source = "title"
    references = {"author_id": User}

    repository: PostsRepository

    async def featured(self, limit: int | None = None) -> list[Post]:
        return await self.repository.find_all(
            limit=limit, is_featured=True, status=PostStatus.PUBLISHED
        )

    async def before_delete(self, post: Post) -> None:
        removed = await self.repository.remove_all_tags(post.id)
        if removed:
            logger.info(f"Removed {removed} tag link(s) from post #{post.id}")

    async def increment_views(self, post_id: int) -> Post:
        post = await self.require(post_id)
        async with self.transaction(record_id=post_id):
            await self.repository.increment_views(post_id)
        await self.session.refresh(post)
        return post

    # --- Tags ---

    async def get_tags(self, post_id: int) -> list[Tag]:
        await self.require(post_id)
        return await self.repository.find_tags(post_id)

    async def add_tag(self, post_id: int, tag_id: int) -> PostTag:
        """Attach a tag; attaching one that is already there returns the existing link."""
        await self.require(post_id)
        if await self.session.get(Tag, tag_id) is None:
            raise NotFoundError("Tag", tag_id)

        existing = await self.repository.find_post_tag(post_id, tag_id)
        if existing is not None:
            return existing

        async with self.transaction({"post_id": post_id, "tag_id": tag_id}, record_id=post_id):
            link = await self.repository.add_tag(post_id, tag_id)
        return link

    async def remove_tag(self, post_id: int, tag_id: int) -> bool:
        await self.require(post_id)
        async with self.transaction(record_id=post_id):
            removed = await self.repository.remove_tag(post_id, tag_id)
        if not removed:
            raise NotFoundError("Post tag", tag_id, field="tag_id")
        return True
