"""Repositories for scholarships, posts, success stories and pages."""

from typing import Any

from sqlalchemy import delete, select, update

from fullsco.db.models import Page, Post, PostTag, Scholarship, SuccessStory, Tag
from fullsco.repositories.base import Repository


class ScholarshipsRepository(Repository[Scholarship]):
    model = Scholarship
    order_by = (Scholarship.created_at.desc(), Scholarship.id.desc())


class SuccessStoriesRepository(Repository[SuccessStory]):
    model = SuccessStory
    order_by = (SuccessStory.created_at.desc(), SuccessStory.id.desc())


class PagesRepository(Repository[Page]):
    model = Page
    order_by = (Page.created_at.desc(), Page.id.desc())


class PostsRepository(Repository[Post]):
    model = Post
    order_by = (Post.created_at.desc(), Post.id.desc())

    async def find_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
        tag: str | None = None,
        **filters: Any,
    ) -> list[Post]:
        """Posts newest first, optionally restricted to one tag slug."""
        query = self._where(select(Post), filters)
        if tag:
            query = (
                query.join(PostTag, PostTag.post_id == Post.id)
                .join(Tag, Tag.id == PostTag.tag_id)
                .where(Tag.slug == tag)
            )
        query = query.order_by(*self._ordering())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def increment_views(self, post_id: int) -> bool:
        result = await self.session.execute(
            update(Post).where(Post.id == post_id).values(views=Post.views + 1)
        )
        return result.rowcount > 0

    # --- Tags ---

    async def find_tags(self, post_id: int) -> list[Tag]:
        result = await self.session.execute(
            select(Tag)
            .join(PostTag, PostTag.tag_id == Tag.id)
            .where(PostTag.post_id == post_id)
            .order_by(Tag.name)
        )
        return list(result.scalars().all())

    async def find_post_tag(self, post_id: int, tag_id: int) -> PostTag | None:
        result = await self.session.execute(
            select(PostTag).where(PostTag.post_id == post_id, PostTag.tag_id == tag_id)
        )
        return result.scalar_one_or_none()

    async def add_tag(self, post_id: int, tag_id: int) -> PostTag:
        link = PostTag(post_id=post_id, tag_id=tag_id)
        self.session.add(link)
        await self.session.flush()
        return link

    async def remove_tag(self, post_id: int, tag_id: int) -> bool:
        result = await self.session.execute(
            delete(PostTag).where(PostTag.post_id == post_id, PostTag.tag_id == tag_id)
        )
        return result.rowcount > 0

    async def remove_all_tags(self, post_id: int) -> int:
        result = await self.session.execute(delete(PostTag).where(PostTag.post_id == post_id))
        return result.rowcount

