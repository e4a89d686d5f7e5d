"""Scholarships, posts, success stories and static pages."""

from datetime import datetime

from pydantic import BaseModel, Field

from fullsco.db.models import PostStatus
from fullsco.schemas.common import Name, Slug, Title

# --- Scholarships ---


class ScholarshipCreate(BaseModel):
    title: Title
    slug: Slug | None = None
    description: str
    content: str | None = None
    deadline: str | None = None
    amount: str | None = None
    currency: str | None = Field(default=None, max_length=10)
    university: str | None = None
    department: str | None = None
    website: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_featured: bool = False
    is_fully_funded: bool = False
    is_published: bool = True
    seo_title: str | None = None
    seo_description: str | None = None
    seo_keywords: str | None = None
    focus_keyword: str | None = None
    country_id: int | None = None
    level_id: int | None = None
    category_id: int | None = None
    requirements: str | None = None
    application_link: str | None = None
    image_url: str | None = None


class ScholarshipUpdate(BaseModel):
    title: Title | None = None
    slug: Slug | None = None
    description: str | None = None
    content: str | None = None
    deadline: str | None = None
    amount: str | None = None
    currency: str | None = Field(default=None, max_length=10)
    university: str | None = None
    department: str | None = None
    website: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_featured: bool | None = None
    is_fully_funded: bool | None = None
    is_published: bool | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    seo_keywords: str | None = None
    focus_keyword: str | None = None
    country_id: int | None = None
    level_id: int | None = None
    category_id: int | None = None
    requirements: str | None = None
    application_link: str | None = None
    image_url: str | None = None


class ScholarshipResponse(BaseModel):
    id: int
    title: str
    slug: str
    description: str
    content: str | None
    deadline: str | None
    amount: str | None
    currency: str | None
    university: str | None
    department: str | None
    website: str | None
    start_date: datetime | None
    end_date: datetime | None
    is_featured: bool
    is_fully_funded: bool
    is_published: bool
    seo_title: str | None
    seo_description: str | None
    seo_keywords: str | None
    focus_keyword: str | None
    country_id: int | None
    level_id: int | None
    category_id: int | None
    requirements: str | None
    application_link: str | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# --- Posts ---


class PostCreate(BaseModel):
    title: Title
    slug: Slug | None = None
    content: str
    excerpt: str | None = None
    author_id: int
    status: PostStatus = PostStatus.DRAFT
    image_url: str | None = None
    is_featured: bool = False
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None
    focus_keyword: str | None = None


class PostUpdate(BaseModel):
    title: Title | None = None
    slug: Slug | None = None
    content: str | None = None
    excerpt: str | None = None
    author_id: int | None = None
    status: PostStatus | None = None
    image_url: str | None = None
    is_featured: bool | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None
    focus_keyword: str | None = None


class PostResponse(BaseModel):
    id: int
    title: str
    slug: str
    content: str
    excerpt: str | None
    author_id: int
    status: PostStatus
    image_url: str | None
    is_featured: bool
    views: int
    meta_title: str | None
    meta_description: str | None
    meta_keywords: str | None
    focus_keyword: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PostTagResponse(BaseModel):
    id: int
    post_id: int
    tag_id: int

    model_config = {"from_attributes": True}


# --- Success stories ---


class SuccessStoryCreate(BaseModel):
    name: Name
    title: Title
    slug: Slug | None = None
    content: str
    scholarship_name: str | None = None
    image_url: str | None = None
    is_published: bool = True


class SuccessStoryUpdate(BaseModel):
    name: Name | None = None
    title: Title | None = None
    slug: Slug | None = None
    content: str | None = None
    scholarship_name: str | None = None
    image_url: str | None = None
    is_published: bool | None = None


class SuccessStoryResponse(BaseModel):
    id: int
    name: str
    title: str
    slug: str
    content: str
    scholarship_name: str | None
    image_url: str | None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# --- Pages ---


class PageCreate(BaseModel):
    title: Title
    slug: Slug
    content: str
    meta_title: str | None = None
    meta_description: str | None = None
    is_published: bool = True
    show_in_footer: bool = False
    show_in_header: bool = False


class PageUpdate(BaseModel):
    title: Title | None = None
    slug: Slug | None = None
    content: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    is_published: bool | None = None
    show_in_footer: bool | None = None
    show_in_header: bool | None = None


class PageResponse(BaseModel):
    id: int
    title: str
    slug: str
    content: str
    meta_title: str | None
    meta_description: str | None
    is_published: bool
    show_in_footer: bool
    show_in_header: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
