"""FULLSCO database models (PostgreSQL).

Every content table the public site and the admin back office read
from. Timestamps are filled by the database; uniqueness of slugs,
paths, usernames and emails is backed by unique constraints so that
concurrent writers cannot both succeed.
"""

import enum
from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


# --- Enums ---


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    USER = "user"


class PostStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class MenuLocation(str, enum.Enum):
    HEADER = "header"
    FOOTER = "footer"
    SIDEBAR = "sidebar"
    MOBILE = "mobile"


class MenuItemType(str, enum.Enum):
    PAGE = "page"
    CATEGORY = "category"
    LEVEL = "level"
    COUNTRY = "country"
    LINK = "link"
    SCHOLARSHIP = "scholarship"
    POST = "post"


# --- Mixins ---


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )


# --- Accounts ---


class User(TimestampMixin, Base):
    """A back-office account. ``password`` holds a bcrypt hash."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True)
    password: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    full_name: Mapped[str] = mapped_column(String(255))
    role: Mapped[UserRole] = mapped_column(Enum(UserRole), default=UserRole.USER)


# --- Taxonomy ---


class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Level(TimestampMixin, Base):
    __tablename__ = "levels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True)


class Country(TimestampMixin, Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True)


class Tag(TimestampMixin, Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True)


# --- Content ---


class Scholarship(TimestampMixin, Base):
    """A scholarship listing, the main public content type."""

    __tablename__ = "scholarships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500))
    slug: Mapped[str] = mapped_column(String(500), unique=True)
    description: Mapped[str] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Award details
    deadline: Mapped[str | None] = mapped_column(String(100), nullable=True)
    amount: Mapped[str | None] = mapped_column(String(100), nullable=True)
    currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    university: Mapped[str | None] = mapped_column(String(255), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    application_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Flags
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    is_fully_funded: Mapped[bool] = mapped_column(Boolean, default=False)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True)

    # SEO
    seo_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seo_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    seo_keywords: Mapped[str | None] = mapped_column(Text, nullable=True)
    focus_keyword: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Taxonomy
    country_id: Mapped[int | None] = mapped_column(ForeignKey("countries.id"), nullable=True)
    level_id: Mapped[int | None] = mapped_column(ForeignKey("levels.id"), nullable=True)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"), nullable=True)


class Post(TimestampMixin, Base):
    """A blog article. Tags are attached through ``post_tags``."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500))
    slug: Mapped[str] = mapped_column(String(500), unique=True)
    content: Mapped[str] = mapped_column(Text)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    status: Mapped[PostStatus] = mapped_column(Enum(PostStatus), default=PostStatus.DRAFT)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    views: Mapped[int] = mapped_column(Integer, default=0)
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_keywords: Mapped[str | None] = mapped_column(Text, nullable=True)
    focus_keyword: Mapped[str | None] = mapped_column(String(255), nullable=True)


class PostTag(Base):
    __tablename__ = "post_tags"
    __table_args__ = (UniqueConstraint("post_id", "tag_id", name="uq_post_tags_post_tag"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(ForeignKey("posts.id"), index=True)
    tag_id: Mapped[int] = mapped_column(ForeignKey("tags.id"), index=True)


class SuccessStory(TimestampMixin, Base):
    __tablename__ = "success_stories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    title: Mapped[str] = mapped_column(String(500))
    slug: Mapped[str] = mapped_column(String(500), unique=True)
    content: Mapped[str] = mapped_column(Text)
    scholarship_name: Mapped[str | None] = mapped_column(String(500), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True)


class Page(TimestampMixin, Base):
    """A static page (about, privacy policy, ...)."""

    __tablename__ = "pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500))
    slug: Mapped[str] = mapped_column(String(500), unique=True)
    content: Mapped[str] = mapped_column(Text)
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True)
    show_in_footer: Mapped[bool] = mapped_column(Boolean, default=False)
    show_in_header: Mapped[bool] = mapped_column(Boolean, default=False)


# --- Navigation ---


class Menu(TimestampMixin, Base):
    __tablename__ = "menus"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[MenuLocation] = mapped_column(Enum(MenuLocation), index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class MenuItem(TimestampMixin, Base):
    """A navigation entry. ``type`` selects which target column is read."""

    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    menu_id: Mapped[int] = mapped_column(ForeignKey("menus.id"), index=True)
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("menu_items.id"), nullable=True)
    title: Mapped[str] = mapped_column(String(255))
    type: Mapped[MenuItemType] = mapped_column(Enum(MenuItemType))
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    target_blank: Mapped[bool] = mapped_column(Boolean, default=False)

    # Targets
    page_id: Mapped[int | None] = mapped_column(ForeignKey("pages.id"), nullable=True)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"), nullable=True)
    level_id: Mapped[int | None] = mapped_column(ForeignKey("levels.id"), nullable=True)
    country_id: Mapped[int | None] = mapped_column(ForeignKey("countries.id"), nullable=True)
    scholarship_id: Mapped[int | None] = mapped_column(
        ForeignKey("scholarships.id"), nullable=True
    )
    post_id: Mapped[int | None] = mapped_column(ForeignKey("posts.id"), nullable=True)

    order: Mapped[int] = mapped_column(Integer, default=0)


# --- Home page blocks ---


class Statistic(TimestampMixin, Base):
    __tablename__ = "statistics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    value: Mapped[str] = mapped_column(String(100))  # "+1000", "50%", ...
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str] = mapped_column(String(100))
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Partner(TimestampMixin, Base):
    __tablename__ = "partners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Subscriber(TimestampMixin, Base):
    """A newsletter subscriber."""

    __tablename__ = "subscribers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)


# --- Media ---


class MediaFile(TimestampMixin, Base):
    """An uploaded file stored under the uploads directory."""

    __tablename__ = "media_files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    filename: Mapped[str] = mapped_column(String(255))
    original_filename: Mapped[str] = mapped_column(String(255))
    url: Mapped[str] = mapped_column(String(500))
    mime_type: Mapped[str] = mapped_column(String(100))
    size: Mapped[int] = mapped_column(Integer)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    alt: Mapped[str | None] = mapped_column(String(255), nullable=True)
    width: Mapped[int | None] = mapped_column(Integer, nullable=True)
    height: Mapped[int | None] = mapped_column(Integer, nullable=True)


# --- Settings ---


class SeoSetting(TimestampMixin, Base):
    __tablename__ = "seo_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    page_path: Mapped[str] = mapped_column(String(500), unique=True)
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    og_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    keywords: Mapped[str | None] = mapped_column(Text, nullable=True)


class SiteSetting(TimestampMixin, Base):
    """Site-wide settings. The table holds a single row."""

    __tablename__ = "site_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Identity
    site_name: Mapped[str] = mapped_column(String(255))
    site_tagline: Mapped[str | None] = mapped_column(String(255), nullable=True)
    site_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    favicon: Mapped[str | None] = mapped_column(String(500), nullable=True)
    logo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    logo_dark: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Contact
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Social
    facebook: Mapped[str | None] = mapped_column(String(500), nullable=True)
    twitter: Mapped[str | None] = mapped_column(String(500), nullable=True)
    instagram: Mapped[str | None] = mapped_column(String(500), nullable=True)
    youtube: Mapped[str | None] = mapped_column(String(500), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Appearance
    primary_color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    accent_color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    enable_dark_mode: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    rtl_direction: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    default_language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    enable_newsletter: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    enable_scholarship_search: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    footer_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Home page sections
    show_hero_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_featured_scholarships: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_search_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_categories_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_countries_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_latest_articles: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_success_stories: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_newsletter_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_statistics_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_partners_section: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Section titles
    hero_title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    hero_subtitle: Mapped[str | None] = mapped_column(String(500), nullable=True)
    hero_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured_scholarships_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    featured_scholarships_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    categories_section_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    categories_section_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    countries_section_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    countries_section_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latest_articles_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    latest_articles_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    success_stories_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    success_stories_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    newsletter_section_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    newsletter_section_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    statistics_section_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    statistics_section_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    partners_section_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    partners_section_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Layouts
    home_page_layout: Mapped[str | None] = mapped_column(String(50), nullable=True)
    scholarship_page_layout: Mapped[str | None] = mapped_column(String(50), nullable=True)
    article_page_layout: Mapped[str | None] = mapped_column(String(50), nullable=True)

    custom_css: Mapped[str | None] = mapped_column(Text, nullable=True)
