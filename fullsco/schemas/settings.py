"""SEO settings and the site-wide settings row."""

from datetime import datetime

from pydantic import BaseModel, Field

# --- SEO ---


class SeoSettingCreate(BaseModel):
    page_path: str = Field(min_length=1, max_length=500, pattern=r"^/")
    meta_title: str | None = None
    meta_description: str | None = None
    og_image: str | None = None
    keywords: str | None = None


class SeoSettingUpdate(BaseModel):
    page_path: str | None = Field(default=None, min_length=1, max_length=500, pattern=r"^/")
    meta_title: str | None = None
    meta_description: str | None = None
    og_image: str | None = None
    keywords: str | None = None


class SeoSettingResponse(BaseModel):
    id: int
    page_path: str
    meta_title: str | None
    meta_description: str | None
    og_image: str | None
    keywords: str | None

    model_config = {"from_attributes": True}


# --- Site settings ---


class SiteSettingFields(BaseModel):
    site_tagline: str | None = None
    site_description: str | None = None
    favicon: str | None = None
    logo: str | None = None
    logo_dark: str | None = None

    email: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    address: str | None = None

    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    youtube: str | None = None
    linkedin: str | None = None

    primary_color: str | None = None
    secondary_color: str | None = None
    accent_color: str | None = None
    enable_dark_mode: bool | None = None
    rtl_direction: bool | None = None
    default_language: str | None = None
    enable_newsletter: bool | None = None
    enable_scholarship_search: bool | None = None
    footer_text: str | None = None

    show_hero_section: bool | None = None
    show_featured_scholarships: bool | None = None
    show_search_section: bool | None = None
    show_categories_section: bool | None = None
    show_countries_section: bool | None = None
    show_latest_articles: bool | None = None
    show_success_stories: bool | None = None
    show_newsletter_section: bool | None = None
    show_statistics_section: bool | None = None
    show_partners_section: bool | None = None

    hero_title: str | None = None
    hero_subtitle: str | None = None
    hero_description: str | None = None
    featured_scholarships_title: str | None = None
    featured_scholarships_description: str | None = None
    categories_section_title: str | None = None
    categories_section_description: str | None = None
    countries_section_title: str | None = None
    countries_section_description: str | None = None
    latest_articles_title: str | None = None
    latest_articles_description: str | None = None
    success_stories_title: str | None = None
    success_stories_description: str | None = None
    newsletter_section_title: str | None = None
    newsletter_section_description: str | None = None
    statistics_section_title: str | None = None
    statistics_section_description: str | None = None
    partners_section_title: str | None = None
    partners_section_description: str | None = None

    home_page_layout: str | None = None
    scholarship_page_layout: str | None = None
    article_page_layout: str | None = None

    custom_css: str | None = None


class SiteSettingCreate(SiteSettingFields):
    site_name: str = Field(min_length=1, max_length=255)


class SiteSettingUpdate(SiteSettingFields):
    site_name: str | None = Field(default=None, min_length=1, max_length=255)


class SiteSettingResponse(SiteSettingFields):
    id: int
    site_name: str
    updated_at: datetime

    model_config = {"from_attributes": True}
