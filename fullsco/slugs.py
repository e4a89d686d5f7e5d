"""Slug helpers shared by schemas and services."""

import re

# Latin lowercase, digits, Arabic letters and Arabic-Indic digits, single dashes
_SLUG_CHARS = "a-z0-9ء-ي٠-٩"
SLUG_PATTERN = rf"^[{_SLUG_CHARS}]+(?:-[{_SLUG_CHARS}]+)*$"


def generate_slug(text: str) -> str:
    """Build a URL slug from a title.

    >>> generate_slug("  Study in Germany: 2025 Guide! ")
    'study-in-germany-2025-guide'
    """
    slug = text.strip().lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(rf"[^{_SLUG_CHARS}-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def is_valid_slug(slug: str) -> bool:
    return re.fullmatch(SLUG_PATTERN, slug) is not None
