from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, StringConstraints

from fullsco.slugs import SLUG_PATTERN

T = TypeVar("T")

Slug = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500, pattern=SLUG_PATTERN)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]


class Envelope(BaseModel, Generic[T]):
    """The response body every endpoint returns."""

    success: bool = True
    message: str | None = None
    data: T | None = None


def ok(data: Any = None, message: str | None = None) -> dict:
    return {"success": True, "message": message, "data": data}
