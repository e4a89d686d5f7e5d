from datetime import datetime

from pydantic import BaseModel, Field


class MediaFileCreate(BaseModel):
    filename: str
    original_filename: str
    url: str
    mime_type: str
    size: int = Field(ge=0)
    title: str | None = None
    alt: str | None = None
    width: int | None = None
    height: int | None = None


class MediaFileUpdate(BaseModel):
    """Only descriptive metadata can change after upload."""

    title: str | None = None
    alt: str | None = None


class MediaFileResponse(BaseModel):
    id: int
    filename: str
    original_filename: str
    url: str
    mime_type: str
    size: int
    title: str | None
    alt: str | None
    width: int | None
    height: int | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BulkDeleteRequest(BaseModel):
    ids: list[int] = Field(min_length=1)
