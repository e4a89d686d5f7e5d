"""Media library: uploaded files on local disk plus their database records.

Files are written under ``settings.upload_dir`` and served from
``settings.upload_url_prefix``. Removing a record removes its file on a
best-effort basis; a file that cannot be unlinked is logged and left
behind, the record is deleted regardless.
"""

import logging
import os
import random
import time
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from fullsco.config import settings
from fullsco.db.models import MediaFile
from fullsco.errors import ValidationFailedError
from fullsco.repositories.media import MediaRepository
from fullsco.schemas.media import MediaFileCreate, MediaFileUpdate
from fullsco.services.base import CrudService

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {
    # Images
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    # Documents
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    # Video
    "video/mp4",
    "video/webm",
}

# Images Pillow can measure (SVG is vector)
RASTER_MIME_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


def stored_filename(original_filename: str, field: str = "file") -> str:
    """``<field>-<epoch ms>-<9 random digits><ext>``, keeping the original extension."""
    ext = os.path.splitext(original_filename)[1].lower()
    return f"{field}-{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}{ext}"


def image_size(data: bytes) -> tuple[int, int] | None:
    try:
        with Image.open(BytesIO(data)) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not read image dimensions: {e}")
        return None


class MediaService(CrudService[MediaFile]):
    entity_name = "Media file"
    repository_class = MediaRepository
    create_schema = MediaFileCreate
    update_schema = MediaFileUpdate

    repository: MediaRepository

    def __init__(self, session, upload_dir: str | None = None):
        super().__init__(session)
        self.upload_dir = Path(upload_dir or settings.upload_dir)

    async def upload(
        self,
        original_filename: str,
        content_type: str | None,
        data: bytes,
        title: str | None = None,
        alt: str | None = None,
        field: str = "file",
    ) -> MediaFile:
        """Validate, store and record one uploaded file."""
        self.check_upload(original_filename, content_type, data)

        filename = stored_filename(original_filename, field)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / filename).write_bytes(data)

        width = height = None
        if content_type in RASTER_MIME_TYPES:
            size = image_size(data)
            if size:
                width, height = size

        record = {
            "filename": filename,
            "original_filename": original_filename,
            "url": f"{settings.upload_url_prefix.rstrip('/')}/{filename}",
            "mime_type": content_type,
            "size": len(data),
            "title": title,
            "alt": alt,
            "width": width,
            "height": height,
        }
        try:
            return await self.create(record)
        except Exception:
            self.remove_file(filename)
            raise

    def check_upload(self, original_filename: str, content_type: str | None, data: bytes) -> None:
        errors = []
        if not original_filename:
            errors.append({"field": "file", "message": "No file was uploaded", "type": "missing"})
        if content_type not in ALLOWED_MIME_TYPES:
            errors.append(
                {"field": "file", "message": f"File type {content_type!r} is not allowed", "type": "mime_type"}
            )
        if len(data) > settings.max_upload_size:
            errors.append(
                {
                    "field": "file",
                    "message": f"File exceeds the {settings.max_upload_size // (1024 * 1024)} MB limit",
                    "type": "size",
                }
            )
        if errors:
            raise ValidationFailedError("Invalid upload", errors=errors)

    async def delete(self, id: int) -> bool:
        media = await self.require(id)

        async with self.transaction(record_id=id):
            await self.repository.delete(media)

        self.remove_file(media.filename)
        logger.info(f"Deleted {self.entity_name} #{id}")
        return True

    async def bulk_delete(self, ids: list[int]) -> int:
        """Delete every record in ``ids`` that exists; unknown ids are skipped."""
        files = await self.repository.find_many(ids)
        if not files:
            return 0

        async with self.transaction():
            deleted = await self.repository.delete_many([f.id for f in files])

        for media in files:
            self.remove_file(media.filename)
        logger.info(f"Bulk deleted {deleted} media file(s)")
        return deleted

    def remove_file(self, filename: str) -> None:
        path = self.upload_dir / filename
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove {path}: {e}")
