from sqlalchemy import delete, select

from fullsco.db.models import MediaFile
from fullsco.repositories.base import Repository


class MediaRepository(Repository[MediaFile]):
    model = MediaFile
    order_by = (MediaFile.created_at.desc(), MediaFile.id.desc())

    async def find_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
        mime_type: str | None = None,
    ) -> list[MediaFile]:
        """Newest first; ``mime_type`` matches by prefix (``image/`` or ``image/png``)."""
        query = select(MediaFile)
        if mime_type:
            query = query.where(MediaFile.mime_type.startswith(mime_type, autoescape=True))
        query = query.order_by(*self._ordering())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_many(self, ids: list[int]) -> list[MediaFile]:
        result = await self.session.execute(select(MediaFile).where(MediaFile.id.in_(ids)))
        return list(result.scalars().all())

    async def delete_many(self, ids: list[int]) -> int:
        result = await self.session.execute(delete(MediaFile).where(MediaFile.id.in_(ids)))
        return result.rowcount
