"""Generic async repository over one SQLAlchemy model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fullsco.db.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """CRUD queries for ``model``.

    Writes only flush; committing is the caller's job so that several
    repository calls can share one transaction.
    """

    model: type[ModelT]
    # Sort for find_all; empty means insertion order (primary key)
    order_by: tuple = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    def _ordering(self) -> tuple:
        return self.order_by or (self.model.id,)

    def _where(self, query, criteria: dict[str, Any]):
        for name, value in criteria.items():
            if value is None:
                continue
            query = query.where(getattr(self.model, name) == value)
        return query

    async def find_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
        **filters: Any,
    ) -> list[ModelT]:
        """Return rows matching the equality ``filters`` (``None`` values are ignored)."""
        query = self._where(select(self.model), filters).order_by(*self._ordering())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_id(self, id: int) -> ModelT | None:
        return await self.find_one_by(id=id)

    async def find_one_by(self, **criteria: Any) -> ModelT | None:
        query = select(self.model)
        for name, value in criteria.items():
            query = query.where(getattr(self.model, name) == value)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def create(self, data: dict[str, Any]) -> ModelT:
        obj = self.model(**data)
        self.session.add(obj)
        await self.session.flush()
        # Pick up server defaults (id, timestamps)
        await self.session.refresh(obj)
        return obj

    async def update(self, obj: ModelT, data: dict[str, Any]) -> ModelT:
        for name, value in data.items():
            setattr(obj, name, value)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.session.delete(obj)
        await self.session.flush()
