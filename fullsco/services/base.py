"""Generic CRUD service.

One ``CrudService`` subclass per entity supplies the repository, the
create/update schemas and the unique fields; everything else (schema
validation, slug generation, uniqueness checks, not-found handling and
the commit/rollback boundary) lives here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Generic, get_args

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fullsco.errors import ConflictError, NotFoundError, ValidationFailedError, validation_details
from fullsco.repositories.base import ModelT, Repository
from fullsco.slugs import generate_slug

logger = logging.getLogger(__name__)


def _allows_none(annotation: Any) -> bool:
    return annotation is None or annotation is type(None) or type(None) in get_args(annotation)


class CrudService(Generic[ModelT]):
    entity_name: str = "Record"
    repository_class: type[Repository] = Repository
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    unique_fields: tuple[str, ...] = ()
    # Field a slug is generated from when the caller sends none
    slug_source: str | None = None
    # Foreign key fields checked before writing: field -> referenced model
    references: dict[str, type] = {}

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = self.repository_class(session)

    # --- Reads ---

    async def list(self, **filters: Any) -> list[ModelT]:
        return await self.repository.find_all(**filters)

    async def get_by_id(self, id: int) -> ModelT | None:
        return await self.repository.find_by_id(id)

    async def get_by_slug(self, slug: str) -> ModelT | None:
        return await self.repository.find_one_by(slug=slug)

    async def require(self, id: int) -> ModelT:
        obj = await self.get_by_id(id)
        if obj is None:
            raise NotFoundError(self.entity_name, id)
        return obj

    # --- Writes ---

    async def create(self, data: BaseModel | dict[str, Any]) -> ModelT:
        payload = self.validate(self.create_schema, data)
        payload = await self.prepare_create(payload)
        await self.ensure_unique(payload)
        await self.check_references(payload)

        async with self.transaction(payload):
            obj = await self.repository.create(payload)

        logger.info(f"Created {self.entity_name} #{obj.id}")
        return obj

    async def update(self, id: int, data: BaseModel | dict[str, Any]) -> ModelT:
        """Apply a partial update. Fields the caller did not send are left alone."""
        obj = await self.require(id)
        patch = self.validate(self.update_schema, data, partial=True)
        patch = await self.prepare_update(obj, patch)

        changes = {name: value for name, value in patch.items() if getattr(obj, name) != value}
        if not changes:
            return obj

        await self.ensure_unique(changes, exclude_id=obj.id)
        await self.check_references(changes)

        async with self.transaction(changes):
            obj = await self.repository.update(obj, changes)

        logger.info(f"Updated {self.entity_name} #{obj.id}: {sorted(changes)}")
        return obj

    async def delete(self, id: int) -> bool:
        obj = await self.require(id)

        async with self.transaction(record_id=id):
            await self.before_delete(obj)
            await self.repository.delete(obj)

        logger.info(f"Deleted {self.entity_name} #{id}")
        return True

    # --- Hooks ---

    async def prepare_create(self, payload: dict[str, Any]) -> dict[str, Any]:
        if self.slug_source and not payload.get("slug"):
            payload["slug"] = self._slug_from(payload.get(self.slug_source))
        return payload

    async def prepare_update(self, obj: ModelT, patch: dict[str, Any]) -> dict[str, Any]:
        if not self.slug_source:
            return patch
        if "slug" in patch and not patch["slug"]:
            source = patch.get(self.slug_source) or getattr(obj, self.slug_source)
            patch["slug"] = self._slug_from(source)
        # A retitled record gets a fresh slug unless one was sent
        elif (
            patch.get(self.slug_source)
            and "slug" not in patch
            and patch[self.slug_source] != getattr(obj, self.slug_source)
        ):
            patch["slug"] = self._slug_from(patch[self.slug_source])
        return patch

    async def before_delete(self, obj: ModelT) -> None:
        """Remove dependent rows inside the delete transaction."""

    # --- Helpers ---

    def validate(
        self,
        schema: type[BaseModel],
        data: BaseModel | dict[str, Any] | None,
        partial: bool = False,
    ) -> dict[str, Any]:
        """Validate ``data`` against ``schema`` and return the field values.

        With ``partial`` only the fields the caller actually sent are
        returned, and nulls are refused for fields the create schema
        declares non-nullable.
        """
        if isinstance(data, schema):
            model = data
        else:
            if isinstance(data, BaseModel):
                data = data.model_dump(exclude_unset=partial)
            try:
                model = schema.model_validate(data or {})
            except ValidationError as e:
                raise ValidationFailedError(
                    f"Invalid {self.entity_name} data",
                    errors=validation_details(e.errors()),
                ) from e

        values = model.model_dump(exclude_unset=partial)
        if partial:
            not_null = {
                name
                for name, field in self.create_schema.model_fields.items()
                if not _allows_none(field.annotation)
            }
            nulled = sorted(name for name, value in values.items() if value is None and name in not_null)
            if nulled:
                raise ValidationFailedError(
                    f"Invalid {self.entity_name} data",
                    errors=[
                        {"field": name, "message": "Field cannot be null", "type": "null"}
                        for name in nulled
                    ],
                )
        return values

    async def ensure_unique(self, values: dict[str, Any], exclude_id: int | None = None) -> None:
        for field in self.unique_fields:
            value = values.get(field)
            if value is None:
                continue
            existing = await self.repository.find_one_by(**{field: value})
            if existing is not None and existing.id != exclude_id:
                raise ConflictError(self.entity_name, field, value)

    async def check_references(self, values: dict[str, Any]) -> None:
        missing = []
        for field, model in self.references.items():
            value = values.get(field)
            if value is None:
                continue
            if await self.session.get(model, value) is None:
                missing.append(
                    {"field": field, "message": f"{model.__name__} {value} does not exist", "type": "reference"}
                )
        if missing:
            raise ValidationFailedError(f"Invalid {self.entity_name} data", errors=missing)

    @asynccontextmanager
    async def transaction(self, values: dict[str, Any] | None = None, record_id: int | None = None):
        """Commit on success, roll back on error.

        A constraint violation becomes a ``ConflictError``: on writes it
        names the first unique field present in ``values``, on deletes it
        reports the record as still referenced.
        """
        try:
            yield
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Integrity error on {self.entity_name}: {e.orig}")
            raise self._conflict(values, record_id) from e
        except Exception:
            await self.session.rollback()
            raise

    def _conflict(self, values: dict[str, Any] | None, record_id: int | None) -> ConflictError:
        if values is None:
            return ConflictError(
                self.entity_name,
                "id",
                record_id,
                message=f"{self.entity_name} #{record_id} is still referenced by other records",
            )
        for field in self.unique_fields:
            if values.get(field) is not None:
                return ConflictError(self.entity_name, field, values[field])
        return ConflictError(
            self.entity_name,
            "id",
            record_id,
            message=f"{self.entity_name} conflicts with existing data",
        )

    def _slug_from(self, text: str | None) -> str:
        slug = generate_slug(text or "")
        if not slug:
            raise ValidationFailedError(
                f"Invalid {self.entity_name} data",
                errors=[{"field": "slug", "message": "Cannot derive a slug", "type": "value_error"}],
            )
        return slug
