"""Mount the standard CRUD routes for one entity on a router.

Area modules declare their extra routes on ``router`` first and call
``mount_crud`` last, so literal paths such as ``/featured`` are matched
before the ``/{id}`` routes.
"""

from typing import Any, Callable, Iterable

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from fullsco.api.deps import require_admin, service_dependency
from fullsco.errors import NotFoundError
from fullsco.schemas.common import Envelope, ok
from fullsco.services.base import CrudService

ALL_OPERATIONS = ("list", "get", "create", "update", "delete")

# Marks "same guard as the other writes"
_WRITE_GUARD = object()


def no_filters() -> dict[str, Any]:
    return {}


def _guard(dependency: Callable | None) -> list:
    return [Depends(dependency)] if dependency else []


def mount_crud(
    router: APIRouter,
    service_class: type[CrudService],
    *,
    response_model: type[BaseModel],
    create_model: type[BaseModel] | None = None,
    update_model: type[BaseModel] | None = None,
    slugged: bool = False,
    list_filters: Callable[..., dict[str, Any]] = no_filters,
    operations: Iterable[str] = ALL_OPERATIONS,
    read_guard: Callable | None = None,
    write_guard: Callable | None = require_admin,
    create_guard: Any = _WRITE_GUARD,
) -> APIRouter:
    """Add list/get/create/update/delete routes for ``service_class``.

    ``read_guard`` protects the GET routes (public when ``None``),
    ``write_guard`` the mutating ones; ``create_guard`` overrides the
    guard for POST only (e.g. public newsletter sign-up).
    """
    operations = set(operations)
    entity = service_class.entity_name
    create_model = create_model or service_class.create_schema
    update_model = update_model or service_class.update_schema
    get_service = service_dependency(service_class)

    read_deps = _guard(read_guard)
    write_deps = _guard(write_guard)
    create_deps = write_deps if create_guard is _WRITE_GUARD else _guard(create_guard)

    def one(record) -> BaseModel:
        return response_model.model_validate(record)

    if "list" in operations:

        @router.get("/", response_model=Envelope[list[response_model]], dependencies=read_deps)
        async def list_records(
            limit: int | None = Query(None, ge=1, le=100),
            offset: int = Query(0, ge=0),
            filters: dict = Depends(list_filters),
            service: CrudService = Depends(get_service),
        ):
            records = await service.list(limit=limit, offset=offset, **filters)
            return ok([one(r) for r in records])

    if slugged and "get" in operations:

        @router.get("/slug/{slug}", response_model=Envelope[response_model], dependencies=read_deps)
        async def get_record_by_slug(slug: str, service: CrudService = Depends(get_service)):
            record = await service.get_by_slug(slug)
            if record is None:
                raise NotFoundError(entity, slug, field="slug")
            return ok(one(record))

    if "get" in operations:

        @router.get("/{id}", response_model=Envelope[response_model], dependencies=read_deps)
        async def get_record(id: int, service: CrudService = Depends(get_service)):
            return ok(one(await service.require(id)))

    if "create" in operations:

        @router.post(
            "/",
            response_model=Envelope[response_model],
            status_code=201,
            dependencies=create_deps,
        )
        async def create_record(data: create_model, service: CrudService = Depends(get_service)):
            record = await service.create(data)
            return ok(one(record), f"{entity} created")

    if "update" in operations:

        @router.api_route(
            "/{id}",
            methods=["PUT", "PATCH"],
            response_model=Envelope[response_model],
            dependencies=write_deps,
        )
        async def update_record(id: int, data: update_model, service: CrudService = Depends(get_service)):
            record = await service.update(id, data)
            return ok(one(record), f"{entity} updated")

    if "delete" in operations:

        @router.delete("/{id}", response_model=Envelope[dict], dependencies=write_deps)
        async def delete_record(id: int, service: CrudService = Depends(get_service)):
            await service.delete(id)
            return ok({"id": id}, f"{entity} deleted")

    return router
