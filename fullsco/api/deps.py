"""Shared route dependencies: services bound to the request session, and auth guards."""

from typing import Callable, TypeVar

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fullsco.db.models import User, UserRole
from fullsco.db.session import get_db
from fullsco.errors import AuthenticationError, PermissionDeniedError
from fullsco.services.base import CrudService

ServiceT = TypeVar("ServiceT", bound=CrudService)

SESSION_USER_KEY = "user_id"


def service_dependency(service_class: type[ServiceT]) -> Callable[..., ServiceT]:
    def get_service(db: AsyncSession = Depends(get_db)) -> ServiceT:
        return service_class(db)

    get_service.__name__ = f"get_{service_class.__name__}"
    return get_service


async def current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User | None:
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    user = await db.get(User, user_id)
    if user is None:
        # Account removed since login
        request.session.pop(SESSION_USER_KEY, None)
    return user


async def require_user(user: User | None = Depends(current_user)) -> User:
    if user is None:
        raise AuthenticationError("Authentication required")
    return user


async def require_admin(user: User = Depends(require_user)) -> User:
    if user.role != UserRole.ADMIN:
        raise PermissionDeniedError("Admin access required")
    return user
