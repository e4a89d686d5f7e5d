"""User accounts, password hashing and login."""

import logging
from typing import Any

import bcrypt

from fullsco.db.models import User, UserRole
from fullsco.repositories.users import UsersRepository
from fullsco.schemas.accounts import RegisterRequest, UserCreate, UserUpdate
from fullsco.services.base import CrudService

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # Not a bcrypt hash
        return False


class UsersService(CrudService[User]):
    entity_name = "User"
    repository_class = UsersRepository
    create_schema = UserCreate
    update_schema = UserUpdate
    unique_fields = ("username", "email")

    repository: UsersRepository

    async def prepare_create(self, payload: dict[str, Any]) -> dict[str, Any]:
        payload["email"] = payload["email"].lower()
        payload["password"] = hash_password(payload["password"])
        return payload

    async def prepare_update(self, user: User, patch: dict[str, Any]) -> dict[str, Any]:
        if patch.get("email"):
            patch["email"] = patch["email"].lower()
        if patch.get("password"):
            patch["password"] = hash_password(patch["password"])
        return patch

    async def register(self, data: RegisterRequest) -> User:
        """Self-service sign-up; always creates a plain ``user`` account."""
        return await self.create({**data.model_dump(), "role": UserRole.USER})

    async def login(self, username: str, password: str) -> User | None:
        user = await self.repository.find_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.info(f"Failed login for {username!r}")
            return None
        return user

    async def ensure_admin(self, username: str, password: str, email: str, full_name: str) -> User | None:
        """Create the admin account unless a user with ``username`` already exists."""
        if not password:
            logger.info("No admin password configured, skipping admin seed")
            return None
        existing = await self.repository.find_by_username(username)
        if existing is not None:
            return existing
        user = await self.create(
            {
                "username": username,
                "password": password,
                "email": email,
                "full_name": full_name,
                "role": UserRole.ADMIN,
            }
        )
        logger.info(f"Seeded admin user {username!r}")
        return user
