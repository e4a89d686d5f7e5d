"""Startup database work: create missing tables and seed the admin account."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from fullsco.config import Settings
from fullsco.db.models import Base
from fullsco.services.users import UsersService

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


async def seed_admin(session_factory: async_sessionmaker, settings: Settings) -> None:
    async with session_factory() as session:
        await UsersService(session).ensure_admin(
            username=settings.admin_username,
            password=settings.admin_password,
            email=settings.admin_email,
            full_name=settings.admin_full_name,
        )
