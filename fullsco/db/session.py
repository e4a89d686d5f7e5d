from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fullsco.config import settings


def _engine_options(url: str) -> dict:
    options = {"echo": settings.app_debug}
    # SQLite (dev/tests) uses a static/singleton pool that takes no sizing
    if not url.startswith("sqlite"):
        options["pool_size"] = 10
    return options


engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session
