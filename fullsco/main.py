import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from fullsco.api import accounts, content, home, media, navigation, taxonomy
from fullsco.api import settings as settings_api
from fullsco.api.handlers import register_exception_handlers
from fullsco.config import settings
from fullsco.db.bootstrap import create_tables, seed_admin
from fullsco.db.session import async_session, engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables:
        await create_tables(engine)
    await seed_admin(async_session, settings)
    logger.info(f"FULLSCO API started ({settings.app_env})")
    yield
    await engine.dispose()


app = FastAPI(
    title="FULLSCO API",
    description="Scholarships, articles and site content for the FULLSCO platform",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    https_only=settings.app_env == "production",
)
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

api = settings.api_prefix

app.include_router(accounts.auth_router, prefix=f"{api}/auth", tags=["auth"])
app.include_router(accounts.users_router, prefix=f"{api}/users", tags=["users"])

app.include_router(taxonomy.categories_router, prefix=f"{api}/categories", tags=["categories"])
app.include_router(taxonomy.levels_router, prefix=f"{api}/levels", tags=["levels"])
app.include_router(taxonomy.countries_router, prefix=f"{api}/countries", tags=["countries"])
app.include_router(taxonomy.tags_router, prefix=f"{api}/tags", tags=["tags"])

app.include_router(content.scholarships_router, prefix=f"{api}/scholarships", tags=["scholarships"])
app.include_router(content.posts_router, prefix=f"{api}/posts", tags=["posts"])
app.include_router(
    content.success_stories_router, prefix=f"{api}/success-stories", tags=["success-stories"]
)
app.include_router(content.pages_router, prefix=f"{api}/pages", tags=["pages"])

app.include_router(home.statistics_router, prefix=f"{api}/statistics", tags=["statistics"])
app.include_router(home.partners_router, prefix=f"{api}/partners", tags=["partners"])
app.include_router(home.subscribers_router, prefix=f"{api}/subscribers", tags=["subscribers"])

app.include_router(media.router, prefix=f"{api}/media", tags=["media"])

app.include_router(settings_api.seo_router, prefix=f"{api}/seo-settings", tags=["seo"])
app.include_router(settings_api.site_router, prefix=f"{api}/site-settings", tags=["site-settings"])

app.include_router(navigation.menus_router, prefix=f"{api}/menus", tags=["menus"])
app.include_router(navigation.menu_items_router, prefix=f"{api}/menu-items", tags=["menus"])
app.include_router(
    navigation.menu_structure_router, prefix=f"{api}/menu-structure", tags=["menus"]
)

app.mount(
    settings.upload_url_prefix,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.app_env}
