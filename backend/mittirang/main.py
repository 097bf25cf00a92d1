import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from mittirang.adapters.media_storage import LocalMediaStorage
from mittirang.api.health import router as health_router
from mittirang.api.routes_admin import router as admin_router
from mittirang.api.routes_auth import router as auth_router
from mittirang.api.routes_catalogue import router as catalogue_router
from mittirang.api.routes_upload import router as upload_router
from mittirang.config import Settings, settings as default_settings
from mittirang.db import Database
from mittirang.exceptions import AppException, app_exception_handler, generic_exception_handler
from mittirang.repositories.admin_repo import AdminRepository
from mittirang.utils.security import hash_password

logger = logging.getLogger(__name__)


def seed_admin(database: Database, settings: Settings) -> None:
    email = settings.ADMIN_EMAIL.strip().lower()
    db = database.session()
    try:
        repo = AdminRepository(db)
        if repo.get_by_email(email):
            return
        repo.ensure_admin(email, hash_password(settings.ADMIN_PASSWORD, settings.BCRYPT_ROUNDS))
        db.commit()
        logger.info("Created default admin %s", email)
    except IntegrityError:
        # another worker inserted it first
        db.rollback()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    settings = app.state.settings
    database = app.state.database
    database.init(reset=settings.RESET_DB)
    app.state.storage.ensure_ready()
    seed_admin(database, settings)

    try:
        yield
    finally:
        database.close()


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    storage: Optional[LocalMediaStorage] = None,
) -> FastAPI:
    settings = settings or default_settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    app = FastAPI(title="Mittirang - Catalogue Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database or Database(settings.DATABASE_URL)
    app.state.storage = storage or LocalMediaStorage(settings.MEDIA_DIR, settings.MEDIA_URL_PREFIX)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health_router, prefix="/api", tags=["health"])

    app.include_router(catalogue_router, prefix="/api/products", tags=["catalogue"])

    app.include_router(auth_router, tags=["auth"])

    app.include_router(admin_router, tags=["admin"])

    app.include_router(upload_router, tags=["upload"])

    app.mount(
        settings.MEDIA_URL_PREFIX,
        StaticFiles(directory=app.state.storage.directory, check_dir=False),
        name="media",
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.APP_HOST, port=default_settings.APP_PORT)
