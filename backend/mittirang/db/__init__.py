import logging
import os
import tempfile
from typing import Iterator, Optional

from fastapi import Request
from filelock import FileLock
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

# model modules that must be imported before create_all so metadata is populated
MODEL_MODULES = [
    "mittirang.models.product",
    "mittirang.models.admin_user",
]


class Database:
    """
    Explicit storage handle.

    Nothing connects at import time: call init() once on startup and close()
    on shutdown. Request handlers get sessions through get_db().
    """

    def __init__(self, url: str):
        self.url = url
        self.engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None

    @property
    def initialized(self) -> bool:
        return self.engine is not None

    def init(self, reset: bool = False) -> None:
        import importlib

        if self.engine is None:
            connect_args = {"check_same_thread": False} if self.url.startswith("sqlite") else {}
            self.engine = create_engine(
                self.url, future=True, echo=False, connect_args=connect_args
            )
            self._sessionmaker = sessionmaker(
                autocommit=False, autoflush=False, bind=self.engine
            )

        for mod in MODEL_MODULES:
            importlib.import_module(mod)

        # several workers may start at once against the same database
        locks_dir = os.path.join(tempfile.gettempdir(), "mittirang_locks")
        os.makedirs(locks_dir, exist_ok=True)
        with FileLock(os.path.join(locks_dir, "init_db.lock"), timeout=30):
            if reset:
                logger.info("Resetting database schema")
                Base.metadata.drop_all(bind=self.engine)
            Base.metadata.create_all(bind=self.engine)
        logger.info("Database initialized")

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise RuntimeError("Database.init() has not been called")
        return self._sessionmaker()

    def ping(self) -> bool:
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database ping failed", exc_info=True)
            return False

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self._sessionmaker = None


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
