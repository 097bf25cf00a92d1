import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def write_transaction(session: Session, action: str) -> Iterator[Session]:
    """
    Commit the request session when the block succeeds, roll it back otherwise.
    Usage:
        with write_transaction(db, "create product"):
            ... DB work ...
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        logger.warning("Rolled back: %s", action)
        raise
