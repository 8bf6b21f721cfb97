from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from bookshelf.core.errors import BookServiceError
from bookshelf.core.settings import get_settings

logger = logging.getLogger(__name__)

_settings = get_settings()

engine = create_engine(_settings.database_url, echo=_settings.database_echo, future=True)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def get_session() -> Generator[Session, None, None]:
    """Yield a database session for request-scoped operations."""
    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """Run a block as one atomic unit: commit on success, roll back on error.

    A failing commit is rolled back too. The original exception is re-raised.
    """
    try:
        yield session
        session.commit()
    except BookServiceError:
        session.rollback()
        raise
    except Exception:
        logger.warning("Rolling back unit of work", exc_info=True)
        session.rollback()
        raise
