from __future__ import annotations

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookshelf.db.session import unit_of_work
from bookshelf.models import Base, Book
from bookshelf.services import BookService


@pytest.fixture()
def session_factory() -> sessionmaker:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )


def _count(session: Session) -> int:
    return session.scalar(select(func.count()).select_from(Book))


def test_unit_of_work_commits_on_success(session_factory: sessionmaker) -> None:
    with session_factory() as db:
        with unit_of_work(db):
            db.add(Book(title="Dune"))

    with session_factory() as db:
        assert _count(db) == 1


def test_unit_of_work_rolls_back_and_reraises(session_factory: sessionmaker) -> None:
    with session_factory() as db:
        with pytest.raises(RuntimeError, match="boom"):
            with unit_of_work(db):
                db.add(Book(title="Dune"))
                db.flush()
                raise RuntimeError("boom")

        assert _count(db) == 0

    with session_factory() as db:
        assert _count(db) == 0


def test_persistence_failure_propagates_unchanged(session_factory: sessionmaker) -> None:
    with session_factory() as db:
        service = BookService(db)

        with pytest.raises(IntegrityError):
            service.create_book(Book(title=None))

        # The session stays usable after the rollback.
        created = service.create_book(Book(title="Solaris"))
        assert created.id is not None
        assert [book.title for book in service.find_books()] == ["Solaris"]


def test_failed_update_leaves_record_untouched(session_factory: sessionmaker) -> None:
    with session_factory() as db:
        book = BookService(db).create_book(Book(title="Neuromancer", description="Cyberpunk"))

    with session_factory() as db:
        with pytest.raises(IntegrityError):
            BookService(db).update_book(Book(id=book.id, title=None, description="Changed"))

    with session_factory() as db:
        stored = db.get(Book, book.id)
        assert stored.title == "Neuromancer"
        assert stored.description == "Cyberpunk"
