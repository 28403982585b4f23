from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Tuple

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from errorcode_admin.config import settings
from errorcode_admin.entities import Base


def _make_engine(url: str):
    engine_kwargs: dict[str, Any] = {"echo": settings.mysql.echo, "future": True}
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["pool_pre_ping"] = True
    return create_engine(url, **engine_kwargs)


def _make_session_factory(bind) -> sessionmaker:
    return sessionmaker(bind=bind, autocommit=False, autoflush=False, expire_on_commit=False, future=True)


engine = _make_engine(settings.database_url)
SessionLocal = _make_session_factory(engine)


def init_db() -> None:
    """Create database tables."""
    Base.metadata.create_all(bind=engine)


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a SQLAlchemy session."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def unit_of_work(session: Session) -> Generator[Session, None, None]:
    """Commit everything done inside the block at once, or roll all of it back."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def create_test_session(database_url: str) -> Tuple[sessionmaker, Any]:
    """Create an isolated engine/session factory for testing."""
    test_engine = _make_engine(database_url)
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    return _make_session_factory(test_engine), test_engine
