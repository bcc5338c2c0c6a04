"""Engine and session factory for the microblog store."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from microblog.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base for the posts, users and settings tables."""


# Model modules register their tables on Base.metadata at import.
import microblog.models  # noqa: E402,F401


def make_engine(url: str, *, echo: bool = False, **kwargs: Any) -> Engine:
    """Create an engine for ``url``.

    SQLite connections are handed between FastAPI's worker threads, so the
    same-thread check is disabled for that backend.
    """
    if make_url(url).get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, echo=echo, **kwargs)


engine = make_engine(settings.database_url, echo=settings.sql_debug)

SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine | None = None) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    Base.metadata.drop_all(bind=bind or engine)
