# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["INIT_DB_ON_STARTUP"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LEGACY_ADMIN_CLAIM"] = "true"
os.environ["ENFORCE_ADMIN_WRITES"] = "false"

from microblog.core.security import hash_password
from microblog.db.session import Base, create_tables, drop_tables, make_engine
from microblog.db.session import get_db as app_get_session
from microblog.main import app as fastapi_app
from microblog.models import Post, SiteSetting, User
from microblog.models.setting import POSTS_PUBLIC

TEST_DB_URL = "sqlite://"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password"
LEGACY_ADMIN_HEADERS = {"Authorization": "Bearer true"}


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = make_engine(TEST_DB_URL, poolclass=StaticPool)
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def admin_user(db_session: Session) -> Iterator[User]:
    """Create and return the persisted admin user."""
    user = User(username=ADMIN_USERNAME, password_hash=hash_password(ADMIN_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    yield user


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory persisting posts with explicit timestamps."""
    counter = iter(range(1, 10_000))

    def _make_post(content: str = "Test post content", timestamp: str | None = None) -> Post:
        n = next(counter)
        post = Post(
            id=f"post-{n:04d}",
            content=content,
            timestamp=timestamp or f"2026-01-01T00:{n // 60:02d}:{n % 60:02d}.000000Z",
        )
        db_session.add(post)
        db_session.commit()
        return post

    return _make_post


@pytest.fixture()
def private_feed(db_session: Session) -> Iterator[SiteSetting]:
    """Switch the feed to admin-only."""
    setting = SiteSetting(key=POSTS_PUBLIC, value="false")
    db_session.add(setting)
    db_session.commit()
    yield setting
