# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("TRUST_FORWARDED_FOR", "true")

from hashvote.db.session import Base, enable_sqlite_foreign_keys
from hashvote.db.session import get_db as app_get_session
from hashvote.main import app as fastapi_app
from hashvote.models import HashRecord, Title, VoteCount
from hashvote.services.vote_service import VoteService

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(
    app: FastAPI,
    session_factory: sessionmaker[Session],
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

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
def vote_service(db_session: Session) -> VoteService:
    """Return a vote service bound to the test session."""
    return VoteService(db_session)


@pytest.fixture()
def submit(vote_service: VoteService) -> Callable[[str, str, Iterable[str]], None]:
    """Return a shortcut for submitting a vote through the service layer."""

    def _submit(client_ip: str, title_key: str, hashes: Iterable[str]) -> None:
        vote_service.submit(client_ip, title_key, hashes)

    return _submit


@pytest.fixture()
def vote_counts(db_session: Session) -> Callable[[], dict[tuple[str, str], int]]:
    """Return a reader for every stored (title_key, hash_value) -> count."""

    def _read() -> dict[tuple[str, str], int]:
        db_session.expire_all()
        rows = db_session.execute(
            select(Title.title_key, HashRecord.hash_value, VoteCount.count)
            .join(Title, Title.id == VoteCount.title_id)
            .join(HashRecord, HashRecord.id == VoteCount.hash_id)
        )
        return {(title_key, hash_value): count for title_key, hash_value, count in rows}

    return _read
