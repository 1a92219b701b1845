import os

# Settings are read at import time, so configure before any app import
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-long-enough-for-hs256-signing")

import threading

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models.index import Base
from config.database import get_db
from api.user.user_schema import UserCreate
from api.user.user_service import create_user
from api.roles.roles_model import UserRole
from helpers.token_helper import create_user_token


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def file_session_factory(tmp_path):
    """
    Sessions on a file-backed SQLite database, one connection per session,
    for tests that run writers on several threads.
    """
    engine = create_engine(
        f"sqlite:///{tmp_path / 'community.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


def _pause_before(engine, statement_prefix: str, parties: int):
    """
    Hold every connection about to run a statement starting with
    `statement_prefix` until `parties` of them have arrived.
    Returns a callable removing the hook.
    """
    barrier = threading.Barrier(parties)

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith(statement_prefix.upper()):
            try:
                barrier.wait(timeout=10)
            except threading.BrokenBarrierError:
                pass

    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    return lambda: event.remove(engine, "before_cursor_execute", before_cursor_execute)


@pytest.fixture
def pause_before():
    return _pause_before


@pytest.fixture
def client(session_factory):
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory):
    """
    Factory creating a user in its own session.
    Returns (user_id, auth_headers).
    """
    counter = {"n": 0}

    def _make(name: str = "member", role: str = UserRole.MEMBER):
        counter["n"] += 1
        db = session_factory()
        try:
            user = create_user(
                db,
                UserCreate(name=name, email=f"{name.lower()}{counter['n']}@example.com"),
                role=role,
            )
            token = create_user_token(user)
            return user.id, {"Authorization": f"Bearer {token}"}
        finally:
            db.close()

    return _make
