# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from db import SessionLocal, get_db
from main import app
from models import Base, Role
from repositories.user_repository import create_user


def _get_engine():
    """Engine used by the app (in-memory when TESTING=true)."""
    return SessionLocal.kw["bind"]


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine per test run; create tables once."""
    eng = _get_engine()
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db_session(engine):
    """Function-scoped session; each test runs in a transaction that is rolled back."""
    connection = engine.connect()
    trans = connection.begin()
    session = Session(bind=connection)
    session.begin_nested()
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        connection.close()


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def client(db_session):
    """API test client; overrides get_db to use the test db_session, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def _unique(prefix: str) -> str:
    return f"{prefix} {uuid.uuid4().hex[:8]}"


@pytest.fixture
def owner(db_session):
    """A user with the ParkOwner role."""
    return create_user(db_session, _unique("Owner"), Role.PARK_OWNER)


@pytest.fixture
def customer(db_session):
    """A user without the ParkOwner role."""
    return create_user(db_session, _unique("Customer"), Role.CUSTOMER)


@pytest.fixture
def make_keeper(db_session):
    """Factory for ParkKeeper users."""
    def make(name: str | None = None):
        return create_user(db_session, name or _unique("Keeper"), Role.PARK_KEEPER)
    return make


@pytest.fixture
def files_dir(tmp_path, monkeypatch):
    """Uploaded files directory pointed at a temp dir for the test."""
    from utils import config

    monkeypatch.setattr(config, "FILES_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def committed_client(engine):
    """API test client on real per-request sessions, so commits and rollbacks reach the DB.

    Data written through it is not rolled back; use unique ids.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def committed_user():
    """Factory creating committed users outside any test transaction."""
    def make(role: Role, name: str | None = None):
        db = SessionLocal()
        try:
            return create_user(db, name or _unique(role.value), role)
        finally:
            db.close()
    return make
