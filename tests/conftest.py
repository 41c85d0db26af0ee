# tests/conftest.py
import os
import sys

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.append(os.path.abspath("."))

from app.database import Base
from app import crud, models


# DB (SQLite in-memory for tests)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Fresh tables for every test so scope queries only see their own owners
@pytest.fixture(autouse=True)
def prepare_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def owner_data():
    return {
        "first_name": "Alex",
        "last_name": "heimann",
        "street": "10152 Sudberry Drive",
        "city": "Wexford",
        "state": "PA",
        "zip": "15090",
        "phone": "412-369-8022",
        "email": "heimann@example.com",
    }


@pytest.fixture()
def make_owner(db_session, owner_data):
    """Persist an owner built from ``owner_data`` plus overrides."""

    def _make(**overrides):
        owner = models.Owner(**{**owner_data, **overrides})
        return crud.save_owner_or_raise(db_session, owner)

    return _make


@pytest.fixture()
def fk_session():
    """Session on a database that enforces foreign keys."""
    fk_engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(fk_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=fk_engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=fk_engine)()
    try:
        yield session
    finally:
        session.close()
        fk_engine.dispose()
