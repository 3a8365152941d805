"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.core import Base, build_engine, get_db, session_scope
from app.services import CustomerService, seed_customers
from app import models  # noqa: F401


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    test_engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with session_scope(factory) as db:
        seed_customers(db)
    return factory


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def service(db) -> CustomerService:
    return CustomerService(db)


@pytest.fixture
def client(session_factory):
    """HTTP client with one session per request, like get_db."""
    from main import app

    def override_get_db():
        with session_scope(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ann_payload() -> dict:
    return {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann@x.com",
        "phone": "+1-555-0000",
        "ssn": "111-22-3333",
        "dateOfBirth": "1990-01-01",
    }
