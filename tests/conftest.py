"""
Pytest configuration and fixtures
"""
import os

# settings are read at import time, so these must be set first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from contact_api.core.deps import get_db
from contact_api.core.security import create_token
from contact_api.db.base import Base, User
from contact_api.main import app


@pytest.fixture(scope="function")
def engine():
    # one shared in-memory connection, visible from the threadpool too
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Session:
    """Create a database session for testing"""
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
    session = TestingSession()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db: Session):
    """Create test client with database dependency override"""
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user(db: Session) -> User:
    row = User(email="member@acme.io", first_name="Min", last_name="Park", is_active=True)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture
def access_token(user: User) -> str:
    return create_token(user.id)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "inquiry_type": "partnership",
        "email": "a@b.com",
        "message": "This is a sufficiently long message.",
    }
