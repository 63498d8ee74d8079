"""Shared test fixtures: in-memory database, client and an authenticated user."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models.apartment import Apartment
from app.models.user import User
from app.services.auth import create_access_token, get_password_hash


@pytest.fixture
def test_db():
    """Create an in-memory test database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(test_db):
    """Create a test client with database override."""

    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, username: str, email: str, password: str = "testpassword123") -> User:
    user = User(
        username=username,
        email=email,
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user(test_db):
    """Create a test user in the database."""
    return make_user(test_db, "testuser", "test@example.com")


@pytest.fixture
def other_user(test_db):
    """A second user, for ownership checks."""
    return make_user(test_db, "otheruser", "other@example.com")


@pytest.fixture
def auth_headers(test_user):
    """Bearer headers for ``test_user``."""
    token = create_access_token(data={"sub": test_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def apartment_payload():
    """A complete, valid apartment body."""
    return {
        "street": "1 Main St",
        "city": "Metropolis",
        "state": "NY",
        "manager": "Alice",
        "email": "a@x.com",
        "price": 1000,
        "bedrooms": 2,
        "bathrooms": 1,
        "pets": True,
    }


@pytest.fixture
def apartment(test_db, other_user, apartment_payload):
    """An apartment owned by ``other_user``."""
    db_apartment = Apartment(**apartment_payload, owner=other_user)
    test_db.add(db_apartment)
    test_db.commit()
    test_db.refresh(db_apartment)
    return db_apartment
