import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mindhaven.database.database import get_db
from mindhaven.main import app
from mindhaven.models import Base, User
from mindhaven.utils.auth import create_access_token, get_password_hash

engine = create_engine(
    "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(display_name=None, role="user", name="Test User"):
        counter["n"] += 1
        user = User(
            email=f"user{counter['n']}@example.com",
            hashed_password=get_password_hash("password123"),
            name=name,
            display_name=display_name,
            role=role,
            consent_given=True,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def auth_headers():
    def _auth_headers(user):
        token = create_access_token(data={"sub": user.email, "user_id": user.id})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
