"""
Pytest configuration for blog service tests.

Points the service at a throwaway SQLite database and log directory before
any service module is imported.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="blog_service_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test_blog.db')}"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from blog_platform.blog_service.main import app  # noqa: E402
from blog_platform.blog_service.db import Base, engine, SessionLocal  # noqa: E402
from blog_platform.blog_service.models import User  # noqa: E402
from blog_platform.blog_service.auth import hash_password, create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


def create_user(email="owner@example.com", password="Secret123!", username=None) -> int:
    db = SessionLocal()
    try:
        user = User(email=email, username=username, password=hash_password(password))
        db.add(user)
        db.commit()
        return user.id
    finally:
        db.close()


def auth_cookie_for(user_id: int, **kwargs) -> dict:
    token = create_access_token(user_id, **kwargs)
    return {"Cookie": f"token={token}"}
