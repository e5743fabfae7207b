import os
import tempfile

# Settings are read at import time, so the environment must be ready first
_db_dir = tempfile.mkdtemp(prefix="course_market_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["JWT_USER_SECRET"] = "test-user-secret"
os.environ["JWT_ADMIN_SECRET"] = "test-admin-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app

API = "/api/v1"


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def signup_and_signin(client, role, email, password="secret1", first_name="Ada", last_name="Lovelace"):
    """Register an account of ``role`` ("user" or "admin") and return its token."""
    resp = client.post(f"{API}/{role}/signup", json={
        "email": email,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
    })
    assert resp.status_code == 200, resp.text
    resp = client.post(f"{API}/{role}/signin", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


@pytest.fixture
def admin_token(client):
    return signup_and_signin(client, "admin", "instructor@school.io")


@pytest.fixture
def other_admin_token(client):
    return signup_and_signin(client, "admin", "rival@school.io")


@pytest.fixture
def user_token(client):
    return signup_and_signin(client, "user", "student@school.io")
