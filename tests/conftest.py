import os

# Settings are read at import time
os.environ["TESTING"] = "true"
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-thirty-two-bytes"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from fusion_order.core.security import token_service
from fusion_order.db.database import SessionLocal, engine
from fusion_order.db.models import Base
from fusion_order.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from fusion_order.main import app
from make_admin import make_user_admin
import fusion_order.infrastructure.orm  # noqa: F401


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    app.state.token_service = token_service
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def unit_of_work(db_session):
    return UnitOfWorkImpl(db_session)


def register(client, username, password="secret1", **extra):
    return client.post("/api/auth/register", json={"username": username, "password": password, **extra})


def login(client, username, password="secret1"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def token_for(client, username, password="secret1"):
    response = login(client, username, password)
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


@pytest.fixture
def user_token(client):
    register(client, "bob_user")
    return token_for(client, "bob_user")


@pytest.fixture
def manager_token(client):
    register(client, "mia_manager", role="MANAGER")
    return token_for(client, "mia_manager")


@pytest.fixture
def admin_token(client):
    register(client, "root_admin")
    assert make_user_admin("root_admin", session_factory=SessionLocal)
    return token_for(client, "root_admin")


@pytest.fixture
def product(client, admin_token):
    response = client.post(
        "/api/products",
        json={"name": "Widget", "category": "tools", "price": 9.99},
        headers=auth_header(admin_token),
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]
