# tests/conftest.py
import os

# Point the app at a throwaway in-memory database before it is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient

from feedback_app.main import app
from feedback_app.db.base import Base
from feedback_app.db.session import engine, SessionLocal


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    with SessionLocal() as session:
        yield session


def register(client, email, role="admin", password="secret123"):
    resp = client.post("/auth/register", json={"email": email, "password": password, "role": role})
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def admin_headers(client):
    return register(client, "owner@example.com")


@pytest.fixture
def other_admin_headers(client):
    return register(client, "other@example.com")


@pytest.fixture
def user_headers(client):
    return register(client, "respondent@example.com", role="user")


SURVEY_PAYLOAD = {
    "title": "Workshop feedback",
    "description": "Tell us how it went",
    "questions": [
        {"id": "q1", "text": "Overall rating", "type": "rating", "required": True},
        {"id": "q2", "text": "Which sessions did you attend?", "type": "multiple_choice",
         "options": ["Intro", "Deep dive", "Q&A"]},
        {"id": "q3", "text": "Anything else?", "type": "text"},
    ],
}


@pytest.fixture
def survey(client, admin_headers):
    resp = client.post("/surveys/create", json=SURVEY_PAYLOAD, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
