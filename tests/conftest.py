import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from trackify.core.config import settings
from trackify.db.dynamo import Database
from trackify.main import app
from trackify.routers.deps import get_database


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", settings.DYNAMO_REGION)


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    # Minimum bcrypt cost keeps the suite fast
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def db():
    with mock_aws():
        database = Database(boto3.resource("dynamodb", region_name=settings.DYNAMO_REGION), settings)
        database.create_tables()
        yield database


@pytest.fixture
def client(db):
    app.dependency_overrides[get_database] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    """Register a user and return ``(user, headers)`` for authenticated calls."""

    def _register(email, name="Test User", password="s3cret-pass"):
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['access_token']}"}

    return _register


@pytest.fixture
def create_category(client):
    def _create(headers, name):
        response = client.post("/api/categories", json={"name": name}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_expense(client):
    def _create(headers, category_id, amount, description="Expense", date="2025-11-01"):
        response = client.post(
            "/api/expenses",
            json={
                "amount": amount,
                "description": description,
                "date": date,
                "categoryId": category_id,
            },
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
