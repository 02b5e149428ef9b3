"""
HTTP tests for the FastAPI application.
"""
import pytest
from fastapi.testclient import TestClient

from greeter.main import create_application


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("API_V1_PREFIX", raising=False)
    return TestClient(create_application())


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_birthday_greeting(client):
    response = client.post(
        "/api/v1/greetings/birthday",
        json={"current_age": 31, "name": "Carmelo Anthony"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "name": "Carmelo Anthony",
        "new_age": 32,
        "lines": ["Happy Birthday, Carmelo Anthony", "You are now 32 years old"],
    }


def test_birthday_greeting_defaults(client):
    response = client.post("/api/v1/greetings/birthday", json={})
    assert response.status_code == 200
    assert response.json()["lines"] == ["Happy Birthday, Beyonce", "You are now 32 years old"]


def test_create_person(client):
    response = client.post("/api/v1/people/create", json={"name": "Sophie", "age": 26})
    assert response.status_code == 201
    assert response.json() == {"name": "Sophie", "age": 26}


@pytest.mark.parametrize(
    "body, missing",
    [
        ({"name": "Sophie"}, ["age"]),
        ({"age": 26}, ["name"]),
        ({}, ["name", "age"]),
        ({"name": "Sophie", "age": None}, ["age"]),
    ],
)
def test_create_person_missing_field(client, body, missing):
    response = client.post("/api/v1/people/create", json=body)
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail.startswith("Missing required field(s)")
    for field in missing:
        assert f"'{field}'" in detail


def test_create_person_invalid_age(client):
    response = client.post("/api/v1/people/create", json={"name": "Sophie", "age": -1})
    assert response.status_code == 422
