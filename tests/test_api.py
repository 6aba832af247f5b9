import pytest
from fastapi.testclient import TestClient

from api import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root(client):
    assert client.get("/").json()["docs"] == "/docs"


def test_count(client):
    response = client.post("/count", json={"html": "<body>Hello world</body>"})
    assert response.status_code == 200
    body = response.json()
    assert body["words"] == {"hello": {"body": 1}, "world": {"body": 1}}
    assert body["distinct"] == 2
    assert body["response_time"] >= 0


def test_count_with_stemming(client):
    response = client.post("/count", json={"html": "<i>jumps jumping</i>", "stem": True})
    assert response.json()["words"] == {"jump": {"i": 2}}


def test_count_rejects_blank_html(client):
    response = client.post("/count", json={"html": "   "})
    assert response.status_code == 400


def test_count_requires_html(client):
    assert client.post("/count", json={}).status_code == 422
