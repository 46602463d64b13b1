"""HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_months(client):
    data = client.get("/api/months").json()["data"]
    assert len(data) == 12
    assert data[0] == {"value": 1, "label": "01 - January"}


def test_analyze(client):
    response = client.post("/api/analyze", json={"day": 3, "month": 4, "year": 5})
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert body["data"]["pythagorean"] is True
    assert body["data"]["prime"] == [3, 5]
    assert body["data"]["original_date"] == {"day": 3, "month": 4, "year": 5}


def test_analyze_validation_error(client):
    response = client.post("/api/analyze", json={"day": 32, "month": 13, "year": 2600})
    assert response.status_code == 422
    assert set(response.json()["detail"]["errors"]) == {"day", "month", "year"}


def test_analyze_report(client):
    response = client.post(
        "/api/analyze/report?explain=true",
        json={"day": 2, "month": 3, "year": 5},
    )
    assert response.status_code == 200
    assert "2 + 3 = 5" in response.json()["report"]


def test_colors_image(client):
    response = client.get("/api/analyze/colors", params={"day": 1, "month": 1, "year": 2024})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_colors_validation_error(client):
    response = client.get("/api/analyze/colors", params={"day": 1, "month": 1, "year": 0})
    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {"year": "Year must be between 1 and 2500"}
