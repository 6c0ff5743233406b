"""
Tests for the public /health endpoint.
"""

from fastapi.testclient import TestClient

from buildadvisor.main import app
from buildadvisor.schemas.health import HealthResponse

client = TestClient(app)


def test_health_returns_ok():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_rejects_post_with_plain_text_405():
    response = client.post("/health")

    assert response.status_code == 405
    assert response.text == "Method Not Allowed"


def test_unknown_path_returns_json_error():
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_health_schema_example():
    schema = HealthResponse.model_json_schema()

    assert schema["example"] == {"status": "ok"}
    assert schema["properties"]["status"]["default"] == "ok"
