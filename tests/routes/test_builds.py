"""
Tests for the /api/generate endpoint.

Covers the HTTP surface of the build adapter:
- Happy path: prompt → Gemini JSON passed through byte-for-byte
- Failure paths: non-POST → 405, missing prompt → 400, missing key → 500
- Upstream failures forwarded with the upstream status
- Serverless entry point (Mangum handler)
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from google.genai import errors
from mangum import Mangum

from buildadvisor.dependencies import get_api_key, get_client_factory
from buildadvisor.main import app, handler


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def override_dependencies(client_factory):
    """Inject the fake Gemini client factory and a test API key."""
    async def mock_get_api_key():
        return "test-api-key"

    async def mock_get_client_factory():
        return client_factory

    app.dependency_overrides[get_api_key] = mock_get_api_key
    app.dependency_overrides[get_client_factory] = mock_get_client_factory

    yield

    # Clean up after test
    app.dependency_overrides.clear()


@pytest.fixture
def missing_api_key(override_dependencies):
    """Simulate a deployment without GEMINI_API_KEY."""
    async def mock_get_api_key():
        return None

    app.dependency_overrides[get_api_key] = mock_get_api_key
    yield


class TestGenerateEndpoint:
    """Tests for POST /api/generate."""

    def test_happy_path_returns_model_text_verbatim(
        self, client, override_dependencies, sample_build_text
    ):
        response = client.post("/api/generate", json={"prompt": "1440p gaming under 1.5 lakh"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.content == sample_build_text.encode("utf-8")

    def test_prompt_reaches_gemini_unmodified(
        self, client, override_dependencies, mock_gemini_client
    ):
        prompt = 'Edit 4K video, "no RGB", budget ~₹2,00,000'

        client.post("/api/generate", json={"prompt": prompt})

        kwargs = mock_gemini_client.aio.models.generate_content.call_args.kwargs
        assert prompt in kwargs["contents"]

    @pytest.mark.parametrize("method", ["get", "put", "patch", "delete"])
    def test_non_post_returns_405_plain_text(
        self, method, client, override_dependencies, mock_gemini_client
    ):
        response = getattr(client, method)("/api/generate")

        assert response.status_code == 405
        assert response.text == "Method Not Allowed"
        assert response.headers["content-type"].startswith("text/plain")
        mock_gemini_client.aio.models.generate_content.assert_not_called()

    def test_plain_options_returns_405(self, client, override_dependencies, mock_gemini_client):
        response = client.options("/api/generate")

        assert response.status_code == 405
        assert response.text == "Method Not Allowed"
        mock_gemini_client.aio.models.generate_content.assert_not_called()

    def test_cors_preflight_is_answered_by_middleware(
        self, client, override_dependencies, mock_gemini_client
    ):
        """Browser preflights never reach the adapter; CORS answers them."""
        response = client.options(
            "/api/generate",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.text == "OK"
        assert "POST" in response.headers["access-control-allow-methods"]
        mock_gemini_client.aio.models.generate_content.assert_not_called()

    def test_missing_prompt_returns_400(self, client, override_dependencies, mock_gemini_client):
        response = client.post("/api/generate", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required."}
        mock_gemini_client.aio.models.generate_content.assert_not_called()

    def test_invalid_json_returns_500(self, client, override_dependencies):
        response = client.post(
            "/api/generate",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "An internal server error occurred."}

    def test_missing_api_key_returns_500(self, client, missing_api_key, mock_gemini_client):
        response = client.post("/api/generate", json={"prompt": "gaming pc"})

        assert response.status_code == 500
        assert response.json() == {"error": "API Key is not configured on the server."}
        mock_gemini_client.aio.models.generate_content.assert_not_called()

    def test_upstream_error_is_forwarded(self, client, override_dependencies, mock_gemini_client):
        mock_gemini_client.aio.models.generate_content.side_effect = errors.ClientError(
            429, {"error": {"code": 429, "message": "Resource has been exhausted", "status": "RESOURCE_EXHAUSTED"}}
        )

        response = client.post("/api/generate", json={"prompt": "gaming pc"})

        assert response.status_code == 429
        assert response.json() == {
            "error": "Failed to get a response from the AI model. Resource has been exhausted"
        }

    def test_unexpected_failure_returns_generic_500(
        self, client, override_dependencies, mock_gemini_client
    ):
        mock_gemini_client.aio.models.generate_content.side_effect = KeyError("candidates")

        response = client.post("/api/generate", json={"prompt": "gaming pc"})

        assert response.status_code == 500
        assert response.json() == {"error": "An internal server error occurred."}


class TestApiKeyDependency:
    """The default credential dependency reads the environment per request."""

    def test_reads_key_from_environment(self, client, monkeypatch, mock_gemini_client):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        factory = MagicMock(return_value=mock_gemini_client)

        async def mock_get_client_factory():
            return factory

        app.dependency_overrides[get_client_factory] = mock_get_client_factory
        try:
            response = client.post("/api/generate", json={"prompt": "gaming pc"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        factory.assert_called_once_with("env-key")

    def test_empty_key_is_treated_as_missing(self, client, monkeypatch, client_factory):
        monkeypatch.setenv("GEMINI_API_KEY", "")

        async def mock_get_client_factory():
            return client_factory

        app.dependency_overrides[get_client_factory] = mock_get_client_factory
        try:
            response = client.post("/api/generate", json={"prompt": "gaming pc"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "API Key is not configured on the server."}


class TestServerlessHandler:
    """The Mangum handler wraps the same FastAPI app."""

    def test_handler_wraps_app(self):
        assert isinstance(handler, Mangum)
        assert handler.app is app
