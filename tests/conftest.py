"""
Pytest configuration for PC Build Advisor tests.

Sets up test environment and global fixtures. No test ever reaches the
real Gemini API: the client factory is always replaced by a fake.
"""
import os
import pytest
from unittest.mock import AsyncMock, MagicMock

from google.genai import types

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-api-key")


SAMPLE_BUILD_TEXT = (
    '{"buildName": "Crimson Vanguard", "estimatedPrice": "₹1,50,000", '
    '"reasoning": "Balanced 1440p gaming build.", '
    '"components": [{"type": "CPU", "name": "AMD Ryzen 5 7600"}, '
    '{"type": "GPU", "name": "NVIDIA GeForce RTX 4070"}]}'
)


def make_gemini_response(text: str) -> types.GenerateContentResponse:
    """Build a Gemini response whose first candidate carries ``text``."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


@pytest.fixture
def sample_build_text():
    """JSON text shaped like BuildRecommendation."""
    return SAMPLE_BUILD_TEXT


@pytest.fixture
def mock_gemini_client(sample_build_text):
    """
    Fake Gemini client.

    ``client.aio.models.generate_content`` is an AsyncMock returning a
    successful response by default; tests override return_value/side_effect.
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=make_gemini_response(sample_build_text)
    )
    return client


@pytest.fixture
def client_factory(mock_gemini_client):
    """Client factory that always hands out ``mock_gemini_client``."""
    return MagicMock(return_value=mock_gemini_client)


@pytest.fixture
def gemini_response():
    """Factory fixture: build a Gemini response carrying the given text."""
    return make_gemini_response
