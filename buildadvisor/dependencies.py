"""
FastAPI dependency functions for the build endpoint.

Both the credential and the Gemini client factory are resolved per request
through these dependencies, so tests can replace them with
``app.dependency_overrides``.
"""

from typing import Optional

from buildadvisor.clients.gemini import GeminiClientFactory, create_gemini_client
from buildadvisor.config import settings


async def get_api_key() -> Optional[str]:
    """
    Read the Gemini API key for this invocation.

    Returns:
        The configured key, or None when GEMINI_API_KEY is unset or empty.
    """
    return settings.GEMINI_API_KEY or None


async def get_client_factory() -> GeminiClientFactory:
    """Return the factory used to build the outbound Gemini client."""
    return create_gemini_client
