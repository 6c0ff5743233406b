"""
Gemini client factory.

The service layer never constructs a client itself: it receives a factory
(``api_key -> client``) so tests can substitute a fake for the external API.
"""

import logging
from typing import Callable

from google import genai

logger = logging.getLogger(__name__)

GeminiClientFactory = Callable[[str], genai.Client]


def create_gemini_client(api_key: str) -> genai.Client:
    """
    Create a Gemini client for a single request.

    Args:
        api_key: Gemini API key for this invocation.

    Returns:
        A Google Gen AI SDK client. No timeout or retry policy is configured
        beyond the SDK transport defaults.
    """
    logger.debug("Creating Gemini client for build generation")
    return genai.Client(api_key=api_key)
