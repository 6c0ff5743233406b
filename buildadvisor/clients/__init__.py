"""
Outbound API clients for the PC Build Advisor backend.

Clients are created per request from the credential read for that
invocation; nothing is cached across requests.
"""

from .gemini import GeminiClientFactory, create_gemini_client

__all__ = ["GeminiClientFactory", "create_gemini_client"]
