"""
Service layer for the PC Build Advisor backend.

Services act as the glue between routes (HTTP layer) and the Gemini API:
- Adapt inbound requests to a single generate_content call
- Map upstream failures into HTTP status codes and error payloads
"""

from .build_service import (
    AdapterResponse,
    BuildAdapterError,
    ConfigurationError,
    InternalError,
    MalformedInputError,
    MethodNotAllowedError,
    PromptValidationError,
    UpstreamError,
    generate_build,
    handle_build_request,
)

__all__ = [
    "AdapterResponse",
    "BuildAdapterError",
    "ConfigurationError",
    "InternalError",
    "MalformedInputError",
    "MethodNotAllowedError",
    "PromptValidationError",
    "UpstreamError",
    "generate_build",
    "handle_build_request",
]
