"""
Build Recommendation Service - Gemini with Structured Output

This service is the adapter between an inbound HTTP caller and the Gemini
generative-language API.

Flow (single linear request/response, no state between invocations):
1. Reject non-POST methods (405, plain text)
2. Parse the JSON body and require a non-empty ``prompt`` (400)
3. Require the Gemini API key (500)
4. Send one generate_content request with the build prompt and schema
5. Relay upstream failures with the upstream status code
6. Return the model's JSON text verbatim (200)

Every failure is converted to an HTTP status and a JSON ``{"error": ...}``
body at the top of ``handle_build_request``. Nothing is retried.

IMPORTANT: The model output is NOT parsed or validated. The adapter trusts
the upstream text to be JSON matching BuildRecommendation and passes it
through byte-for-byte.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from google.genai import errors

from buildadvisor.agents.build.prompts import (
    build_build_user_prompt,
    build_generation_config,
)
from buildadvisor.clients.gemini import GeminiClientFactory, create_gemini_client
from buildadvisor.config import settings
from buildadvisor.utils.logging import preview

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"

METHOD_NOT_ALLOWED_MESSAGE = "Method Not Allowed"
PROMPT_REQUIRED_MESSAGE = "Prompt is required."
API_KEY_MISSING_MESSAGE = "API Key is not configured on the server."
UPSTREAM_FAILURE_MESSAGE = "Failed to get a response from the AI model."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


# =============================================================================
# ERROR TAXONOMY
# =============================================================================

class BuildAdapterError(Exception):
    """Base class for failures the adapter maps to an HTTP response."""

    status_code: int = 500
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MethodNotAllowedError(BuildAdapterError):
    """Request used a method other than POST."""
    status_code = 405
    message = METHOD_NOT_ALLOWED_MESSAGE


class MalformedInputError(BuildAdapterError):
    """Request body is not valid JSON. Reported as a generic internal error."""
    status_code = 500
    message = INTERNAL_ERROR_MESSAGE


class PromptValidationError(BuildAdapterError):
    """Request body has no usable ``prompt``."""
    status_code = 400
    message = PROMPT_REQUIRED_MESSAGE


class ConfigurationError(BuildAdapterError):
    """Gemini API key is not configured. Not retryable by the caller."""
    status_code = 500
    message = API_KEY_MISSING_MESSAGE


class UpstreamError(BuildAdapterError):
    """Gemini answered with a non-success status; the status is forwarded."""

    def __init__(self, status_code: int, upstream_message: Optional[str]):
        self.upstream_message = upstream_message
        super().__init__(
            message=f"{UPSTREAM_FAILURE_MESSAGE} {upstream_message}",
            status_code=status_code,
        )


class InternalError(BuildAdapterError):
    """Catch-all for anything unexpected."""
    status_code = 500
    message = INTERNAL_ERROR_MESSAGE


# =============================================================================
# RESPONSE TYPE
# =============================================================================

@dataclass
class AdapterResponse:
    """
    Transport-neutral response produced by the adapter.

    Attributes:
        status_code: HTTP status code
        body: Response body text (upstream JSON, error JSON or plain text)
        media_type: Content type of ``body``
    """
    status_code: int
    body: str
    media_type: str = JSON_MEDIA_TYPE

    @classmethod
    def from_error(cls, error: BuildAdapterError) -> "AdapterResponse":
        """Map an adapter error to its public response."""
        if isinstance(error, MethodNotAllowedError):
            return cls(
                status_code=error.status_code,
                body=error.message,
                media_type=TEXT_MEDIA_TYPE,
            )
        return cls(
            status_code=error.status_code,
            body=json.dumps({"error": error.message}),
        )


# =============================================================================
# HELPERS
# =============================================================================

def _parse_prompt(body: Any) -> str:
    """
    Extract the prompt from a raw request body.

    Raises:
        MalformedInputError: If the body is not valid JSON (or is JSON null)
        PromptValidationError: If the prompt is missing, empty or not a string
    """
    try:
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        payload = json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedInputError() from e

    if payload is None:
        raise MalformedInputError()

    prompt = payload.get("prompt") if isinstance(payload, dict) else None
    if not prompt or not isinstance(prompt, str):
        raise PromptValidationError()

    return prompt


def _upstream_error_message(error: errors.APIError) -> Optional[str]:
    """
    Read the nested ``error.message`` from an upstream error body.

    A top-level ``message`` is ignored. An error body that is not JSON cannot
    be read and is reported as an internal error.

    Raises:
        InternalError: If the upstream error body is not valid JSON
    """
    if isinstance(error.response, httpx.Response):
        try:
            error.response.json()
        except ValueError as e:
            raise InternalError() from e

    details = error.details
    if isinstance(details, dict) and isinstance(details.get("error"), dict):
        return details["error"].get("message")
    return None


def _extract_build_text(response: Any) -> str:
    """
    Return the first candidate's first part text.

    Any deviation from the expected shape raises (TypeError, IndexError,
    AttributeError) and is reported as an internal error by the caller.
    """
    text = response.candidates[0].content.parts[0].text
    if text is None:
        raise InternalError()
    return text


# =============================================================================
# SERVICE OPERATIONS
# =============================================================================

async def generate_build(
    prompt: str,
    *,
    api_key: str,
    client_factory: GeminiClientFactory = create_gemini_client,
    model: Optional[str] = None,
) -> str:
    """
    Ask Gemini for a PC build and return its raw JSON text.

    Args:
        prompt: The caller's request text, embedded verbatim
        api_key: Gemini API key for this invocation
        client_factory: Builds the Gemini client (substitutable in tests)
        model: Gemini model id (defaults to GEMINI_MODEL)

    Returns:
        The model's JSON text, unparsed

    Raises:
        UpstreamError: If Gemini answers with a non-success status
        InternalError: If the upstream error body is not JSON
    """
    client = client_factory(api_key)
    model_name = model or settings.GEMINI_MODEL

    logger.info(f"Calling Gemini ({model_name}) for build recommendation...")

    try:
        response = await client.aio.models.generate_content(
            model=model_name,
            contents=build_build_user_prompt(prompt),
            config=build_generation_config(),
        )
    except errors.APIError as e:
        logger.error(f"Google API Error: {e.code} {e.details}")
        raise UpstreamError(status_code=e.code, upstream_message=_upstream_error_message(e)) from e

    return _extract_build_text(response)


async def handle_build_request(
    method: str,
    body: Any,
    *,
    api_key: Optional[str],
    client_factory: GeminiClientFactory = create_gemini_client,
    model: Optional[str] = None,
) -> AdapterResponse:
    """
    Handle one build recommendation request end to end.

    Args:
        method: HTTP method of the inbound request
        body: Raw request body (str or bytes)
        api_key: Gemini API key, or None/empty when not configured
        client_factory: Builds the Gemini client (substitutable in tests)
        model: Gemini model id (defaults to GEMINI_MODEL)

    Returns:
        AdapterResponse with the upstream JSON text on success, or the mapped
        error response. This function never raises.
    """
    if method.upper() != "POST":
        return AdapterResponse.from_error(MethodNotAllowedError())

    try:
        prompt = _parse_prompt(body)
        logger.info(f"Build recommendation requested, prompt='{preview(prompt)}'")

        if not api_key:
            logger.error("GEMINI_API_KEY not configured")
            raise ConfigurationError()

        build_text = await generate_build(
            prompt,
            api_key=api_key,
            client_factory=client_factory,
            model=model,
        )

    except (PromptValidationError, ConfigurationError, UpstreamError) as e:
        return AdapterResponse.from_error(e)

    except Exception as e:
        logger.error(f"Serverless function error: {e!r}")
        return AdapterResponse.from_error(InternalError())

    logger.info("Returning build recommendation")
    return AdapterResponse(status_code=200, body=build_text)
