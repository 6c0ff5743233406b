"""
FastAPI route for the PC build recommendation endpoint.

Endpoint:
- /api/generate: POST a free-text prompt, receive Gemini's build JSON

Every HTTP method is routed here so the adapter itself answers non-POST
requests with 405, exactly as the serverless function did.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from buildadvisor.clients.gemini import GeminiClientFactory
from buildadvisor.dependencies import get_api_key, get_client_factory
from buildadvisor.schemas.builds import BuildRecommendation, BuildRequest, ErrorResponse
from buildadvisor.services.build_service import handle_build_request

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/api",
    tags=["builds"]
)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.api_route(
    "/generate",
    methods=ALL_METHODS,
    summary="Generate a PC build recommendation",
    description="""
    Sends the user's prompt to Gemini and returns the generated build.

    **Request body:** `{"prompt": "<free text>"}`

    **Responses:**
    - 200: Gemini's JSON text, passed through unmodified
    - 400: `{"error": "Prompt is required."}`
    - 405: plain text `Method Not Allowed` (any method except POST)
    - 500: missing API key or internal error
    - Upstream status: `{"error": "Failed to get a response from the AI model. ..."}`

    Prices are quoted in Indian Rupees.
    """,
    response_model=None,
    responses={
        200: {"model": BuildRecommendation},
        400: {"model": ErrorResponse},
        405: {"content": {"text/plain": {}}},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": BuildRequest.model_json_schema()}
            },
        }
    },
)
async def generate_build_endpoint(
    request: Request,
    api_key: Optional[str] = Depends(get_api_key),
    client_factory: GeminiClientFactory = Depends(get_client_factory),
) -> Response:
    """
    Build recommendation endpoint.

    - Method check, parsing and validation: handled by the adapter
    - Call LLM: single Gemini call via service layer
    - Return response: adapter output relayed as-is
    """
    logger.info(f"{request.method} {request.url.path} called")

    body = await request.body()
    result = await handle_build_request(
        request.method,
        body,
        api_key=api_key,
        client_factory=client_factory,
    )

    logger.info(f"Returning response with status={result.status_code}")
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type,
    )
