"""
Pydantic schemas for the build recommendation endpoint.

BuildRecommendation is the response schema contract sent to Gemini: the
model is constrained to emit exactly this shape as JSON text, and the
adapter relays that text to the caller without parsing it.
"""

from typing import List

from pydantic import BaseModel, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class BuildRequest(BaseModel):
    """
    Request body for POST /api/generate.

    The adapter parses the raw body itself so that malformed JSON and a
    missing prompt map to the exact error payloads the frontend expects;
    this model documents the contract.
    """
    prompt: str = Field(
        ...,
        description="Free-text description of the PC the user wants.",
        examples=[
            "Gaming PC for 1440p under 1.5 lakh",
            "Quiet workstation for video editing"
        ]
    )


# ============================================================================
# RESPONSE SCHEMA CONTRACT (sent to Gemini as response_schema)
# ============================================================================

class BuildComponent(BaseModel):
    """A single core PC component."""
    type: str = Field(
        ...,
        description="The type of component (e.g., CPU, GPU, Motherboard)."
    )
    name: str = Field(
        ...,
        description="The specific model name of the component."
    )


class BuildRecommendation(BaseModel):
    """Complete PC build recommendation returned by the model."""
    buildName: str = Field(
        ...,
        description="A creative and fitting name for the PC build."
    )
    estimatedPrice: str = Field(
        ...,
        description=(
            "The total estimated price of the build in Indian Rupees, "
            "formatted with the ₹ symbol and Indian digit grouping "
            "(e.g., ₹1,50,000)."
        )
    )
    reasoning: str = Field(
        ...,
        description="A brief explanation of why these components were chosen for the user's needs."
    )
    components: List[BuildComponent] = Field(
        ...,
        description="A list of the core PC components."
    )


# ============================================================================
# ERROR MODELS
# ============================================================================

class ErrorResponse(BaseModel):
    """JSON error payload returned on every non-405 failure."""
    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Prompt is required."]
    )
