"""
Build Recommendation Prompt Templates

Contains the user prompt builder and the generation config for the build
recommendation call.

The user's request is embedded verbatim inside the instruction. Pricing is
pinned to Indian Rupees; the model is not asked to infer a currency from
the request.
"""

from google.genai import types

from buildadvisor.schemas.builds import BuildRecommendation

# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

BUILD_PROMPT_TEMPLATE = (
    'Generate a PC component list for a user based on this request: "{prompt}". '
    "All prices must be in Indian Rupees (INR). Format the estimated price "
    "with the ₹ symbol and Indian digit grouping (for example, ₹1,50,000). "
    "Also give a creative name for the build, a brief reasoning for your "
    "choices, and a list of core components."
)


def build_build_user_prompt(prompt: str) -> str:
    """
    Build the instruction text sent to Gemini.

    Args:
        prompt: The caller's raw request text. It is inserted unmodified.

    Returns:
        The complete instruction string.
    """
    # str.format does not re-interpret braces inside the substituted value
    return BUILD_PROMPT_TEMPLATE.format(prompt=prompt)


# =============================================================================
# GENERATION CONFIG
# =============================================================================

def build_generation_config() -> types.GenerateContentConfig:
    """
    Generation config constraining the answer to the BuildRecommendation shape.

    The model returns machine-readable JSON directly (no markdown wrapping),
    which the service relays as-is.
    """
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=BuildRecommendation,
    )
