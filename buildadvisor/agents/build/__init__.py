"""
Build Recommendation - Structured Output Architecture

Prompt template and generation config for the Gemini-based PC build
recommendation.

Architecture:
- Pattern: Single-shot structured generation (one API call, no tools)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Output: JSON constrained by response_schema (BuildRecommendation)
"""

from buildadvisor.agents.build.prompts import (
    build_build_user_prompt,
    build_generation_config,
)

__all__ = [
    "build_build_user_prompt",
    "build_generation_config",
]
