"""
AI Components for the PC Build Advisor backend.

1. Build Recommendation (Single-Shot Structured Generation)
   - Uses Gemini with response_schema to emit a PC build as JSON
   - NOT an ADK agent - uses the Google Gen AI SDK directly
   - Service layer is in: buildadvisor/services/build_service.py
"""

from buildadvisor.agents.build import (
    build_build_user_prompt,
    build_generation_config,
)

__all__ = [
    "build_build_user_prompt",
    "build_generation_config",
]
