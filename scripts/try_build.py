#!/usr/bin/env python3
"""
Build Recommendation Test Script

This script lets you try the build recommendation service locally against
the real Gemini API, without deploying the serverless function.

Usage:
    python scripts/try_build.py --prompt "Gaming PC for 1440p under 1.5 lakh"
    python scripts/try_build.py --prompt "Silent editing workstation" --raw
    python scripts/try_build.py --prompt "..." --model gemini-2.5-pro
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from buildadvisor.config import settings
from buildadvisor.services.build_service import UpstreamError, generate_build


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_build(build_text: str, raw: bool = False) -> None:
    """Pretty print the build recommendation text returned by Gemini."""
    print("\n" + "=" * 60)

    if raw:
        print(build_text)
        return

    try:
        build = json.loads(build_text)
    except json.JSONDecodeError:
        print("⚠️  Model returned text that is not valid JSON:\n")
        print(build_text)
        return

    print(f"BUILD: {build.get('buildName')}")
    print("=" * 60)
    print(f"\nEstimated price: {build.get('estimatedPrice')}")
    print(f"\nReasoning:\n  {build.get('reasoning')}\n")

    components = build.get("components") or []
    print(f"Components ({len(components)}):")
    for component in components:
        print(f"  - {component.get('type')!s:<12} {component.get('name')}")
    print()


async def run_build(prompt: str, model: Optional[str] = None, raw: bool = False):
    """Run a single build recommendation request."""

    api_key = settings.GEMINI_API_KEY
    if not api_key:
        print("\n⚠️  ERROR: GEMINI_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GEMINI_API_KEY=your-gemini-api-key")
        print("\n   Get your API key at: https://aistudio.google.com/app/apikey")
        return None

    print("\n" + "=" * 60)
    print("PC BUILD RECOMMENDATION TEST (Gemini structured output)")
    print("=" * 60)
    print(f"\nPrompt: {prompt}")
    print(f"Model:  {model or settings.GEMINI_MODEL}")
    print("\nCalling Gemini API...")

    try:
        build_text = await generate_build(prompt, api_key=api_key, model=model)
    except UpstreamError as e:
        print(f"\n❌ Upstream error ({e.status_code}): {e.message}\n")
        return None

    print_build(build_text, raw=raw)
    return build_text


def main():
    parser = argparse.ArgumentParser(
        description="Try the build recommendation service locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/try_build.py --prompt "Gaming PC for 1440p under 1.5 lakh"
  python scripts/try_build.py -p "Budget office PC" --raw
        """
    )

    parser.add_argument(
        "--prompt", "-p",
        type=str,
        required=True,
        help="Free-text build request"
    )
    parser.add_argument(
        "--model", "-m",
        type=str,
        help=f"Gemini model (default: {settings.GEMINI_MODEL})"
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the model's JSON text exactly as returned"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    asyncio.run(run_build(prompt=args.prompt, model=args.model, raw=args.raw))


if __name__ == "__main__":
    main()
