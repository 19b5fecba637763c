#!/usr/bin/env python3
"""
Coffee Recommendation Try-Out Script

Runs the recommendation pipeline locally against the real Gemini API,
without starting the server or touching Supabase.

Usage:
    python scripts/try_recommendation.py
    python scripts/try_recommendation.py --language Go --framework Gin --ide NeoVim --vibe performance-obsessed
    python scripts/try_recommendation.py --all-languages
    python scripts/try_recommendation.py --fallback-only --language Ruby
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

os.environ.setdefault("VALIDATE_CONFIG", "false")

from coffee_backend.agents.sommelier import GeneratorConfig, SommelierGenerator
from coffee_backend.config import settings
from coffee_backend.services import (
    PreferenceValidationError,
    recommend,
)
from coffee_backend.utils.constants import FRAMEWORKS_BY_LANGUAGE, SUPPORTED_LANGUAGES

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def run_one(
    language: str,
    framework: str,
    ide: str,
    vibe: str,
    generator: Optional[SommelierGenerator],
) -> bool:
    """Run a single recommendation and print it. Returns False on a rejected body."""
    body = {"language": language, "framework": framework, "ide": ide, "vibe": vibe}

    print("\n" + "=" * 70)
    print(f"☕ {language} / {framework} / {ide} / {vibe}")
    print("=" * 70)

    try:
        result = await recommend(body, generator)
    except PreferenceValidationError as e:
        print(f"❌ Rejected: {e.details}")
        return False

    print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return True


async def run_all_languages(ide: str, vibe: str, generator: Optional[SommelierGenerator]) -> None:
    """One recommendation per supported language using its first framework."""
    ok = 0
    for language in SUPPORTED_LANGUAGES:
        framework = FRAMEWORKS_BY_LANGUAGE[language][0]
        if await run_one(language, framework, ide, vibe, generator):
            ok += 1
        if generator is not None:
            # Delay between calls to avoid rate limits
            await asyncio.sleep(1)

    print("\n" + "=" * 70)
    print(f"Done: {ok}/{len(SUPPORTED_LANGUAGES)} recommendations")
    print("=" * 70 + "\n")


def main():
    parser = argparse.ArgumentParser(
        description="Try the coffee recommendation pipeline locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--language", "-l", type=str, default="Python")
    parser.add_argument("--framework", "-f", type=str, default="FastAPI")
    parser.add_argument("--ide", "-i", type=str, default="VS Code")
    parser.add_argument("--vibe", "-v", type=str, default="elegantly-simple")
    parser.add_argument(
        "--all-languages",
        action="store_true",
        help="Run one recommendation per supported language"
    )
    parser.add_argument(
        "--fallback-only",
        action="store_true",
        help="Skip Gemini and show the static fallback recommendation"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    generator: Optional[SommelierGenerator] = None
    if not args.fallback_only:
        if not settings.GOOGLE_API_KEY:
            print("⚠️  GOOGLE_API_KEY is not set; every answer will come from the fallback table.")
        generator = SommelierGenerator(GeneratorConfig.from_settings(settings))

    if args.all_languages:
        asyncio.run(run_all_languages(args.ide, args.vibe, generator))
    else:
        asyncio.run(run_one(args.language, args.framework, args.ide, args.vibe, generator))


if __name__ == "__main__":
    main()
