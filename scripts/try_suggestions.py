#!/usr/bin/env python3
"""
AI Suggestions Local Test Script

This script calls the three suggestion flows directly (no server, no web
client) so prompt changes can be checked against the real Gemini API.

Every flow prints where its records came from: "model", "salvage" (hobby
ideas only) or "default".

Usage:
    python scripts/try_suggestions.py --hobby painting
    python scripts/try_suggestions.py --courses --hobby "video editing"
    python scripts/try_suggestions.py --trending --interest outdoors
    python scripts/try_suggestions.py --suite
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

from backend.services.recommendation_pipeline import (
    ModelNotConfiguredError,
    SuggestionBatch,
)
from backend.services.recommendation_service import (
    generate_course_recommendations,
    generate_hobby_ideas,
    get_trending_hobbies,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

TITLE_FIELDS = ("method", "title")


def print_batch(label: str, batch: SuggestionBatch, verbose: bool = False):
    """Pretty print a suggestion batch."""
    print("\n" + "=" * 60)
    print(f"{label}: {len(batch.records)} record(s), source={batch.source}")
    if batch.fallback_reason:
        print(f"Fallback reason: {batch.fallback_reason}")
    print("=" * 60)

    for i, record in enumerate(batch.records, 1):
        if verbose or not isinstance(record, dict):
            print(f"--- #{i} ---")
            print(json.dumps(record, indent=2, ensure_ascii=False))
            continue

        title = next((record[f] for f in TITLE_FIELDS if f in record), "(untitled)")
        print(f"  {record.get('icon', '•')} {title}")


async def run_single(
    hobby: Optional[str],
    courses: bool,
    trending: bool,
    interest: Optional[str],
    verbose: bool
):
    """Run one flow."""
    if not os.getenv("GOOGLE_API_KEY"):
        print("\n⚠️  GOOGLE_API_KEY environment variable not set!")
        print("   Every flow will return its default batch.")
        print("   Get your API key at: https://aistudio.google.com/app/apikey")

    if trending:
        batch = await get_trending_hobbies(interest)
        print_batch("TRENDING HOBBIES", batch, verbose)
        return batch

    if courses:
        try:
            batch = await generate_course_recommendations(hobby)
        except ModelNotConfiguredError as e:
            print(f"\n❌ Course recommendations unavailable: {e}")
            return None
        print_batch(f"FREE COURSES for '{hobby or ''}'", batch, verbose)
        return batch

    if not hobby:
        print("\n❌ --hobby is required for hobby ideas")
        return None

    batch = await generate_hobby_ideas(hobby)
    print_batch(f"HOBBY IDEAS for '{hobby}'", batch, verbose)
    return batch


async def run_suite(verbose: bool):
    """Run every flow over a few representative hobbies."""
    hobbies = ["painting", "baking", "coding", "photography", "gardening"]
    sources = []

    for hobby in hobbies:
        ideas = await generate_hobby_ideas(hobby)
        print_batch(f"HOBBY IDEAS for '{hobby}'", ideas, verbose)
        sources.append(("ideas", hobby, ideas.source))

        try:
            courses = await generate_course_recommendations(hobby)
        except ModelNotConfiguredError as e:
            print(f"\n❌ Course recommendations unavailable: {e}")
            sources.append(("courses", hobby, "error"))
        else:
            print_batch(f"FREE COURSES for '{hobby}'", courses, verbose)
            sources.append(("courses", hobby, courses.source))

        # Delay between hobbies to avoid rate limits
        await asyncio.sleep(2)

    trending = await get_trending_hobbies()
    print_batch("TRENDING HOBBIES", trending, verbose)
    sources.append(("trending", "-", trending.source))

    # Print summary
    print("\n\n" + "=" * 60)
    print("SUITE SUMMARY")
    print("=" * 60)
    for flow, hobby, source in sources:
        icon = "✅" if source == "model" else "⚠️ "
        print(f"  {icon} {flow:<9} {hobby:<12} source={source}")
    degraded = sum(1 for _, _, source in sources if source != "model")
    print(f"\n{len(sources) - degraded}/{len(sources)} answered by the model")


def main():
    parser = argparse.ArgumentParser(
        description="Try the AI suggestion flows locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Money-making ideas for a hobby
  python scripts/try_suggestions.py --hobby painting

  # FREE course recommendations (omit --hobby for the generic batch)
  python scripts/try_suggestions.py --courses --hobby "video editing"

  # Trending hobbies, optionally narrowed
  python scripts/try_suggestions.py --trending --interest tech

  # Run every flow for a few hobbies
  python scripts/try_suggestions.py --suite
        """
    )

    parser.add_argument("--hobby", type=str, help="Hobby (e.g., 'painting')")
    parser.add_argument("--courses", action="store_true", help="Recommend FREE courses")
    parser.add_argument("--trending", action="store_true", help="List trending hobbies")
    parser.add_argument("--interest", type=str, help="Interest to narrow trending hobbies")
    parser.add_argument("--suite", action="store_true", help="Run every flow")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print full records")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.suite:
        asyncio.run(run_suite(args.verbose))
    else:
        asyncio.run(run_single(args.hobby, args.courses, args.trending, args.interest, args.verbose))


if __name__ == "__main__":
    main()
