"""
Recommendation Service - AI suggestions with deterministic fallbacks

This service implements the three AI suggestion flows on top of the shared
normalization pipeline (backend/services/recommendation_pipeline.py):

- generate_hobby_ideas: 10 ways to monetize a hobby
- generate_course_recommendations: FREE courses for a hobby
- get_trending_hobbies: top trending hobbies with income potential

Fallback policy:
- Model not configured  -> default batch (course flow raises instead, so the
                           route can answer with a configuration error)
- Upstream failure      -> default batch
- Unparseable text      -> salvage pass (ideas only), then default batch
- Wrong shape           -> default batch

From the caller's point of view these flows never fail; they degrade to
generic but valid suggestions.
"""

import logging
import random
from typing import Optional

from backend.agents.recommendation.defaults import (
    default_course_recommendations,
    default_hobby_ideas,
    default_trending_hobbies,
)
from backend.agents.recommendation.prompts import (
    COURSE_RECOMMENDATIONS_SYSTEM_PROMPT,
    HOBBY_IDEAS_SYSTEM_PROMPT,
    TRENDING_HOBBIES_SYSTEM_PROMPT,
    build_course_recommendations_prompt,
    build_hobby_ideas_prompt,
    build_trending_hobbies_prompt,
)
from backend.services.recommendation_pipeline import (
    InvalidBatch,
    ModelInvocationError,
    ModelNotConfiguredError,
    SuggestionBatch,
    ValidBatch,
    decode_model_output,
    invoke_model,
    salvage_ideas_from_text,
    validate_batch,
)
from backend.utils.constants import GENERIC_TOPIC

logger = logging.getLogger(__name__)

HOBBY_IDEAS_TEMPERATURE = 0.8
HOBBY_IDEAS_MAX_TOKENS = 4096

COURSE_RECOMMENDATIONS_TEMPERATURE = 0.8
COURSE_RECOMMENDATIONS_MAX_TOKENS = 4096

TRENDING_HOBBIES_TEMPERATURE = 0.9
TRENDING_HOBBIES_MAX_TOKENS = 2000


async def generate_hobby_ideas(
    hobby: str,
    rng: Optional[random.Random] = None,
) -> SuggestionBatch:
    """
    Generate money-making ideas for a hobby.

    Args:
        hobby: The user's hobby. Routes reject blank values before calling.
        rng: Randomness for salvaged icons (seed it in tests)

    Returns:
        SuggestionBatch with source "model", "salvage" or "default"
    """
    hobby = hobby.strip() or GENERIC_TOPIC
    logger.info(f"generate_hobby_ideas called for hobby='{hobby[:50]}'")

    try:
        content = invoke_model(
            prompt=build_hobby_ideas_prompt(hobby),
            system_instruction=HOBBY_IDEAS_SYSTEM_PROMPT,
            temperature=HOBBY_IDEAS_TEMPERATURE,
            max_output_tokens=HOBBY_IDEAS_MAX_TOKENS,
        )
    except (ModelNotConfiguredError, ModelInvocationError) as e:
        logger.warning(f"Using default ideas due to model error: {e}")
        return SuggestionBatch(
            records=list(default_hobby_ideas(hobby)),
            source="default",
            fallback_reason=str(e),
        )

    result = decode_model_output(content)

    if isinstance(result, ValidBatch):
        logger.info(f"Returning {len(result.records)} model ideas")
        return SuggestionBatch(records=result.records, source="model")

    if result.parse_failed:
        salvaged = validate_batch(salvage_ideas_from_text(content, hobby, rng))
        if isinstance(salvaged, ValidBatch):
            return SuggestionBatch(
                records=salvaged.records,
                source="salvage",
                fallback_reason=result.reason,
            )

    logger.warning(f"Using default ideas: {result.reason}")
    return SuggestionBatch(
        records=list(default_hobby_ideas(hobby)),
        source="default",
        fallback_reason=result.reason,
    )


async def generate_course_recommendations(hobby: Optional[str]) -> SuggestionBatch:
    """
    Recommend FREE courses and learning resources for a hobby.

    A blank hobby is a browsing request: the default batch for a generic
    topic is returned without calling the model.

    Raises:
        ModelNotConfiguredError: GOOGLE_API_KEY is missing (surfaced as a
            configuration error by the route)
    """
    topic = (hobby or "").strip()
    if not topic:
        logger.info("generate_course_recommendations called without hobby, using defaults")
        return SuggestionBatch(
            records=list(default_course_recommendations(GENERIC_TOPIC)),
            source="default",
            fallback_reason="no hobby provided",
        )

    logger.info(f"generate_course_recommendations called for hobby='{topic[:50]}'")

    try:
        content = invoke_model(
            prompt=build_course_recommendations_prompt(topic),
            system_instruction=COURSE_RECOMMENDATIONS_SYSTEM_PROMPT,
            temperature=COURSE_RECOMMENDATIONS_TEMPERATURE,
            max_output_tokens=COURSE_RECOMMENDATIONS_MAX_TOKENS,
        )
    except ModelInvocationError as e:
        logger.warning(f"Using default courses due to model error: {e}")
        return SuggestionBatch(
            records=list(default_course_recommendations(topic)),
            source="default",
            fallback_reason=str(e),
        )

    result = decode_model_output(content)

    if isinstance(result, InvalidBatch):
        logger.warning(f"Using default courses: {result.reason}")
        return SuggestionBatch(
            records=list(default_course_recommendations(topic)),
            source="default",
            fallback_reason=result.reason,
        )

    logger.info(f"Returning {len(result.records)} model course recommendations")
    return SuggestionBatch(records=result.records, source="model")


async def get_trending_hobbies(interest: Optional[str] = None) -> SuggestionBatch:
    """
    List currently trending hobbies with income potential.

    Args:
        interest: Optional area used only to narrow the prompt. The default
                  batch does not depend on it.
    """
    interest = (interest or "").strip() or None
    logger.info("Generating trending hobbies with income potential")

    try:
        content = invoke_model(
            prompt=build_trending_hobbies_prompt(interest),
            system_instruction=TRENDING_HOBBIES_SYSTEM_PROMPT,
            temperature=TRENDING_HOBBIES_TEMPERATURE,
            max_output_tokens=TRENDING_HOBBIES_MAX_TOKENS,
        )
    except (ModelNotConfiguredError, ModelInvocationError) as e:
        logger.warning(f"Using default trending hobbies due to model error: {e}")
        return SuggestionBatch(
            records=list(default_trending_hobbies()),
            source="default",
            fallback_reason=str(e),
        )

    result = decode_model_output(content)

    if isinstance(result, InvalidBatch):
        logger.warning(f"Using default trending hobbies: {result.reason}")
        return SuggestionBatch(
            records=list(default_trending_hobbies()),
            source="default",
            fallback_reason=result.reason,
        )

    logger.info(f"Returning {len(result.records)} model trending hobbies")
    return SuggestionBatch(records=result.records, source="model")
