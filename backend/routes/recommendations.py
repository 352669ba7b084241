"""
FastAPI routes for the AI suggestion endpoints.

These endpoints are PUBLIC (no authentication) and mirror the function names
the web client invokes:

- POST /functions/generate-hobby-ideas
- POST /functions/generate-course-recommendations
- POST /functions/get-trending-hobbies

Degraded answers (default or salvaged batches) are returned with HTTP 200;
callers must not rely on the status code to detect them. The
X-Suggestion-Source header says where the records came from
("model", "salvage" or "default").
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Response, status

from backend.schemas.recommendations import (
    CourseRecommendationsRequest,
    CourseRecommendationsResponse,
    HobbyIdeasRequest,
    HobbyIdeasResponse,
    TrendingHobbiesRequest,
    TrendingHobbiesResponse,
)
from backend.services.recommendation_pipeline import ModelNotConfiguredError
from backend.services.recommendation_service import (
    generate_course_recommendations,
    generate_hobby_ideas,
    get_trending_hobbies,
)

logger = logging.getLogger(__name__)

SOURCE_HEADER = "X-Suggestion-Source"

router = APIRouter(
    prefix="/functions",
    tags=["suggestions"]
)


@router.post(
    "/generate-hobby-ideas",
    response_model=HobbyIdeasResponse,
    status_code=200,
    summary="Generate money-making ideas for a hobby",
    description="""
    Asks Gemini for 10 ways to monetize the given hobby.

    **Authentication:** Not required

    **Fallbacks (always HTTP 200):**
    - Model unavailable or failing -> 10 default ideas for the hobby
    - Prose instead of JSON -> one placeholder idea per line (max 10)
    - JSON that is not a non-empty array -> default ideas

    **Errors:**
    - 400 when hobby is missing or blank (including an empty body)
    """
)
async def generate_hobby_ideas_endpoint(
    response: Response,
    request: Optional[HobbyIdeasRequest] = None,
) -> HobbyIdeasResponse:
    """Hobby idea endpoint."""
    hobby = ((request.hobby if request else None) or "").strip()
    if not hobby:
        logger.warning("generate-hobby-ideas called without hobby")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "details": "Hobby is required"}
        )

    logger.info(f"POST /functions/generate-hobby-ideas called, hobby='{hobby[:50]}'")

    batch = await generate_hobby_ideas(hobby)
    response.headers[SOURCE_HEADER] = batch.source

    logger.info(f"Returning {len(batch.records)} ideas (source={batch.source})")
    return HobbyIdeasResponse(ideas=batch.records)


@router.post(
    "/generate-course-recommendations",
    response_model=CourseRecommendationsResponse,
    status_code=200,
    summary="Recommend FREE courses for a hobby",
    description="""
    Asks Gemini for 6 free courses / learning resources for the hobby.

    **Authentication:** Not required

    **Behavior:**
    - Missing or blank hobby -> generic default courses (browsing)
    - Model failure, unparseable or wrongly shaped output -> default courses

    **Errors:**
    - 500 configuration_error when the AI credential is not configured
    """
)
async def generate_course_recommendations_endpoint(
    response: Response,
    request: Optional[CourseRecommendationsRequest] = None,
) -> CourseRecommendationsResponse:
    """Course recommendation endpoint."""
    hobby = request.hobby if request else None
    logger.info("POST /functions/generate-course-recommendations called")

    try:
        batch = await generate_course_recommendations(hobby)
    except ModelNotConfiguredError as e:
        logger.error(f"Course recommendations unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "configuration_error", "details": str(e)}
        )

    response.headers[SOURCE_HEADER] = batch.source

    logger.info(f"Returning {len(batch.records)} courses (source={batch.source})")
    return CourseRecommendationsResponse(courses=batch.records)


@router.post(
    "/get-trending-hobbies",
    response_model=TrendingHobbiesResponse,
    status_code=200,
    summary="List trending hobbies with income potential",
    description="""
    Asks Gemini for the top 6 currently trending hobbies.

    **Authentication:** Not required

    The body is optional; "interest" only narrows the prompt. Any failure
    returns the 6 default trending hobbies.
    """
)
async def get_trending_hobbies_endpoint(
    response: Response,
    request: Optional[TrendingHobbiesRequest] = None,
) -> TrendingHobbiesResponse:
    """Trending hobbies endpoint."""
    interest = request.interest if request else None
    logger.info("POST /functions/get-trending-hobbies called")

    batch = await get_trending_hobbies(interest)
    response.headers[SOURCE_HEADER] = batch.source

    logger.info(f"Returning {len(batch.records)} trending hobbies (source={batch.source})")
    return TrendingHobbiesResponse(trending_hobbies=batch.records)
