"""
Pydantic schemas for the AI suggestion endpoints.

Request bodies are strict. Response records are NOT validated field by
field: whatever the model returned (or the default batch) is passed through
as long as it is a non-empty list. See
backend/services/recommendation_pipeline.py for the acceptance rule and
backend/agents/recommendation/types.py for the canonical record shapes.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class HobbyIdeasRequest(BaseModel):
    """
    Request for money-making ideas.

    hobby is required; a missing or blank value is answered with HTTP 400
    by the route (kept Optional here so the route can produce that error
    instead of a generic 422).
    """
    hobby: Optional[str] = Field(
        None,
        description="The user's hobby",
        max_length=200,
        examples=["painting", "baking", "coding"]
    )


class CourseRecommendationsRequest(BaseModel):
    """
    Request for FREE course recommendations.

    A missing or blank hobby is a browsing request and returns the generic
    default courses.
    """
    hobby: Optional[str] = Field(
        None,
        description="Hobby or skill to learn",
        max_length=200,
        examples=["photography", "video editing"]
    )


class TrendingHobbiesRequest(BaseModel):
    """Optional body for trending hobbies."""
    interest: Optional[str] = Field(
        None,
        description="Optional area to narrow the trending list",
        max_length=200,
        examples=["outdoors", "tech"]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class HobbyIdeasResponse(BaseModel):
    """
    Response for POST /functions/generate-hobby-ideas.

    Each idea usually carries method, description, tools, earnings, icon and
    source, but any field may be missing.
    """
    ideas: List[Any] = Field(
        ...,
        description="Ordered money-making ideas (model order preserved)",
        min_length=1
    )


class CourseRecommendationsResponse(BaseModel):
    """Response for POST /functions/generate-course-recommendations."""
    courses: List[Any] = Field(
        ...,
        description="Ordered course recommendations",
        min_length=1
    )


class TrendingHobbiesResponse(BaseModel):
    """
    Response for POST /functions/get-trending-hobbies.

    Serialized as {"trendingHobbies": [...]}.
    """
    model_config = ConfigDict(populate_by_name=True)

    trending_hobbies: List[Any] = Field(
        ...,
        alias="trendingHobbies",
        description="Ordered trending hobbies",
        min_length=1
    )
