"""
Service layer for Hobby to Hustle Backend.

Contains business logic orchestration that:
- Builds prompts, calls Gemini and normalizes its free-text output
- Falls back to deterministic default batches when the output is unusable
- Filters the live opportunity board and searches the course catalog
- Handles learning hub persistence (calling DB layer under RLS)

Services act as the glue between routes (HTTP layer) and agents/database.
"""

from .course_catalog_service import build_course_search_view, search_courses
from .learning_service import (
    derive_progress_status,
    get_course_progress,
    get_learning_progress,
    get_saved_courses,
    remove_saved_course,
    save_course,
    update_course_progress,
)
from .opportunity_service import (
    build_opportunity_view,
    filter_opportunities,
    list_opportunities,
    matches_filters,
    reset_filters,
)
from .recommendation_service import (
    generate_course_recommendations,
    generate_hobby_ideas,
    get_trending_hobbies,
)

__all__ = [
    "generate_hobby_ideas",
    "generate_course_recommendations",
    "get_trending_hobbies",
    "list_opportunities",
    "reset_filters",
    "matches_filters",
    "filter_opportunities",
    "build_opportunity_view",
    "search_courses",
    "build_course_search_view",
    "derive_progress_status",
    "get_saved_courses",
    "save_course",
    "remove_saved_course",
    "get_learning_progress",
    "get_course_progress",
    "update_course_progress",
]
