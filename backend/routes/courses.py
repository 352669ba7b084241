"""
Learning hub API endpoints.

Public:
- GET /courses  catalog search (saved courses are flagged when signed in)

Requires Bearer token:
- GET    /learning/saved-courses
- POST   /learning/saved-courses
- DELETE /learning/saved-courses/{course_title}
- GET    /learning/progress
- GET    /learning/progress/{course_title}
- PUT    /learning/progress/{course_title}
"""

import logging
from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from backend.auth.dependencies import (
    AuthenticatedUser,
    get_authenticated_user,
    get_optional_user,
)
from backend.db.client import get_supabase_client
from backend.schemas.courses import (
    CourseSearchResponse,
    ProgressListResponse,
    ProgressResponse,
    ProgressUpdateRequest,
    SaveCourseRequest,
    SavedCourseDeleteResponse,
    SavedCourseListResponse,
    SavedCourseResponse,
)
from backend.services.course_catalog_service import build_course_search_view
from backend.services.learning_service import (
    get_course_progress,
    get_learning_progress,
    get_saved_courses,
    remove_saved_course,
    save_course,
    update_course_progress,
)

logger = logging.getLogger(__name__)

catalog_router = APIRouter(prefix="/courses", tags=["courses"])
router = APIRouter(prefix="/learning", tags=["learning"])


def _as_str(v: Any) -> str:
    """Helper to coerce DB values to strings."""
    return str(v) if v is not None else ""


def _clean_title(course_title: str) -> str:
    """
    Normalize a course title the same way for every learning route.

    Titles may contain "/" (e.g. "HTML/CSS Crash Course"), so the path
    routes declare course_title with the :path converter.
    """
    title = course_title.strip()
    if not title:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "details": "Course title is required"}
        )
    return title


def _to_saved_course_response(row: Dict[str, Any]) -> SavedCourseResponse:
    return SavedCourseResponse(
        id=_as_str(row.get("id")),
        user_id=_as_str(row.get("user_id")),
        course_title=_as_str(row.get("course_title")),
        course_data=row.get("course_data") or {},
        created_at=_as_str(row.get("created_at")),
    )


def _to_progress_response(row: Dict[str, Any]) -> ProgressResponse:
    return ProgressResponse(
        id=_as_str(row.get("id")),
        user_id=_as_str(row.get("user_id")),
        course_title=_as_str(row.get("course_title")),
        progress_percentage=int(row.get("progress_percentage") or 0),
        status=row.get("status", "not_started"),  # type: ignore
        updated_at=_as_str(row.get("updated_at")),
    )


# ============================================================================
# CATALOG
# ============================================================================

@catalog_router.get(
    "",
    response_model=CourseSearchResponse,
    status_code=status.HTTP_200_OK,
    summary="Search the course catalog",
    description="""
    Case-insensitive search over course title, hobby and description.
    A blank search returns the popular courses.

    Authentication is optional. With a valid Bearer token, courses the user
    saved are flagged with is_saved=true.
    """
)
async def search_courses_endpoint(
    auth_user: Annotated[Optional[AuthenticatedUser], Depends(get_optional_user)],
    search: str = Query("", max_length=200, description="Search text"),
) -> CourseSearchResponse:
    """Search catalog courses."""
    saved_titles: set[str] = set()

    if auth_user is not None:
        try:
            supabase_client = get_supabase_client(auth_user.access_token)
            saved = await get_saved_courses(supabase_client, auth_user.user_id)
            saved_titles = {_as_str(row.get("course_title")) for row in saved}
        except Exception as e:
            # Search still works, just without saved flags
            logger.error(f"Failed to load saved courses for user {auth_user.user_id}: {e}")

    view = build_course_search_view(search, saved_titles)
    logger.info(f"GET /courses returning {view.count} courses")
    return view


# ============================================================================
# SAVED COURSES
# ============================================================================

@router.get(
    "/saved-courses",
    response_model=SavedCourseListResponse,
    status_code=status.HTTP_200_OK,
    summary="List saved courses"
)
async def list_saved_courses(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> SavedCourseListResponse:
    """List the user's saved courses."""
    logger.info(f"Listing saved courses for user {auth_user.user_id}")

    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        rows = await get_saved_courses(supabase_client, auth_user.user_id)
    except Exception as e:
        logger.error(f"Failed to list saved courses for user {auth_user.user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": "Failed to retrieve saved courses"}
        )

    saved_courses = [_to_saved_course_response(row) for row in rows]
    return SavedCourseListResponse(saved_courses=saved_courses, count=len(saved_courses))


@router.post(
    "/saved-courses",
    response_model=SavedCourseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a course",
    description="Saving a course that is already saved updates the stored record."
)
async def save_course_endpoint(
    request: SaveCourseRequest,
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> SavedCourseResponse:
    """Save a course for the user."""
    course_title = _clean_title(request.course_title)
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        row = await save_course(
            supabase_client=supabase_client,
            user_id=auth_user.user_id,
            course_title=course_title,
            course_data=request.course,
        )
    except Exception as e:
        logger.error(f"Failed to save course for user {auth_user.user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "save_error", "details": "Failed to save course"}
        )

    return _to_saved_course_response(row)


@router.delete(
    "/saved-courses/{course_title:path}",
    response_model=SavedCourseDeleteResponse,
    status_code=status.HTTP_200_OK,
    summary="Remove a saved course"
)
async def remove_saved_course_endpoint(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    course_title: str = Path(..., min_length=1, description="Saved course title")
) -> SavedCourseDeleteResponse:
    """Remove a course from the user's saved courses."""
    course_title = _clean_title(course_title)
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        deleted = await remove_saved_course(supabase_client, auth_user.user_id, course_title)
    except Exception as e:
        logger.error(f"Failed to remove saved course for user {auth_user.user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "delete_error", "details": "Failed to remove saved course"}
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": "Course is not in your saved courses"}
        )

    return SavedCourseDeleteResponse(
        course_title=course_title,
        message="Course removed from saved courses"
    )


# ============================================================================
# LEARNING PROGRESS
# ============================================================================

@router.get(
    "/progress",
    response_model=ProgressListResponse,
    status_code=status.HTTP_200_OK,
    summary="List learning progress"
)
async def list_progress(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
) -> ProgressListResponse:
    """List progress on every course the user started."""
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        rows = await get_learning_progress(supabase_client, auth_user.user_id)
    except Exception as e:
        logger.error(f"Failed to list progress for user {auth_user.user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": "Failed to retrieve learning progress"}
        )

    progress = [_to_progress_response(row) for row in rows]
    return ProgressListResponse(progress=progress, count=len(progress))


@router.get(
    "/progress/{course_title:path}",
    response_model=ProgressResponse,
    status_code=status.HTTP_200_OK,
    summary="Get progress on one course"
)
async def get_progress(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    course_title: str = Path(..., min_length=1, description="Course title")
) -> ProgressResponse:
    """Get the user's progress on a course."""
    course_title = _clean_title(course_title)
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        row = await get_course_progress(supabase_client, auth_user.user_id, course_title)
    except Exception as e:
        logger.error(f"Failed to fetch progress for user {auth_user.user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "fetch_error", "details": "Failed to retrieve learning progress"}
        )

    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": "No progress recorded for this course"}
        )

    return _to_progress_response(row)


@router.put(
    "/progress/{course_title:path}",
    response_model=ProgressResponse,
    status_code=status.HTTP_200_OK,
    summary="Record progress on a course",
    description="""
    Creates or updates the progress row for this course.

    When status is omitted it follows the percentage:
    0 -> not_started, 100 -> completed, otherwise in_progress.
    """
)
async def put_progress(
    request: ProgressUpdateRequest,
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    course_title: str = Path(..., min_length=1, description="Course title")
) -> ProgressResponse:
    """Record the user's progress on a course."""
    course_title = _clean_title(course_title)
    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        row = await update_course_progress(
            supabase_client=supabase_client,
            user_id=auth_user.user_id,
            course_title=course_title,
            progress_percentage=request.progress_percentage,
            status=request.status,
        )
    except Exception as e:
        logger.error(f"Failed to update progress for user {auth_user.user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "update_error", "details": "Failed to update learning progress"}
        )

    return _to_progress_response(row)
