"""
Learning hub persistence service.

Handles saved courses and learning progress for signed-in users.

Both tables are keyed by (user_id, course_title):
- saved_course: the course record as the user saw it
- learning_progress: progress_percentage (0-100) and status

Writes are upserts on that key, so saving the same course twice or
updating progress repeatedly never creates duplicates.
"""

import logging
from typing import Any, Dict, List, Optional, cast

from supabase import Client

logger = logging.getLogger(__name__)

SAVED_COURSE_TABLE = "saved_course"
LEARNING_PROGRESS_TABLE = "learning_progress"


def derive_progress_status(progress_percentage: int) -> str:
    """Status implied by a percentage when the client does not send one."""
    if progress_percentage >= 100:
        return "completed"
    if progress_percentage <= 0:
        return "not_started"
    return "in_progress"


async def get_saved_courses(
    supabase_client: Client,
    user_id: str
) -> List[Dict[str, Any]]:
    """
    Fetch the user's saved courses, newest first.

    Security:
        - RLS enforces user_id = auth.uid()
    """
    logger.debug(f"Fetching saved courses for user {user_id}")

    result = (
        supabase_client.table(SAVED_COURSE_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .execute()
    )

    saved: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Found {len(saved)} saved courses for user {user_id}")

    return saved


async def save_course(
    supabase_client: Client,
    user_id: str,
    course_title: str,
    course_data: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Save a course for the user (idempotent on user + title).

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID
        course_title: Course title, unique per user
        course_data: Course record as displayed

    Returns:
        The saved_course row

    Raises:
        Exception: If the store returns no row
    """
    logger.info(f"Saving course for user {user_id}: course_title='{course_title[:80]}'")

    result = (
        supabase_client.table(SAVED_COURSE_TABLE)
        .upsert(
            {
                "user_id": user_id,
                "course_title": course_title,
                "course_data": course_data or {},
            },
            on_conflict="user_id,course_title"
        )
        .execute()
    )

    if not result.data or len(result.data) == 0:
        raise Exception("Failed to save course: no data returned")

    return cast(Dict[str, Any], result.data[0])


async def remove_saved_course(
    supabase_client: Client,
    user_id: str,
    course_title: str
) -> bool:
    """
    Remove a saved course.

    Returns:
        True if a row was deleted, False if the course was not saved
    """
    logger.info(f"Removing saved course for user {user_id}: course_title='{course_title[:80]}'")

    result = (
        supabase_client.table(SAVED_COURSE_TABLE)
        .delete()
        .eq("user_id", user_id)
        .eq("course_title", course_title)
        .execute()
    )

    deleted = bool(result.data)
    if not deleted:
        logger.warning(f"Saved course '{course_title[:80]}' not found for user {user_id}")
    return deleted


async def get_learning_progress(
    supabase_client: Client,
    user_id: str
) -> List[Dict[str, Any]]:
    """Fetch all progress rows for the user, most recently updated first."""
    logger.debug(f"Fetching learning progress for user {user_id}")

    result = (
        supabase_client.table(LEARNING_PROGRESS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("updated_at", desc=True)
        .execute()
    )

    progress: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Found {len(progress)} progress rows for user {user_id}")

    return progress


async def get_course_progress(
    supabase_client: Client,
    user_id: str,
    course_title: str
) -> Optional[Dict[str, Any]]:
    """
    Fetch progress on one course.

    Returns:
        The learning_progress row, or None if the user never started it
    """
    result = (
        supabase_client.table(LEARNING_PROGRESS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .eq("course_title", course_title)
        .execute()
    )

    if not result.data or len(result.data) == 0:
        logger.warning(f"No progress for course '{course_title[:80]}' and user {user_id}")
        return None

    return cast(Dict[str, Any], result.data[0])


async def update_course_progress(
    supabase_client: Client,
    user_id: str,
    course_title: str,
    progress_percentage: int,
    status: Optional[str] = None
) -> Dict[str, Any]:
    """
    Record progress on a course (upsert on user + title).

    Args:
        progress_percentage: 0-100, validated by the request schema
        status: Explicit status, or None to derive it from the percentage

    Returns:
        The learning_progress row

    Raises:
        Exception: If the store returns no row
    """
    resolved_status = status or derive_progress_status(progress_percentage)

    logger.info(
        f"Updating progress for user {user_id}: "
        f"course_title='{course_title[:80]}', progress={progress_percentage}, status={resolved_status}"
    )

    result = (
        supabase_client.table(LEARNING_PROGRESS_TABLE)
        .upsert(
            {
                "user_id": user_id,
                "course_title": course_title,
                "progress_percentage": progress_percentage,
                "status": resolved_status,
            },
            on_conflict="user_id,course_title"
        )
        .execute()
    )

    if not result.data or len(result.data) == 0:
        raise Exception("Failed to update progress: no data returned")

    return cast(Dict[str, Any], result.data[0])
