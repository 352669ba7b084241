"""
Pydantic schemas for the learning hub.

Covers the public course catalog search plus the signed-in features:
saved courses and learning progress (persisted in Supabase under RLS).
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

ProgressStatus = Literal["not_started", "in_progress", "completed"]


# --- Catalog ---

class CatalogCourse(BaseModel):
    """A course listed in the learning hub."""
    id: int
    title: str
    hobby: str = Field(..., description="Hobby the course belongs to", examples=["Photography"])
    provider: str = Field(..., examples=["Skillshare", "Udemy"])
    duration: str = Field(..., examples=["8 weeks"])
    rating: float = Field(..., ge=0, le=5)
    students: int = Field(..., ge=0)
    price: str = Field(..., examples=["$49"])
    level: str = Field(..., examples=["Beginner to Advanced"])
    description: str
    is_saved: bool = Field(False, description="True when the signed-in user saved this course")


class CourseSearchResponse(BaseModel):
    """Response for GET /courses."""
    query: str = Field("", description="Search text as received (trimmed)")
    heading: str = Field(
        ...,
        description="Section heading for the result list",
        examples=["Popular Courses", 'Results for "photo"']
    )
    courses: List[CatalogCourse] = Field(default_factory=list)
    count: int = Field(0, ge=0)
    message: Optional[str] = Field(
        None,
        description="User-facing note when nothing matches",
        examples=["No courses found. Try a different search term."]
    )


# --- Saved courses ---

class SaveCourseRequest(BaseModel):
    """
    Request to save a course for later.

    course_title identifies the course for this user; course carries the
    record as displayed (catalog course or AI recommendation).
    """
    course_title: str = Field(..., min_length=1, max_length=300)
    course: Dict[str, Any] = Field(
        default_factory=dict,
        description="Course record as shown to the user"
    )


class SavedCourseResponse(BaseModel):
    """A saved course row."""
    id: str
    user_id: str
    course_title: str
    course_data: Dict[str, Any] = Field(default_factory=dict)
    created_at: str


class SavedCourseListResponse(BaseModel):
    """Response for GET /learning/saved-courses."""
    saved_courses: List[SavedCourseResponse]
    count: int


class SavedCourseDeleteResponse(BaseModel):
    """Response after removing a saved course."""
    status: str = Field("DELETED")
    course_title: str
    message: str = Field(..., examples=["Course removed from saved courses"])


# --- Learning progress ---

class ProgressUpdateRequest(BaseModel):
    """
    Request to record progress on a course.

    When status is omitted it is derived from the percentage:
    0 -> not_started, 100 -> completed, otherwise in_progress.
    """
    progress_percentage: int = Field(..., ge=0, le=100)
    status: Optional[ProgressStatus] = Field(None)


class ProgressResponse(BaseModel):
    """A learning_progress row."""
    id: str
    user_id: str
    course_title: str
    progress_percentage: int = Field(..., ge=0, le=100)
    status: ProgressStatus
    updated_at: str


class ProgressListResponse(BaseModel):
    """Response for GET /learning/progress."""
    progress: List[ProgressResponse]
    count: int
