"""
Course catalog service.

Backs the learning hub's "Popular Courses" grid and its search box. The
catalog is a small fixed list; search is a case-insensitive substring match
over title, hobby and description.
"""

import logging
from typing import Collection, List, Optional

from backend.schemas.courses import CatalogCourse, CourseSearchResponse

logger = logging.getLogger(__name__)

POPULAR_HEADING = "Popular Courses"
NO_RESULTS_MESSAGE = "No courses found. Try a different search term."

CATALOG_COURSES: List[CatalogCourse] = [
    CatalogCourse(
        id=1,
        title="Complete Photography Masterclass",
        hobby="Photography",
        provider="Skillshare",
        duration="8 weeks",
        rating=4.8,
        students=12500,
        price="$49",
        level="Beginner to Advanced",
        description="Master photography from basics to advanced techniques including composition, lighting, and editing.",
    ),
    CatalogCourse(
        id=2,
        title="Web Development Bootcamp 2024",
        hobby="Coding",
        provider="Udemy",
        duration="12 weeks",
        rating=4.9,
        students=45000,
        price="$79",
        level="Beginner",
        description="Learn HTML, CSS, JavaScript, React, and Node.js to become a full-stack developer.",
    ),
    CatalogCourse(
        id=3,
        title="Digital Marketing Fundamentals",
        hobby="Marketing",
        provider="Coursera",
        duration="6 weeks",
        rating=4.7,
        students=8900,
        price="$39",
        level="Intermediate",
        description="Understand SEO, social media marketing, content strategy, and analytics.",
    ),
    CatalogCourse(
        id=4,
        title="Graphic Design for Beginners",
        hobby="Design",
        provider="LinkedIn Learning",
        duration="4 weeks",
        rating=4.6,
        students=15600,
        price="$29",
        level="Beginner",
        description="Learn Adobe Photoshop, Illustrator, and design principles to create stunning visuals.",
    ),
    CatalogCourse(
        id=5,
        title="Content Writing & Copywriting",
        hobby="Writing",
        provider="Skillshare",
        duration="5 weeks",
        rating=4.8,
        students=9200,
        price="$35",
        level="All Levels",
        description="Master the art of persuasive writing, blog posts, and engaging copy for businesses.",
    ),
    CatalogCourse(
        id=6,
        title="Video Editing Pro Course",
        hobby="Video Editing",
        provider="Udemy",
        duration="10 weeks",
        rating=4.9,
        students=23400,
        price="$59",
        level="Beginner to Advanced",
        description="Learn Adobe Premiere Pro, After Effects, and create professional-quality videos.",
    ),
]


def _matches(course: CatalogCourse, needle: str) -> bool:
    return (
        needle in course.title.lower()
        or needle in course.hobby.lower()
        or needle in course.description.lower()
    )


def search_courses(query: Optional[str] = None) -> List[CatalogCourse]:
    """
    Search the catalog.

    A blank query returns every course in catalog order.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(CATALOG_COURSES)
    return [course for course in CATALOG_COURSES if _matches(course, needle)]


def build_course_search_view(
    query: Optional[str] = None,
    saved_titles: Optional[Collection[str]] = None,
) -> CourseSearchResponse:
    """
    Build the search results view.

    Args:
        query: Search box text
        saved_titles: Titles the signed-in user saved, used to flag is_saved
    """
    query = (query or "").strip()
    saved = set(saved_titles or ())

    courses = [
        course.model_copy(update={"is_saved": course.title in saved})
        for course in search_courses(query)
    ]
    logger.debug(f"Course search '{query[:50]}' matched {len(courses)} courses")

    return CourseSearchResponse(
        query=query,
        heading=f'Results for "{query}"' if query else POPULAR_HEADING,
        courses=courses,
        count=len(courses),
        message=None if courses else NO_RESULTS_MESSAGE,
    )
