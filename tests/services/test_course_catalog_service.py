"""
Tests for course catalog search.
"""

from backend.services.course_catalog_service import (
    NO_RESULTS_MESSAGE,
    POPULAR_HEADING,
    build_course_search_view,
    search_courses,
)


class TestSearchCourses:
    """Tests for search_courses."""

    def test_blank_query_returns_catalog(self):
        assert len(search_courses("")) == 6
        assert len(search_courses(None)) == 6
        assert len(search_courses("   ")) == 6

    def test_matches_title_case_insensitively(self):
        titles = [c.title for c in search_courses("PHOTOGRAPHY")]
        assert titles == ["Complete Photography Masterclass"]

    def test_matches_hobby(self):
        assert [c.id for c in search_courses("video editing")] == [6]

    def test_matches_description(self):
        assert [c.id for c in search_courses("illustrator")] == [4]

    def test_no_match(self):
        assert search_courses("underwater basket weaving") == []


class TestCourseSearchView:
    """Tests for build_course_search_view."""

    def test_popular_heading(self):
        view = build_course_search_view("")
        assert view.heading == POPULAR_HEADING
        assert view.count == 6
        assert view.message is None

    def test_results_heading(self):
        view = build_course_search_view("  design ")
        assert view.query == "design"
        assert view.heading == 'Results for "design"'

    def test_empty_results_message(self):
        view = build_course_search_view("zzz")
        assert view.count == 0
        assert view.message == NO_RESULTS_MESSAGE

    def test_saved_courses_are_flagged(self):
        view = build_course_search_view("", {"Video Editing Pro Course"})
        saved = [c.title for c in view.courses if c.is_saved]
        assert saved == ["Video Editing Pro Course"]

    def test_catalog_is_not_mutated(self):
        build_course_search_view("", {"Video Editing Pro Course"})
        assert not any(c.is_saved for c in search_courses(""))
