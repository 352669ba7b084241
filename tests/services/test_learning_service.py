"""
Tests for learning hub persistence (saved courses and progress).

The Supabase client is a MagicMock; assertions check the query chain the
service builds and how it interprets the returned rows.
"""

from unittest.mock import MagicMock

import pytest

from backend.services.learning_service import (
    LEARNING_PROGRESS_TABLE,
    SAVED_COURSE_TABLE,
    derive_progress_status,
    get_course_progress,
    get_saved_courses,
    remove_saved_course,
    save_course,
    update_course_progress,
)

USER_ID = "test-user-uuid-123"


def _response(data):
    mock_response = MagicMock()
    mock_response.data = data
    return mock_response


class TestDeriveProgressStatus:
    """Tests for derive_progress_status."""

    @pytest.mark.parametrize(
        "percentage, expected",
        [(0, "not_started"), (1, "in_progress"), (99, "in_progress"), (100, "completed")],
    )
    def test_status_follows_percentage(self, percentage, expected):
        assert derive_progress_status(percentage) == expected


class TestSavedCourses:
    """Tests for saved course queries."""

    @pytest.mark.asyncio
    async def test_get_saved_courses(self, supabase_client):
        rows = [{"id": "1", "course_title": "Guitar Basics"}]
        chain = supabase_client.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.execute.return_value = _response(rows)

        result = await get_saved_courses(supabase_client, USER_ID)

        assert result == rows
        supabase_client.table.assert_called_with(SAVED_COURSE_TABLE)
        supabase_client.table.return_value.select.return_value.eq.assert_called_with("user_id", USER_ID)

    @pytest.mark.asyncio
    async def test_get_saved_courses_none(self, supabase_client):
        chain = supabase_client.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.execute.return_value = _response(None)

        assert await get_saved_courses(supabase_client, USER_ID) == []

    @pytest.mark.asyncio
    async def test_save_course_upserts_on_user_and_title(self, supabase_client):
        row = {"id": "1", "user_id": USER_ID, "course_title": "Guitar Basics"}
        supabase_client.table.return_value.upsert.return_value.execute.return_value = _response([row])

        result = await save_course(supabase_client, USER_ID, "Guitar Basics", {"provider": "YouTube"})

        assert result == row
        args, kwargs = supabase_client.table.return_value.upsert.call_args
        assert args[0] == {
            "user_id": USER_ID,
            "course_title": "Guitar Basics",
            "course_data": {"provider": "YouTube"},
        }
        assert kwargs["on_conflict"] == "user_id,course_title"

    @pytest.mark.asyncio
    async def test_save_course_no_data_raises(self, supabase_client):
        supabase_client.table.return_value.upsert.return_value.execute.return_value = _response([])

        with pytest.raises(Exception, match="Failed to save course"):
            await save_course(supabase_client, USER_ID, "Guitar Basics")

    @pytest.mark.asyncio
    async def test_remove_saved_course(self, supabase_client):
        chain = supabase_client.table.return_value.delete.return_value.eq.return_value.eq.return_value
        chain.execute.return_value = _response([{"id": "1"}])

        assert await remove_saved_course(supabase_client, USER_ID, "Guitar Basics") is True

    @pytest.mark.asyncio
    async def test_remove_missing_saved_course(self, supabase_client):
        chain = supabase_client.table.return_value.delete.return_value.eq.return_value.eq.return_value
        chain.execute.return_value = _response([])

        assert await remove_saved_course(supabase_client, USER_ID, "Unknown") is False


class TestLearningProgress:
    """Tests for learning progress queries."""

    @pytest.mark.asyncio
    async def test_get_course_progress_missing(self, supabase_client):
        chain = supabase_client.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.execute.return_value = _response([])

        assert await get_course_progress(supabase_client, USER_ID, "Guitar Basics") is None

    @pytest.mark.asyncio
    async def test_update_derives_status(self, supabase_client):
        row = {"course_title": "Guitar Basics", "progress_percentage": 100, "status": "completed"}
        supabase_client.table.return_value.upsert.return_value.execute.return_value = _response([row])

        await update_course_progress(supabase_client, USER_ID, "Guitar Basics", 100)

        supabase_client.table.assert_called_with(LEARNING_PROGRESS_TABLE)
        payload = supabase_client.table.return_value.upsert.call_args.args[0]
        assert payload["status"] == "completed"
        assert payload["progress_percentage"] == 100

    @pytest.mark.asyncio
    async def test_update_keeps_explicit_status(self, supabase_client):
        supabase_client.table.return_value.upsert.return_value.execute.return_value = _response([{}])

        await update_course_progress(supabase_client, USER_ID, "Guitar Basics", 0, status="in_progress")

        payload = supabase_client.table.return_value.upsert.call_args.args[0]
        assert payload["status"] == "in_progress"
