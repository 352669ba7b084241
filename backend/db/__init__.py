"""
Database access layer for Hobby to Hustle backend.

All database operations MUST:
- Respect Row Level Security (RLS): user_id = auth.uid()
- Use a per-request client created from the user's access token

Tables used by the learning hub:
- saved_course       (user_id, course_title) unique
- learning_progress  (user_id, course_title) unique
"""

from .client import get_supabase_client

__all__ = ["get_supabase_client"]
