"""
AI Components for Hobby to Hustle Backend.

Contains the prompt layer for the Gemini-backed suggestion workflows:

1. Recommendation Prompts (Single-Shot LLM)
   - Hobby ideas, FREE course recommendations and trending hobbies
   - NOT an ADK agent - uses the Google Gen AI SDK directly
   - Located in: backend/agents/recommendation/

2. Default Batches
   - Deterministic fallback records served when the model output is unusable
   - Located in: backend/agents/recommendation/defaults.py

Invocation, JSON extraction and fallback selection live in
backend/services/recommendation_pipeline.py and
backend/services/recommendation_service.py.
"""

from backend.agents.recommendation import (
    build_course_recommendations_prompt,
    build_hobby_ideas_prompt,
    build_trending_hobbies_prompt,
)
from backend.agents.recommendation.defaults import (
    default_course_recommendations,
    default_hobby_ideas,
    default_trending_hobbies,
)

__all__ = [
    "build_hobby_ideas_prompt",
    "build_course_recommendations_prompt",
    "build_trending_hobbies_prompt",
    "default_hobby_ideas",
    "default_course_recommendations",
    "default_trending_hobbies",
]
