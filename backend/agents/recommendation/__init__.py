"""
Recommendation prompts - Single-Shot LLM Architecture

This module contains the prompt templates for the three Gemini-backed
suggestion flows (hobby ideas, course recommendations, trending hobbies).

Architecture:
- Pattern: Single-shot LLM (one generate_content call, no tools)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Temperature: 0.8-0.9 (creative idea generation, variety over determinism)
- Output: JSON array parsed from free text (never trusted)

The service layer is in:
- backend/services/recommendation_service.py
- backend/services/recommendation_pipeline.py
"""

from backend.agents.recommendation.prompts import (
    COURSE_RECOMMENDATIONS_SYSTEM_PROMPT,
    HOBBY_IDEAS_SYSTEM_PROMPT,
    TRENDING_HOBBIES_SYSTEM_PROMPT,
    build_course_recommendations_prompt,
    build_hobby_ideas_prompt,
    build_trending_hobbies_prompt,
)

__all__ = [
    "HOBBY_IDEAS_SYSTEM_PROMPT",
    "COURSE_RECOMMENDATIONS_SYSTEM_PROMPT",
    "TRENDING_HOBBIES_SYSTEM_PROMPT",
    "build_hobby_ideas_prompt",
    "build_course_recommendations_prompt",
    "build_trending_hobbies_prompt",
]
