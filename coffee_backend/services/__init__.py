"""
Service layer for the Code & Coffee backend.

Contains business logic orchestration that:
- Validates quiz answers and runs the recommendation pipeline
- Substitutes the static fallback table when generation fails
- Handles persistence of quiz responses through the Supabase client

Services act as the glue between routes (HTTP layer) and agents/database.
"""

from .fallback import fallback
from .quiz_response_service import (
    QuizResponseStoreError,
    delete_quiz_response,
    get_quiz_response,
    get_response_stats,
    list_quiz_responses,
    save_quiz_response,
)
from .recommendation_service import (
    PreferenceValidationError,
    recommend,
    recommend_for_preferences,
    validate_preferences,
)

__all__ = [
    "fallback",
    "recommend",
    "recommend_for_preferences",
    "validate_preferences",
    "PreferenceValidationError",
    "save_quiz_response",
    "get_quiz_response",
    "list_quiz_responses",
    "delete_quiz_response",
    "get_response_stats",
    "QuizResponseStoreError",
]
