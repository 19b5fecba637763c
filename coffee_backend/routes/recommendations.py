"""
FastAPI routes for the coffee recommendation endpoint.

Endpoints:
- POST /api/recommendation: Generate a coffee recommendation for quiz answers

Any verb other than POST is answered with 405 by the router before the
body is read.
"""

import logging
from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status

from coffee_backend.agents.sommelier import GeneratorConfig, SommelierGenerator
from coffee_backend.config import settings
from coffee_backend.db.client import get_supabase_client
from coffee_backend.schemas.recommendations import (
    ApiErrorResponse,
    PreferenceRequest,
    RecommendationResult,
)
from coffee_backend.services import (
    PreferenceValidationError,
    recommend_for_preferences,
    save_quiz_response,
    validate_preferences,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["recommendations"]
)


@lru_cache(maxsize=1)
def get_sommelier_generator() -> SommelierGenerator:
    """Shared generator built from settings (overridden in tests)."""
    return SommelierGenerator(GeneratorConfig.from_settings(settings))


def _invalid_request(details: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error": "Invalid request format",
            "status": status.HTTP_400_BAD_REQUEST,
            "details": details,
        }
    )


def _extract_session_id(raw: Any) -> Optional[str]:
    """Optional sessionId sent alongside the answers."""
    if isinstance(raw, dict):
        session_id = raw.get("sessionId")
        if isinstance(session_id, str) and session_id.strip():
            return session_id
    return None


async def persist_quiz_response(session_id: str, preferences: PreferenceRequest) -> None:
    """
    Store the answers after the response has been sent.

    Failures are logged and dropped; they never reach the client.
    """
    try:
        await save_quiz_response(
            supabase_client=get_supabase_client(),
            session_id=session_id,
            language=preferences.language,
            framework=preferences.framework,
            ide=preferences.ide,
            vibe=preferences.vibe,
        )
    except Exception as e:
        logger.error(f"Failed to persist quiz response for session {session_id}: {e}")


@router.post(
    "/recommendation",
    response_model=RecommendationResult,
    status_code=200,
    responses={
        400: {"model": ApiErrorResponse, "description": "Invalid request body"},
        405: {"model": ApiErrorResponse, "description": "Method not allowed"},
    },
    summary="Generate a coffee recommendation",
    description="""
    Generates a coffee recommendation from the four quiz answers.

    **Body:** `{language, framework, ide, vibe}` plus an optional `sessionId`.
    `language` must be one of Node.js, Python, Java, Go, Ruby, .NET, PHP.

    **Behavior:**
    - Invalid JSON or invalid answers -> 400 with `{error, status, details}`
    - Otherwise always 200: the sommelier model's answer, or the static
      fallback recommendation when the model is unavailable
    - When `sessionId` is present the answers are stored after the
      response is sent; storage failures are ignored
    """
)
async def create_recommendation_endpoint(
    request: Request,
    background_tasks: BackgroundTasks,
    generator: SommelierGenerator = Depends(get_sommelier_generator),
) -> RecommendationResult:
    """
    Recommendation endpoint.

    - Parse: raw JSON body (malformed JSON is a client error)
    - Validate: PreferenceRequest via the service layer
    - Call service: knowledge lookup, sommelier, fallback table
    - Persistence: background task when a sessionId was sent
    """
    try:
        raw = await request.json()
    except ValueError:
        logger.info("POST /api/recommendation rejected: body is not valid JSON")
        raise _invalid_request("Request body must be valid JSON")

    try:
        preferences = validate_preferences(raw)
    except PreferenceValidationError as e:
        raise _invalid_request(e.details)

    logger.info(f"POST /api/recommendation called for language={preferences.language}")

    result = await recommend_for_preferences(preferences, generator)

    session_id = _extract_session_id(raw)
    if session_id:
        background_tasks.add_task(persist_quiz_response, session_id, preferences)

    return result
