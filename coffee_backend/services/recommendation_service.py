"""
Recommendation Service - Coffee Sommelier with static fallback

Orchestrates one coffee recommendation:

1. Validate the raw body into a PreferenceRequest (client error on failure)
2. Knowledge lookup with a fixed query and the quiz answers as context
3. Sommelier generation (single Gemini call)
4. On any generation failure, the static fallback table

Only step 1 can surface an error to the caller. Everything after a
successful validation returns a RecommendationResult.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from coffee_backend.agents.sommelier import GenerationError, SommelierGenerator, lookup
from coffee_backend.schemas.recommendations import PreferenceRequest, RecommendationResult
from coffee_backend.services.fallback import fallback
from coffee_backend.utils.errors import format_validation_errors

logger = logging.getLogger(__name__)

KNOWLEDGE_QUERY = "flavor profile brewing method roast level origin"


class PreferenceValidationError(Exception):
    """The submitted quiz answers do not match the PreferenceRequest shape."""

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details


def validate_preferences(raw: Any) -> PreferenceRequest:
    """
    Validate an untyped request body.

    Raises:
        PreferenceValidationError: With a human-readable description of every problem
    """
    try:
        return PreferenceRequest.model_validate(raw)
    except ValidationError as e:
        details = format_validation_errors(e.errors())
        logger.info(f"Rejected recommendation request: {details}")
        raise PreferenceValidationError(details) from e


def build_knowledge_context(request: PreferenceRequest) -> str:
    """Context string handed to the knowledge lookup."""
    return (
        f"{request.language} {request.framework} {request.ide} {request.vibe} "
        "developer preferences"
    )


async def recommend_for_preferences(
    request: PreferenceRequest,
    generator: Optional[SommelierGenerator],
) -> RecommendationResult:
    """
    Produce a recommendation for already-validated answers.

    Never raises. A missing generator or any generation failure is answered
    with the fallback table entry for the request.
    """
    logger.info(
        f"Recommendation requested: language={request.language}, "
        f"framework={request.framework}, ide={request.ide}, vibe={request.vibe}"
    )

    knowledge = lookup(KNOWLEDGE_QUERY, build_knowledge_context(request))

    if generator is None:
        logger.warning("Sommelier generator not available, using fallback table")
        return fallback(request)

    try:
        result = await generator.generate(request, knowledge)
    except GenerationError as e:
        logger.warning(f"Sommelier generation failed, using fallback table: {e}")
        return fallback(request)
    except Exception as e:
        logger.error(f"Unexpected sommelier error, using fallback table: {e}", exc_info=True)
        return fallback(request)

    logger.info(f"Returning recommendation coffee_name='{result.coffee_name}'")
    return result


async def recommend(
    raw: Any,
    generator: Optional[SommelierGenerator],
) -> RecommendationResult:
    """
    Validate a raw request body and produce a recommendation.

    Args:
        raw: Decoded JSON body (any shape)
        generator: Sommelier generator, or None to go straight to the fallback table

    Returns:
        RecommendationResult with three non-empty fields

    Raises:
        PreferenceValidationError: The body is not a valid PreferenceRequest.
            No knowledge lookup, model call or fallback happens in that case.
    """
    request = validate_preferences(raw)
    return await recommend_for_preferences(request, generator)
