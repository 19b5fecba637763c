"""
Quiz option catalogue.

Serves the answers shown on the four quiz screens so the frontend and the
recommendation validator share one list of supported languages.
"""

from fastapi import APIRouter

from coffee_backend.schemas.quiz import QuizOption, QuizOptionsResponse
from coffee_backend.utils.constants import (
    FRAMEWORKS_BY_LANGUAGE,
    IDES,
    SUPPORTED_LANGUAGES,
    VIBES,
)
from coffee_backend.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.get(
    "/options",
    response_model=QuizOptionsResponse,
    summary="List quiz answers",
)
async def get_quiz_options() -> QuizOptionsResponse:
    logger.debug("Quiz options requested")

    return QuizOptionsResponse(
        languages=[QuizOption(value=lang, label=lang) for lang in SUPPORTED_LANGUAGES],
        frameworks={
            lang: [QuizOption(value=name, label=name) for name in names]
            for lang, names in FRAMEWORKS_BY_LANGUAGE.items()
        },
        ides=[QuizOption(**ide) for ide in IDES],
        vibes=[QuizOption(**vibe) for vibe in VIBES],
    )
