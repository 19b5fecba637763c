"""
Quiz response API endpoints.

Endpoints:
- GET    /api/responses             All responses (newest first)
- GET    /api/responses?sessionId=  One session's response
- GET    /api/responses?stats=true  Answer statistics
- POST   /api/responses             Save/overwrite a session's answers
- DELETE /api/responses?sessionId=  Delete a session's answers
- GET    /api/stats                 Answer statistics
"""

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from supabase import Client

from coffee_backend.db.client import get_supabase_client
from coffee_backend.schemas.quiz_responses import (
    QuizResponse,
    QuizResponseDeleteResponse,
    QuizResponseSaveRequest,
    ResponseStats,
)
from coffee_backend.services import (
    delete_quiz_response,
    get_quiz_response,
    get_response_stats,
    list_quiz_responses,
    save_quiz_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz responses"])


def _as_str(val: Any) -> str:
    """Coerce optional DB values into strings for required fields."""
    return str(val) if val is not None else ""


def _to_quiz_response(row: Dict[str, Any]) -> QuizResponse:
    return QuizResponse(
        id=_as_str(row.get("id")) or None,
        session_id=_as_str(row.get("session_id")),
        language=_as_str(row.get("language")),
        framework=_as_str(row.get("framework")),
        ide=_as_str(row.get("ide")),
        vibe=_as_str(row.get("vibe")),
        created_at=_as_str(row.get("created_at")),
        updated_at=_as_str(row.get("updated_at")),
    )


def _internal_error(message: str = "Internal server error") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": message, "status": status.HTTP_500_INTERNAL_SERVER_ERROR}
    )


@router.get(
    "/responses",
    response_model=Union[ResponseStats, QuizResponse, List[QuizResponse]],
    status_code=status.HTTP_200_OK,
    summary="Get quiz responses",
    description="""
    Without parameters returns every stored response, newest first.

    - `sessionId`: return only that session's response (404 if unknown)
    - `stats=true`: return answer statistics instead
    """
)
async def get_responses(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    stats: Optional[str] = Query(None),
    supabase_client: Client = Depends(get_supabase_client),
) -> Union[ResponseStats, QuizResponse, List[QuizResponse]]:
    try:
        if stats == "true":
            return ResponseStats(**await get_response_stats(supabase_client))

        if session_id:
            row = await get_quiz_response(supabase_client, session_id)
            if not row:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail={"error": "Quiz response not found", "status": status.HTTP_404_NOT_FOUND}
                )
            return _to_quiz_response(row)

        rows = await list_quiz_responses(supabase_client)
        return [_to_quiz_response(row) for row in rows]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in GET /api/responses: {e}", exc_info=True)
        raise _internal_error()


@router.post(
    "/responses",
    response_model=QuizResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save quiz response",
    description="""
    Saves the four quiz answers of a session. A second save for the same
    `sessionId` overwrites the first one.
    """
)
async def save_response(
    request: QuizResponseSaveRequest,
    supabase_client: Client = Depends(get_supabase_client),
) -> QuizResponse:
    """
    Parse/Validate: FastAPI validates QuizResponseSaveRequest (400 on failure)
    Persistence: upsert on session_id
    """
    try:
        saved = await save_quiz_response(
            supabase_client=supabase_client,
            session_id=request.session_id,
            language=request.language,
            framework=request.framework,
            ide=request.ide,
            vibe=request.vibe,
        )
    except Exception as e:
        logger.error(f"Error in POST /api/responses: {e}", exc_info=True)
        raise _internal_error()

    return _to_quiz_response(saved)


@router.delete(
    "/responses",
    response_model=QuizResponseDeleteResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete quiz response",
)
async def delete_response(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    supabase_client: Client = Depends(get_supabase_client),
) -> QuizResponseDeleteResponse:
    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Session ID is required", "status": status.HTTP_400_BAD_REQUEST}
        )

    try:
        deleted = await delete_quiz_response(supabase_client, session_id)
    except Exception as e:
        logger.error(f"Error in DELETE /api/responses: {e}", exc_info=True)
        raise _internal_error()

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Quiz response not found", "status": status.HTTP_404_NOT_FOUND}
        )

    return QuizResponseDeleteResponse(message="Quiz response deleted successfully")


@router.get(
    "/stats",
    response_model=ResponseStats,
    status_code=status.HTTP_200_OK,
    summary="Get answer statistics",
)
async def get_stats(
    supabase_client: Client = Depends(get_supabase_client),
) -> ResponseStats:
    try:
        return ResponseStats(**await get_response_stats(supabase_client))
    except Exception as e:
        logger.error(f"Error fetching statistics: {e}", exc_info=True)
        raise _internal_error("Failed to fetch statistics")
