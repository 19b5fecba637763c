"""
Quiz response service.

Stores one row per quiz session in the Supabase table `quiz_responses`
and aggregates answer statistics for the booth leaderboard.

Table columns: id (uuid), session_id (unique), language, framework, ide,
vibe, created_at, updated_at.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, cast

from supabase import Client

from coffee_backend.utils.constants import QUIZ_RESPONSES_TABLE

logger = logging.getLogger(__name__)

STATS_FIELDS = ("language", "framework", "ide", "vibe")


class QuizResponseStoreError(Exception):
    """The store accepted a write but returned no row."""


async def save_quiz_response(
    supabase_client: Client,
    session_id: str,
    language: str,
    framework: str,
    ide: str,
    vibe: str,
) -> Dict[str, Any]:
    """
    Save or overwrite the quiz answers of a session (upsert on session_id).

    Args:
        supabase_client: Supabase client
        session_id: Opaque client-generated session id
        language: Programming language answer
        framework: Framework answer
        ide: IDE answer
        vibe: Coding philosophy answer

    Returns:
        The stored row

    Raises:
        QuizResponseStoreError: If the upsert returned no data
    """
    logger.info(f"Saving quiz response for session {session_id}")

    row = {
        "session_id": session_id,
        "language": language,
        "framework": framework,
        "ide": ide,
        "vibe": vibe,
        "updated_at": datetime.now(timezone.utc).isoformat(),
    }

    result = (
        supabase_client.table(QUIZ_RESPONSES_TABLE)
        .upsert(row, on_conflict="session_id")
        .execute()
    )

    if not result.data or len(result.data) == 0:
        raise QuizResponseStoreError("Failed to save quiz response: no data returned")

    saved: Dict[str, Any] = cast(Dict[str, Any], result.data[0])
    logger.info(f"Quiz response saved for session {session_id}")
    return saved


async def get_quiz_response(
    supabase_client: Client,
    session_id: str,
) -> Optional[Dict[str, Any]]:
    """Fetch the stored answers of a session, or None."""
    logger.debug(f"Fetching quiz response for session {session_id}")

    result = (
        supabase_client.table(QUIZ_RESPONSES_TABLE)
        .select("*")
        .eq("session_id", session_id)
        .execute()
    )

    if not result.data or len(result.data) == 0:
        logger.info(f"No quiz response found for session {session_id}")
        return None

    return cast(Dict[str, Any], result.data[0])


async def list_quiz_responses(supabase_client: Client) -> List[Dict[str, Any]]:
    """Fetch every stored response, newest first."""
    result = (
        supabase_client.table(QUIZ_RESPONSES_TABLE)
        .select("*")
        .order("created_at", desc=True)
        .execute()
    )

    responses = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Fetched {len(responses)} quiz responses")
    return responses


async def delete_quiz_response(supabase_client: Client, session_id: str) -> bool:
    """
    Delete the stored answers of a session.

    Returns:
        True if a row was deleted, False if the session was unknown
    """
    logger.info(f"Deleting quiz response for session {session_id}")

    result = (
        supabase_client.table(QUIZ_RESPONSES_TABLE)
        .delete()
        .eq("session_id", session_id)
        .execute()
    )

    deleted = bool(result.data)
    if not deleted:
        logger.info(f"Nothing to delete for session {session_id}")
    return deleted


async def get_response_stats(supabase_client: Client) -> Dict[str, Any]:
    """
    Count answers per value for each quiz question.

    Returns:
        {"total_responses": int, "language_stats": {...}, "framework_stats": {...},
         "ide_stats": {...}, "vibe_stats": {...}}; each stats dict is ordered
        by count, most popular first
    """
    result = (
        supabase_client.table(QUIZ_RESPONSES_TABLE)
        .select(", ".join(STATS_FIELDS))
        .execute()
    )

    rows = cast(List[Dict[str, Any]], result.data or [])

    stats: Dict[str, Any] = {"total_responses": len(rows)}
    for field in STATS_FIELDS:
        counts = Counter(str(row[field]) for row in rows if row.get(field) is not None)
        stats[f"{field}_stats"] = dict(counts.most_common())

    logger.info(f"Computed quiz statistics over {len(rows)} responses")
    return stats
