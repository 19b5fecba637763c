"""
Pydantic schemas for quiz response persistence and statistics.

Rows live in the Supabase table `quiz_responses` (snake_case columns);
the API exposes them with camelCase keys.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from coffee_backend.schemas.recommendations import ProgrammingLanguage


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# REQUEST MODELS
# ============================================================================

class QuizResponseSaveRequest(_CamelModel):
    """
    Request to save (or overwrite) the quiz answers of one session.

    The session id is generated by the browser and stored in sessionStorage.
    """
    session_id: str = Field(
        ...,
        description="Opaque client-generated session identifier",
        min_length=1,
        max_length=255,
        examples=["session_1717171717_k3j4h5g6"]
    )
    language: ProgrammingLanguage
    framework: str = Field(..., min_length=1, max_length=100)
    ide: str = Field(..., min_length=1, max_length=100)
    vibe: str = Field(..., min_length=1, max_length=100)


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class QuizResponse(_CamelModel):
    """A stored quiz response."""
    id: Optional[str] = None
    session_id: str
    language: str
    framework: str
    ide: str
    vibe: str
    created_at: str
    updated_at: str


class QuizResponseDeleteResponse(BaseModel):
    """Response for DELETE /api/responses."""
    message: str = Field(
        "Quiz response deleted successfully",
        examples=["Quiz response deleted successfully"]
    )


class ResponseStats(_CamelModel):
    """
    Aggregated answer counts.

    Each map is ordered by count, most popular first.
    """
    total_responses: int = Field(..., ge=0)
    language_stats: Dict[str, int] = Field(default_factory=dict)
    framework_stats: Dict[str, int] = Field(default_factory=dict)
    ide_stats: Dict[str, int] = Field(default_factory=dict)
    vibe_stats: Dict[str, int] = Field(default_factory=dict)
