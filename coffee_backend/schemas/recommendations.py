"""
Pydantic schemas for the coffee recommendation endpoint.

These models define the strict request/response contracts of
POST /api/recommendation. Responses are serialized with camelCase keys
(coffeeName, flavorProfile, reasoning) because that is what the quiz
frontend reads.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ProgrammingLanguage = Literal["Node.js", "Python", "Java", "Go", "Ruby", ".NET", "PHP"]


# ============================================================================
# REQUEST MODELS
# ============================================================================

class PreferenceRequest(BaseModel):
    """
    The four quiz answers of one visitor.

    Built once per quiz submission and never mutated. Unknown keys in the
    raw body (e.g. sessionId) are ignored here; the route reads them itself.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    language: ProgrammingLanguage = Field(
        ...,
        description="Preferred programming language (closed set)",
        examples=["Node.js", "Go"]
    )
    framework: str = Field(
        ...,
        description="Selected framework",
        min_length=1,
        examples=["Express.js", "Gin"]
    )
    ide: str = Field(
        ...,
        description="Preferred IDE or editor",
        min_length=1,
        examples=["VS Code", "NeoVim"]
    )
    vibe: str = Field(
        ...,
        description="Coding philosophy picked on the last quiz screen",
        min_length=1,
        examples=["elegantly-simple", "cutting-edge-explorer"]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RecommendationResult(BaseModel):
    """
    Coffee recommendation returned to the client.

    All three fields are non-empty; a result is either fully populated or
    not created at all.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    coffee_name: str = Field(
        ...,
        description="Creative, tech-themed coffee name",
        min_length=1,
        examples=["Async Espresso"]
    )
    flavor_profile: str = Field(
        ...,
        description="Sensory description of the coffee",
        min_length=1,
        examples=["Bold and efficient with notes of vanilla and a smooth, non-blocking finish"]
    )
    reasoning: str = Field(
        ...,
        description="Witty explanation connecting the coffee to the developer's choices",
        min_length=1
    )


class ApiErrorResponse(BaseModel):
    """Error body shared by all endpoints."""
    error: str = Field(..., examples=["Invalid request format", "Method not allowed"])
    status: int = Field(..., examples=[400, 405])
    details: Optional[str] = Field(
        None,
        examples=["language: Input should be 'Node.js', 'Python', 'Java', 'Go', 'Ruby', '.NET' or 'PHP'"]
    )
