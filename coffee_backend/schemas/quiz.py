"""
Schemas for the quiz option catalogue (GET /api/quiz/options).
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class QuizOption(BaseModel):
    """A single selectable answer on a quiz screen."""
    value: str
    label: str
    description: Optional[str] = None


class QuizOptionsResponse(BaseModel):
    """All answers offered by the four quiz screens."""
    languages: List[QuizOption] = Field(..., min_length=1)
    frameworks: Dict[str, List[QuizOption]]
    ides: List[QuizOption]
    vibes: List[QuizOption]
