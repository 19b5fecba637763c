"""
Coffee Sommelier Package

Everything needed to turn four quiz answers into a model-written coffee
recommendation.

Main Components:
- knowledge: static coffee knowledge lookup (pure)
- prompts: system prompt and user prompt builder
- parsing: fence stripping, JSON decoding, degraded results
- agent: SommelierGenerator, the single Gemini call

The orchestration (validation, fallback table) lives in
coffee_backend/services/recommendation_service.py.
"""

from coffee_backend.agents.sommelier.agent import (
    GenerationError,
    GeneratorConfig,
    SommelierGenerator,
)
from coffee_backend.agents.sommelier.knowledge import KnowledgeEntry, lookup
from coffee_backend.agents.sommelier.parsing import (
    extract_json_payload,
    parse_recommendation_text,
)
from coffee_backend.agents.sommelier.prompts import (
    SOMMELIER_SYSTEM_PROMPT,
    build_sommelier_user_prompt,
)

__all__ = [
    "GenerationError",
    "GeneratorConfig",
    "SommelierGenerator",
    "KnowledgeEntry",
    "lookup",
    "extract_json_payload",
    "parse_recommendation_text",
    "SOMMELIER_SYSTEM_PROMPT",
    "build_sommelier_user_prompt",
]
