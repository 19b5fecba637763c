"""
Parsing of sommelier replies into RecommendationResult.

Gemini is asked for a bare JSON object but regularly wraps it in a
```json fenced block. Parsing is kept apart from the network call so it
can be tested on its own.

Two failure levels exist downstream of the model:
- reply unusable as JSON or missing a field: degraded result built from
  the raw text (this module)
- no reply at all: GenerationError, handled by the service with the
  fallback table (see agent.py)
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from coffee_backend.schemas.recommendations import RecommendationResult

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("coffeeName", "flavorProfile", "reasoning")

DEGRADED_COFFEE_NAME = "Developer's Choice Blend"
DEGRADED_FLAVOR_PROFILE = "Perfectly balanced for coding sessions"
DEGRADED_REASONING = "A coffee as reliable as your favorite IDE"

_JSON_FENCE_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)


def extract_json_payload(text: str) -> str:
    """Return the interior of a ```json fence if present, else the trimmed text."""
    stripped = text.strip()
    fence_match = _JSON_FENCE_PATTERN.search(stripped)
    if fence_match:
        return fence_match.group(1).strip()
    return stripped


def _load_fields(payload: str) -> Optional[Dict[str, str]]:
    """Decode the payload and check the three required fields, or return None."""
    try:
        data: Any = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.warning(f"Sommelier reply is not valid JSON: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Sommelier reply is JSON but not an object: {type(data).__name__}")
        return None

    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            logger.warning(f"Sommelier reply missing field: {field}")
            return None

    return {field: data[field] for field in REQUIRED_FIELDS}


def parse_recommendation_text(text: str) -> RecommendationResult:
    """
    Turn a model reply into a RecommendationResult.

    Never raises: when the reply cannot be fully parsed, the raw text
    becomes the reasoning and the other two fields get placeholders.

    Args:
        text: Raw text returned by the model

    Returns:
        RecommendationResult, either parsed or degraded
    """
    payload = extract_json_payload(text)
    fields = _load_fields(payload)

    if fields is None:
        logger.debug(f"Unparsed sommelier reply: {text[:500]}")
        return RecommendationResult(
            coffee_name=DEGRADED_COFFEE_NAME,
            flavor_profile=DEGRADED_FLAVOR_PROFILE,
            reasoning=text.strip() or DEGRADED_REASONING,
        )

    return RecommendationResult(
        coffee_name=fields["coffeeName"],
        flavor_profile=fields["flavorProfile"],
        reasoning=fields["reasoning"],
    )
