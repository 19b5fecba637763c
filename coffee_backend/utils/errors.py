"""
Helpers for rendering validation errors in API error bodies.
"""

from typing import Any, Dict, Sequence


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Flatten pydantic error dicts into "field: message, field: message".

    The leading "body" location segment added by FastAPI is dropped.

    >>> format_validation_errors([{"loc": ("body", "ide"), "msg": "Field required"}])
    'ide: Field required'
    """
    parts = []
    for error in errors:
        location = [str(item) for item in error.get("loc", ())]
        if location and location[0] == "body":
            location = location[1:]
        field = ".".join(location) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return ", ".join(parts)
