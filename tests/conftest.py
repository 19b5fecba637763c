"""
Pytest configuration for Code & Coffee backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client.
    Returns a MagicMock that simulates the chained query builder.
    """
    mock_client = MagicMock()
    return mock_client


@pytest.fixture
def go_request_body():
    return {
        "language": "Go",
        "framework": "Gin",
        "ide": "VS Code",
        "vibe": "cutting-edge-explorer",
    }


@pytest.fixture
def node_request_body():
    return {
        "language": "Node.js",
        "framework": "Express.js",
        "ide": "VS Code",
        "vibe": "elegantly-simple",
    }


def make_gemini_response(text):
    """Fake google-genai response exposing only .text."""
    response = MagicMock()
    response.candidates = []
    response.text = text
    return response


def make_gemini_client(text=None, side_effect=None):
    """Fake genai.Client whose aio.models.generate_content is awaitable."""
    client = MagicMock()
    if side_effect is not None:
        client.aio.models.generate_content = AsyncMock(side_effect=side_effect)
    else:
        client.aio.models.generate_content = AsyncMock(return_value=make_gemini_response(text))
    return client


@pytest.fixture
def gemini_client_factory():
    """Build fake Gemini clients: factory(text=...) or factory(side_effect=...)."""
    return make_gemini_client
