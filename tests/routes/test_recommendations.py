"""
Tests for POST /api/recommendation.

Tests cover:
- Successful recommendation with camelCase output
- Fallback when the model is unavailable
- Request validation (400) and wrong verbs (405)
- Optional sessionId persistence in the background
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from coffee_backend.agents.sommelier import GeneratorConfig, SommelierGenerator
from coffee_backend.main import app
from coffee_backend.routes.recommendations import get_sommelier_generator

client = TestClient(app)

ROUTES = "coffee_backend.routes.recommendations"

MODEL_REPLY = {
    "coffeeName": "Callback Cortado",
    "flavorProfile": "Short, sweet, resolves quickly",
    "reasoning": "Express.js middleware chains deserve a drink that never blocks.",
}


def _override_generator(gemini_client):
    generator = SommelierGenerator(GeneratorConfig(api_key="test-key"), client=gemini_client)
    app.dependency_overrides[get_sommelier_generator] = lambda: generator


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def working_model(gemini_client_factory):
    gemini = gemini_client_factory(text=f"```json\n{json.dumps(MODEL_REPLY)}\n```")
    _override_generator(gemini)
    return gemini


@pytest.fixture
def broken_model(gemini_client_factory):
    gemini = gemini_client_factory(side_effect=RuntimeError("API key not valid"))
    _override_generator(gemini)
    return gemini


class TestRecommendationSuccess:

    def test_returns_model_recommendation(self, working_model, node_request_body):
        response = client.post("/api/recommendation", json=node_request_body)

        assert response.status_code == 200
        assert response.json() == MODEL_REPLY

    def test_response_uses_camel_case_keys(self, working_model, go_request_body):
        response = client.post("/api/recommendation", json=go_request_body)

        assert set(response.json()) == {"coffeeName", "flavorProfile", "reasoning"}

    def test_model_failure_returns_fallback(self, broken_model, go_request_body):
        response = client.post("/api/recommendation", json=go_request_body)

        assert response.status_code == 200
        data = response.json()
        assert data["coffeeName"] == "Concurrent Cold Brew"
        assert "Gin" in data["reasoning"]
        assert "cutting-edge-explorer" in data["reasoning"]

    def test_unparseable_reply_is_still_200(self, gemini_client_factory, node_request_body):
        _override_generator(gemini_client_factory(text="Honestly? Just drink water."))

        response = client.post("/api/recommendation", json=node_request_body)

        assert response.status_code == 200
        assert response.json()["reasoning"] == "Honestly? Just drink water."


class TestRecommendationValidation:

    def test_malformed_json_is_rejected(self, working_model):
        response = client.post(
            "/api/recommendation",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request format"
        assert data["status"] == 400
        assert data["details"] == "Request body must be valid JSON"
        working_model.aio.models.generate_content.assert_not_called()

    def test_unsupported_language(self, working_model, go_request_body):
        response = client.post(
            "/api/recommendation",
            json=dict(go_request_body, language="COBOL"),
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request format"
        assert "language" in data["details"]
        working_model.aio.models.generate_content.assert_not_called()

    def test_missing_fields(self, working_model):
        response = client.post("/api/recommendation", json={"language": "Python"})

        assert response.status_code == 400
        details = response.json()["details"]
        for field in ("framework", "ide", "vibe"):
            assert field in details

    def test_json_array_body(self, working_model):
        response = client.post("/api/recommendation", json=["Go", "Gin"])

        assert response.status_code == 400

    @pytest.mark.parametrize("method", ["get", "put", "delete", "patch"])
    def test_other_methods_not_allowed(self, working_model, method):
        response = getattr(client, method)("/api/recommendation")

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed", "status": 405}
        working_model.aio.models.generate_content.assert_not_called()


class TestRecommendationPersistence:

    def test_session_id_saves_answers(self, working_model, go_request_body):
        with patch(f"{ROUTES}.get_supabase_client") as mock_get_client, \
                patch(f"{ROUTES}.save_quiz_response", new_callable=AsyncMock) as mock_save:
            response = client.post(
                "/api/recommendation",
                json=dict(go_request_body, sessionId="session_1_abc"),
            )

        assert response.status_code == 200
        mock_save.assert_awaited_once()
        kwargs = mock_save.call_args.kwargs
        assert kwargs["supabase_client"] is mock_get_client.return_value
        assert kwargs["session_id"] == "session_1_abc"
        assert kwargs["language"] == "Go"
        assert kwargs["framework"] == "Gin"
        assert kwargs["ide"] == "VS Code"
        assert kwargs["vibe"] == "cutting-edge-explorer"

    def test_no_session_id_skips_persistence(self, working_model, go_request_body):
        with patch(f"{ROUTES}.save_quiz_response", new_callable=AsyncMock) as mock_save:
            response = client.post("/api/recommendation", json=go_request_body)

        assert response.status_code == 200
        mock_save.assert_not_called()

    def test_persistence_failure_does_not_affect_response(self, working_model, go_request_body):
        with patch(f"{ROUTES}.get_supabase_client", return_value=MagicMock()), \
                patch(
                    f"{ROUTES}.save_quiz_response",
                    new_callable=AsyncMock,
                    side_effect=Exception("connection refused"),
                ):
            response = client.post(
                "/api/recommendation",
                json=dict(go_request_body, sessionId="session_2_def"),
            )

        assert response.status_code == 200
        assert response.json() == MODEL_REPLY

    def test_invalid_body_is_not_persisted(self, working_model):
        with patch(f"{ROUTES}.save_quiz_response", new_callable=AsyncMock) as mock_save:
            response = client.post(
                "/api/recommendation",
                json={"language": "Rust", "sessionId": "session_3"},
            )

        assert response.status_code == 400
        mock_save.assert_not_called()
