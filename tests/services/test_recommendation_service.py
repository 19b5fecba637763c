"""
Tests for the recommendation orchestrator.

These tests verify:
- Validation errors stop the pipeline before lookup, model or fallback
- Generator failures are answered with the fallback table
- Successful and degraded model replies are returned unchanged

Gemini is never called; the generator is either a fake or an AsyncMock.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from coffee_backend.agents.sommelier import (
    GenerationError,
    GeneratorConfig,
    KnowledgeEntry,
    SommelierGenerator,
)
from coffee_backend.agents.sommelier.knowledge import lookup as real_lookup
from coffee_backend.agents.sommelier.parsing import DEGRADED_COFFEE_NAME
from coffee_backend.schemas.recommendations import PreferenceRequest, RecommendationResult
from coffee_backend.services.fallback import fallback
from coffee_backend.services.recommendation_service import (
    KNOWLEDGE_QUERY,
    PreferenceValidationError,
    build_knowledge_context,
    recommend,
    recommend_for_preferences,
    validate_preferences,
)

SERVICE = "coffee_backend.services.recommendation_service"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def failing_generator():
    generator = MagicMock(spec=SommelierGenerator)
    generator.generate = AsyncMock(side_effect=GenerationError("quota exceeded"))
    return generator


@pytest.fixture
def stub_generator():
    generator = MagicMock(spec=SommelierGenerator)
    generator.generate = AsyncMock(return_value=RecommendationResult(
        coffee_name="Stub Roast",
        flavor_profile="Stubby",
        reasoning="Because tests.",
    ))
    return generator


# =============================================================================
# VALIDATION
# =============================================================================

class TestValidatePreferences:

    def test_valid_body(self, go_request_body):
        request = validate_preferences(go_request_body)
        assert request == PreferenceRequest(**go_request_body)

    def test_extra_keys_are_ignored(self, go_request_body):
        request = validate_preferences(dict(go_request_body, sessionId="abc"))
        assert request.language == "Go"

    def test_missing_fields_are_listed(self):
        with pytest.raises(PreferenceValidationError) as exc_info:
            validate_preferences({"language": "Python", "framework": "Django"})

        assert "ide" in exc_info.value.details
        assert "vibe" in exc_info.value.details

    def test_unsupported_language(self, go_request_body):
        with pytest.raises(PreferenceValidationError) as exc_info:
            validate_preferences(dict(go_request_body, language="Rust"))

        assert exc_info.value.details.startswith("language:")

    def test_empty_string_rejected(self, go_request_body):
        with pytest.raises(PreferenceValidationError) as exc_info:
            validate_preferences(dict(go_request_body, framework=""))

        assert "framework" in exc_info.value.details

    def test_non_string_rejected(self, go_request_body):
        with pytest.raises(PreferenceValidationError):
            validate_preferences(dict(go_request_body, ide=42))

    @pytest.mark.parametrize("raw", [None, [], "Go", 3])
    def test_non_object_body(self, raw):
        with pytest.raises(PreferenceValidationError) as exc_info:
            validate_preferences(raw)

        assert exc_info.value.details


# =============================================================================
# ORCHESTRATION
# =============================================================================

class TestRecommend:

    @pytest.mark.asyncio
    async def test_invalid_body_skips_everything(self, stub_generator):
        with patch(f"{SERVICE}.lookup") as mock_lookup, \
                patch(f"{SERVICE}.fallback") as mock_fallback:
            with pytest.raises(PreferenceValidationError):
                await recommend({"language": "Python"}, stub_generator)

        mock_lookup.assert_not_called()
        mock_fallback.assert_not_called()
        stub_generator.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_generator_result_returned_unchanged(self, stub_generator, node_request_body):
        result = await recommend(node_request_body, stub_generator)

        assert result.coffee_name == "Stub Roast"
        assert result.flavor_profile == "Stubby"
        assert result.reasoning == "Because tests."

    @pytest.mark.asyncio
    async def test_generation_failure_returns_fallback(self, failing_generator, go_request_body):
        result = await recommend(go_request_body, failing_generator)

        assert result == fallback(PreferenceRequest(**go_request_body))
        assert result.coffee_name == "Concurrent Cold Brew"

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_fallback(self, go_request_body):
        generator = MagicMock(spec=SommelierGenerator)
        generator.generate = AsyncMock(side_effect=KeyError("boom"))

        result = await recommend(go_request_body, generator)

        assert result == fallback(PreferenceRequest(**go_request_body))

    @pytest.mark.asyncio
    async def test_no_generator_returns_fallback(self, node_request_body):
        result = await recommend(node_request_body, None)

        assert result.coffee_name == "Async Espresso"

    @pytest.mark.asyncio
    async def test_lookup_receives_fixed_query_and_answers(self, stub_generator, go_request_body):
        with patch(f"{SERVICE}.lookup", wraps=real_lookup) as spy:
            await recommend(go_request_body, stub_generator)

        query, context = spy.call_args.args
        assert query == KNOWLEDGE_QUERY
        assert context == "Go Gin VS Code cutting-edge-explorer developer preferences"

        knowledge = stub_generator.generate.call_args.args[1]
        assert isinstance(knowledge, KnowledgeEntry)


class TestRecommendWithFakeGemini:
    """End-to-end through the real SommelierGenerator with a fake client."""

    @pytest.mark.asyncio
    async def test_model_reply_passes_through(self, gemini_client_factory, node_request_body):
        reply = {"coffeeName": "X", "flavorProfile": "Y", "reasoning": "Z"}
        client = gemini_client_factory(text=json.dumps(reply))
        generator = SommelierGenerator(GeneratorConfig(api_key="k"), client=client)

        result = await recommend(node_request_body, generator)

        assert (result.coffee_name, result.flavor_profile, result.reasoning) == ("X", "Y", "Z")

    @pytest.mark.asyncio
    async def test_degraded_reply_is_not_replaced_by_fallback(
        self, gemini_client_factory, node_request_body
    ):
        client = gemini_client_factory(text="A flat white. No JSON today.")
        generator = SommelierGenerator(GeneratorConfig(api_key="k"), client=client)

        result = await recommend(node_request_body, generator)

        assert result.coffee_name == DEGRADED_COFFEE_NAME
        assert result.reasoning == "A flat white. No JSON today."

    @pytest.mark.asyncio
    async def test_transport_error_falls_back(self, gemini_client_factory, node_request_body):
        client = gemini_client_factory(side_effect=ConnectionError("network down"))
        generator = SommelierGenerator(GeneratorConfig(api_key="k"), client=client)

        result = await recommend_for_preferences(PreferenceRequest(**node_request_body), generator)

        assert result.coffee_name == "Async Espresso"
        assert "Express.js" in result.reasoning


def test_build_knowledge_context(node_request_body):
    request = PreferenceRequest(**node_request_body)
    assert build_knowledge_context(request) == (
        "Node.js Express.js VS Code elegantly-simple developer preferences"
    )
