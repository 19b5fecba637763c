"""
Coffee Sommelier Generator

Single-shot LLM workflow: one prompt built from the quiz answers and the
knowledge lookup, one Gemini call, one parsed RecommendationResult.

Configuration is explicit (GeneratorConfig) and handed to the generator at
construction time; nothing is read from the environment at call time.

Failure contract:
- any problem reaching the model (no API key, transport error, auth,
  quota, timeout, empty reply) raises GenerationError
- a reply that arrives but does not parse yields a degraded result
  (see parsing.py), never an exception
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

from google import genai
from google.genai import types

from coffee_backend.agents.sommelier.knowledge import KnowledgeEntry
from coffee_backend.agents.sommelier.parsing import parse_recommendation_text
from coffee_backend.agents.sommelier.prompts import (
    SOMMELIER_SYSTEM_PROMPT,
    build_sommelier_user_prompt,
)
from coffee_backend.config import Settings
from coffee_backend.schemas.recommendations import PreferenceRequest, RecommendationResult

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The model could not be reached or returned nothing usable."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Connection and sampling settings for the sommelier model."""
    api_key: str
    model: str = "gemini-2.5-flash"
    temperature: float = 0.8
    timeout_seconds: float = 20.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeneratorConfig":
        return cls(
            api_key=settings.GOOGLE_API_KEY,
            model=settings.GEMINI_MODEL,
            temperature=settings.GENERATION_TEMPERATURE,
            timeout_seconds=settings.GENERATION_TIMEOUT_SECONDS,
        )


def _extract_response_text(response: Any) -> Optional[str]:
    """Get the reply text, preferring candidate parts over response.text."""
    # response.text can be None even when parts carry text
    candidates = getattr(response, "candidates", None)
    if candidates:
        candidate = candidates[0]
        if candidate.content and candidate.content.parts:
            for part in candidate.content.parts:
                if getattr(part, "text", None):
                    return part.text
    return response.text


class SommelierGenerator:
    """
    Generates coffee recommendations with Gemini.

    Args:
        config: Model settings
        client: Optional pre-built genai.Client (tests inject a fake)
    """

    def __init__(self, config: GeneratorConfig, client: Optional[Any] = None):
        self.config = config
        self._client = client

    def _get_client(self) -> Any:
        """Lazy initialization of the Gemini client."""
        if self._client is not None:
            return self._client

        if not self.config.api_key:
            raise GenerationError("GOOGLE_API_KEY is not configured")

        try:
            self._client = genai.Client(api_key=self.config.api_key)
        except Exception as e:
            raise GenerationError(f"Failed to initialize Gemini client: {e}") from e

        logger.info("Gemini client initialized for the coffee sommelier")
        return self._client

    async def generate(
        self,
        request: PreferenceRequest,
        knowledge: KnowledgeEntry,
    ) -> RecommendationResult:
        """
        Ask the model for a recommendation.

        Args:
            request: Validated quiz answers
            knowledge: Knowledge lookup result used as prompt grounding

        Returns:
            Parsed (or degraded) RecommendationResult

        Raises:
            GenerationError: The model call failed, timed out or returned no text
        """
        client = self._get_client()

        user_prompt = build_sommelier_user_prompt(
            language=request.language,
            framework=request.framework,
            ide=request.ide,
            vibe=request.vibe,
            knowledge=knowledge.knowledge,
            suggestions=knowledge.suggestions,
        )

        generation_config = types.GenerateContentConfig(
            system_instruction=SOMMELIER_SYSTEM_PROMPT,
            temperature=self.config.temperature,
        )

        logger.info(f"Calling Gemini model={self.config.model} for language={request.language}")

        try:
            # wait_for cancels the outbound request when the timeout expires
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.config.model,
                    contents=user_prompt,
                    config=generation_config,
                ),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise GenerationError(
                f"Gemini call timed out after {self.config.timeout_seconds}s"
            ) from e
        except Exception as e:
            raise GenerationError(f"Error calling Gemini API: {e}") from e

        text = _extract_response_text(response)
        if not text or not text.strip():
            raise GenerationError("Empty text in Gemini response")

        logger.debug(f"Raw sommelier reply: {text[:200]}...")
        return parse_recommendation_text(text)
