"""Gemini-powered coaching feedback for tracked activities."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Protocol

from app.exceptions import AITransportError
from app.models.database_models import Recommendation
from app.services.gemini_client import GeminiClient
from app.services.prompt_builder import PromptBuilder
from app.services.recommendation_builder import assemble_recommendation


logger = logging.getLogger(__name__)


class AITransport(Protocol):
    """Anything that can send a prompt and return the raw response text."""

    async def send(self, prompt: str) -> str: ...


class ActivityAnalyzer:
    """Generates a Recommendation for a single activity.

    Holds no per-request state, so one instance can serve concurrent
    activities.
    """

    def __init__(
        self,
        transport: AITransport | None = None,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self.transport = transport if transport is not None else GeminiClient()
        self.prompt_builder = prompt_builder if prompt_builder is not None else get_prompt_builder()

    async def generate_recommendation(self, activity: Any) -> Recommendation:
        """
        Analyze ``activity`` with Gemini and return structured feedback.

        Always returns a Recommendation. Transport and parse failures fall
        back to the default recommendation instead of raising.
        """
        logger.info("Generating recommendation for activity %s (type=%s)", activity.id, activity.type)
        prompt = self.prompt_builder.build(activity)

        raw_response: str | None
        try:
            raw_response = await self.transport.send(prompt)
        except AITransportError as exc:
            logger.warning("AI request failed for activity %s: %s", activity.id, exc)
            raw_response = None

        recommendation = assemble_recommendation(activity, raw_response)
        logger.info(
            "Recommendation ready for activity %s | improvements=%d suggestions=%d safety=%d",
            activity.id,
            len(recommendation.improvements),
            len(recommendation.suggestions),
            len(recommendation.safety),
        )
        return recommendation


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """Return a shared builder so the template is read from disk only once."""
    return PromptBuilder()


def get_activity_analyzer() -> ActivityAnalyzer:
    """FastAPI dependency returning an analyzer backed by Gemini."""
    return ActivityAnalyzer()
