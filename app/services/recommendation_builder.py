"""Turn parsed Gemini output into Recommendation rows."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from app.models.database_models import Recommendation
from app.services.response_parser import ParsedSections, ParseFailure, parse_response


logger = logging.getLogger(__name__)


DEFAULT_NARRATIVE = (
    "Keep maintaining consistency in your activity. Regular effort matters more than intensity."
)
DEFAULT_IMPROVEMENTS = (
    "Increase consistency if activity frequency is low",
    "Ensure proper warm-up and cool-down",
    "Track progress weekly",
)
DEFAULT_SUGGESTIONS = (
    "Stay hydrated",
    "Maintain proper posture",
    "Allow adequate recovery time",
)
DEFAULT_SAFETY = (
    "Avoid overtraining",
    "Stop immediately if you feel pain or dizziness",
)


def build_recommendation(activity: Any, sections: ParsedSections) -> Recommendation:
    """Create a recommendation for ``activity`` from decoded AI sections."""

    return Recommendation(
        activity_id=activity.id,
        user_id=activity.user_id,
        activity_type=activity.type,
        recommendation=sections.narrative,
        improvements=list(sections.improvements),
        suggestions=list(sections.suggestions),
        safety=list(sections.safety),
        created_at=datetime.utcnow(),
    )


def default_recommendation(activity: Any) -> Recommendation:
    """Fixed feedback used whenever the AI output is unavailable."""

    return build_recommendation(
        activity,
        ParsedSections(
            narrative=DEFAULT_NARRATIVE,
            improvements=DEFAULT_IMPROVEMENTS,
            suggestions=DEFAULT_SUGGESTIONS,
            safety=DEFAULT_SAFETY,
        ),
    )


def assemble_recommendation(activity: Any, raw_response: str | None) -> Recommendation:
    """Build a recommendation from a raw Gemini body, never raising.

    ``raw_response`` is None when the AI call itself failed.
    """
    if raw_response is None:
        logger.info("No AI response for activity %s, using default recommendation", activity.id)
        return default_recommendation(activity)

    parsed = parse_response(raw_response)
    if isinstance(parsed, ParseFailure):
        logger.warning(
            "Could not parse AI response for activity %s | stage=%s reason=%s",
            activity.id,
            parsed.stage,
            parsed.reason,
        )
        return default_recommendation(activity)

    return build_recommendation(activity, parsed)
