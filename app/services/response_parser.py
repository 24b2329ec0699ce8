"""Defensive parsing of Gemini responses into recommendation sections.

Gemini wraps the model output in an envelope::

    {"candidates": [{"content": {"parts": [{"text": "<payload>"}]}}]}

where ``<payload>`` is itself a JSON document, sometimes wrapped in a
markdown code fence. Parsing runs as a chain of steps; each step returns
either its value or a ``ParseFailure`` naming the step that gave up. Once the
payload decodes, field extraction never fails: every missing or malformed
field falls back to fixed text from ``SECTION_FALLBACKS``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


# (payload key, narrative label) in output order.
ANALYSIS_SECTIONS: tuple[tuple[str, str], ...] = (
    ("overall", "OverAll: "),
    ("pace", "Pace: "),
    ("heartRate", "Heart Rate: "),
    ("caloriesBurned", "Calories: "),
)

# Object lists rendered as "<first>: <second>".
PAIRED_SECTIONS: dict[str, tuple[str, str]] = {
    "improvements": ("area", "recommendation"),
    "suggestions": ("workout", "description"),
}

SECTION_FALLBACKS: dict[str, tuple[str, ...]] = {
    "improvements": ("No specific improvements provided",),
    "suggestions": ("No specific Suggestions provided",),
    "safety": ("Follow general safety protocols",),
}

_TEXT_PATH: tuple[str | int, ...] = ("candidates", 0, "content", "parts", 0, "text")
_FENCE_MARKERS = ("```json\n", "\n```")


@dataclass(frozen=True)
class ParsedSections:
    """Recommendation content decoded from a Gemini payload."""

    narrative: str
    improvements: tuple[str, ...]
    suggestions: tuple[str, ...]
    safety: tuple[str, ...]


@dataclass(frozen=True)
class ParseFailure:
    """Why a response could not be decoded. Only used for logging."""

    stage: str
    reason: str


_MISSING = object()


def parse_response(raw_response: str) -> ParsedSections | ParseFailure:
    """Decode a raw Gemini response body."""

    envelope = _load_json(raw_response, stage="envelope")
    if isinstance(envelope, ParseFailure):
        return envelope

    text = _extract_text(envelope)
    if isinstance(text, ParseFailure):
        return text

    payload = _load_json(strip_code_fence(text), stage="payload")
    if isinstance(payload, ParseFailure):
        return payload

    return extract_sections(payload)


def strip_code_fence(text: str) -> str:
    """Remove markdown ```json fencing and surrounding whitespace."""

    for marker in _FENCE_MARKERS:
        text = text.replace(marker, "")
    return text.strip()


def extract_sections(payload: Any) -> ParsedSections:
    """Pull the four content groups out of a decoded payload."""

    if not isinstance(payload, dict):
        payload = {}

    sections: dict[str, list[str]] = {
        name: _extract_pairs(payload.get(name), *keys)
        for name, keys in PAIRED_SECTIONS.items()
    }
    sections["safety"] = _extract_scalars(payload.get("safety"))

    resolved = {
        name: tuple(values) if values else SECTION_FALLBACKS[name]
        for name, values in sections.items()
    }
    return ParsedSections(
        narrative=_build_narrative(payload.get("analysis")),
        improvements=resolved["improvements"],
        suggestions=resolved["suggestions"],
        safety=resolved["safety"],
    )


def _load_json(text: str, stage: str) -> Any:
    try:
        return json.loads(text)
    except RecursionError:
        return ParseFailure(stage=stage, reason="JSON nested too deeply")
    except (TypeError, ValueError) as exc:
        return ParseFailure(stage=stage, reason=str(exc))


def _extract_text(envelope: Any) -> str | ParseFailure:
    node = envelope
    for segment in _TEXT_PATH:
        node = _child(node, segment)
        if node is _MISSING:
            return ParseFailure(stage="text_path", reason=f"missing '{segment}' in response envelope")
    if not isinstance(node, str):
        return ParseFailure(stage="text_path", reason=f"text part is {type(node).__name__}, not a string")
    return node


def _child(node: Any, segment: str | int) -> Any:
    if isinstance(segment, int):
        if isinstance(node, list) and len(node) > segment:
            return node[segment]
        return _MISSING
    if isinstance(node, dict) and segment in node:
        return node[segment]
    return _MISSING


def _as_text(value: Any) -> str | None:
    """Render a JSON scalar as text; containers and null give None."""

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _build_narrative(analysis: Any) -> str:
    if not isinstance(analysis, dict):
        return ""
    parts = []
    for key, label in ANALYSIS_SECTIONS:
        text = _as_text(analysis.get(key))
        if text is not None:
            parts.append(f"{label}{text}\n\n")
    return "".join(parts).strip()


def _extract_pairs(items: Any, first_key: str, second_key: str) -> list[str]:
    if not isinstance(items, list):
        return []
    extracted = []
    for item in items:
        if not isinstance(item, dict):
            continue
        first = _as_text(item.get(first_key))
        second = _as_text(item.get(second_key))
        if first is None and second is None:
            continue
        extracted.append(f"{first or ''}: {second or ''}")
    return extracted


def _extract_scalars(items: Any) -> list[str]:
    if not isinstance(items, list):
        return []
    return [text for text in (_as_text(item) for item in items) if text is not None]
