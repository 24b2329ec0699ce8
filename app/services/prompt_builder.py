"""Render tracked activities into the coaching prompt sent to Gemini."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from app.config import get_settings


class PromptBuilder:
    """Fills the activity recommendation template.

    The template is read once at construction; ``build`` itself performs no
    I/O, so the same activity always yields byte-identical prompt text.
    """

    TEMPLATE_KEY = "activity_recommendation"

    def __init__(self, template: str | None = None, prompt_config_path: Path | None = None) -> None:
        if template is None:
            config_path = prompt_config_path or get_settings().prompt_config_path
            template = self._load_template_from_config(config_path)
        self.template = template

    def build(self, activity: Any) -> str:
        """Return the prompt for ``activity``.

        ``activity`` needs ``type``, ``duration``, ``calories_burned`` and
        ``additional_metrics`` attributes. Metrics are rendered with ``str()``.
        """
        metrics = activity.additional_metrics
        return self.template.format(
            activity_type=activity.type,
            duration=activity.duration,
            calories_burned=activity.calories_burned,
            additional_metrics=metrics if metrics is not None else {},
        )

    @classmethod
    def _load_template_from_config(cls, config_path: Path) -> str:
        prompt_config = cls._load_prompt_config(config_path)
        prompt_path = Path(prompt_config[cls.TEMPLATE_KEY]["prompt_path"])
        if not prompt_path.is_absolute():
            prompt_path = config_path.parent / prompt_path
        return cls._load_template(prompt_path)

    @staticmethod
    def _load_template(path: str | Path) -> str:
        with Path(path).open("r", encoding="utf-8") as fh:
            return fh.read()

    @staticmethod
    def _load_prompt_config(path: Path) -> dict[str, Any]:
        with Path(path).open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
