"""HTTP client for the Gemini generateContent endpoint."""
from __future__ import annotations

import logging

import httpx

from app.config import get_settings
from app.exceptions import AITransportError


logger = logging.getLogger(__name__)


class GeminiClient:
    """Sends a prompt to Gemini and returns the raw response body.

    Every failure (timeout, connection error, non-2xx status) is raised as
    ``AITransportError``. No retries are attempted here.
    """

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if api_url is None or api_key is None or timeout is None:
            settings = get_settings()
            api_url = api_url if api_url is not None else settings.gemini_api_url
            api_key = api_key if api_key is not None else settings.gemini_api_key
            timeout = timeout if timeout is not None else settings.ai_request_timeout_seconds
        self.endpoint = f"{api_url}{api_key}"
        self.timeout = timeout
        self._transport = transport

    @staticmethod
    def build_request_body(prompt: str) -> dict:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    async def send(self, prompt: str) -> str:
        """POST ``prompt`` and return the response text."""

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    json=self.build_request_body(prompt),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise AITransportError(f"Gemini request timed out after {self.timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise AITransportError(f"Gemini returned HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise AITransportError(f"Gemini request failed: {exc}") from exc

        logger.debug("Gemini responded with %d bytes", len(response.content))
        return response.text
