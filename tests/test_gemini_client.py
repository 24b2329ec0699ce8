"""Tests for the Gemini HTTP client using httpx mock transports."""
from __future__ import annotations

import json

import httpx
import pytest

from app.config import get_settings
from app.exceptions import AITransportError
from app.services.gemini_client import GeminiClient


def make_client(handler) -> GeminiClient:
    return GeminiClient(
        api_url="https://gemini.test/v1beta/models/test:generateContent?key=",
        api_key="secret",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_send_posts_prompt_and_returns_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(200, text='{"candidates": []}')

    body = await make_client(handler).send("Analyze this")

    assert body == '{"candidates": []}'
    assert seen["url"] == "https://gemini.test/v1beta/models/test:generateContent?key=secret"
    assert seen["body"] == {"contents": [{"parts": [{"text": "Analyze this"}]}]}
    assert seen["content_type"] == "application/json"


@pytest.mark.asyncio
async def test_error_status_raises_transport_error():
    client = make_client(lambda request: httpx.Response(503, text="overloaded"))

    with pytest.raises(AITransportError, match="503"):
        await client.send("prompt")


@pytest.mark.asyncio
async def test_timeout_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(AITransportError, match="timed out"):
        await make_client(handler).send("prompt")


@pytest.mark.asyncio
async def test_connection_error_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(AITransportError):
        await make_client(handler).send("prompt")


def test_defaults_come_from_settings():
    settings = get_settings()

    client = GeminiClient()

    assert client.endpoint == f"{settings.gemini_api_url}{settings.gemini_api_key}"
    assert client.timeout == settings.ai_request_timeout_seconds


@pytest.mark.asyncio
async def test_invalid_url_raises_transport_error():
    client = GeminiClient(
        api_url="https://gemini.test/generate?key=",
        api_key="bad key\n",
        timeout=5.0,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="{}")),
    )

    with pytest.raises(AITransportError):
        await client.send("prompt")
