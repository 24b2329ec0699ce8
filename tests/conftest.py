"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

_TEST_DB_PATH = Path(tempfile.gettempdir()) / f"activity_coach_test_{os.getpid()}.db"
if _TEST_DB_PATH.exists():
    _TEST_DB_PATH.unlink()

os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY") or "test-gemini-key"
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_PATH}"

from app.logging_config import configure_logging

configure_logging()

from app.database import Base, SessionLocal, engine
from app.exceptions import AITransportError
from app.main import app
from app.models import database_models  # noqa: F401  (registers tables)
from app.models.database_models import Activity

Base.metadata.create_all(engine)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class StubTransport:
    """In-memory stand-in for the Gemini client."""

    def __init__(self, response: str | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def send(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if self.response is None:
            raise AITransportError("no stubbed response")
        return self.response


def wrap_in_envelope(text: str) -> str:
    """Wrap payload text the way Gemini does."""

    return json.dumps({"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]})


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture
def db_session() -> Iterator[Any]:
    """Session against the test database, rolled back afterwards."""

    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="session")
def gemini_payload() -> Dict[str, Any]:
    """Return a well-formed recommendation payload."""

    with (FIXTURES_DIR / "gemini_payload.json").open("r", encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def envelope() -> Callable[[Any], str]:
    """Build a Gemini response body around a payload dict or raw text."""

    def _build(payload: Any) -> str:
        text = payload if isinstance(payload, str) else json.dumps(payload)
        return wrap_in_envelope(text)

    return _build


@pytest.fixture
def stub_transport() -> Callable[..., StubTransport]:
    return StubTransport


@pytest.fixture
def running_activity() -> Activity:
    """An unsaved activity with identifiers already assigned."""

    return Activity(
        id="act-123",
        user_id="user-42",
        type="RUNNING",
        duration=45,
        calories_burned=520,
        additional_metrics={"avgHeartRate": 152, "distanceKm": 7.9},
    )
