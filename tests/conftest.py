"""Shared fixtures for the lesson planner test suite.

Gemini is never contacted: ``llm.genai`` is replaced by a recorder that
returns canned responses.
"""

import pytest

import llm
from app import app as flask_app
from schemas import LessonPlanRequest
from tests.helpers import FakeGenAI, FakeResponse


# ---------------------------------------------------------------------------
# Backend fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def api_backend(monkeypatch):
    """Route llm through the API backend with a test key."""
    monkeypatch.setattr(llm, "MOCK_LLM", False)
    monkeypatch.setattr(llm, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(llm, "GEMINI_MODEL", "gemini-1.5-pro")


@pytest.fixture
def fake_genai(monkeypatch, api_backend):
    """Replace the SDK module; set ``.response`` or ``.exc`` per test."""
    recorder = FakeGenAI()
    monkeypatch.setattr(llm, "genai", recorder)
    return recorder


@pytest.fixture
def service_returns(fake_genai):
    """Make the fake model answer with ``text`` as its generated body."""
    def _set(text):
        fake_genai.response = FakeResponse(text)
        return fake_genai
    return _set


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def photosynthesis_request():
    return LessonPlanRequest(
        topic="Photosynthesis",
        grade="7",
        subject="Science",
        subUnits="Light reactions, Dark reactions",
    )


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    return flask_app.test_client()
