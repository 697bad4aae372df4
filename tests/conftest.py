"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

import pytest
from fastapi.testclient import TestClient

from mime_description.main import app
from mime_description.services.description_service import DescriptionService


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    The lifespan context (startup/shutdown events) is entered automatically.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Sample table fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def sample_descriptions() -> dict:
    """A tiny description table, independent of the embedded dataset."""
    return {
        "application/pdf": "PDF document",
        "text/plain": "Plain text document",
        "text/html": "HTML document",
    }


@pytest.fixture
def sample_service(sample_descriptions) -> DescriptionService:
    """A DescriptionService backed by ``sample_descriptions``."""
    return DescriptionService(descriptions=sample_descriptions)
