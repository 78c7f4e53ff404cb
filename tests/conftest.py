"""
Shared test fixtures for the Compass Capacity Engine.

This module provides common fixtures used across all test modules:
- Environment setup (dev mode, development environment)
- Sample focus and life tasks
- A fixed evening clock for time-dependent code
- FastAPI application and async HTTP client

Usage:
    All fixtures are automatically available to any test in the tests/ directory.
"""

from __future__ import annotations

import os
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# 1. Environment setup -- must run before any application imports
# ---------------------------------------------------------------------------

os.environ.setdefault("COMPASS_DEV_MODE", "1")
os.environ.setdefault("COMPASS_ENVIRONMENT", "development")

from src.config.energy import TaskComplexity, TaskType  # noqa: E402
from src.models.task import Task  # noqa: E402

# ---------------------------------------------------------------------------
# 2. Sample tasks
# ---------------------------------------------------------------------------


@pytest.fixture()
def deep_focus() -> Task:
    """An open deep focus task (3 points)."""
    return Task(complexity=TaskComplexity.DEEP, description="Write the quarterly report")


@pytest.fixture()
def medium_focus() -> Task:
    """An open medium focus task (2 points)."""
    return Task(complexity=TaskComplexity.MEDIUM, description="Reply to the landlord")


@pytest.fixture()
def quick_focus() -> Task:
    """An open quick focus task (1 point)."""
    return Task(complexity=TaskComplexity.QUICK, description="Book dentist")


@pytest.fixture()
def completed_deep_focus() -> Task:
    """A finished deep focus task; costs nothing."""
    return Task(complexity=TaskComplexity.DEEP, completed=True)


@pytest.fixture()
def deep_life_task() -> Task:
    """A deep life-maintenance task; always free."""
    return Task(complexity=TaskComplexity.DEEP, type=TaskType.LIFE, description="Laundry")


# ---------------------------------------------------------------------------
# 3. Clock
# ---------------------------------------------------------------------------


@pytest.fixture()
def monday_evening() -> datetime:
    """Monday 2026-10-19 at 20:30."""
    return datetime(2026, 10, 19, 20, 30)


# ---------------------------------------------------------------------------
# 4. API
# ---------------------------------------------------------------------------


@pytest.fixture()
def app(monkeypatch):
    """Create a fresh FastAPI application for each test."""
    monkeypatch.setenv("COMPASS_ENVIRONMENT", "development")
    monkeypatch.setenv("COMPASS_CORS_ORIGINS", "http://localhost:3000")

    from src.api import create_app

    return create_app()


@pytest.fixture()
async def client(app):
    """Async HTTP client wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
