"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from repeater.core.styles import StyleRegistry
from repeater.core.styling import StyleApplicator
from repeater.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Create an async test client against the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def registry() -> StyleRegistry:
    """A fresh registry over the built-in catalog."""
    return StyleRegistry()


@pytest.fixture
def applicator(registry: StyleRegistry) -> StyleApplicator:
    """A style applicator over a fresh registry."""
    return StyleApplicator(registry)


@pytest.fixture
def afternoon() -> datetime:
    """Fixed instant for live time/date styles: 9 Oct 2026, 15:04:05."""
    return datetime(2026, 10, 9, 15, 4, 5)


@pytest.fixture
def morning() -> datetime:
    """Fixed instant before noon: 2 Jan 2026, 09:05:03."""
    return datetime(2026, 1, 2, 9, 5, 3)
