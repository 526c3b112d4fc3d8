"""Shared test fixtures.

Provides a ``test_client`` for FastAPI, mock Supabase clients for use
across all test modules.
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

# Settings() requires these at import time
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


def _chainable_table_mock() -> MagicMock:
    """Return a mock that supports the fluent Supabase query chain."""
    m = MagicMock()
    for method in ("select", "insert", "upsert", "update", "eq", "limit", "order"):
        getattr(m, method).return_value = m
    return m


@pytest.fixture()
def mock_supabase() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` in the db module to return a mock client."""
    mock_client = MagicMock()
    with patch("app.db.supabase.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    mock_table = _chainable_table_mock()
    mock_table.execute.return_value = MagicMock()  # non-None result
    mock_client.table.return_value = mock_table

    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from app.main import app

    with TestClient(app) as client:
        yield client
