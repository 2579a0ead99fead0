"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment variables before importing package modules
os.environ.setdefault("GRAPH_ACCESS_TOKEN", "test_token")


@pytest.fixture
def mock_client():
    """Mock OneDrive client with an in-memory session id."""
    mock = MagicMock()
    mock.do_fetch = AsyncMock(return_value={})
    mock.workbook_session_id = None

    def set_session_id(session_id):
        mock.workbook_session_id = session_id

    mock.set_workbook_session_id = MagicMock(side_effect=set_session_id)
    return mock


@pytest.fixture
def workbook(mock_client):
    """Workbook handle on the mock client."""
    from onedrive_excel.excel import Workbook

    return Workbook(mock_client, "/me/drive/items/ITEM/workbook")


@pytest.fixture(autouse=True)
def reset_client_singleton(monkeypatch):
    """Drop cached settings and client between tests."""
    from onedrive_excel import client
    from onedrive_excel.config import get_settings

    get_settings.cache_clear()
    monkeypatch.setattr(client, "_onedrive_client", None)
    yield
    get_settings.cache_clear()
