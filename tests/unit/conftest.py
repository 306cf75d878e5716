"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from graphcommunity.sharepoint import HTTPClient, SharePointClient

MOCK_WEB_URL = "https://mock.sharepoint.com/sites/mockSite"

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def web_url() -> str:
    return MOCK_WEB_URL


@pytest.fixture
def load_fixture():
    """Load a captured response body from tests/unit/fixtures."""

    def _load(name: str) -> dict:
        return json.loads((FIXTURES / name).read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def mock_transport():
    """Transport whose send() returns an empty JSON object unless overridden."""
    transport = MagicMock(spec=HTTPClient)
    transport.send = AsyncMock(return_value={})
    return transport


@pytest.fixture
def sent_requests(mock_transport):
    """HttpRequest objects passed to mock_transport.send, in call order."""

    def _sent() -> list:
        return [call.args[0] for call in mock_transport.send.call_args_list]

    return _sent


@pytest.fixture
def client(mock_transport):
    """SharePointClient wired to the mock transport."""
    return SharePointClient(mock_transport)


@pytest.fixture
def api(client, web_url):
    """Root builder for the mock site."""
    return client.api(web_url)
