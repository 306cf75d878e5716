"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def site_url() -> str:
    url = os.environ.get("SHAREPOINT_SITE_URL")
    if not url:
        pytest.skip("SHAREPOINT_SITE_URL is not set")
    return url


@pytest.fixture
def access_token() -> str:
    token = os.environ.get("SHAREPOINT_ACCESS_TOKEN")
    if not token:
        pytest.skip("SHAREPOINT_ACCESS_TOKEN is not set")
    return token
