"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_INSTANCE_URL": "https://test.atlassian.net",
            "JIRA_USER_EMAIL": "test.user@example.com",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance for a cloud site."""
    return JiraConfig(
        url="https://test.atlassian.net",
        username="test.user@example.com",
        api_token="test_token",
    )


@pytest.fixture
def jira_fetcher(mock_config):
    """Create a JiraFetcher whose HTTP session never leaves the process.

    Tests set ``jira_fetcher.session.request.return_value`` (or
    ``side_effect``) and inspect its calls.
    """
    fetcher = JiraFetcher(config=mock_config)
    fetcher.session.request = MagicMock()
    return fetcher
