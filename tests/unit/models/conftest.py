"""
Test fixtures for model testing.
"""

import copy
from typing import Any

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_JIRA_CREATED_ISSUE_RESPONSE,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_SEARCH_RESPONSE,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return mock Jira issue data."""
    return copy.deepcopy(MOCK_JIRA_ISSUE_RESPONSE)


@pytest.fixture
def jira_search_data() -> dict[str, Any]:
    """Return mock Jira search (JQL) results."""
    return copy.deepcopy(MOCK_JIRA_SEARCH_RESPONSE)


@pytest.fixture
def jira_created_issue_data() -> dict[str, Any]:
    """Return the body Jira answers with after creating an issue."""
    return copy.deepcopy(MOCK_JIRA_CREATED_ISSUE_RESPONSE)
