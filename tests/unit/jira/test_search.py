"""Tests for the Jira search operations."""

import pytest

from mcp_jira.exceptions import JiraRemoteError
from mcp_jira.jira.search import normalize_max_results
from mcp_jira.models.jira import JiraSearchResult
from tests.fixtures.jira_mocks import MOCK_JIRA_SEARCH_RESPONSE


@pytest.mark.parametrize("value", [None, 0, -1, -100, 1001, 5000])
def test_normalize_max_results_out_of_range(value):
    """Test that out-of-range page sizes fall back to 50."""
    assert normalize_max_results(value) == 50


@pytest.mark.parametrize("value", [1, 10, 50, 999, 1000])
def test_normalize_max_results_in_range(value):
    """Test that page sizes in [1, 1000] are kept."""
    assert normalize_max_results(value) == value


def test_search_issues(jira_fetcher, response_factory):
    """Test that search_issues passes the JQL through and decodes the page."""
    jira_fetcher.session.request.return_value = response_factory(
        body=MOCK_JIRA_SEARCH_RESPONSE
    )
    jql = "project = PROJ AND status = 'In Progress' ORDER BY created DESC"

    result = jira_fetcher.search_issues(jql, 10)

    jira_fetcher.session.request.assert_called_once()
    args, kwargs = jira_fetcher.session.request.call_args
    assert args == ("GET", "https://test.atlassian.net/rest/api/3/search")
    assert kwargs["params"] == {"jql": jql, "maxResults": 10}
    assert isinstance(result, JiraSearchResult)
    assert result.total == 2
    assert [issue.key for issue in result.issues] == ["PROJ-123", "PROJ-124"]


@pytest.mark.parametrize("value", [None, 0, -5, 1001])
def test_search_issues_normalizes_max_results(jira_fetcher, response_factory, value):
    """Test that out-of-range page sizes are sent as 50 without an error."""
    jira_fetcher.session.request.return_value = response_factory(
        body=MOCK_JIRA_SEARCH_RESPONSE
    )

    jira_fetcher.search_issues("project = PROJ", value)

    _, kwargs = jira_fetcher.session.request.call_args
    assert kwargs["params"]["maxResults"] == 50


def test_search_issues_simplified_dict(jira_fetcher, response_factory):
    """Test the dictionary form of a search page."""
    jira_fetcher.session.request.return_value = response_factory(
        body=MOCK_JIRA_SEARCH_RESPONSE
    )

    result = jira_fetcher.search_issues("project = PROJ").to_simplified_dict()

    assert result["startAt"] == 0
    assert result["maxResults"] == 50
    assert result["total"] == 2
    assert result["issues"] == MOCK_JIRA_SEARCH_RESPONSE["issues"]
    assert "expand" not in result


def test_search_issues_bad_jql(jira_fetcher, response_factory):
    """Test that a JQL error from Jira is surfaced."""
    jira_fetcher.session.request.return_value = response_factory(
        400,
        text='{"errorMessages":["Error in the JQL Query"]}',
        reason="Bad Request",
    )

    with pytest.raises(JiraRemoteError) as excinfo:
        jira_fetcher.search_issues("project = = PROJ")

    assert excinfo.value.path == (
        "/rest/api/3/search?jql=project+%3D+%3D+PROJ&maxResults=50"
    )
    assert str(excinfo.value).startswith(
        "Jira GET /rest/api/3/search?jql=project+%3D+%3D+PROJ&maxResults=50 failed: 400"
    )
    assert "Error in the JQL Query" in str(excinfo.value)
