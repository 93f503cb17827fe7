"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT

logger = logging.getLogger("mcp-jira")


def normalize_max_results(max_results: int | None) -> int:
    """Clamp a requested page size into the range Jira accepts.

    Values that are missing, not positive, or above the limit fall back to
    the default page size instead of being rejected.
    """
    if max_results is None or max_results <= 0 or max_results > MAX_RESULTS_LIMIT:
        return DEFAULT_MAX_RESULTS
    return max_results


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self, jql: str, max_results: int | None = None
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Only the first page of results is fetched.

        Args:
            jql: JQL query string, passed to Jira unmodified
            max_results: Page size; out-of-range values fall back to 50

        Returns:
            JiraSearchResult with pagination values and the matching issues

        Raises:
            JiraRemoteError: If Jira rejects the query
            JiraDecodeError: If the response is not a search result object
        """
        limit = normalize_max_results(max_results)
        if limit != max_results:
            logger.debug(f"Normalized max_results {max_results!r} to {limit}")

        data = self._request_json(
            "GET",
            "/rest/api/3/search",
            params={"jql": jql, "maxResults": limit},
        )
        return JiraSearchResult.from_api_response(data)
