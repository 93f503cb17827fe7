"""Module for Jira comment operations."""

import logging

from ..utils.urls import escape_path_segment
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> None:
        """
        Add a comment to an issue.

        The comment is sent as given. Jira's response body is not used;
        any status below 300 counts as success.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text

        Raises:
            JiraRemoteError: If Jira rejects the comment
        """
        path = f"/rest/api/3/issue/{escape_path_segment(issue_key)}/comment"
        self._request("POST", path, payload={"body": comment})
        logger.info(f"Added comment to issue {issue_key}")
