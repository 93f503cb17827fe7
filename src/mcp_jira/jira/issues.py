"""Module for Jira issue operations."""

import logging

from ..models.jira import JiraIssue
from ..utils.urls import escape_path_segment
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            The issue as Jira returned it

        Raises:
            JiraRemoteError: If Jira rejects the request
            JiraDecodeError: If the response is not an issue object
        """
        path = f"/rest/api/3/issue/{escape_path_segment(issue_key)}"
        data = self._request_json("GET", path)
        return JiraIssue.from_api_response(data)

    def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str = "",
    ) -> JiraIssue:
        """
        Create a new Jira issue.

        Args:
            project_key: The key of the project (e.g. 'PROJ')
            issue_type: Issue type name (e.g. 'Task', 'Bug')
            summary: Summary of the issue
            description: Issue description

        Returns:
            The created issue as Jira reported it (id, key and self link)

        Raises:
            JiraRemoteError: If Jira rejects the request
            JiraDecodeError: If the response is not an issue object
        """
        payload = {
            "fields": {
                "project": {"key": project_key},
                "summary": summary,
                "description": description,
                "issuetype": {"name": issue_type},
            }
        }
        data = self._request_json("POST", "/rest/api/3/issue", payload=payload)
        issue = JiraIssue.from_api_response(data)
        logger.info(f"Created issue {issue.key} in project {project_key}")
        return issue
