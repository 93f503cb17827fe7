"""
Jira data models for the MCP Jira integration.
"""

from .issue import JiraIssue
from .search import JiraSearchResult

__all__ = [
    "JiraIssue",
    "JiraSearchResult",
]
