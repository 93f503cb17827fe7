"""
Pydantic models for Jira API responses.

This package provides models for working with Jira API data, including
conversion from API responses and back to plain dictionaries for tool results.
"""

from .base import ApiModel
from .jira import JiraIssue, JiraSearchResult

__all__ = [
    "ApiModel",
    "JiraIssue",
    "JiraSearchResult",
]
