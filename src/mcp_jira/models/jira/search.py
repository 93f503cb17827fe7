"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any

from pydantic import ConfigDict, Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing a single page of a Jira search (JQL) result.
    """

    model_config = ConfigDict(populate_by_name=True)

    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=0, alias="maxResults")
    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the search result to a dictionary.

        Pagination values are always present; each issue is rendered the way
        Jira returned it.
        """
        return {
            "startAt": self.start_at,
            "maxResults": self.max_results,
            "total": self.total,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }
