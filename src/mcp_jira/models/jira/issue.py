"""
Jira issue models.

This module provides the Pydantic model for Jira issues.
"""

import logging
from typing import Any

from pydantic import ConfigDict, Field

from ..base import ApiModel

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    The field set of an issue depends on the Jira instance (custom fields,
    screens), so ``fields`` is kept as an open mapping rather than typed.
    Top-level keys this model does not declare are preserved as well.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    fields: dict[str, Any] | None = None
