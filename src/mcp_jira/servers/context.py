from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira.jira import JiraFetcher


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Jira client built at server startup.
    It is shared, read-only, by every tool invocation.
    """

    jira: JiraFetcher | None = None
    read_only: bool = False
