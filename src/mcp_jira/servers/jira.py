"""Jira tool definitions for the FastMCP server."""

import asyncio
import logging
from collections.abc import Callable
from typing import Annotated, Any, TypeVar

from fastmcp import Context, FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from .dependencies import get_app_context, get_jira_fetcher

logger = logging.getLogger("mcp-jira.servers.jira")

T = TypeVar("T")

COMMENT_PREVIEW_LENGTH = 80


async def _call_jira(tool: str, func: Callable[..., T], *args: Any) -> T:
    """Run a blocking Jira client call in a worker thread.

    Cancelling the invocation stops waiting at once; the thread itself ends
    within the request timeout and its result is dropped.
    """
    try:
        return await asyncio.to_thread(func, *args)
    except Exception as e:
        logger.debug(f"tool={tool} error={e}")
        raise


def _ensure_writable(ctx: Context, tool: str) -> None:
    if get_app_context(ctx).read_only:
        logger.warning(f"Attempted to call {tool} in read-only mode.")
        raise ValueError(f"Cannot call {tool} in read-only mode.")


async def get_issue(
    ctx: Context,
    key: Annotated[str, Field(description="Jira issue key, e.g. 'PROJ-123'")],
) -> dict[str, Any]:
    """Get a Jira issue by key.

    Args:
        ctx: The FastMCP context.
        key: Jira issue key.

    Returns:
        The issue (id, key, self link and fields) as returned by Jira.
    """
    jira = await get_jira_fetcher(ctx)
    logger.debug(f"tool=get_issue args={{key:{key!r}}}")
    issue = await _call_jira("get_issue", jira.get_issue, key)
    return issue.to_simplified_dict()


async def search_issues(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "JQL query string (Jira Query Language), e.g. "
                "\"project = PROJ AND status = 'In Progress'\""
            )
        ),
    ],
    max_results: Annotated[
        int | None,
        Field(
            description=(
                "Maximum number of issues to return (1-1000). "
                "Missing or out-of-range values fall back to 50."
            ),
        ),
    ] = None,
) -> dict[str, Any]:
    """Search Jira issues with JQL.

    Args:
        ctx: The FastMCP context.
        jql: JQL query string.
        max_results: Page size.

    Returns:
        The first page of results with startAt, maxResults, total and issues.
    """
    jira = await get_jira_fetcher(ctx)
    logger.debug(f"tool=search_issues args={{jql:{jql!r},max:{max_results}}}")
    result = await _call_jira("search_issues", jira.search_issues, jql, max_results)
    return result.to_simplified_dict()


async def add_comment(
    ctx: Context,
    key: Annotated[str, Field(description="Jira issue key, e.g. 'PROJ-123'")],
    body: Annotated[str, Field(description="Comment text")],
) -> str:
    """Add a comment to a Jira issue.

    Args:
        ctx: The FastMCP context.
        key: Jira issue key.
        body: Comment text.

    Returns:
        "ok" once Jira has accepted the comment.

    Raises:
        ValueError: If in read-only mode or Jira client unavailable.
    """
    _ensure_writable(ctx, "add_comment")
    jira = await get_jira_fetcher(ctx)
    preview = body
    if len(preview) > COMMENT_PREVIEW_LENGTH:
        preview = preview[:COMMENT_PREVIEW_LENGTH] + "..."
    logger.debug(f"tool=add_comment args={{key:{key!r}, body-preview:{preview!r}}}")
    await _call_jira("add_comment", jira.add_comment, key, body)
    return "ok"


async def create_issue(
    ctx: Context,
    project_key: Annotated[
        str,
        Field(
            description=(
                "The Jira project key (e.g. 'PROJ'). "
                "This is the prefix of issue keys in the project."
            )
        ),
    ],
    issue_type: Annotated[
        str,
        Field(description="Issue type name (e.g. 'Task', 'Bug', 'Story')"),
    ],
    summary: Annotated[str, Field(description="Summary/title of the issue")],
    description: Annotated[str, Field(description="Issue description")] = "",
) -> dict[str, Any]:
    """Create a Jira issue.

    Args:
        ctx: The FastMCP context.
        project_key: The Jira project key.
        issue_type: Issue type name.
        summary: Summary/title of the issue.
        description: Issue description.

    Returns:
        The created issue as reported by Jira.

    Raises:
        ValueError: If in read-only mode or Jira client unavailable.
    """
    _ensure_writable(ctx, "create_issue")
    jira = await get_jira_fetcher(ctx)
    logger.debug(
        f"tool=create_issue args={{project:{project_key!r},type:{issue_type!r},"
        f"summary:{summary!r},desc-len:{len(description)}}}"
    )
    issue = await _call_jira(
        "create_issue",
        jira.create_issue,
        project_key,
        issue_type,
        summary,
        description,
    )
    return issue.to_simplified_dict()


def register_jira_tools(mcp: FastMCP) -> None:
    """Register the Jira tools on a FastMCP server.

    Args:
        mcp: The server to register the tools on.
    """
    mcp.tool(
        name="get_issue",
        description="Get a Jira issue by key",
        tags={"jira", "read"},
        annotations=ToolAnnotations(title="Get Issue", readOnlyHint=True),
    )(get_issue)
    mcp.tool(
        name="search_issues",
        description="Search Jira with JQL",
        tags={"jira", "read"},
        annotations=ToolAnnotations(title="Search Issues", readOnlyHint=True),
    )(search_issues)
    mcp.tool(
        name="add_comment",
        description="Add a comment to a Jira issue",
        tags={"jira", "write"},
        annotations=ToolAnnotations(title="Add Comment", readOnlyHint=False),
    )(add_comment)
    mcp.tool(
        name="create_issue",
        description="Create a Jira issue",
        tags={"jira", "write"},
        annotations=ToolAnnotations(
            title="Create Issue", readOnlyHint=False, idempotentHint=False
        ),
    )(create_issue)
    logger.debug(f"Registered Jira tools on server '{mcp.name}'")
