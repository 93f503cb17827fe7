"""Dependency providers for tool functions.

Provides get_jira_fetcher, which resolves the Jira client injected into the
server lifespan context.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_jira.jira import JiraFetcher
from mcp_jira.servers.context import MainAppContext

logger = logging.getLogger("mcp-jira.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext:
    """Returns the application context of the running server.

    Args:
        ctx: The FastMCP context.

    Raises:
        ValueError: If the server was started without an application context.
    """
    lifespan_ctx = ctx.request_context.lifespan_context
    if not isinstance(lifespan_ctx, MainAppContext):
        logger.error(
            f"Unexpected lifespan context type: {type(lifespan_ctx).__name__}"
        )
        raise ValueError("Application context is not available.")
    return lifespan_ctx


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns the JiraFetcher shared by all tool invocations.

    Args:
        ctx: The FastMCP context.

    Returns:
        The JiraFetcher built from the global configuration.

    Raises:
        ValueError: If no Jira client was configured.
    """
    app_ctx = get_app_context(ctx)
    if app_ctx.jira is None:
        logger.error("Jira client could not be resolved from the lifespan context.")
        raise ValueError("Jira client is not configured or available.")
    return app_ctx.jira
