"""Main FastMCP server setup for the Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.jira import JiraFetcher

from .context import MainAppContext
from .jira import register_jira_tools

logger = logging.getLogger("mcp-jira.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_server(
    jira: JiraFetcher, *, read_only: bool = False, name: str = "Jira MCP"
) -> FastMCP[MainAppContext]:
    """Build the MCP server around an already configured Jira client.

    The client is handed to every tool through the lifespan context, so the
    server holds exactly one client for its whole lifetime.

    Args:
        jira: The Jira client shared by all tool invocations.
        read_only: Whether to reject the write tools.
        name: The server name advertised to MCP hosts.

    Returns:
        The FastMCP server with the Jira tools registered.
    """
    app_context = MainAppContext(jira=jira, read_only=read_only)

    @asynccontextmanager
    async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[MainAppContext]:
        logger.info("Jira MCP server lifespan starting...")
        logger.info(f"Jira instance: {jira.config.url}")
        logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
        yield app_context
        logger.info("Jira MCP server lifespan shutting down.")

    mcp: FastMCP[MainAppContext] = FastMCP(
        name=name,
        instructions="Provides tools for reading, searching, commenting on and creating Jira issues.",
        lifespan=main_lifespan,
    )
    register_jira_tools(mcp)
    mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)(
        health_check
    )
    return mcp
