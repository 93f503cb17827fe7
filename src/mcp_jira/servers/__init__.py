"""Server implementations for MCP Jira."""

from .jira import register_jira_tools
from .main import create_server

__all__ = ["create_server", "register_jira_tools"]
