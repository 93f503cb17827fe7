"""Exceptions raised by the MCP Jira client."""


class MCPJiraError(Exception):
    """Base class for errors raised by mcp-jira."""


class MCPJiraConfigurationError(MCPJiraError, ValueError):
    """Raised when the Jira configuration is missing or invalid."""


class JiraRemoteError(MCPJiraError):
    """Raised when Jira answers with a status code of 300 or above.

    The message carries the method, path, status and raw response body so the
    caller can diagnose the failure. Request headers are never included.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        reason: str | None = None,
        body: str = "",
    ) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.reason = reason or ""
        self.body = body
        status = f"{status_code} {self.reason}".rstrip()
        super().__init__(f"Jira {method} {path} failed: {status} - {body}")


class JiraDecodeError(MCPJiraError, ValueError):
    """Raised when a Jira response body does not have the expected JSON shape."""
