"""I/O utility functions for MCP Jira."""

import os


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode rejects the write tools (add_comment, create_issue)
    while allowing all read operations.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    value = os.getenv("READ_ONLY_MODE", "false")
    return value.lower() in ("true", "1", "yes", "y", "on")
