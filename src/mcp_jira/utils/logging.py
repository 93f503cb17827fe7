"""Logging utilities for MCP Jira.

Log records always go to stderr so that the stdio transport keeps stdout
for protocol messages only.
"""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure MCP-Jira logging.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    loggers = ["mcp-jira", "mcp.server", "mcp.server.lowlevel.server"]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)

    return logging.getLogger("mcp-jira")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def mask_email(value: str | None) -> str:
    """Mask the local part of an email address, keeping its first character.

    Args:
        value: The email address to mask

    Returns:
        The masked address (``a***@example.com``), or the value unchanged when
        it does not look like an email address
    """
    if not value:
        return "Not Provided"
    if "@" not in value:
        return value
    user, domain = value.split("@", 1)
    if len(user) <= 1:
        return f"*@{domain}"
    return f"{user[0]}{'*' * (len(user) - 1)}@{domain}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter, masking if sensitive.

    Args:
        logger: The logger to use
        service: The service name
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
