"""
Utility functions for the MCP Jira integration.
"""

from .io import is_read_only_mode
from .logging import log_config_param, mask_email, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import escape_path_segment, is_absolute_url

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "escape_path_segment",
    "is_absolute_url",
    "is_read_only_mode",
    "log_config_param",
    "mask_email",
    "mask_sensitive",
    "setup_logging",
]
