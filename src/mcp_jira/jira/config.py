"""Configuration module for Jira API interactions."""

import base64
import logging
import os
from dataclasses import dataclass, field
from functools import cached_property

from ..exceptions import MCPJiraConfigurationError
from ..utils.logging import log_config_param, mask_email
from ..utils.urls import is_absolute_url

logger = logging.getLogger("mcp-jira.jira.config")

DEFAULT_TIMEOUT = 30.0


def _getenv(*names: str) -> str | None:
    """Return the first non-empty value among the given environment variables."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Authentication is HTTP basic auth with an identity (the account email on
    Jira Cloud) and an API token. The configuration is immutable once built
    and shared by every request the server makes.
    """

    url: str  # Base URL for Jira, without trailing slash
    username: str  # Email or username
    api_token: str = field(repr=False)  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # Per-request timeout in seconds
    http_proxy: str | None = None  # HTTP proxy URL
    https_proxy: str | None = None  # HTTPS proxy URL
    no_proxy: str | None = None  # Comma-separated list of hosts to bypass proxy

    def __post_init__(self) -> None:
        if not self.url:
            raise MCPJiraConfigurationError("Jira URL must not be empty")
        if not is_absolute_url(self.url):
            raise MCPJiraConfigurationError(
                f"Invalid Jira URL '{self.url}': expected an absolute http(s) URL"
            )
        if not self.username or not self.api_token:
            raise MCPJiraConfigurationError(
                "Jira authentication requires both a username and an API token"
            )
        if self.timeout <= 0:
            raise MCPJiraConfigurationError(
                f"Jira timeout must be positive, got {self.timeout}"
            )
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @cached_property
    def auth_header(self) -> str:
        """The ``Authorization`` header value sent with every request."""
        credentials = f"{self.username}:{self.api_token}".encode()
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the form expected by ``requests``."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        if self.no_proxy:
            proxies["no_proxy"] = self.no_proxy
        return proxies

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            MCPJiraConfigurationError: If required environment variables are
                missing or invalid
        """
        url = _getenv("JIRA_INSTANCE_URL", "JIRA_URL")
        username = _getenv("JIRA_USER_EMAIL", "JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")

        logger.debug(f"Loaded JIRA_INSTANCE_URL={url!r}")
        logger.debug(f"Loaded JIRA_USER_EMAIL (masked)={mask_email(username)!r}")
        logger.debug(f"Loaded JIRA_API_TOKEN (len={len(api_token or '')})")

        missing = [
            name
            for name, value in (
                ("JIRA_INSTANCE_URL", url),
                ("JIRA_USER_EMAIL", username),
                ("JIRA_API_TOKEN", api_token),
            )
            if not value
        ]
        if missing:
            raise MCPJiraConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("JIRA_TIMEOUT")
        try:
            timeout = float(timeout_env) if timeout_env else DEFAULT_TIMEOUT
        except ValueError as e:
            raise MCPJiraConfigurationError(
                f"Invalid JIRA_TIMEOUT '{timeout_env}': expected a number of seconds"
            ) from e

        config = cls(
            url=url,
            username=username,
            api_token=api_token,
            ssl_verify=ssl_verify,
            timeout=timeout,
            http_proxy=_getenv("JIRA_HTTP_PROXY", "HTTP_PROXY"),
            https_proxy=_getenv("JIRA_HTTPS_PROXY", "HTTPS_PROXY"),
            no_proxy=_getenv("JIRA_NO_PROXY", "NO_PROXY"),
        )
        log_config_param(logger, "Jira", "URL", config.url)
        log_config_param(logger, "Jira", "Username", mask_email(config.username))
        log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
        return config
