"""Base client module for Jira API interactions."""

import json
import logging
import threading
import time
from typing import Any
from urllib.parse import urlencode

from requests import ReadTimeout, RequestException, Response, Session

from mcp_jira.exceptions import JiraDecodeError, JiraRemoteError
from mcp_jira.utils.ssl import configure_ssl_verification

from .config import JiraConfig

# Configure logging
logger = logging.getLogger("mcp-jira")


def _log_response(response: Response, *args: Any, **kwargs: Any) -> None:
    """Response hook logging the outcome of every HTTP call, without headers."""
    logger.debug(
        f"HTTP {response.request.method} {response.url} -> {response.status_code} {response.reason}"
    )


def _read_body(response: Response, deadline: float, description: str) -> bytes:
    """Read a streamed response body, giving up at ``deadline``.

    A timer shuts the socket down for reading when the deadline passes, which
    wakes a read blocked on a server that trickles its body.

    Raises:
        requests.ReadTimeout: If the body was not complete by the deadline
    """
    expired = threading.Event()

    def interrupt() -> None:
        expired.set()
        try:
            response.raw.shutdown()
        except (RuntimeError, ValueError, OSError) as e:
            # The connection is already back in the pool or closed.
            logger.debug(f"Could not interrupt {description}: {e}")

    timer = threading.Timer(max(deadline - time.monotonic(), 0.0), interrupt)
    timer.daemon = True
    timer.start()
    content = b""
    try:
        content = response.content
    except RequestException:
        # Reading fails once the socket is shut down; reported below.
        if not expired.is_set():
            raise
    finally:
        timer.cancel()

    if expired.is_set():
        raise ReadTimeout(
            f"{description} did not complete in time", request=response.request
        )
    return content


class JiraClient:
    """Base client for Jira API interactions.

    Holds the configuration and one ``requests`` session. The session carries
    the authorization and JSON accept headers, so it is built once and shared
    by every request; it is not mutated afterwards.
    """

    config: JiraConfig
    session: Session

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            MCPJiraConfigurationError: If configuration is invalid or required
                credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        self.session = Session()
        self.session.headers.update(
            {
                "Authorization": self.config.auth_header,
                "Accept": "application/json",
            }
        )
        if self.config.proxies:
            self.session.proxies.update(self.config.proxies)
            logger.debug(f"Jira proxies configured: {sorted(self.config.proxies)}")
        self.session.hooks["response"].append(_log_response)

        configure_ssl_verification(
            service_name="Jira",
            url=self.config.url,
            session=self.session,
            ssl_verify=self.config.ssl_verify,
        )

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> Response:
        """Send one request to Jira and check its status.

        The response body must be complete within ``config.timeout`` seconds
        of the request being sent.

        Args:
            method: The HTTP method
            path: The API path, starting with ``/``
            params: Optional query parameters
            payload: Optional JSON body

        Returns:
            The response, with its body loaded and a status code below 300

        Raises:
            JiraRemoteError: If Jira answers with a status code of 300 or above
            requests.RequestException: On connection failures and timeouts
        """
        headers = None
        if payload is not None:
            headers = {"Content-Type": "application/json"}
            logger.debug(f"Jira request body: {json.dumps(payload)}")

        target = f"{path}?{urlencode(params)}" if params else path
        deadline = time.monotonic() + self.config.timeout
        response = self.session.request(
            method,
            f"{self.config.url}{path}",
            params=params,
            json=payload,
            headers=headers,
            timeout=self.config.timeout,
            stream=True,
        )
        with response:
            body = _read_body(response, deadline, f"Jira {method} {target}")
        logger.debug(f"Jira response body: {len(body)} bytes")

        if response.status_code >= 300:
            error = JiraRemoteError(
                method=method,
                path=target,
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            )
            logger.error(str(error))
            raise error
        return response

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> Any:
        """Send one request to Jira and decode the JSON response body.

        Raises:
            JiraDecodeError: If the response body is not valid JSON
        """
        response = self._request(method, path, params=params, payload=payload)
        try:
            return response.json()
        except ValueError as e:
            raise JiraDecodeError(
                f"Jira {method} {path} returned a body that is not valid JSON: {e}"
            ) from e
