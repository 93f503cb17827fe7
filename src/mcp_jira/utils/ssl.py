"""SSL-related utility functions for MCP Jira."""

import logging
import ssl
from typing import Any
from urllib.parse import urlparse

from requests.adapters import HTTPAdapter
from requests.sessions import Session
from urllib3.poolmanager import PoolManager

logger = logging.getLogger("mcp-jira.utils.ssl")


class SSLIgnoreAdapter(HTTPAdapter):
    """Transport adapter that skips certificate and hostname checks.

    Only mounted for the configured Jira host when SSL verification is
    turned off, typically for a Server/Data Center instance with a
    self-signed certificate.
    """

    def init_poolmanager(
        self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any
    ) -> None:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

        self.poolmanager = PoolManager(
            num_pools=connections,
            maxsize=maxsize,
            block=block,
            ssl_context=context,
            **pool_kwargs,
        )

    def cert_verify(self, conn: Any, url: str, verify: bool, cert: Any | None) -> None:
        super().cert_verify(conn, url, verify=False, cert=cert)


def configure_ssl_verification(
    service_name: str, url: str, session: Session, ssl_verify: bool
) -> None:
    """Mount the SSL-ignoring adapter on the session when verification is off.

    Args:
        service_name: Name of the service for logging
        url: The base URL of the service
        session: The requests session to configure
        ssl_verify: Whether SSL verification should be enabled
    """
    if ssl_verify:
        return

    logger.warning(
        f"{service_name} SSL verification disabled. This is insecure and should only be used in testing environments."
    )
    domain = urlparse(url).netloc
    adapter = SSLIgnoreAdapter()
    session.mount(f"https://{domain}", adapter)
    session.mount(f"http://{domain}", adapter)
