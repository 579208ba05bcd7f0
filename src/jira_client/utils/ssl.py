"""SSL and proxy configuration for the requests session used by the client."""

import logging
import ssl
from typing import Any
from urllib.parse import urlparse

from requests.adapters import HTTPAdapter
from requests.sessions import Session
from urllib3.poolmanager import PoolManager

logger = logging.getLogger("jira-client")

# Older Server/Data Center installs still negotiate legacy TLS renegotiation
_LEGACY_SERVER_OPTIONS = 0x4 | 0x40000


def _unverified_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    context.options |= _LEGACY_SERVER_OPTIONS
    return context


class SSLIgnoreAdapter(HTTPAdapter):
    """Transport adapter for a Jira host whose certificate is not checked."""

    def init_poolmanager(
        self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any
    ) -> None:
        pool_kwargs["ssl_context"] = _unverified_context()
        self.poolmanager = PoolManager(
            num_pools=connections, maxsize=maxsize, block=block, **pool_kwargs
        )

    def cert_verify(self, conn: Any, url: str, verify: bool, cert: Any | None) -> None:
        super().cert_verify(conn, url, verify=False, cert=cert)


def configure_ssl_verification(url: str, session: Session, ssl_verify: bool) -> bool:
    """
    Stop verifying the certificate of the Jira host when ``ssl_verify`` is off.

    Only ``https://`` requests to the host named by ``url`` are affected;
    other hosts reached through the same session keep full verification.

    Args:
        url: The Jira base URL
        session: The transport's requests session
        ssl_verify: Whether certificates should be verified

    Returns:
        True if verification was turned off for the host
    """
    if ssl_verify:
        return False

    host = urlparse(url).netloc
    logger.warning(
        f"SSL verification disabled for {host}. Only use this against test instances."
    )
    session.mount(f"https://{host}", SSLIgnoreAdapter())
    return True


def configure_proxies(
    session: Session,
    http_proxy: str | None = None,
    https_proxy: str | None = None,
    socks_proxy: str | None = None,
    no_proxy: str | None = None,
) -> None:
    """Apply proxy settings to a requests session.

    Args:
        session: The requests session to configure
        http_proxy: Proxy used for http:// URLs
        https_proxy: Proxy used for https:// URLs
        socks_proxy: SOCKS proxy URL
        no_proxy: Comma-separated list of hosts that bypass the proxy
    """
    proxies: dict[str, str] = {}
    if http_proxy:
        proxies["http"] = http_proxy
    if https_proxy:
        proxies["https"] = https_proxy
    if socks_proxy:
        proxies["socks"] = socks_proxy
    if no_proxy:
        proxies["no_proxy"] = no_proxy
    if proxies:
        logger.debug(f"Configuring proxies for session: {sorted(proxies)}")
        session.proxies.update(proxies)
