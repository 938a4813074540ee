"""HTTP session setup from a transport policy.

Applies the proxy/TLS policy to requests sessions used for chat API calls.
"""

import logging

import requests

from chat_auth.config.constants import USER_AGENT
from chat_auth.transport.policy import TransportConfigurator, TransportPolicy

logger = logging.getLogger("chat_auth.transport.session")


def apply_policy(session: requests.Session, policy: TransportPolicy) -> requests.Session:
    """
    Configure a session's proxy and TLS verification.

    Existing proxy entries are replaced so a session can be re-pointed
    after the settings change.

    Args:
        session: Session to configure
        policy: Policy to apply

    Returns:
        The same session
    """
    session.proxies.clear()
    if policy.uses_proxy:
        session.proxies.update({
            "http": policy.proxy_endpoint,
            "https": policy.proxy_endpoint,
        })
    session.verify = policy.tls_verify
    return session


def create_session(configurator: TransportConfigurator) -> requests.Session:
    """
    Create a session for the current settings.

    Args:
        configurator: Source of the transport policy

    Returns:
        New requests.Session with headers, proxy and TLS set
    """
    policy = configurator.build_transport_policy()
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
    })
    apply_policy(session, policy)

    if policy.is_default:
        logger.debug("Using default transport")
    else:
        logger.debug(
            f"Using custom transport (proxy={policy.uses_proxy}, "
            f"verify={policy.tls_verify})"
        )
    return session
