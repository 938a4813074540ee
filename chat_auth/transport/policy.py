"""Proxy and TLS policy for outbound chat connections.

Settings are read on every call so a changed proxy or TLS option takes
effect on the next request without restarting the client.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from chat_auth.config.constants import (
    CONFIG_ROOT,
    PROVIDERS_KEY,
    PROXY_URL_KEY,
    REJECT_TLS_UNAUTHORIZED_KEY,
    TELEMETRY_CONFIG_ROOT,
    TELEMETRY_ENABLED_KEY,
    TRAVIS_PROVIDER,
)
from chat_auth.config.settings import SettingsSection
from chat_auth.interfaces import SettingsStore

logger = logging.getLogger("chat_auth.transport")


@dataclass(frozen=True)
class TransportPolicy:
    """Proxy/TLS configuration applied to one outbound connection."""
    proxy_endpoint: Optional[str] = None
    tls_verify: bool = True

    @property
    def uses_proxy(self) -> bool:
        return self.proxy_endpoint is not None

    @property
    def is_default(self) -> bool:
        """True when the transport needs no override at all."""
        return not self.uses_proxy and self.tls_verify


class TransportConfigurator:
    """Derives transport policy and feature flags from settings."""

    def __init__(self, settings: SettingsStore):
        """
        Initialize the configurator.

        Args:
            settings: Settings store to read on every call
        """
        self._root_config = SettingsSection(settings, CONFIG_ROOT)
        self._telemetry_config = SettingsSection(settings, TELEMETRY_CONFIG_ROOT)

    def get_proxy_endpoint(self) -> Optional[str]:
        """
        Get the configured proxy URL.

        The value is passed through as-is; malformed URLs surface as
        errors from the HTTP client.

        Returns:
            Proxy URL or None if unset or empty
        """
        proxy_url = self._root_config.get(PROXY_URL_KEY)
        return proxy_url or None

    def get_tls_verify(self) -> bool:
        """
        Whether TLS certificates must be verified.

        Returns:
            False only when rejectTlsUnauthorized is explicitly false
        """
        return self._root_config.get(REJECT_TLS_UNAUTHORIZED_KEY) is not False

    def build_transport_policy(self) -> TransportPolicy:
        """
        Build the policy for the next outbound connection.

        A configured proxy always wins. An explicit TLS opt-out is kept
        alongside the proxy rather than silently dropped.

        Returns:
            TransportPolicy for the current settings
        """
        proxy_endpoint = self.get_proxy_endpoint()
        tls_verify = self.get_tls_verify()

        if proxy_endpoint:
            if not tls_verify:
                logger.warning(
                    "TLS verification disabled while routing through a proxy"
                )
            return TransportPolicy(proxy_endpoint=proxy_endpoint, tls_verify=tls_verify)

        if not tls_verify:
            logger.warning("TLS verification disabled for direct connections")
            return TransportPolicy(tls_verify=False)

        return TransportPolicy()

    def has_telemetry_enabled(self) -> bool:
        """Check if the user opted in to telemetry."""
        return self._telemetry_config.get(TELEMETRY_ENABLED_KEY) is True

    def get_providers(self) -> List[str]:
        """Get the configured provider names."""
        providers = self._root_config.get(PROVIDERS_KEY)
        if not isinstance(providers, (list, tuple)):
            return []
        return list(providers)

    def has_provider_enabled(self, name: str) -> bool:
        """
        Check if a provider is enabled.

        Args:
            name: Provider name, matched exactly (case-sensitive)

        Returns:
            True if name is in the providers list
        """
        return name in self.get_providers()

    def has_travis_provider(self) -> bool:
        return self.has_provider_enabled(TRAVIS_PROVIDER)
