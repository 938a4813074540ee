"""Application wiring for the chat client's auth and transport layers.

Builds the default collaborators and exposes the startup, sign-in and
sign-out entry points the host calls.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import requests

from chat_auth.auth.prompt import AuthPrompt
from chat_auth.auth.resolver import CredentialResolver
from chat_auth.config.credentials import KeyringCredentialStore
from chat_auth.config.paths import get_log_file_path
from chat_auth.config.settings import SettingsManager
from chat_auth.events import ResetEvent, SignalBus
from chat_auth.interfaces import SecureCredentialStore, UserInteraction
from chat_auth.transport.policy import TransportConfigurator
from chat_auth.transport.session import apply_policy, create_session
from chat_auth.utils.logging import setup_logging

logger = logging.getLogger("chat_auth.app")


class Application:
    """
    Application controller for credentials and outbound transport.

    Owns the HTTP session built from the transport policy and drops it
    whenever the credential changes, so the next request starts fresh.
    """

    def __init__(
        self,
        settings_manager: Optional[SettingsManager] = None,
        secure_store: Optional[SecureCredentialStore] = None,
        signal_bus: Optional[SignalBus] = None,
        ui: Optional[UserInteraction] = None,
        sign_in_command: Optional[Callable[[str], None]] = None,
        offer_unsupported: bool = False
    ):
        """
        Initialize the application.

        Args:
            settings_manager: Settings store, defaults to the platform file
            secure_store: Secure credential store, defaults to keyring
            signal_bus: Reset signal bus, a new one if omitted
            ui: Host UI; without it a missing token is only logged
            sign_in_command: Starts the host's sign-in flow
            offer_unsupported: Offer the "I don't use Slack" option
        """
        self._settings_manager = settings_manager or SettingsManager()
        self._signal_bus = signal_bus or SignalBus()
        self._resolver = CredentialResolver(
            secure_store or KeyringCredentialStore(),
            self._settings_manager,
            self._signal_bus
        )
        self._configurator = TransportConfigurator(self._settings_manager)
        self._ui = ui
        self._sign_in_command = sign_in_command
        self._offer_unsupported = offer_unsupported
        self._session: Optional[requests.Session] = None

        self._signal_bus.subscribe(self._on_reset)

    @classmethod
    def create_default(
        cls,
        log_file: Optional[Path] = None,
        **kwargs
    ) -> "Application":
        """Set up logging, then build an application with default stores."""
        setup_logging(log_file=log_file or get_log_file_path())
        logger.info("Application starting")
        return cls(**kwargs)

    @property
    def resolver(self) -> CredentialResolver:
        return self._resolver

    @property
    def configurator(self) -> TransportConfigurator:
        return self._configurator

    @property
    def signal_bus(self) -> SignalBus:
        return self._signal_bus

    def startup(self) -> Optional[str]:
        """
        Resolve the chat token, prompting the user when there is none.

        Returns:
            The token, or None if the user still has to sign in

        Raises:
            CredentialStoreError: If the secure store fails
        """
        token = self._resolver.resolve()
        if token is not None:
            logger.info("Chat token available")
            return token

        logger.info("No chat token found")
        if self._ui is not None:
            self._prompt().prompt_for_auth()
        return None

    def sign_in(self, token: str) -> None:
        """Store a token obtained by the host's sign-in flow."""
        self._resolver.set_credential(token)

    def sign_out(self) -> None:
        """Forget the stored token."""
        self._resolver.clear_credential()

    def open_session(self) -> requests.Session:
        """
        Get the HTTP session for chat API calls.

        The session is rebuilt after a credential reset. Its proxy and
        TLS options are refreshed from settings on every call.

        Returns:
            Session configured for the current settings
        """
        if self._session is None:
            self._session = create_session(self._configurator)
        else:
            apply_policy(self._session, self._configurator.build_transport_policy())
        return self._session

    def close(self) -> None:
        """Close the HTTP session, if any."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def _prompt(self) -> AuthPrompt:
        return AuthPrompt(
            self._ui,
            self._sign_in_command or self._default_sign_in,
            offer_unsupported=self._offer_unsupported
        )

    def _default_sign_in(self, source: str) -> None:
        logger.warning(f"Sign-in requested from '{source}' but no sign-in command is set")

    def _on_reset(self, event: ResetEvent) -> None:
        logger.debug(f"Reset received: {event.reason}")
        self.close()
