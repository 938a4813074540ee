"""Chat token resolution with legacy settings migration.

The secure store is authoritative whenever it holds a token. Installs
that predate secure storage kept the token in plaintext settings; the
first resolve() after upgrading moves it into the secure store and
erases the plaintext copy.
"""

import logging
import threading
from typing import Optional

from chat_auth.config.constants import (
    CONFIG_ROOT,
    CREDENTIAL_ACCOUNT_NAME,
    CREDENTIAL_SERVICE_NAME,
    LEGACY_TOKEN_KEY,
)
from chat_auth.config.settings import ConfigurationScope, SettingsSection
from chat_auth.events import ResetEvent
from chat_auth.interfaces import EventSignal, SecureCredentialStore, SettingsStore

logger = logging.getLogger("chat_auth.resolver")


class CredentialResolver:
    """
    Resolves, stores and clears the chat token.

    Usage:
        resolver = CredentialResolver(KeyringCredentialStore(), settings, bus)

        token = resolver.resolve()
        if token is None:
            AuthPrompt(ui, sign_in).prompt_for_auth()

    Tokens are opaque: nothing here checks their format. Callers that
    need validation must do it before set_credential().
    """

    def __init__(
        self,
        secure_store: SecureCredentialStore,
        settings: SettingsStore,
        signal: EventSignal,
        service: str = CREDENTIAL_SERVICE_NAME,
        account: str = CREDENTIAL_ACCOUNT_NAME
    ):
        """
        Initialize the resolver.

        Args:
            secure_store: Secure credential store (e.g. keyring)
            settings: Settings store holding the legacy plaintext token
            signal: Receives a ResetEvent after every credential change
            service: Secure store service name
            account: Secure store account name
        """
        self._secure_store = secure_store
        self._settings = settings
        self._root_config = SettingsSection(settings, CONFIG_ROOT)
        self._signal = signal
        self._service = service
        self._account = account
        # Guards every secure store mutation, migration included
        self._lock = threading.Lock()

    def resolve(self) -> Optional[str]:
        """
        Get the current token, migrating a legacy one if needed.

        Returns:
            The token, or None when the user has not signed in

        Raises:
            StoreUnavailableError: If the secure store cannot be read
            StoreWriteError: If migrating into the secure store fails;
                the legacy entry is left untouched
            SettingsWriteError: If the legacy entry cannot be cleared
                after a successful migration
        """
        with self._lock:
            token = self._secure_store.get(self._service, self._account)
            if token:
                return token

            legacy_token = self._root_config.get(LEGACY_TOKEN_KEY)
            if not legacy_token:
                logger.debug("No chat token in secure store or settings")
                return None

            self._migrate(legacy_token)
            return legacy_token

    def has_credential(self) -> bool:
        """Check whether a token is available."""
        return self.resolve() is not None

    def set_credential(self, token: str) -> None:
        """
        Store a new token in the secure store and signal a reset.

        Args:
            token: Token obtained from sign-in

        Raises:
            StoreWriteError: If the secure store rejects the write
        """
        with self._lock:
            self._secure_store.set(self._service, self._account, token)
        logger.info("Chat token saved to secure storage")
        # Outside the lock so listeners may call resolve()
        self._signal.emit(ResetEvent(reason="credential-set"))

    def clear_credential(self) -> None:
        """
        Remove the token from the secure store and signal a reset.

        Clearing when no token is stored is not an error.

        Raises:
            StoreDeleteError: If an existing token could not be removed
        """
        with self._lock:
            removed = self._secure_store.delete(self._service, self._account)
        if removed:
            logger.info("Chat token removed from secure storage")
        else:
            logger.info("No chat token stored, nothing to remove")
        self._signal.emit(ResetEvent(reason="credential-cleared"))

    def _migrate(self, legacy_token: str) -> None:
        # Write first: a failure here must leave the legacy copy in place
        logger.info("Migrating chat token from settings to secure storage")
        self._secure_store.set(self._service, self._account, legacy_token)
        self._clear_legacy_token()
        logger.info("Chat token migrated, legacy setting cleared")

    def _clear_legacy_token(self) -> None:
        # The legacy key may sit in any scope that resolve() reads from
        for scope in self._settings.scopes:
            self._root_config.update(LEGACY_TOKEN_KEY, None, scope=scope)
