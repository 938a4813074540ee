"""Secure credential storage for the chat client.

Uses the system keyring (Windows Credential Manager, macOS Keychain,
Linux Secret Service) to store the chat token.
"""

import logging
from typing import Optional

import keyring
from keyring.errors import (
    InitError,
    KeyringError,
    KeyringLocked,
    NoKeyringError,
    PasswordDeleteError,
)

from chat_auth.auth.exceptions import (
    StoreDeleteError,
    StoreUnavailableError,
    StoreWriteError,
)

logger = logging.getLogger("chat_auth.credentials")

# Errors meaning the backend itself cannot be used right now
UNAVAILABLE_ERRORS = (NoKeyringError, KeyringLocked, InitError)


class KeyringCredentialStore:
    """Secure credential storage using system keyring."""

    def get(self, service: str, account: str) -> Optional[str]:
        """
        Retrieve a saved secret.

        Args:
            service: Keyring service name
            account: Keyring account name

        Returns:
            Secret string or None if not found

        Raises:
            StoreUnavailableError: If the keyring cannot be read
        """
        try:
            return keyring.get_password(service, account)
        except KeyringError as e:
            logger.error(f"Keyring read failed for {service}/{account}: {e}")
            raise StoreUnavailableError(service, e) from e

    def set(self, service: str, account: str, secret: str) -> None:
        """
        Save a secret, replacing any previous value.

        Args:
            service: Keyring service name
            account: Keyring account name
            secret: Secret to save

        Raises:
            StoreWriteError: If the keyring rejects the write
        """
        try:
            keyring.set_password(service, account, secret)
        except KeyringError as e:
            logger.error(f"Keyring write failed for {service}/{account}: {e}")
            raise StoreWriteError(
                service,
                account,
                e,
                backend_unavailable=isinstance(e, UNAVAILABLE_ERRORS)
            ) from e

    def delete(self, service: str, account: str) -> bool:
        """
        Remove a saved secret.

        Args:
            service: Keyring service name
            account: Keyring account name

        Returns:
            True if an entry was removed, False if none existed

        Raises:
            StoreDeleteError: If an existing entry could not be removed
        """
        try:
            keyring.delete_password(service, account)
            return True
        except PasswordDeleteError as e:
            # Backends raise this for missing entries too
            if self._is_absent(service, account):
                logger.debug(f"No keyring entry to delete for {service}/{account}")
                return False
            raise StoreDeleteError(service, account, e) from e
        except KeyringError as e:
            logger.error(f"Keyring delete failed for {service}/{account}: {e}")
            raise StoreDeleteError(
                service,
                account,
                e,
                backend_unavailable=isinstance(e, UNAVAILABLE_ERRORS)
            ) from e

    def _is_absent(self, service: str, account: str) -> bool:
        try:
            return keyring.get_password(service, account) is None
        except KeyringError:
            return False
