"""Credential storage exceptions for the chat client.

Custom exception hierarchy for secure store operations. A missing
credential is never an exception: lookups return None for that.
"""


class CredentialStoreError(Exception):
    """Base exception for all secure credential store errors."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class StoreUnavailableError(CredentialStoreError):
    """Secure storage backend missing, locked or failing to initialize."""

    def __init__(self, service: str, original_error: Exception = None):
        self.service = service
        message = f"Secure storage is unavailable for '{service}'"
        super().__init__(message, original_error)


class StoreWriteError(CredentialStoreError):
    """Failed to write a secret to secure storage."""

    def __init__(
        self,
        service: str,
        account: str,
        original_error: Exception = None,
        backend_unavailable: bool = False
    ):
        self.service = service
        self.account = account
        self.backend_unavailable = backend_unavailable
        message = f"Failed to store credential '{service}/{account}'"
        super().__init__(message, original_error)


class StoreDeleteError(CredentialStoreError):
    """Failed to delete a secret from secure storage."""

    def __init__(
        self,
        service: str,
        account: str,
        original_error: Exception = None,
        backend_unavailable: bool = False
    ):
        self.service = service
        self.account = account
        self.backend_unavailable = backend_unavailable
        message = f"Failed to delete credential '{service}/{account}'"
        super().__init__(message, original_error)
