"""Capability protocols consumed by the credential and transport logic.

Concrete adapters live next to the code that owns the concern:
KeyringCredentialStore (config.credentials), SettingsManager
(config.settings) and SignalBus (events).
"""

from typing import Any, List, Optional, Protocol, Sequence

from chat_auth.config.settings import ConfigurationScope
from chat_auth.events import ResetEvent


class SecureCredentialStore(Protocol):
    """Protocol for encrypted secret storage addressed by service/account."""

    def get(self, service: str, account: str) -> Optional[str]:
        """Return the secret, or None when no entry exists."""
        ...

    def set(self, service: str, account: str, secret: str) -> None:
        """Store the secret, replacing any previous value."""
        ...

    def delete(self, service: str, account: str) -> bool:
        """Remove the entry. Returns False if there was nothing to remove."""
        ...


class SettingsStore(Protocol):
    """Protocol for hierarchical settings keyed by dotted names."""

    @property
    def scopes(self) -> List[ConfigurationScope]:
        """Scopes that can be written, in read order."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def update(
        self,
        key: str,
        value: Any,
        scope: ConfigurationScope = ConfigurationScope.GLOBAL
    ) -> None:
        ...


class EventSignal(Protocol):
    """Protocol for broadcasting a reset after credential changes."""

    def emit(self, event: ResetEvent) -> None:
        ...


class UserInteraction(Protocol):
    """Protocol defining the UI calls made by the sign-in prompt."""

    def prompt_choice(self, message: str, options: Sequence[str]) -> Optional[str]:
        """Show a message with action buttons; return the one clicked."""
        ...

    def prompt_free_text(self, prompt: str, placeholder: str) -> Optional[str]:
        """Ask for a line of text; return None if dismissed."""
        ...

    def file_issue(self, title: str, body: str) -> None:
        """Open a new issue report prefilled with title and body."""
        ...
