"""Application settings management for the chat client.

Settings live in a JSON file of dotted keys (``"chat.proxyUrl": ...``),
optionally overlaid by a workspace file. Every read goes back to disk so
edits made while the application runs are picked up on the next call.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from chat_auth.config.paths import get_settings_path

logger = logging.getLogger("chat_auth.settings")


class ConfigurationScope(Enum):
    """Where a settings update is written."""
    GLOBAL = "global"
    WORKSPACE = "workspace"


class SettingsWriteError(Exception):
    """Raised when a settings file cannot be written."""

    def __init__(self, path: Path, original_error: Exception = None):
        self.path = path
        self.original_error = original_error
        self.message = f"Failed to write settings file '{path}'"
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class SettingsManager:
    """Manages hierarchical settings persistence."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        workspace_path: Optional[Path] = None
    ):
        """
        Initialize settings manager.

        Args:
            config_path: Optional custom global settings path,
                defaults to platform standard
            workspace_path: Optional workspace settings file whose
                values take precedence over the global file
        """
        self._config_path = config_path or get_settings_path()
        self._workspace_path = workspace_path

    @property
    def config_path(self) -> Path:
        """Path to global settings file."""
        return self._config_path

    @property
    def workspace_path(self) -> Optional[Path]:
        """Path to workspace settings file, if any."""
        return self._workspace_path

    @property
    def scopes(self) -> List[ConfigurationScope]:
        """Scopes backed by a settings file, in read order."""
        if self._workspace_path is not None:
            return [ConfigurationScope.WORKSPACE, ConfigurationScope.GLOBAL]
        return [ConfigurationScope.GLOBAL]

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read a setting.

        Workspace values win over global ones. A key stored as null
        counts as unset.

        Args:
            key: Dotted setting key, e.g. "chat.proxyUrl"
            default: Value returned when no scope defines the key

        Returns:
            The stored value or default
        """
        for path in self._read_order():
            value = self._load(path).get(key)
            if value is not None:
                return value
        return default

    def update(
        self,
        key: str,
        value: Any,
        scope: ConfigurationScope = ConfigurationScope.GLOBAL
    ) -> None:
        """
        Write a setting, or remove it when value is None.

        Args:
            key: Dotted setting key
            value: New value, None to remove the key
            scope: Which settings file to modify

        Raises:
            ValueError: If WORKSPACE scope is requested without a workspace
            SettingsWriteError: If the file cannot be written
        """
        path = self._path_for(scope)
        data = self._load(path)

        if value is None:
            if key not in data:
                return
            del data[key]
        else:
            data[key] = value

        self._save(path, data)
        logger.debug(f"Updated setting '{key}' in {scope.value} scope")

    def reset(self) -> None:
        """Remove the global settings file."""
        if self._config_path.exists():
            self._config_path.unlink()

    def get_section(self, root: str) -> "SettingsSection":
        """Get a view of the settings under one namespace root."""
        return SettingsSection(self, root)

    def _read_order(self):
        for scope in self.scopes:
            yield self._path_for(scope)

    def _path_for(self, scope: ConfigurationScope) -> Path:
        if scope is ConfigurationScope.WORKSPACE:
            if self._workspace_path is None:
                raise ValueError("No workspace is open for workspace settings")
            return self._workspace_path
        return self._config_path

    def _load(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            # Invalid or unreadable file, treat as empty
            logger.warning(f"Ignoring unreadable settings file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings file {path}: not a JSON object")
            return {}
        return data

    def _save(self, path: Path, data: Dict[str, Any]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write settings file {path}: {e}")
            raise SettingsWriteError(path, e) from e


class SettingsSection:
    """
    Settings scoped to a namespace root.

    ``SettingsSection(store, "chat").get("proxyUrl")`` reads
    ``"chat.proxyUrl"`` from any store with get/update.
    """

    def __init__(self, store, root: str):
        self._store = store
        self._root = root

    @property
    def root(self) -> str:
        """Namespace root of this section."""
        return self._root

    def key(self, name: str) -> str:
        """Full dotted key for a name in this section."""
        return f"{self._root}.{name}"

    def get(self, name: str, default: Any = None) -> Any:
        return self._store.get(self.key(name), default)

    def update(
        self,
        name: str,
        value: Any,
        scope: ConfigurationScope = ConfigurationScope.GLOBAL
    ) -> None:
        self._store.update(self.key(name), value, scope=scope)
