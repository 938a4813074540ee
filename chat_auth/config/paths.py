"""Path discovery for the chat client.

Defines the application data directory and the files kept inside it.
"""

import os
import sys
from pathlib import Path


APP_NAME = "ChatClient"
HOME_ENV_VAR = "CHAT_AUTH_HOME"

SETTINGS_FILE_NAME = "settings.json"
LOG_FILE_NAME = "chat.log"


def get_app_data_dir() -> Path:
    """
    Directory holding the global settings file and logs.

    CHAT_AUTH_HOME overrides the platform default (%APPDATA% on Windows,
    ~/Library/Application Support on macOS, $XDG_CONFIG_HOME elsewhere).
    Nothing is created here; writers create parents on first write.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()

    if sys.platform == "win32":
        root = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(root) / APP_NAME


def get_settings_path() -> Path:
    """
    Get the path to the global settings JSON file.

    Returns:
        Path to settings.json
    """
    return get_app_data_dir() / SETTINGS_FILE_NAME


def get_workspace_settings_path(workspace_dir: Path) -> Path:
    """
    Get the path to a workspace's settings file.

    Args:
        workspace_dir: Root directory of the open workspace

    Returns:
        Path to <workspace>/.chat/settings.json
    """
    return workspace_dir / ".chat" / SETTINGS_FILE_NAME


def get_log_file_path() -> Path:
    """Path to the main log file."""
    return get_app_data_dir() / "logs" / LOG_FILE_NAME
