"""Configuration module for the chat client.

This module handles application settings and credential storage:
- SettingsManager: JSON-based hierarchical settings persistence
- KeyringCredentialStore: Secure credential storage via keyring
- Paths: Path constants and discovery
- Constants: Setting keys, credential identifiers, user-facing strings
"""
