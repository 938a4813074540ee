"""Authentication module for the chat client.

This module handles the chat token lifecycle:
- CredentialResolver: Secure store lookup with legacy settings migration
- AuthPrompt: Decision logic for the "token not found" notification
- Exceptions: Secure store error types
"""
