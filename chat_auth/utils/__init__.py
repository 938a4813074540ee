"""Utility module for the chat client.

- Logging: Configured logging with secret redaction
"""
