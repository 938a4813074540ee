"""Credential and transport configuration for the chat client.

Subpackages:
- config: Settings persistence, paths, constants
- auth: Credential resolution, legacy migration, sign-in prompt
- transport: Proxy/TLS policy and HTTP session setup
- utils: Logging with secret redaction
"""
