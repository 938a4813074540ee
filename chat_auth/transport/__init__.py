"""Transport module for outbound chat connections.

- TransportConfigurator: Proxy/TLS policy and feature flags from settings
- TransportPolicy: Resolved proxy/TLS configuration
- Session helpers: Apply a policy to a requests session
"""
