"""
smartconfig network module - remote registry access.
"""

from smartconfig.network.registry_client import RegistryClient, DEFAULT_TIMEOUT

__all__ = [
    "RegistryClient",
    "DEFAULT_TIMEOUT",
]
