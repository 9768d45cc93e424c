"""
smartconfig - configuration façade for distributed-ledger clients.

Resolves:
- Network environment and client ledger
- Nodes, utilities and fees, from static tables or a remote registry
- Consensus threshold from the node count
- Operator, issuer and mirror node settings
"""

from smartconfig.core.config import (
    CustomNetwork,
    NetworkConfig,
    ResourceKind,
    SmartConfigOptions,
    load_options,
)
from smartconfig.core.ledger import LedgerId
from smartconfig.core.resolver import NetworkResolver, resolve_network_config
from smartconfig.core.store import ConfigStore
from smartconfig.errors import (
    ConfigurationError,
    ConfigurationMissing,
    InvalidLedgerId,
    RemoteFetchFailed,
    RemoteUnavailable,
    SmartConfigError,
)
from smartconfig.network.registry_client import RegistryClient
from smartconfig.service import SmartConfigService, create_service

__version__ = "0.1.0"

__all__ = [
    # Config
    "CustomNetwork",
    "NetworkConfig",
    "ResourceKind",
    "SmartConfigOptions",
    "load_options",
    "ConfigStore",
    "LedgerId",
    # Resolution
    "NetworkResolver",
    "resolve_network_config",
    "RegistryClient",
    "SmartConfigService",
    "create_service",
    # Errors
    "SmartConfigError",
    "ConfigurationError",
    "ConfigurationMissing",
    "InvalidLedgerId",
    "RemoteFetchFailed",
    "RemoteUnavailable",
]
