"""
Network configuration options for smartconfig.

Defines the immutable options object supplied at startup (environment,
network type, client environment, custom network tables, registry URL)
and the resolved per-network table of nodes, utilities and fees.
"""

from copy import deepcopy
from enum import Enum
from typing import Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from smartconfig.core.store import ConfigStore
from smartconfig.errors import ConfigurationError

# Store key holding the options section
OPTIONS_KEY = "smartConfig"

Environment = Literal["testnet", "mainnet"]
NetworkType = Literal["public", "private"]
ClientEnvironment = Literal["testnet", "local", "mainnet"]


class ResourceKind(str, Enum):
    """Resource kinds served by the resolver."""
    NODES = "nodes"
    UTILITIES = "utilities"
    FEES = "fees"


class NetworkConfig(BaseModel):
    """
    Static topology for one network.

    Entries are opaque descriptors. resource() hands out copies so callers
    cannot change the configured table.
    """

    model_config = ConfigDict(frozen=True)

    nodes: List[Any] = Field(default_factory=list)
    utilities: List[Any] = Field(default_factory=list)
    fees: Any = None

    def resource(self, kind: Union[ResourceKind, str]) -> Any:
        """Return a copy of the entry for ``kind``."""
        return deepcopy(getattr(self, ResourceKind(kind).value))


class CustomNetwork(BaseModel):
    """Custom network tables keyed by client environment."""

    model_config = ConfigDict(frozen=True)

    testnet: Optional[NetworkConfig] = None
    local: Optional[NetworkConfig] = None
    mainnet: Optional[NetworkConfig] = None


class SmartConfigOptions(BaseModel):
    """
    Options describing which network to use and where to find it.

    Attributes:
        environment: Ledger environment (testnet/mainnet)
        network: Network type (public/private)
        client_environment: Ledger the client operates against
        custom_network: Static tables used for private networks
        smart_registry_url: Registry base URL; ``local`` disables remote lookup
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    environment: Environment
    network: NetworkType
    client_environment: ClientEnvironment
    custom_network: Optional[CustomNetwork] = Field(default=None, alias="customNetwork")
    smart_registry_url: Optional[str] = Field(default=None, alias="smartRegistryUrl")


def load_options(source: Union[ConfigStore, Mapping[str, Any]]) -> SmartConfigOptions:
    """
    Build options from a configuration store or a plain mapping.

    A store is read at the ``smartConfig`` key; a mapping is taken to be the
    options section itself.

    Args:
        source: ConfigStore or options mapping

    Returns:
        SmartConfigOptions instance

    Raises:
        ConfigurationMissing: If the store has no ``smartConfig`` section
        ConfigurationError: If the options are malformed
    """
    if isinstance(source, ConfigStore):
        section = source.get(OPTIONS_KEY)
    else:
        section = source

    if not isinstance(section, Mapping):
        raise ConfigurationError(f"{OPTIONS_KEY} must be an object, got {type(section).__name__}")

    try:
        return SmartConfigOptions.model_validate(dict(section))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {OPTIONS_KEY} options: {e}") from e


__all__ = [
    "ResourceKind",
    "NetworkConfig",
    "CustomNetwork",
    "SmartConfigOptions",
    "load_options",
    "OPTIONS_KEY",
]
