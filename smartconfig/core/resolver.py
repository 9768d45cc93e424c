"""
Network Resolver - decides where nodes, utilities and fees come from.

Resolution policy:
1. Pick a static NetworkConfig from the custom network tables based on
   environment, network type and client environment.
2. If one applies, serve the resource from it.
3. Otherwise fetch ``{smartRegistryUrl}/network/{kind}`` from the registry,
   unless no registry is configured.

Each call resolves independently; nothing is cached.
"""

from typing import Any, List, Optional, Protocol, Union

from smartconfig.core.config import NetworkConfig, ResourceKind, SmartConfigOptions
from smartconfig.core.store import ConfigStore
from smartconfig.errors import ConfigurationError, RemoteUnavailable
from smartconfig.utils.logger import get_logger
from smartconfig.utils.validation import (
    is_remote_registry,
    validate_registry_url,
    validate_threshold_percent,
)

logger = get_logger("resolver")

# Store key holding the consensus threshold percentage
THRESHOLD_KEY = "clusterConfig.threshold"


class HttpClient(Protocol):
    """Anything that can GET a URL and return the decoded JSON body."""

    async def get(self, url: str) -> Any:
        ...


# =============================================================================
# Resolution Policy
# =============================================================================


def select_table_name(options: SmartConfigOptions) -> Optional[str]:
    """
    Name of the custom network table that applies, or None for public networks.

    Under testnet/private, ``local`` and ``mainnet`` client environments
    both select the ``local`` table.
    """
    if options.network != "private":
        return None

    if options.environment == "testnet":
        return "testnet" if options.client_environment == "testnet" else "local"

    return "mainnet"


def resolve_network_config(options: SmartConfigOptions) -> Optional[NetworkConfig]:
    """
    Resolve the static network configuration for the given options.

    Returns:
        The selected NetworkConfig, or None when the resource must come
        from the registry
    """
    table = select_table_name(options)
    if table is None:
        return None

    if options.custom_network is None:
        logger.warning("Private network selected but customNetwork is not configured")
        return None

    config = getattr(options.custom_network, table)
    if config is None:
        logger.warning(f"Private network selected but customNetwork.{table} is not configured")
    return config


def compute_threshold(node_count: int, percentage: Union[int, float]) -> int:
    """
    Minimum number of agreeing nodes: ceil(node_count * percentage / 100).

    Integral percentages use exact integer arithmetic.
    """
    return int(-(-(node_count * percentage) // 100))


# =============================================================================
# Resolver
# =============================================================================


class NetworkResolver:
    """
    Serves network resources from static tables with registry fallback.

    Args:
        options: Network options
        store: Configuration store (used for the threshold percentage)
        http: HTTP collaborator used for registry lookups
    """

    def __init__(
        self,
        options: SmartConfigOptions,
        store: ConfigStore,
        http: HttpClient,
    ):
        self.options = options
        self.store = store
        self.http = http

    def network_config(self) -> Optional[NetworkConfig]:
        """The static NetworkConfig selected by the options, if any."""
        return resolve_network_config(self.options)

    def registry_url(self, kind: Union[ResourceKind, str]) -> str:
        """
        Registry URL for ``kind``.

        The base URL is only checked here, when a remote fetch is needed.

        Raises:
            RemoteUnavailable: No registry is configured
            ConfigurationError: The registry URL is not an http(s) URL
        """
        base = self.options.smart_registry_url
        if not is_remote_registry(base):
            raise RemoteUnavailable()

        valid, err = validate_registry_url(base)
        if not valid:
            raise ConfigurationError(err)
        return f"{base.rstrip('/')}/network/{ResourceKind(kind).value}"

    async def get_resource(self, kind: Union[ResourceKind, str]) -> Any:
        """
        Resolve one resource kind.

        Args:
            kind: nodes, utilities or fees

        Returns:
            The configured entry, or the registry response body unchanged

        Raises:
            ValueError: Unknown resource kind
            RemoteUnavailable: No static table applies and no registry is set
            ConfigurationError: The registry URL is malformed
            RemoteFetchFailed: Registry request failed
        """
        kind = ResourceKind(kind)

        config = self.network_config()
        if config is not None:
            logger.debug(f"Serving {kind.value} from custom network table")
            return config.resource(kind)

        url = self.registry_url(kind)
        logger.debug(f"Fetching {kind.value} from registry: {url}")
        return await self.http.get(url)

    async def get_nodes(self) -> List[Any]:
        return await self.get_resource(ResourceKind.NODES)

    async def get_utilities(self) -> List[Any]:
        return await self.get_resource(ResourceKind.UTILITIES)

    async def get_fees(self) -> Any:
        return await self.get_resource(ResourceKind.FEES)

    async def get_threshold(self) -> int:
        """
        Consensus threshold derived from the node count.

        Raises:
            ConfigurationMissing: ``clusterConfig.threshold`` is absent
            ConfigurationError: The percentage is not a number in 0-100
        """
        percentage = self.store.get(THRESHOLD_KEY)
        valid, err = validate_threshold_percent(percentage)
        if not valid:
            raise ConfigurationError(err)

        nodes = await self.get_nodes()
        threshold = compute_threshold(len(nodes), percentage)
        logger.debug(f"Threshold {threshold} for {len(nodes)} nodes at {percentage}%")
        return threshold
