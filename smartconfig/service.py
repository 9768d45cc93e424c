"""
SmartConfigService - configuration façade for ledger clients.

Combines plain configuration lookups (environment, issuer, operator,
mirror node) with the network resolver (nodes, utilities, fees and the
consensus threshold).

Example:
    store = ConfigStore.from_file("config.json")
    service = create_service(store)
    nodes = await service.get_nodes()
"""

from typing import Any, Dict, List, Optional

from smartconfig.core.config import NetworkConfig, SmartConfigOptions, load_options
from smartconfig.core.ledger import LedgerId
from smartconfig.core.resolver import HttpClient, NetworkResolver
from smartconfig.core.store import ConfigStore
from smartconfig.errors import ConfigurationMissing
from smartconfig.network.registry_client import RegistryClient
from smartconfig.utils.logger import get_logger

logger = get_logger("service")

# =============================================================================
# Configuration Keys
# =============================================================================

ENVIRONMENT_KEY = "smartConfig.environment"
CLIENT_ENVIRONMENT_KEY = "smartConfig.client_environment"
ISSUER_KEY = "issuer"
OPERATOR_KEY = "client.operator"
MIRROR_NODE_KEY = "mirrorNode"


def empty_mirror_node() -> Dict[str, Any]:
    """Mirror node record used when none is configured."""
    return {"url": None, "apiKey": None, "grpc": None}


class SmartConfigService:
    """
    Read-only access to ledger client configuration.

    Args:
        options: Network options
        store: Configuration store
        http: HTTP collaborator for registry lookups
    """

    def __init__(
        self,
        options: SmartConfigOptions,
        store: ConfigStore,
        http: HttpClient,
    ):
        self.options = options
        self.store = store
        self.resolver = NetworkResolver(options, store, http)

    # =========================================================================
    # Plain Lookups
    # =========================================================================

    def get_environment(self) -> str:
        return self.store.get(ENVIRONMENT_KEY)

    def get_client_environment(self) -> LedgerId:
        """Client environment parsed as a ledger id."""
        return LedgerId.from_string(self.store.get(CLIENT_ENVIRONMENT_KEY))

    def get_issuer(self) -> Any:
        return self.store.get(ISSUER_KEY)

    def get_operator(self) -> Any:
        return self.store.get(OPERATOR_KEY)

    def get_mirror_node(self) -> Any:
        """
        Mirror node settings.

        Unlike the other lookups this never fails on a missing key: an
        all-None record is returned instead.
        """
        try:
            return self.store.get(MIRROR_NODE_KEY)
        except ConfigurationMissing:
            logger.debug("No mirror node configured")
            return empty_mirror_node()

    # =========================================================================
    # Network Resources
    # =========================================================================

    def resolved_network(self) -> Optional[NetworkConfig]:
        """Static network table in use, or None when the registry serves resources."""
        return self.resolver.network_config()

    async def get_nodes(self) -> List[Any]:
        return await self.resolver.get_nodes()

    async def get_utilities(self) -> List[Any]:
        return await self.resolver.get_utilities()

    async def get_fees(self) -> Any:
        return await self.resolver.get_fees()

    async def get_threshold(self) -> int:
        return await self.resolver.get_threshold()


def create_service(
    store: ConfigStore,
    http: Optional[HttpClient] = None,
    options: Optional[SmartConfigOptions] = None,
) -> SmartConfigService:
    """
    Build a SmartConfigService.

    Args:
        store: Configuration store
        http: HTTP collaborator. Defaults to a RegistryClient.
        options: Network options. Defaults to the store's ``smartConfig`` section.

    Returns:
        SmartConfigService instance
    """
    if options is None:
        options = load_options(store)
    if http is None:
        http = RegistryClient()

    logger.debug(
        f"SmartConfigService created for environment={options.environment} "
        f"network={options.network} client_environment={options.client_environment}"
    )
    return SmartConfigService(options, store, http)
