"""
Tests for SmartConfigService.

Tests cover:
1. Plain lookups and their failures
2. Mirror node default record
3. Delegation to the resolver
4. create_service wiring
"""

import pytest

from smartconfig.core.ledger import LedgerId
from smartconfig.core.store import ConfigStore
from smartconfig.errors import ConfigurationError, ConfigurationMissing, InvalidLedgerId
from smartconfig.network.registry_client import RegistryClient
from smartconfig.service import SmartConfigService, create_service


CONFIG = {
    "smartConfig": {
        "environment": "mainnet",
        "network": "private",
        "client_environment": "mainnet",
        "customNetwork": {
            "mainnet": {
                "nodes": [{"id": i} for i in range(4)],
                "utilities": [{"name": "util"}],
                "fees": {"transfer": 0.001},
            },
        },
    },
    "clusterConfig": {"threshold": 100},
    "issuer": {"accountId": "0.0.500", "publicKey": "302a..."},
    "client": {"operator": {"accountId": "0.0.1001", "privateKey": "302e..."}},
    "mirrorNode": {"url": "https://mirror.test", "apiKey": "k", "grpc": "mirror.test:443"},
}


class RecordingHttp:
    def __init__(self):
        self.calls = []

    async def get(self, url):
        self.calls.append(url)
        return []


def make_service(config=CONFIG, http=None):
    return create_service(ConfigStore(config), http=http or RecordingHttp())


class TestPlainLookups:
    """Tests for single-key lookups."""

    def test_environment(self):
        assert make_service().get_environment() == "mainnet"

    def test_client_environment(self):
        assert make_service().get_client_environment() == LedgerId("mainnet")

    def test_client_environment_local(self):
        config = dict(CONFIG, smartConfig=dict(CONFIG["smartConfig"], client_environment="local"))

        assert make_service(config).get_client_environment().is_local_node()

    def test_client_environment_unparseable(self):
        service = make_service()
        service.store = ConfigStore({"smartConfig": {"client_environment": "devnet"}})

        with pytest.raises(InvalidLedgerId):
            service.get_client_environment()

    def test_issuer(self):
        assert make_service().get_issuer() == CONFIG["issuer"]

    def test_operator(self):
        assert make_service().get_operator() == CONFIG["client"]["operator"]

    @pytest.mark.parametrize(
        "method,key",
        [
            ("get_environment", "smartConfig.environment"),
            ("get_client_environment", "smartConfig.client_environment"),
            ("get_issuer", "issuer"),
            ("get_operator", "client.operator"),
        ],
    )
    def test_missing_keys_raise(self, method, key):
        service = make_service()
        service.store = ConfigStore({})

        with pytest.raises(ConfigurationMissing) as exc_info:
            getattr(service, method)()

        assert exc_info.value.key == key


class TestMirrorNode:
    """Tests for the mirror node lookup."""

    def test_present(self):
        assert make_service().get_mirror_node() == CONFIG["mirrorNode"]

    def test_missing_returns_null_record(self):
        config = {k: v for k, v in CONFIG.items() if k != "mirrorNode"}

        assert make_service(config).get_mirror_node() == {"url": None, "apiKey": None, "grpc": None}

    def test_null_record_is_fresh(self):
        config = {k: v for k, v in CONFIG.items() if k != "mirrorNode"}
        service = make_service(config)

        first = service.get_mirror_node()
        first["url"] = "changed"

        assert service.get_mirror_node()["url"] is None

    def test_other_errors_propagate(self):
        class BrokenStore(ConfigStore):
            def get(self, key, default=None):
                raise ConfigurationError("store unavailable")

        service = make_service()
        service.store = BrokenStore()

        with pytest.raises(ConfigurationError, match="store unavailable"):
            service.get_mirror_node()


class TestNetworkResources:
    """Tests for resolver delegation."""

    @pytest.mark.asyncio
    async def test_resources_from_table(self):
        http = RecordingHttp()
        service = make_service(http=http)

        assert len(await service.get_nodes()) == 4
        assert await service.get_utilities() == [{"name": "util"}]
        assert await service.get_fees() == {"transfer": 0.001}
        assert http.calls == []

    @pytest.mark.asyncio
    async def test_unusable_registry_url_with_custom_table(self):
        """A private network never needs the registry, so its URL is not checked."""
        config = dict(CONFIG, smartConfig=dict(CONFIG["smartConfig"], smartRegistryUrl="registry.svc:8080"))
        http = RecordingHttp()
        service = make_service(config, http=http)

        assert len(await service.get_nodes()) == 4
        assert service.get_operator() == CONFIG["client"]["operator"]
        assert service.get_environment() == "mainnet"
        assert service.get_mirror_node() == CONFIG["mirrorNode"]
        assert http.calls == []

    @pytest.mark.asyncio
    async def test_returned_nodes_are_copies(self):
        service = make_service()

        first = await service.get_nodes()
        first.append({"id": 99})

        assert len(await service.get_nodes()) == 4
        assert await service.get_threshold() == 4

    @pytest.mark.asyncio
    async def test_threshold(self):
        assert await make_service().get_threshold() == 4

    @pytest.mark.asyncio
    async def test_idempotent(self):
        service = make_service()

        assert await service.get_nodes() == await service.get_nodes()
        assert await service.get_threshold() == await service.get_threshold()

    def test_resolved_network(self):
        service = make_service()

        assert service.resolved_network() is service.options.custom_network.mainnet


class TestCreateService:
    """Tests for create_service."""

    def test_defaults(self):
        service = create_service(ConfigStore(CONFIG))

        assert isinstance(service, SmartConfigService)
        assert isinstance(service.resolver.http, RegistryClient)
        assert service.options.environment == "mainnet"

    def test_explicit_options(self):
        from smartconfig.core.config import SmartConfigOptions

        options = SmartConfigOptions(environment="testnet", network="public", client_environment="testnet")
        service = create_service(ConfigStore({}), http=RecordingHttp(), options=options)

        assert service.options is options

    def test_missing_options(self):
        with pytest.raises(ConfigurationMissing):
            create_service(ConfigStore({}))
