"""
Tests for the configuration store.

Tests cover:
1. Dotted-path lookup and defaults
2. File loading (JSON, TOML)
3. Environment variable parsing
4. Merging
"""

import json
import os

import pytest

from smartconfig.core.store import ConfigStore
from smartconfig.errors import ConfigurationError, ConfigurationMissing


SAMPLE = {
    "smartConfig": {"environment": "testnet", "client_environment": "local"},
    "clusterConfig": {"threshold": 67},
    "client": {"operator": {"accountId": "0.0.1001", "privateKey": "302e..."}},
    "mirrorNode": None,
}


class TestLookup:
    """Tests for dotted-path lookup."""

    def test_get_nested(self):
        store = ConfigStore(SAMPLE)

        assert store.get("smartConfig.environment") == "testnet"
        assert store.get("clusterConfig.threshold") == 67

    def test_get_structured(self):
        store = ConfigStore(SAMPLE)

        assert store.get("client.operator") == {"accountId": "0.0.1001", "privateKey": "302e..."}

    def test_missing_raises(self):
        store = ConfigStore(SAMPLE)

        with pytest.raises(ConfigurationMissing) as exc_info:
            store.get("issuer")

        assert exc_info.value.key == "issuer"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_missing_nested_raises(self):
        store = ConfigStore(SAMPLE)

        with pytest.raises(ConfigurationMissing):
            store.get("clusterConfig.threshold.value")

    def test_none_counts_as_missing(self):
        store = ConfigStore(SAMPLE)

        with pytest.raises(ConfigurationMissing):
            store.get_or_throw("mirrorNode")
        assert not store.has("mirrorNode")

    def test_default(self):
        store = ConfigStore(SAMPLE)

        assert store.get("logging.debug", False) is False
        assert store.get("issuer", None) is None

    def test_falsy_values_are_present(self):
        store = ConfigStore({"a": {"zero": 0, "empty": "", "no": False}})

        assert store.get("a.zero") == 0
        assert store.get("a.empty") == ""
        assert store.get("a.no") is False

    def test_empty_key(self):
        with pytest.raises(ConfigurationMissing):
            ConfigStore(SAMPLE).get("")

    def test_contains(self):
        store = ConfigStore(SAMPLE)

        assert "client.operator.accountId" in store
        assert "client.issuer" not in store

    def test_source_mutation_not_observed(self):
        data = {"clusterConfig": {"threshold": 50}}
        store = ConfigStore(data)

        data["clusterConfig"]["threshold"] = 90

        assert store.get("clusterConfig.threshold") == 50


class TestFromFile:
    """Tests for file loading."""

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(SAMPLE))

        store = ConfigStore.from_file(path)

        assert store.get("client.operator.accountId") == "0.0.1001"

    def test_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[clusterConfig]\nthreshold = 75\n\n[smartConfig]\nenvironment = "mainnet"\n')

        store = ConfigStore.from_file(str(path))

        assert store.get("clusterConfig.threshold") == 75
        assert store.get("smartConfig.environment") == "mainnet"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("a: 1\n")

        with pytest.raises(ConfigurationError, match="Unsupported"):
            ConfigStore.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            ConfigStore.from_file(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Cannot parse"):
            ConfigStore.from_file(path)

    def test_non_object_root(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigurationError):
            ConfigStore.from_file(path)


class TestFromEnv:
    """Tests for environment variable parsing."""

    def test_nested_paths(self):
        environ = {
            "SMART_CONFIG__clusterConfig__threshold": "67",
            "SMART_CONFIG__smartConfig__environment": "testnet",
            "UNRELATED": "x",
        }

        store = ConfigStore.from_env(environ=environ)

        assert store.get("clusterConfig.threshold") == 67
        assert store.get("smartConfig.environment") == "testnet"
        assert not store.has("UNRELATED")

    def test_json_values(self):
        environ = {
            "SMART_CONFIG__client__operator": '{"accountId": "0.0.2"}',
            "SMART_CONFIG__logging__debug": "true",
        }

        store = ConfigStore.from_env(environ=environ)

        assert store.get("client.operator.accountId") == "0.0.2"
        assert store.get("logging.debug") is True

    def test_custom_prefix(self):
        store = ConfigStore.from_env(prefix="APP_", environ={"APP_issuer": "0.0.9"})

        assert store.get("issuer") == "0.0.9"

    def test_dotenv_file(self, tmp_path):
        name = "SMART_CONFIG__clusterConfig__threshold"
        env_file = tmp_path / ".env"
        env_file.write_text(f"{name}=80\n")
        assert name not in os.environ

        try:
            store = ConfigStore.from_env(dotenv_path=env_file)
        finally:
            os.environ.pop(name, None)

        assert store.get("clusterConfig.threshold") == 80


class TestMerge:
    """Tests for layering stores."""

    def test_override_wins(self):
        base = ConfigStore(SAMPLE)
        override = ConfigStore({"clusterConfig": {"threshold": 90}})

        merged = base.merged(override)

        assert merged.get("clusterConfig.threshold") == 90
        assert merged.get("client.operator.accountId") == "0.0.1001"
        assert base.get("clusterConfig.threshold") == 67

    def test_merge_mapping(self):
        merged = ConfigStore(SAMPLE).merged({"smartConfig": {"smartRegistryUrl": "local"}})

        assert merged.get("smartConfig.smartRegistryUrl") == "local"
        assert merged.get("smartConfig.environment") == "testnet"
