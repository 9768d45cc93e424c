"""
Configuration Store - dotted-path access to nested configuration.

Values are looked up with keys like ``clusterConfig.threshold``. A key that
resolves to nothing (or to None) is absent and raises ConfigurationMissing,
which callers can tell apart from every other failure.
"""

import json
import os
import tomllib
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import load_dotenv

from smartconfig.errors import ConfigurationError, ConfigurationMissing
from smartconfig.utils.logger import get_logger

logger = get_logger("store")

# Prefix for environment variables read by ConfigStore.from_env
ENV_PREFIX = "SMART_CONFIG__"

# Separator between path segments inside an environment variable name
ENV_SEPARATOR = "__"

_MISSING = object()


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; nested mappings are merged."""
    result = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = _deep_merge(dict(result[key]), value)
        else:
            result[key] = deepcopy(value)
    return result


def _parse_env_value(raw: str) -> Any:
    """Decode JSON scalars and structures; anything else stays a string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class ConfigStore:
    """
    Read-only key-value configuration queried by dotted path.

    The store copies its input, so later changes to the source mapping are
    not observed.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = deepcopy(dict(data or {}))

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ConfigStore":
        """
        Load configuration from a JSON or TOML file.

        Args:
            path: File path; the suffix selects the format

        Returns:
            ConfigStore instance
        """
        path = Path(path)
        suffix = path.suffix.lower()

        try:
            if suffix == ".json":
                data = json.loads(path.read_text(encoding="utf-8"))
            elif suffix == ".toml":
                with path.open("rb") as fh:
                    data = tomllib.load(fh)
            else:
                raise ConfigurationError(f"Unsupported config file format: {path.name}")
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except (ValueError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Cannot parse config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain an object at top level")

        logger.debug(f"Loaded configuration from {path}")
        return cls(data)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
        dotenv_path: Optional[Union[str, Path]] = None,
    ) -> "ConfigStore":
        """
        Build a store from environment variables.

        ``SMART_CONFIG__clusterConfig__threshold=67`` becomes
        ``{"clusterConfig": {"threshold": 67}}``. Values are JSON-decoded
        when possible. A ``.env`` file is loaded first unless an explicit
        ``environ`` mapping is given.

        Args:
            prefix: Variable name prefix
            environ: Source mapping (defaults to os.environ)
            dotenv_path: Optional path to a .env file
        """
        if environ is None:
            load_dotenv(dotenv_path=dotenv_path)
            environ = os.environ

        data: Dict[str, Any] = {}
        for name, raw in environ.items():
            if not name.startswith(prefix) or len(name) == len(prefix):
                continue

            segments = [s for s in name[len(prefix):].split(ENV_SEPARATOR) if s]
            if not segments:
                continue

            node = data
            for segment in segments[:-1]:
                child = node.get(segment)
                if not isinstance(child, dict):
                    child = {}
                    node[segment] = child
                node = child
            node[segments[-1]] = _parse_env_value(raw)

        return cls(data)

    def merged(self, other: Union["ConfigStore", Mapping[str, Any]]) -> "ConfigStore":
        """Return a new store where values from ``other`` take precedence."""
        override = other.as_dict() if isinstance(other, ConfigStore) else other
        return ConfigStore(_deep_merge(self._data, override))

    # =========================================================================
    # Lookup
    # =========================================================================

    def _lookup(self, key: str) -> Any:
        if not key:
            return _MISSING

        node: Any = self._data
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return _MISSING
            node = node[segment]

        if node is None:
            return _MISSING
        return node

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Get a value by dotted path.

        Args:
            key: Dotted path, e.g. ``client.operator``
            default: Returned when the key is absent. If omitted, absence
                raises ConfigurationMissing.

        Returns:
            The stored value (structured values are returned as stored)
        """
        value = self._lookup(key)
        if value is _MISSING:
            if default is _MISSING:
                raise ConfigurationMissing(key)
            return default
        return value

    def get_or_throw(self, key: str) -> Any:
        """Get a value by dotted path, raising ConfigurationMissing if absent."""
        return self.get(key)

    def has(self, key: str) -> bool:
        """Check whether a key is present."""
        return self._lookup(key) is not _MISSING

    def as_dict(self) -> Dict[str, Any]:
        """Deep copy of the underlying data."""
        return deepcopy(self._data)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"ConfigStore(keys={sorted(self._data)})"
